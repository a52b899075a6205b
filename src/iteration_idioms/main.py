"""Main entry point for the iteration idioms walkthrough."""

import logging
import sys
from typing import Any

from .config import DemoConfig, get_demo_config
from .cursor import TraversableAdapter, traverse
from .data_generator import PersonGenerator
from .errors import ImmutablePropertyError, OutOfRangeError
from .generators import NumberRange, is_adult, iter_values
from .guarded import GuardedView
from .idioms import (
    by_enumerate,
    by_index,
    direct,
    find,
    find_index,
    for_each,
    keep,
    mapped,
    values_by_index,
    values_by_key,
    values_direct,
    values_from_items,
)
from .models import Container
from .tabular import iter_row_containers, people_frame

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    handlers=[logging.StreamHandler(sys.stdout)],
)

logger = logging.getLogger(__name__)

USERS = ["John", "Jane", "Bob", "Alice"]


def setup_logging(verbose: bool = False):
    """Configure logging level.

    Args:
        verbose: Enable verbose logging
    """
    if verbose:
        logging.getLogger().setLevel(logging.DEBUG)
    else:
        logging.getLogger().setLevel(logging.INFO)


def sample_person() -> Container:
    return Container(name="John", age=30, job="developer")


def section(title: str):
    print("\n" + "=" * 80)
    print(title)
    print("=" * 80)


def show(label: str, value: Any):
    print(f"  {label}: {value}")


def run_sequence_loops():
    section("LOOPS OVER A LIST")
    show("by index", by_index(USERS))
    show("by enumerate", by_enumerate(USERS))
    show("direct", direct(USERS))
    print("  for_each:")
    for_each(USERS, lambda user: print(f"    {user}"))
    show("mapped (allocates a new list)", mapped(USERS, str.upper))
    show("first name starting with 'J'", find(USERS, lambda user: user.startswith("J")))
    show("index of 'Bob'", find_index(USERS, lambda user: user == "Bob"))
    show("names longer than 3", keep(USERS, lambda user: len(user) > 3))


def run_container_loops():
    section("LOOPS OVER A CONTAINER")
    person = sample_person()
    show("values by index", values_by_index(person))
    show("values by key", values_by_key(person))
    show("values()", values_direct(person))
    show("items()", values_from_items(person))


def run_custom_iterables(config: DemoConfig):
    section("CUSTOM ITERABLES")
    numbers = NumberRange(1, 5)
    show("range 1..5", list(numbers))

    cursor = numbers.begin()
    steps = [cursor.step() for _ in range(len(numbers) + 1)]
    show("range steps", [(step.done, step.value) for step in steps])
    show("range traversal", traverse(numbers))

    person = sample_person()
    adapter = TraversableAdapter(person)
    show("adapter", traverse(adapter))
    show("adapter size", adapter.size)

    show("generator", list(iter_values(person)))
    show("is adult", is_adult(person, config.adult_age))

    cursor = adapter.begin()
    for _ in range(len(person) + 1):
        show("step", cursor.step())


def run_guarded_view(config: DemoConfig):
    section("GUARDED VIEW")
    person = sample_person()
    view = GuardedView(person, protected=config.protected_keys)

    show("view[0]", view[0])
    try:
        view[len(person)]
    except OutOfRangeError as e:
        show(f"view[{len(person)}]", f"error: {e}")

    show("set job", view.set("job", "coding"))
    show("container job", person["job"])

    for key in sorted(config.protected_keys):
        try:
            view.set(key, "Bob")
        except ImmutablePropertyError as e:
            show(f"set {key}", f"error: {e}")


def run_sample_people(config: DemoConfig):
    section("GENERATED PEOPLE")
    generator = PersonGenerator(seed=config.faker_seed)
    frame = people_frame(generator.generate_people(config.sample_people))
    for person in iter_row_containers(frame):
        adult = is_adult(person, config.adult_age)
        show(person["name"], f"{list(TraversableAdapter(person))} adult={adult}")


def main():
    """Main execution function."""
    logger.info("Starting iteration idioms walkthrough")

    try:
        config = get_demo_config()
        setup_logging(config.verbose)

        logger.info(f"Protected keys: {sorted(config.protected_keys)}")
        logger.info(f"Sample people: {config.sample_people}")

        run_sequence_loops()
        run_container_loops()
        run_custom_iterables(config)
        run_guarded_view(config)
        run_sample_people(config)

        logger.info("\nWalkthrough completed successfully!")
        return 0

    except KeyboardInterrupt:
        logger.warning("\nWalkthrough interrupted by user")
        return 130
    except Exception as e:
        logger.error(f"\nError during walkthrough: {e}", exc_info=True)
        return 1


if __name__ == "__main__":
    sys.exit(main())
