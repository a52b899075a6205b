"""
Example 04: Guarding Reads and Writes

A GuardedView reads by position and refuses writes to protected keys.
Reads come from a snapshot taken when the view was created.
"""

from iteration_idioms import Container, GuardedView, ImmutablePropertyError, OutOfRangeError


if __name__ == "__main__":
    person = Container(name="John", age=30, job="developer")
    view = GuardedView(person)

    print(f"view[0] = {view[0]}")
    print(f"view['2'] = {view['2']}")

    try:
        view[3]
    except OutOfRangeError as e:
        print(f"view[3] -> {e}")

    print(f"\nview.set('job', 'coding') = {view.set('job', 'coding')}")
    print(f"person['job'] = {person['job']}")
    print(f"view[2] = {view[2]}  # snapshot value")

    try:
        view["name"] = "Bob"
    except ImmutablePropertyError as e:
        print(f"view['name'] = 'Bob' -> {e}")

    print("\n✅ The view enforces the policy; the container stays a plain mapping!")
