"""Generate sample people using Faker library."""

import logging
from typing import Iterator

from faker import Faker

from .models import Container

logger = logging.getLogger(__name__)


class PersonGenerator:
    """Generate fake person containers (name, age, job)."""

    def __init__(self, seed: int = 42):
        """Initialize the person generator.

        Args:
            seed: Random seed for reproducibility
        """
        self.faker = Faker()
        Faker.seed(seed)

    def generate_person(self) -> Container:
        """Generate one person with entries in name, age, job order."""
        return Container(
            name=self.faker.name(),
            age=self.faker.random_int(min=12, max=70),
            job=self.faker.job(),
        )

    def generate_people(self, num_people: int) -> Iterator[Container]:
        """Generate people one at a time.

        Args:
            num_people: Number of people to generate

        Yields:
            Person containers
        """
        logger.info(f"Generating {num_people:,} fake people...")
        for _ in range(num_people):
            yield self.generate_person()
