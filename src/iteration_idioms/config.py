"""Configuration management for the walkthrough."""

import os
from dataclasses import dataclass
from typing import FrozenSet

from dotenv import load_dotenv

# Load environment variables from .env file
load_dotenv()


def _parse_keys(raw: str) -> FrozenSet[str]:
    return frozenset(key.strip() for key in raw.split(",") if key.strip())


@dataclass
class DemoConfig:
    """Walkthrough configuration parameters."""

    protected_keys: FrozenSet[str]
    adult_age: int
    sample_people: int
    faker_seed: int
    verbose: bool

    @classmethod
    def from_env(cls) -> "DemoConfig":
        """Load walkthrough configuration from environment variables.

        - PROTECTED_KEYS: comma separated keys a guarded view refuses to write
        - ADULT_AGE: age above which a person counts as adult
        - SAMPLE_PEOPLE: number of generated people to show
        - FAKER_SEED: seed for generated people
        - VERBOSE: enable debug logging
        """
        return cls(
            protected_keys=_parse_keys(os.getenv("PROTECTED_KEYS", "name,age")),
            adult_age=int(os.getenv("ADULT_AGE", "18")),
            sample_people=int(os.getenv("SAMPLE_PEOPLE", "3")),
            faker_seed=int(os.getenv("FAKER_SEED", "42")),
            verbose=os.getenv("VERBOSE", "false").lower() == "true",
        )

    def __post_init__(self):
        """Validate configuration after initialization."""
        if self.adult_age < 0:
            raise ValueError("adult_age must not be negative")
        if self.sample_people < 0:
            raise ValueError("sample_people must not be negative")


def get_demo_config() -> DemoConfig:
    """Get walkthrough configuration."""
    return DemoConfig.from_env()
