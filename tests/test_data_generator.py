"""Tests for data_generator module."""

import types

from iteration_idioms.data_generator import PersonGenerator
from iteration_idioms.models import Container


def test_person_generator_initialization():
    """Test that PersonGenerator can be initialized."""
    generator = PersonGenerator(seed=42)
    assert generator is not None
    assert generator.faker is not None


def test_generate_person():
    """Test that a person has name, age and job in that order."""
    person = PersonGenerator(seed=42).generate_person()

    assert isinstance(person, Container)
    assert list(person) == ["name", "age", "job"]
    assert isinstance(person["name"], str)
    assert 12 <= person["age"] <= 70
    assert isinstance(person["job"], str)


def test_generate_people_is_lazy():
    """Test that people are produced by a generator."""
    people = PersonGenerator(seed=42).generate_people(5)

    assert isinstance(people, types.GeneratorType)
    assert len(list(people)) == 5
