"""Tests for idioms module."""

from iteration_idioms import idioms
from iteration_idioms.models import Container

USERS = ["John", "Jane", "Bob", "Alice"]


def test_sequence_idioms_agree():
    """Test that every sequence loop visits items in the same order."""
    assert idioms.by_index(USERS) == USERS
    assert idioms.by_enumerate(USERS) == USERS
    assert idioms.direct(USERS) == USERS


def test_container_idioms_agree():
    """Test that every container loop visits values in insertion order."""
    person = Container(name="John", age=30, job="developer")
    expected = ["John", 30, "developer"]
    assert idioms.values_by_index(person) == expected
    assert idioms.values_by_key(person) == expected
    assert idioms.values_direct(person) == expected
    assert idioms.values_from_items(person) == expected


def test_for_each_runs_side_effect():
    """Test that for_each calls the action once per item and returns None."""
    seen = []
    assert idioms.for_each(USERS, seen.append) is None
    assert seen == USERS


def test_mapped_builds_new_list():
    """Test mapped."""
    assert idioms.mapped(USERS, len) == [4, 4, 3, 5]


def test_find_and_find_index():
    """Test search helpers, including misses."""
    assert idioms.find(USERS, lambda user: user.startswith("B")) == "Bob"
    assert idioms.find(USERS, lambda user: user.startswith("Z")) is None
    assert idioms.find_index(USERS, lambda user: user == "Alice") == 3
    assert idioms.find_index(USERS, lambda user: user == "Zoe") == -1


def test_every_some_keep_reduce():
    """Test the remaining higher-order helpers."""
    assert idioms.every(USERS, lambda user: user.istitle())
    assert not idioms.every(USERS, lambda user: len(user) == 4)
    assert idioms.some(USERS, lambda user: len(user) == 3)
    assert not idioms.some([], lambda user: True)
    assert idioms.keep(USERS, lambda user: "a" in user) == ["Jane"]
    assert idioms.reduce_values(USERS, lambda total, user: total + len(user), 0) == 16
