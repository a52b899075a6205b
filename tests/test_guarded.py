"""Tests for guarded module."""

import pytest

from iteration_idioms.errors import ImmutablePropertyError, IterationIdiomsError, OutOfRangeError
from iteration_idioms.guarded import DEFAULT_PROTECTED_KEYS, GuardedView, make_guarded_view
from iteration_idioms.models import Container


@pytest.fixture
def person():
    return Container(name="John", age=30, job="developer")


def test_get_by_position(person):
    """Test ordinal reads inside the range."""
    view = GuardedView(person)
    assert view.get(0) == "John"
    assert view.get(1) == 30
    assert view.get(2) == "developer"


def test_get_out_of_range(person):
    """Test that reads past the end or before the start fail."""
    view = GuardedView(person)
    with pytest.raises(OutOfRangeError):
        view.get(3)
    with pytest.raises(OutOfRangeError):
        view.get(-1)


def test_get_converts_integer_strings(person):
    """Test that integer strings are accepted as positions."""
    view = GuardedView(person)
    assert view.get("0") == "John"
    assert view["2"] == "developer"


@pytest.mark.parametrize("index", ["name", "1.5", "", None, True, 1.0])
def test_get_rejects_non_integer_index(person, index):
    """Test that values that aren't integer positions are out of range."""
    view = GuardedView(person)
    with pytest.raises(OutOfRangeError):
        view.get(index)


def test_out_of_range_is_index_error(person):
    """Test the error hierarchy for reads."""
    view = GuardedView(person)
    with pytest.raises(IndexError):
        view[10]
    with pytest.raises(IterationIdiomsError):
        view[10]


def test_set_protected_key_fails(person):
    """Test that writes to protected keys are rejected and change nothing."""
    view = GuardedView(person)
    with pytest.raises(ImmutablePropertyError) as exc_info:
        view.set("name", "Bob")
    assert exc_info.value.key == "name"
    with pytest.raises(ImmutablePropertyError):
        view["age"] = 31
    assert person["name"] == "John"
    assert person["age"] == 30


def test_set_writes_through(person):
    """Test that unprotected writes reach the container."""
    view = GuardedView(person)
    assert view.set("job", "coding") is True
    assert person["job"] == "coding"

    view["2"] = "coding"
    assert person["2"] == "coding"


def test_reads_come_from_snapshot(person):
    """Test that reads keep returning construction-time values."""
    view = GuardedView(person)
    view.set("job", "coding")
    assert view.get(2) == "developer"


def test_size_is_fixed_at_construction(person):
    """Test that entries added later are outside the view's range."""
    view = GuardedView(person)
    person["city"] = "Lisbon"

    assert len(person) == 4
    assert view.size == 3
    with pytest.raises(OutOfRangeError):
        view.get(3)


def test_configurable_denylist(person):
    """Test a custom set of protected keys."""
    view = GuardedView(person, protected=["job"])
    with pytest.raises(ImmutablePropertyError):
        view.set("job", "coding")
    assert view.set("name", "Bob") is True
    assert person["name"] == "Bob"


def test_make_guarded_view_defaults(person):
    """Test the factory's default protected keys."""
    view = make_guarded_view(person)
    assert view.protected == DEFAULT_PROTECTED_KEYS
    assert make_guarded_view(person, protected=[]).protected == frozenset()
