"""Tests for shallow and deep copy strategies.

Why these tests exist:
- A shallow copy must alias nested mutable elements with its source
- A deep copy must share no mutable state with its source
- Copy failures must surface as CopyError naming the mode
"""

import threading

import pytest
from hypothesis import given
from hypothesis import strategies as st

from copysemantics import CopyError, CopyMode, Dog, copy_with, deep_copy, shallow_copy

names = st.text(min_size=1, max_size=12).filter(lambda s: s.strip())
scalars = st.one_of(st.text(max_size=8), st.integers(), st.floats(allow_nan=False), st.none())


@st.composite
def roster_with_dog(draw):
    """Generate a list of scalars with one Dog inserted at a random index."""
    items = draw(st.lists(scalars, max_size=6))
    index = draw(st.integers(min_value=0, max_value=len(items)))
    items.insert(index, Dog(draw(names)))
    return items, index


@given(case=roster_with_dog(), new_name=names)
def test_shallow_copy_mutation_visible_through_original(case, new_name):
    """PROPERTY: Renaming the dog through a shallow copy renames it in the source."""
    original, index = case

    view = shallow_copy(original)
    view[index].set_name(new_name)

    assert view is not original
    assert original[index] is view[index]
    assert original[index].get_name() == new_name


@given(case=roster_with_dog(), new_name=names)
def test_deep_copy_mutation_invisible_through_original(case, new_name):
    """PROPERTY: Renaming the dog through a deep copy leaves the source alone."""
    original, index = case
    before = original[index].get_name()

    clone = deep_copy(original)
    clone[index].set_name(new_name)

    assert clone[index] is not original[index]
    assert original[index].get_name() == before
    assert clone[index].get_name() == new_name


def test_buster_renamed_through_shallow_copy(roster):
    view = shallow_copy(roster)

    view[0].set_name("Roscoe")

    assert roster[0].get_name() == "Roscoe"
    assert view[0].get_name() == "Roscoe"


def test_buster_survives_deep_copy_rename(roster):
    clone = deep_copy(roster)

    clone[0].set_name("Roscoe")

    assert roster[0].get_name() == "Buster"
    assert clone[0].get_name() == "Roscoe"


def test_rebinding_slot_in_shallow_copy_does_not_touch_source(roster):
    """Replacing an element is not a mutation of the shared element."""
    view = shallow_copy(roster)

    view[1] = "Pepper"
    view[0] = Dog("Roscoe")

    assert roster[1] == "Ginger"
    assert roster[0].get_name() == "Buster"


def test_deep_copy_preserves_repeated_references():
    """An object reachable twice in the source is one object reachable twice in the copy."""
    dog = Dog("Buster")
    source = [dog, {"best_friend": dog}]

    clone = deep_copy(source)

    assert clone[0] is clone[1]["best_friend"]
    assert clone[0] is not dog


def test_deep_copy_handles_cycles():
    source: list = []
    source.append(source)

    clone = deep_copy(source)

    assert clone is not source
    assert clone[0] is clone


def test_shallow_copy_of_dict_shares_values():
    dog = Dog("Buster")
    source = {"dog": dog, "tags": ["good"]}

    view = shallow_copy(source)

    assert view is not source
    assert view["dog"] is dog
    assert view["tags"] is source["tags"]


@pytest.mark.parametrize(
    ("mode", "expected"),
    [(CopyMode.SHALLOW, shallow_copy), (CopyMode.DEEP, deep_copy)],
    ids=["shallow", "deep"],
)
def test_mode_selects_strategy(mode, expected):
    assert mode.get_strategy() is expected


@pytest.mark.parametrize(
    ("mode", "shares_dog"),
    [(CopyMode.SHALLOW, True), (CopyMode.DEEP, False)],
    ids=["shallow", "deep"],
)
def test_copy_with_applies_mode(roster, mode, shares_dog):
    copied = copy_with(roster, mode)

    assert copied == roster
    assert copied is not roster
    assert (copied[0] is roster[0]) == shares_dog


def test_deep_copy_of_uncopyable_raises_copy_error():
    source = [Dog("Buster"), threading.Lock()]

    with pytest.raises(CopyError, match="Cannot deep copy list") as exc_info:
        deep_copy(source)

    assert isinstance(exc_info.value, TypeError)
    assert exc_info.value.__cause__ is not None


def test_shallow_copy_of_container_with_uncopyable_element_succeeds():
    """Shallow copy never touches the elements, so an uncopyable one is fine."""
    lock = threading.Lock()
    source = [Dog("Buster"), lock]

    view = shallow_copy(source)

    assert view[1] is lock


def test_shallow_copy_of_uncopyable_raises_copy_error():
    with pytest.raises(CopyError, match="Cannot shallow copy"):
        shallow_copy(threading.Lock())
