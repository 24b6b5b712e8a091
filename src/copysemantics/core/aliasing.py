"""Detect mutable objects shared between two object graphs.

Two graphs alias each other when some mutable object is reachable from both.
A mutation made through one handle to such an object is observable through
the other. Immutable scalars are never reported: sharing them cannot be
observed.

Usage:
    roster = [Dog("Buster"), "Ginger"]
    view = shallow_copy(roster)

    find_shared_references(roster, view)
    # [SharedReference(path=(0,), type_name='Dog')]

    is_independent(roster, deep_copy(roster))  # True
"""

from __future__ import annotations

import logging
import types
from collections.abc import Callable, Collection, Iterator, Mapping, Sequence
from dataclasses import dataclass
from enum import Enum
from typing import Any

logger = logging.getLogger(__name__)

# Objects the copy module never duplicates; sharing them is not aliasing.
_ATOMIC_TYPES: tuple[type, ...] = (
    type(None),
    type(Ellipsis),
    bool,
    int,
    float,
    complex,
    str,
    bytes,
    range,
    type,
    types.FunctionType,
    types.BuiltinFunctionType,
    types.ModuleType,
    Enum,
)

# Immutable containers: traversed, never reported themselves.
_IMMUTABLE_CONTAINERS: tuple[type, ...] = (tuple, frozenset)


@dataclass(slots=True, frozen=True)
class Attribute:
    """Path step naming an attribute, rendered as ``.name``."""

    name: str


@dataclass(slots=True, frozen=True)
class Member:
    """Path step into an unordered collection such as a set, rendered as ``{*}``.

    Members of a set have no stable position, so the step carries no value.
    """


@dataclass(slots=True, frozen=True)
class SharedReference:
    """A mutable object reachable from both graphs.

    Attributes:
        path: Steps from the second graph's root to the shared object. An
            ``int`` is a sequence index, an `Attribute` an attribute name, a
            `Member` an element of an unordered collection, and anything else
            a mapping key. For example ``(0, Attribute("tags"))`` or
            ``("resident",)``.
        type_name: Class name of the shared object.
    """

    path: tuple[Any, ...]
    type_name: str

    @property
    def dotted(self) -> str:
        """Path rendered as a single expression suffix, e.g. ``[0].tags``."""
        return "".join(_render_step(step) for step in self.path)


def _render_step(step: Any) -> str:
    if isinstance(step, Attribute):
        return f".{step.name}"
    if isinstance(step, Member):
        return "{*}"
    if isinstance(step, int) and not isinstance(step, bool):
        return f"[{step}]"
    return f"[{step!r}]"


def _is_atomic(obj: Any) -> bool:
    return isinstance(obj, _ATOMIC_TYPES)


def _slot_names(cls: type) -> Iterator[str]:
    for klass in cls.__mro__:
        slots = klass.__dict__.get("__slots__", ())
        if isinstance(slots, str):
            slots = (slots,)
        for name in slots:
            if name not in ("__dict__", "__weakref__"):
                yield name


def _children(obj: Any) -> Iterator[tuple[Any, Any]]:
    """Yield (path step, child) pairs for the direct children of `obj`.

    Container items come first, then slot and instance attributes, so
    subclasses of built-in containers have both walked. Mapping keys are not
    traversed; only values are. Iterators are never consumed.
    """
    if isinstance(obj, Mapping):
        for key, value in obj.items():
            yield key, value
    elif isinstance(obj, Sequence):
        for index, item in enumerate(obj):
            yield index, item
    elif isinstance(obj, Collection) and not isinstance(obj, Iterator):
        for item in obj:
            yield Member(), item

    sentinel = object()
    for name in _slot_names(type(obj)):
        value = getattr(obj, name, sentinel)
        if value is not sentinel:
            yield Attribute(name), value
    instance_dict = getattr(obj, "__dict__", None)
    if isinstance(instance_dict, dict):
        for name, value in instance_dict.items():
            yield Attribute(name), value


def _walk(
    root: Any, stop: Callable[[Any], bool] | None = None
) -> Iterator[tuple[tuple[Any, ...], Any]]:
    """Depth-first walk over every non-atomic object reachable from root.

    Each object is yielded once, with the first path it was reached by.

    Args:
        root: Object to start from.
        stop: If given and it returns True for an object, that object's
            children are not visited.

    Yields:
        Tuples of (path, object). The root itself is yielded with path ().
    """
    if _is_atomic(root):
        return
    seen: set[int] = {id(root)}
    stack: list[tuple[tuple[Any, ...], Any]] = [((), root)]
    while stack:
        path, obj = stack.pop()
        yield path, obj
        if stop is not None and stop(obj):
            continue
        pending = []
        for step, child in _children(obj):
            if _is_atomic(child) or id(child) in seen:
                continue
            seen.add(id(child))
            pending.append((path + (step,), child))
        # Reverse so children are visited in declaration order
        stack.extend(reversed(pending))


def find_shared_references(original: Any, other: Any) -> list[SharedReference]:
    """Find mutable objects reachable from both `original` and `other`.

    Only the outermost shared object on each path is reported; its own
    children are necessarily shared too. The root of `other` is never
    reported, so comparing an object with itself reports its children. The
    root of `original` is reported when `other` reaches it, since mutating it
    through `other` changes `original` itself.

    Args:
        original: Source object graph.
        other: Object graph to check against the source, usually a copy.

    Returns:
        Shared references in the order they are reached from `other`.
    """
    reachable = {id(obj): obj for _, obj in _walk(original)}

    def is_shared(obj: Any) -> bool:
        if obj is other or isinstance(obj, _IMMUTABLE_CONTAINERS):
            return False
        return id(obj) in reachable

    shared: list[SharedReference] = []
    for path, obj in _walk(other, stop=is_shared):
        if is_shared(obj):
            shared.append(SharedReference(path=path, type_name=type(obj).__name__))
    logger.debug("Found %d shared references", len(shared))
    return shared


def is_independent(original: Any, other: Any) -> bool:
    """Check that two graphs share no mutable state.

    Args:
        original: Source object graph.
        other: Object graph to compare, usually a copy.

    Returns:
        True if the roots are distinct objects and nothing mutable is shared.
    """
    if original is other and not _is_atomic(original):
        return False
    return not find_shared_references(original, other)
