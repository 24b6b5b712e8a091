"""Pure functions for shallow and deep copy strategies.

These are stateless functions selected by `CopyMode`. A shallow copy duplicates
only the top-level container, so nested mutable elements stay shared with the
source. A deep copy allocates a new instance for every nested mutable object
reachable from the root.

Usage:
    roster = [Dog("Buster"), "Ginger"]

    view = shallow_copy(roster)      # view[0] is roster[0]
    clone = deep_copy(roster)        # clone[0] is not roster[0]

    clone = copy_with(roster, CopyMode.DEEP)
"""

from __future__ import annotations

import copy
import logging
from collections.abc import Callable
from enum import Enum, auto
from typing import Any, TypeVar

from copysemantics.core.types import Copy, View

T = TypeVar("T")

logger = logging.getLogger(__name__)


class CopyError(TypeError):
    """Raised when an object graph contains something that cannot be copied."""

    pass


class CopyMode(Enum):
    """How far a copy reaches into the object graph."""

    SHALLOW = auto()  # Top-level container only, nested elements shared
    DEEP = auto()  # Every reachable mutable object duplicated

    def get_strategy(self) -> Callable[[Any], Any]:
        """Get the copy function for this mode.

        Returns:
            Pure function implementing the copy.
        """
        strategies: dict[CopyMode, Callable[[Any], Any]] = {
            CopyMode.SHALLOW: shallow_copy,
            CopyMode.DEEP: deep_copy,
        }
        return strategies[self]


def shallow_copy(obj: T) -> View[T]:
    """Duplicate the top-level container, keeping nested references.

    Args:
        obj: Container or object to copy.

    Returns:
        New top-level object whose elements are the source's elements.
        Immutable objects such as tuples of scalars may be returned as-is.

    Raises:
        CopyError: If the object cannot be copied.
    """
    try:
        return copy.copy(obj)
    except (TypeError, copy.Error) as e:
        raise CopyError(f"Cannot shallow copy {type(obj).__name__}: {e}") from e


def deep_copy(obj: T) -> Copy[T]:
    """Recursively duplicate an object graph.

    Repeated references and cycles inside the source are reproduced inside the
    copy: an object reachable twice in `obj` is one object reachable twice in
    the result.

    Args:
        obj: Root of the graph to copy.

    Returns:
        Independent copy sharing no mutable state with `obj`.

    Raises:
        CopyError: If some object in the graph cannot be copied.
    """
    try:
        return copy.deepcopy(obj)
    except (TypeError, copy.Error) as e:
        raise CopyError(f"Cannot deep copy {type(obj).__name__}: {e}") from e


def copy_with(obj: T, mode: CopyMode) -> T:
    """Copy an object using the strategy for `mode`.

    Args:
        obj: Object to copy.
        mode: Shallow or deep.

    Returns:
        The copy produced by the selected strategy.
    """
    logger.debug("Copying %s with mode %s", type(obj).__name__, mode.name)
    return mode.get_strategy()(obj)
