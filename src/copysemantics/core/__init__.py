"""Core functionalities: stateless copy strategies and aliasing checks.

Architecture Note:
    core/ contains pure functions and plain records with no global state.
    The runnable demonstration that ties them together lives in demo/.
"""

from copysemantics.core.aliasing import (
    Attribute,
    Member,
    SharedReference,
    find_shared_references,
    is_independent,
)
from copysemantics.core.copying import (
    CopyError,
    CopyMode,
    copy_with,
    deep_copy,
    shallow_copy,
)
from copysemantics.core.pet import Dog
from copysemantics.core.types import Copy, View

__all__ = [
    # Types
    "Copy",
    "View",
    # Records
    "Dog",
    # Copying
    "CopyMode",
    "CopyError",
    "shallow_copy",
    "deep_copy",
    "copy_with",
    # Aliasing
    "Attribute",
    "Member",
    "SharedReference",
    "find_shared_references",
    "is_independent",
]
