"""Core type definitions for copysemantics."""

type Copy[T] = T
"""Type alias indicating a value is an independent deep copy.

When you see `Copy[T]` in a return type, mutating the returned value never
affects the object it was copied from.
"""

type View[T] = T
"""Type alias indicating a value may alias its source.

A `View[T]` is a new top-level container whose nested elements are the same
objects as in the source. Mutating a nested element is visible through both.
"""
