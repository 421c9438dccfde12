"""Leaf node wrapping a single value.

Usage:
    node = FieldNode(5)
    node.set(8)
    assert node.is_dirty
    node.set(5)
    assert not node.is_dirty
"""

from __future__ import annotations


class FieldNode[T]:
    """Leaf proxy holding the value captured at construction and the value last set.

    Dirtiness is derived on every read by comparing ``current`` to ``origin``
    with the value's own ``__eq__``. Compound leaves (sets, plain objects) are
    compared shallowly, so a plain object without ``__eq__`` is only clean
    while the very same instance is stored. When ``!=`` yields something
    without a truth value, any object other than ``origin`` counts as dirty.

    Args:
        value: Value to wrap. Becomes both ``origin`` and ``current``.
    """

    __slots__ = ("_origin", "_current")

    def __init__(self, value: T) -> None:
        self._origin = value
        self._current = value

    @property
    def origin(self) -> T:
        """Value captured when the node was built."""
        return self._origin

    @property
    def current(self) -> T:
        """Value as last set."""
        return self._current

    @property
    def is_dirty(self) -> bool:
        """True while ``current`` differs from ``origin``."""
        # Identity first, same as list/dict equality, so NaN leaves start clean.
        if self._current is self._origin:
            return False
        try:
            return bool(self._current != self._origin)
        except (TypeError, ValueError):
            # Element-wise comparisons (arrays) have no single truth value;
            # a different object counts as a change.
            return True

    def get(self) -> T:
        """Return the current value."""
        return self._current

    def set(self, value: T) -> None:
        """Replace the current value. No validation or coercion is applied."""
        self._current = value

    def __repr__(self) -> str:
        if self.is_dirty:
            return f"FieldNode*({self._origin!r} -> {self._current!r})"
        return f"FieldNode({self._current!r})"
