"""Internal node mirroring the keys of an object-like value.

Usage:
    node = build({"x": {"y": 1}})

    # Item access works for every key
    node["x"]["y"].set(2)

    # Attribute access for identifier keys
    node.x.y.get()

    # Dirtiness aggregates over descendants
    if node.is_dirty:
        ...
"""

from __future__ import annotations

from collections.abc import ItemsView, Iterator, KeysView, ValuesView
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from dirtyproxy.core.types import ProxyNode


class ContainerNode:
    """Read-only view from the mirrored value's keys to child nodes.

    The key set is fixed when the node is built; children cannot be added,
    replaced or removed. Leaves are changed through their own ``set``.

    Not a ``Mapping``: a container exposes no ``get`` or ``set``.

    Args:
        children: Child nodes keyed like the mirrored value, in natural order.
        source_type: Type of the value this node mirrors.
    """

    __slots__ = ("_children", "_source_type")

    def __init__(self, children: dict[Any, ProxyNode], source_type: type = dict) -> None:
        object.__setattr__(self, "_children", dict(children))
        object.__setattr__(self, "_source_type", source_type)

    @property
    def source_type(self) -> type:
        """Type of the value this node mirrors."""
        return self._source_type

    @property
    def is_dirty(self) -> bool:
        """True if any descendant leaf differs from its original value.

        Recomputed on every read; only the children captured at construction
        are scanned.
        """
        return any(child.is_dirty for child in self._children.values())

    def __getitem__(self, key: Any) -> ProxyNode:
        return self._children[key]

    def __iter__(self) -> Iterator[Any]:
        return iter(self._children)

    def __len__(self) -> int:
        return len(self._children)

    def __contains__(self, key: object) -> bool:
        return key in self._children

    def keys(self) -> KeysView[Any]:
        """Keys of the mirrored value, in natural order."""
        return self._children.keys()

    def values(self) -> ValuesView[ProxyNode]:
        return self._children.values()

    def items(self) -> ItemsView[Any, ProxyNode]:
        return self._children.items()

    def __getattr__(self, name: str) -> ProxyNode:
        # Only reached when normal lookup fails, so real attributes win.
        try:
            children = object.__getattribute__(self, "_children")
        except AttributeError:
            raise AttributeError(name) from None
        try:
            return children[name]
        except KeyError:
            raise AttributeError(
                f"{type(self).__name__} mirroring {self._source_type.__name__} "
                f"has no key {name!r}"
            ) from None

    def __setattr__(self, name: str, value: Any) -> None:
        raise AttributeError(
            f"{type(self).__name__} keys are fixed; "
            f"use node[{name!r}].set(...) to change a leaf"
        )

    def __delattr__(self, name: str) -> None:
        raise AttributeError(f"{type(self).__name__} keys are fixed")

    def __reduce__(self) -> tuple[Any, ...]:
        # Rebuild through __init__; __setattr__ rejects slot restoration.
        return (type(self), (self._children, self._source_type))

    def __dir__(self) -> list[str]:
        names = set(super().__dir__())
        names.update(key for key in self._children if isinstance(key, str) and key.isidentifier())
        return sorted(names)

    def __repr__(self) -> str:
        marker = "*" if self.is_dirty else ""
        keys = ", ".join(repr(key) for key in self._children)
        return f"ContainerNode{marker}<{self._source_type.__name__}>({keys})"


# Keys with these names cannot be reached as attributes of a ContainerNode.
RESERVED_ATTRIBUTES = frozenset(name for name in dir(ContainerNode) if not name.startswith("__"))
