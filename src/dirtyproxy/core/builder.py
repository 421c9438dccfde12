"""Proxy builder: mirror a nested value as a tree of dirty-tracking nodes.

Usage:
    node = build({"x": {"y": {"z": 5}}})
    node.x.y.z.set(8)
    assert node.is_dirty and node.x.is_dirty and node.x.y.is_dirty

    # Reusable builder with explicit settings
    builder = ProxyBuilder(BuilderSettings(expand_sequences=False))
    tags = builder.build({"tags": ["a", "b"]})
    tags["tags"].set(["a"])
"""

from __future__ import annotations

import dataclasses
import functools
import logging
import types
import warnings
from collections.abc import Iterator, Mapping
from enum import Enum
from typing import Any

from pydantic import BaseModel

from dirtyproxy.config import BuilderSettings
from dirtyproxy.core.node import RESERVED_ATTRIBUTES, ContainerNode, FieldNode
from dirtyproxy.core.types import ProxyNode

logger = logging.getLogger(__name__)

# Always leaves, even for subclasses whose instances carry a __dict__.
_SCALAR_TYPES: tuple[type, ...] = (
    str,
    bytes,
    bytearray,
    memoryview,
    int,
    float,
    complex,
    Enum,
)

# Instances of these carry a __dict__ but are never mirrored.
_OPAQUE_TYPES: tuple[type, ...] = (
    type,
    types.FunctionType,
    types.BuiltinFunctionType,
    types.MethodType,
    types.ModuleType,
    functools.partial,
)


class ProxyBuildError(Exception):
    """Base class for errors raised while building a proxy tree."""

    pass


class CyclicReferenceError(ProxyBuildError):
    """Raised when a container contains itself along the construction path."""

    def __init__(self, path: tuple[Any, ...]) -> None:
        self.path = path
        super().__init__(f"Cyclic reference at {format_path(path)}")


class MaxDepthExceededError(ProxyBuildError):
    """Raised when container nesting is deeper than ``max_depth`` allows."""

    def __init__(self, path: tuple[Any, ...], max_depth: int) -> None:
        self.path = path
        self.max_depth = max_depth
        super().__init__(
            f"Container at {format_path(path)} exceeds max_depth={max_depth}"
        )


def format_path(path: tuple[Any, ...]) -> str:
    """Render a key path as ``$['x'][0]`` for error messages."""
    return "$" + "".join(f"[{key!r}]" for key in path)


def is_container(value: Any, settings: BuilderSettings | None = None) -> bool:
    """Decide whether a value is mirrored as a container or wrapped as a leaf.

    None, scalars, enum members, classes, functions and modules are always
    leaves. Mappings and ``SimpleNamespace`` objects are always containers.
    Lists, tuples (including namedtuples), dataclass instances, pydantic model
    instances and other objects with a ``__dict__`` are containers unless
    disabled in settings. Everything else is a leaf.

    Args:
        value: Value to classify.
        settings: Builder settings; defaults are loaded when omitted.

    Returns:
        True if the value gets a ContainerNode.
    """
    if settings is None:
        settings = BuilderSettings()
    if value is None or isinstance(value, _SCALAR_TYPES + _OPAQUE_TYPES):
        return False
    if isinstance(value, (Mapping, types.SimpleNamespace)):
        return True
    if isinstance(value, (list, tuple)):
        return settings.expand_sequences
    if isinstance(value, BaseModel):
        return settings.expand_models
    if dataclasses.is_dataclass(value):
        return settings.expand_dataclasses
    if hasattr(value, "__dict__"):
        return settings.expand_objects
    return False


def _is_namedtuple(value: Any) -> bool:
    return isinstance(value, tuple) and hasattr(type(value), "_fields")


def _own_items(value: Any) -> Iterator[tuple[Any, Any]]:
    """Yield (key, child) pairs of a container value in natural order."""
    if isinstance(value, Mapping):
        yield from value.items()
    elif _is_namedtuple(value):
        yield from zip(type(value)._fields, value)
    elif isinstance(value, (list, tuple)):
        yield from enumerate(value)
    elif isinstance(value, BaseModel):
        for name in type(value).model_fields:
            yield name, getattr(value, name)
    elif dataclasses.is_dataclass(value):
        for field in dataclasses.fields(value):
            yield field.name, getattr(value, field.name)
    else:
        yield from vars(value).items()


class ProxyBuilder:
    """Builds proxy trees according to a fixed set of settings.

    A builder holds only its settings; every ``build`` call produces an
    independent tree.

    Args:
        settings: Builder settings; loaded from the environment when omitted.
    """

    def __init__(self, settings: BuilderSettings | None = None) -> None:
        self._settings = settings if settings is not None else BuilderSettings()

    @property
    def settings(self) -> BuilderSettings:
        return self._settings

    def build(self, value: Any) -> ProxyNode:
        """Mirror ``value`` as a proxy tree.

        Args:
            value: Any acyclic value.

        Returns:
            A ContainerNode for container values, a FieldNode otherwise.

        Raises:
            CyclicReferenceError: If a container is reachable from itself.
            MaxDepthExceededError: If nesting exceeds ``settings.max_depth``.
        """
        return self._build_root(value, stacklevel=3)

    def _build_root(self, value: Any, stacklevel: int) -> ProxyNode:
        logger.debug("Building proxy for %s", type(value).__name__)
        shadowed: list[tuple[Any, ...]] = []
        node = self._build(value, (), set(), shadowed)
        if self._settings.warn_on_shadowed_keys:
            for path in shadowed:
                warnings.warn(
                    f"Key {path[-1]!r} at {format_path(path[:-1])} is shadowed by a "
                    f"ContainerNode attribute; use node[{path[-1]!r}] to reach it.",
                    stacklevel=stacklevel,
                )
        return node

    def _build(
        self,
        value: Any,
        path: tuple[Any, ...],
        active: set[int],
        shadowed: list[tuple[Any, ...]],
    ) -> ProxyNode:
        if not is_container(value, self._settings):
            return FieldNode(value)

        if id(value) in active:
            raise CyclicReferenceError(path)
        max_depth = self._settings.max_depth
        if max_depth is not None and len(active) >= max_depth:
            raise MaxDepthExceededError(path, max_depth)

        active.add(id(value))
        try:
            children: dict[Any, ProxyNode] = {}
            for key, child in _own_items(value):
                if key in RESERVED_ATTRIBUTES:
                    shadowed.append((*path, key))
                children[key] = self._build(child, (*path, key), active, shadowed)
        finally:
            active.discard(id(value))

        logger.debug(
            "Mirrored %s at %s with %d keys", type(value).__name__, format_path(path), len(children)
        )
        return ContainerNode(children, source_type=type(value))


def build(value: Any, settings: BuilderSettings | None = None) -> ProxyNode:
    """Mirror ``value`` as a tree of dirty-tracking proxy nodes.

    Containers (mappings, sequences, dataclass and pydantic model instances,
    plain objects with attributes) become ContainerNodes whose children mirror their keys; everything else,
    including None, becomes a FieldNode with ``get``/``set``.

    Args:
        value: Any acyclic value.
        settings: Builder settings; loaded from the environment when omitted.

    Returns:
        The root node of a new, independent proxy tree.

    Raises:
        CyclicReferenceError: If a container is reachable from itself.
        MaxDepthExceededError: If nesting exceeds ``settings.max_depth``.
    """
    return ProxyBuilder(settings)._build_root(value, stacklevel=3)
