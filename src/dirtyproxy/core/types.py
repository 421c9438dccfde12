"""Core type definitions for dirtyproxy."""

from typing import Any

from dirtyproxy.core.node.container import ContainerNode
from dirtyproxy.core.node.field import FieldNode

type ProxyNode = FieldNode[Any] | ContainerNode
"""Any node produced by the builder.

Containers mirror object-like values and hold further ``ProxyNode`` children;
everything else is wrapped in a ``FieldNode``.
"""
