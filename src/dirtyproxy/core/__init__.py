"""Core functionalities: proxy nodes and the builder that mirrors values into them.

Architecture Note:
    core/node/ holds the node types, which carry all per-tree state.
    core/builder.py is stateless apart from its settings; each build call
    produces an independent tree.
"""

from dirtyproxy.core.builder import (
    CyclicReferenceError,
    MaxDepthExceededError,
    ProxyBuildError,
    ProxyBuilder,
    build,
    format_path,
    is_container,
)
from dirtyproxy.core.node import ContainerNode, FieldNode, Trackable
from dirtyproxy.core.types import ProxyNode

__all__ = [
    # Types
    "ProxyNode",
    # Nodes
    "Trackable",
    "FieldNode",
    "ContainerNode",
    # Builder
    "build",
    "is_container",
    "format_path",
    "ProxyBuilder",
    # Errors
    "ProxyBuildError",
    "CyclicReferenceError",
    "MaxDepthExceededError",
]
