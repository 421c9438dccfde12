"""Node functionality: leaf and container proxies and their shared protocol."""

from dirtyproxy.core.node.container import RESERVED_ATTRIBUTES, ContainerNode
from dirtyproxy.core.node.field import FieldNode
from dirtyproxy.core.node.models import Trackable

__all__ = [
    # Models
    "Trackable",
    # Nodes
    "FieldNode",
    "ContainerNode",
    "RESERVED_ATTRIBUTES",
]
