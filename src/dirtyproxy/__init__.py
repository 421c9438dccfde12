"""dirtyproxy: dirty-tracking proxies for nested data.

Usage:
    from dirtyproxy import build

    props = build({"x": {"y": {"z": 5}}})
    props.is_dirty            # False
    props.x.y.z.get()         # 5

    props.x.y.z.set(8)
    props.is_dirty            # True, and so is every level down to z

    props.x.y.z.set(5)
    props.is_dirty            # False again: dirtiness is recomputed on read
"""

__version__ = "0.1.0"

# Config
from dirtyproxy.config import BuilderSettings

# Core primitives
from dirtyproxy.core import (
    ContainerNode,
    CyclicReferenceError,
    FieldNode,
    MaxDepthExceededError,
    ProxyBuilder,
    ProxyBuildError,
    ProxyNode,
    Trackable,
    build,
    is_container,
)

__all__ = [
    # Version
    "__version__",
    # Core
    "build",
    "is_container",
    "ProxyBuilder",
    "ProxyNode",
    "Trackable",
    "FieldNode",
    "ContainerNode",
    # Errors
    "ProxyBuildError",
    "CyclicReferenceError",
    "MaxDepthExceededError",
    # Config
    "BuilderSettings",
]
