"""Configuration module using Pydantic Settings.

Provides typed configuration for the proxy builder with environment variable support.

Usage:
    from dirtyproxy.config import BuilderSettings

    settings = BuilderSettings(max_depth=16)
"""

from dirtyproxy.config.settings import BuilderSettings

__all__ = [
    "BuilderSettings",
]
