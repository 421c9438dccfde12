"""Configuration settings using Pydantic Settings.

Provides typed configuration with environment variable support for the builder.

Usage:
    from dirtyproxy.config import BuilderSettings

    # Load from environment variables (DIRTYPROXY_*)
    settings = BuilderSettings()

    # Or override with explicit values
    settings = BuilderSettings(expand_sequences=False, max_depth=8)
"""

from __future__ import annotations

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class BuilderSettings(BaseSettings):  # type: ignore[misc]
    """Configuration for the proxy builder.

    Attributes:
        expand_sequences: Mirror lists and tuples as containers keyed by index.
        expand_dataclasses: Mirror dataclass instances as containers keyed by field.
        expand_models: Mirror pydantic model instances as containers keyed by field.
        expand_objects: Mirror other objects with a __dict__ as containers keyed by attribute.
        max_depth: Maximum number of nested container levels (None for unbounded).
        warn_on_shadowed_keys: Warn when a key is hidden behind a node attribute.

    Environment Variables:
        DIRTYPROXY_EXPAND_SEQUENCES
        DIRTYPROXY_EXPAND_DATACLASSES
        DIRTYPROXY_EXPAND_MODELS
        DIRTYPROXY_EXPAND_OBJECTS
        DIRTYPROXY_MAX_DEPTH
        DIRTYPROXY_WARN_ON_SHADOWED_KEYS
    """

    model_config = SettingsConfigDict(
        env_prefix="DIRTYPROXY_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    expand_sequences: bool = True
    expand_dataclasses: bool = True
    expand_models: bool = True
    expand_objects: bool = True
    max_depth: int | None = Field(default=None, ge=1)
    warn_on_shadowed_keys: bool = True
