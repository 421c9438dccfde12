"""Node models: the protocol shared by every proxy node."""

from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class Trackable(Protocol):
    """Anything that can report whether it changed since it was created."""

    @property
    def is_dirty(self) -> bool: ...
