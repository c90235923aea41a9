from __future__ import annotations

from typing import Any, Protocol, runtime_checkable


# SampleStore is the boundary to the audio backend.
@runtime_checkable
class SampleStore(Protocol):
    def get(self, name: str) -> Any | None:
        """Return an opaque sample handle for name, or None when absent."""
        raise NotImplementedError("SampleStore is a port; use a concrete adapter.")
