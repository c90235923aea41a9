from __future__ import annotations

from typing import Any, Protocol, runtime_checkable


# TextureStore is the boundary to whatever decodes and owns texture resources.
@runtime_checkable
class TextureStore(Protocol):
    def get(self, name: str) -> Any | None:
        """Return an opaque texture handle for name, or None when absent."""
        raise NotImplementedError("TextureStore is a port; use a concrete adapter.")
