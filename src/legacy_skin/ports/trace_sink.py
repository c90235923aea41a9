from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from legacy_skin.resolver.trace import LookupTraceRecord


# TraceSink is a port-like interface for lookup trace adapters.
@runtime_checkable
class TraceSink(Protocol):
    def emit(self, record: LookupTraceRecord) -> None:
        """Consume one LookupTraceRecord."""
        raise NotImplementedError("TraceSink is a port; use a concrete adapter.")

    def flush(self) -> None:
        """Flush buffered trace output if supported."""
        raise NotImplementedError("TraceSink is a port; use a concrete adapter.")

    def close(self) -> None:
        """Close the sink and release resources."""
        raise NotImplementedError("TraceSink is a port; use a concrete adapter.")
