from __future__ import annotations

import time
from collections.abc import Iterable
from dataclasses import dataclass
from datetime import UTC, datetime
from typing import TYPE_CHECKING, Literal

if TYPE_CHECKING:
    from legacy_skin.ports.trace_sink import TraceSink

Operation = Literal["config", "drawable", "texture", "sample"]
Outcome = Literal["hit", "miss", "disabled", "error"]


@dataclass(frozen=True, slots=True)
class LookupTraceRecord:
    # One resolver call: what was asked, which names were probed, how it ended.
    operation: Operation
    request: str
    outcome: Outcome
    candidates: tuple[str, ...]
    resolved_name: str | None
    t_at: datetime
    duration_ms: float
    error: str | None = None


@dataclass(frozen=True, slots=True)
class LookupSpan:
    # Internal handle between begin/finish.
    operation: Operation
    request: str
    t_at: datetime
    started: float


class LookupTracer:
    # Builds LookupTraceRecord entries and forwards them to a sink.
    def __init__(self, sink: TraceSink) -> None:
        self._sink = sink

    @property
    def sink(self) -> TraceSink:
        return self._sink

    def begin(self, operation: Operation, request: object) -> LookupSpan:
        return LookupSpan(
            operation=operation,
            request=_describe(request),
            t_at=datetime.now(tz=UTC),
            started=time.perf_counter(),
        )

    def finish(
        self,
        span: LookupSpan,
        *,
        outcome: Outcome,
        candidates: Iterable[str] = (),
        resolved_name: str | None = None,
        error: BaseException | None = None,
    ) -> LookupTraceRecord:
        record = LookupTraceRecord(
            operation=span.operation,
            request=span.request,
            outcome=outcome,
            candidates=tuple(candidates),
            resolved_name=resolved_name,
            t_at=span.t_at,
            duration_ms=(time.perf_counter() - span.started) * 1000.0,
            error=f"{type(error).__name__}: {error}" if error is not None else None,
        )
        self._sink.emit(record)
        return record

    def close(self) -> None:
        self._sink.close()


def _describe(request: object) -> str:
    # Enum members read better by value than by repr.
    value = getattr(request, "value", None)
    if isinstance(value, str):
        return f"{type(request).__name__}.{value}"
    if isinstance(request, str):
        return request
    return repr(request)
