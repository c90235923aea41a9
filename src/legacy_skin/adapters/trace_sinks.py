from __future__ import annotations

import json
import sys
from collections.abc import Iterable
from datetime import UTC, datetime
from pathlib import Path
from typing import TYPE_CHECKING, Literal

if TYPE_CHECKING:
    from legacy_skin.resolver.trace import LookupTraceRecord
from legacy_skin.ports.trace_sink import TraceSink


class JsonlTraceSink(TraceSink):
    # JsonlTraceSink writes one LookupTraceRecord per line.
    def __init__(
        self,
        *,
        path: Path,
        write_mode: Literal["line", "batch"] = "line",
        flush_every_n: int = 1,
    ) -> None:
        self._path = path
        self._write_mode = write_mode
        self._flush_every_n = max(1, flush_every_n)
        self._emit_count = 0
        self._buffer: list[str] = []
        self._path.parent.mkdir(parents=True, exist_ok=True)
        self._handle = self._path.open("a", encoding="utf-8")

    def emit(self, record: "LookupTraceRecord") -> None:
        line = json.dumps(
            _trace_to_dict(record),
            separators=(",", ":"),
            ensure_ascii=False,
            default=_json_default,
        )
        if self._write_mode == "batch":
            self._buffer.append(line)
            if len(self._buffer) >= self._flush_every_n:
                self._write_lines(self._buffer)
                self._buffer.clear()
                self._handle.flush()
        else:
            self._write_lines([line])
            self._emit_count += 1
            if self._emit_count % self._flush_every_n == 0:
                self.flush()

    def flush(self) -> None:
        # Flush both buffered and handle-level writes.
        if self._buffer:
            self._write_lines(self._buffer)
            self._buffer.clear()
        self._handle.flush()

    def close(self) -> None:
        # Always flush pending data before releasing the descriptor.
        if self._handle.closed:
            return
        self.flush()
        self._handle.close()

    def _write_lines(self, lines: Iterable[str]) -> None:
        for line in lines:
            self._handle.write(line + "\n")


class StdoutTraceSink(TraceSink):
    # Debug adapter: one JSON record per line on stdout.
    def emit(self, record: "LookupTraceRecord") -> None:
        line = json.dumps(
            _trace_to_dict(record),
            separators=(",", ":"),
            ensure_ascii=False,
            default=_json_default,
        )
        sys.stdout.write(line + "\n")

    def flush(self) -> None:
        sys.stdout.flush()

    def close(self) -> None:
        self.flush()


def _trace_to_dict(record: "LookupTraceRecord") -> dict[str, object]:
    # Stable key order keeps trace files diffable.
    return {
        "operation": record.operation,
        "request": record.request,
        "outcome": record.outcome,
        "candidates": list(record.candidates),
        "resolved_name": record.resolved_name,
        "t_at": _format_dt(record.t_at),
        "duration_ms": record.duration_ms,
        "error": record.error,
    }


def _format_dt(value: datetime) -> str:
    # RFC3339 UTC with Z suffix.
    return value.astimezone(UTC).isoformat().replace("+00:00", "Z")


def _json_default(obj: object) -> str:
    # JSON fallback for deterministic serialization of free-form values.
    return str(obj)
