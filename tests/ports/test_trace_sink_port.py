from __future__ import annotations

import pytest

from legacy_skin.ports.trace_sink import TraceSink


class _PortOnly(TraceSink):
    pass


def test_trace_sink_port_raises_on_direct_use() -> None:
    # Port methods must not be used directly; adapters implement the interface.
    port = _PortOnly()  # type: ignore[misc,abstract]
    with pytest.raises(NotImplementedError):
        port.emit(object())  # type: ignore[arg-type]
    with pytest.raises(NotImplementedError):
        port.flush()
    with pytest.raises(NotImplementedError):
        port.close()
