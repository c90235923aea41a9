from __future__ import annotations

from pathlib import Path

from legacy_skin.adapters.resource_stores import directory_sample_store, directory_texture_store
from legacy_skin.adapters.trace_sinks import JsonlTraceSink, StdoutTraceSink
from legacy_skin.config.loader import build_configuration, load_skin_document
from legacy_skin.config.models import ResolverSettings, TracingConfig
from legacy_skin.ports.trace_sink import TraceSink
from legacy_skin.resolver.skin import LegacySkin
from legacy_skin.resolver.trace import LookupTracer


def build_trace_sink(tracing: TracingConfig | None) -> TraceSink | None:
    # Tracing is opt-in; a disabled or sink-less config means no sink at all.
    if tracing is None or not tracing.enabled or tracing.sink is None:
        return None
    if tracing.sink.kind == "stdout":
        return StdoutTraceSink()
    jsonl = tracing.sink.jsonl
    assert jsonl is not None
    return JsonlTraceSink(
        path=Path(jsonl.path),
        write_mode=jsonl.write_mode,
        flush_every_n=jsonl.flush_every_n,
    )


def build_skin(
    *,
    skin_path: Path | None,
    assets_dir: Path | None,
    settings: ResolverSettings,
) -> LegacySkin:
    # Composition root: decoded document + directory stores + optional tracer.
    configuration = None
    mania = []
    if skin_path is not None:
        configuration, mania = build_configuration(load_skin_document(skin_path))

    textures = directory_texture_store(assets_dir) if assets_dir is not None else None
    samples = directory_sample_store(assets_dir) if assets_dir is not None else None

    sink = build_trace_sink(settings.tracing)
    tracer = LookupTracer(sink) if sink is not None else None
    return LegacySkin(
        configuration,
        mania,
        textures,
        samples,
        allow_mania=settings.allow_mania,
        tracer=tracer,
    )
