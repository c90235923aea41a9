from .resource_stores import (
    DirectoryResourceStore,
    InMemorySampleStore,
    InMemoryTextureStore,
    ResourceFile,
    directory_sample_store,
    directory_texture_store,
)
from .trace_sinks import JsonlTraceSink, StdoutTraceSink

# Public adapter exports are optional but make wiring simpler.
__all__ = [
    "DirectoryResourceStore",
    "InMemorySampleStore",
    "InMemoryTextureStore",
    "JsonlTraceSink",
    "ResourceFile",
    "StdoutTraceSink",
    "directory_sample_store",
    "directory_texture_store",
]
