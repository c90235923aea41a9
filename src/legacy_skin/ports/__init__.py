from .sample_store import SampleStore
from .texture_store import TextureStore
from .trace_sink import TraceSink

# Public port exports keep wiring explicit at composition time.
__all__ = [
    "SampleStore",
    "TextureStore",
    "TraceSink",
]
