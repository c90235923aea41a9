from .mania_cache import ManiaConfigurationCache
from .naming import legacy_texture_name
from .skin import MANIA_DISABLED, LegacySkin
from .trace import LookupTraceRecord, LookupTracer

__all__ = [
    "LegacySkin",
    "LookupTraceRecord",
    "LookupTracer",
    "MANIA_DISABLED",
    "ManiaConfigurationCache",
    "legacy_texture_name",
]
