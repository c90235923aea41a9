from .loader import ConfigError, build_configuration, load_settings, load_skin_document
from .models import ResolverSettings, SkinDocument

# Config exports are intentionally small.
__all__ = [
    "ConfigError",
    "ResolverSettings",
    "SkinDocument",
    "build_configuration",
    "load_settings",
    "load_skin_document",
]
