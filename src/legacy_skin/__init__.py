from legacy_skin.resolver.skin import MANIA_DISABLED, LegacySkin

__all__ = ["LegacySkin", "MANIA_DISABLED"]
