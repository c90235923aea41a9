from .colours import Colour, parse_colour
from .components import (
    HIT_RESULT_TEXTURES,
    HitResult,
    HitResultComponent,
    HitSampleInfo,
    SampleInfo,
    SkinComponent,
)
from .configuration import LATEST_VERSION, ManiaConfiguration, SkinConfiguration
from .errors import LookupContractError, ValueParseError
from .lookups import (
    ConfigKeyLookup,
    CustomColourLookup,
    GlobalSkinColour,
    GlobalSkinConfiguration,
    LegacySetting,
    ManiaLookup,
    ManiaLookupField,
    SkinLookup,
    lookup_key,
)
from .resources import Drawable, ScaledTexture, StaticSprite, TextureAnimation
from .values import normalize_legacy_bool, parse_value

# Public domain exports keep imports explicit across layers.
__all__ = [
    "Colour",
    "ConfigKeyLookup",
    "CustomColourLookup",
    "Drawable",
    "GlobalSkinColour",
    "GlobalSkinConfiguration",
    "HIT_RESULT_TEXTURES",
    "HitResult",
    "HitResultComponent",
    "HitSampleInfo",
    "LATEST_VERSION",
    "LegacySetting",
    "LookupContractError",
    "ManiaConfiguration",
    "ManiaLookup",
    "ManiaLookupField",
    "SampleInfo",
    "ScaledTexture",
    "SkinComponent",
    "SkinConfiguration",
    "SkinLookup",
    "StaticSprite",
    "TextureAnimation",
    "ValueParseError",
    "lookup_key",
    "normalize_legacy_bool",
    "parse_value",
]
