from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Union

# Lookup descriptors form a closed set; the resolver dispatches on their type.


class GlobalSkinColour(str, Enum):
    # Values are the names used by legacy skin files.
    COMBO_COLOURS = "ComboColours"
    MENU_GLOW = "MenuGlow"
    SONG_SELECT_ACTIVE_TEXT = "SongSelectActiveText"
    SONG_SELECT_INACTIVE_TEXT = "SongSelectInactiveText"

    @property
    def lookup_name(self) -> str:
        return self.value


class LegacySetting(str, Enum):
    VERSION = "Version"


class GlobalSkinConfiguration(str, Enum):
    # Typed keys resolved through the generic configuration path.
    ANIMATION_FRAMERATE = "AnimationFramerate"

    @property
    def lookup_name(self) -> str:
        return self.value


class ManiaLookupField(str, Enum):
    COLUMN_WIDTH = "ColumnWidth"
    COLUMN_SPACING = "ColumnSpacing"
    HIT_POSITION = "HitPosition"
    SHOW_JUDGEMENT_LINE = "ShowJudgementLine"

    @property
    def column_indexed(self) -> bool:
        return self in (ManiaLookupField.COLUMN_WIDTH, ManiaLookupField.COLUMN_SPACING)


@dataclass(frozen=True, slots=True)
class CustomColourLookup:
    name: str


@dataclass(frozen=True, slots=True)
class ManiaLookup:
    # column is required for column-indexed fields.
    keys: int
    field: ManiaLookupField
    column: int | None = None


@dataclass(frozen=True, slots=True)
class ConfigKeyLookup:
    # Plain string key into the raw configuration entries.
    key: str


SkinLookup = Union[
    GlobalSkinColour,
    LegacySetting,
    CustomColourLookup,
    ManiaLookup,
    GlobalSkinConfiguration,
    ConfigKeyLookup,
]


def lookup_key(lookup: GlobalSkinConfiguration | ConfigKeyLookup | Enum | str) -> str:
    # Key used against SkinConfiguration.config_entries; enums key on their legacy name.
    if isinstance(lookup, ConfigKeyLookup):
        return lookup.key
    if isinstance(lookup, Enum):
        return lookup.value if isinstance(lookup.value, str) else lookup.name
    return str(lookup)
