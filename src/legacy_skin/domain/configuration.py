from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from decimal import Decimal
from types import MappingProxyType

from .colours import Colour

# Newest legacy skin format version; used when a skin ships no configuration.
LATEST_VERSION = Decimal("2.7")

# Mania positions are authored against a 480px tall playfield.
POSITION_SCALE_FACTOR = 1.6
DEFAULT_COLUMN_SIZE = 30 * POSITION_SCALE_FACTOR
DEFAULT_HIT_POSITION = (480 - 402) * POSITION_SCALE_FACTOR
DEFAULT_LIGHT_POSITION = (480 - 413) * POSITION_SCALE_FACTOR
DEFAULT_COLUMN_LINE_WIDTH = 2.0


@dataclass(frozen=True, slots=True)
class SkinConfiguration:
    """Decoded, untyped view of a legacy skin configuration.

    ``config_entries`` keeps raw strings exactly as decoded; typing happens at
    lookup time. Mappings are wrapped read-only so the model cannot drift
    after the resolver has been built.
    """

    legacy_version: Decimal | None = None
    config_entries: Mapping[str, str] = field(default_factory=dict)
    custom_colours: Mapping[str, Colour] = field(default_factory=dict)
    combo_colours: tuple[Colour, ...] | None = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "config_entries", MappingProxyType(dict(self.config_entries)))
        object.__setattr__(self, "custom_colours", MappingProxyType(dict(self.custom_colours)))
        if self.combo_colours is not None:
            object.__setattr__(self, "combo_colours", tuple(self.combo_colours))

    @classmethod
    def default(cls) -> SkinConfiguration:
        # Skins without a configuration file behave like the latest format.
        return cls(legacy_version=LATEST_VERSION)


@dataclass(slots=True)
class ManiaConfiguration:
    # Per key-count block; array lengths are tied to the key count.
    keys: int
    column_width: list[float]
    column_spacing: list[float]
    column_line_width: list[float]
    hit_position: float = DEFAULT_HIT_POSITION
    light_position: float = DEFAULT_LIGHT_POSITION
    show_judgement_line: bool = True

    def __post_init__(self) -> None:
        if self.keys < 1:
            raise ValueError("ManiaConfiguration.keys must be >= 1")
        _check_length("column_width", self.column_width, self.keys)
        _check_length("column_spacing", self.column_spacing, self.keys - 1)
        _check_length("column_line_width", self.column_line_width, self.keys + 1)

    @classmethod
    def defaults(cls, keys: int) -> ManiaConfiguration:
        return cls(
            keys=keys,
            column_width=[DEFAULT_COLUMN_SIZE] * keys,
            column_spacing=[0.0] * max(keys - 1, 0),
            column_line_width=[DEFAULT_COLUMN_LINE_WIDTH] * (keys + 1),
        )


def _check_length(name: str, values: Iterable[float], expected: int) -> None:
    actual = len(list(values))
    if actual != expected:
        raise ValueError(f"ManiaConfiguration.{name} must have {expected} entries, got {actual}")
