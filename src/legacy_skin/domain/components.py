from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType


class HitResult(str, Enum):
    NONE = "none"
    MISS = "miss"
    MEH = "meh"
    OK = "ok"
    GOOD = "good"
    GREAT = "great"
    PERFECT = "perfect"


# Conventional legacy texture names for judgement results; other results have no legacy art.
HIT_RESULT_TEXTURES: Mapping[HitResult, str] = MappingProxyType(
    {
        HitResult.MISS: "hit0",
        HitResult.MEH: "hit50",
        HitResult.GOOD: "hit100",
        HitResult.GREAT: "hit300",
    }
)


@dataclass(frozen=True, slots=True)
class SkinComponent:
    # Any drawable element identified by its own lookup name.
    lookup_name: str


@dataclass(frozen=True, slots=True)
class HitResultComponent:
    # Gameplay judgement display; lookup_name is used when the result has no legacy texture.
    result: HitResult

    @property
    def lookup_name(self) -> str:
        return self.result.value


class SampleInfo:
    """Ordered candidate names for one audio sample, most specific first."""

    __slots__ = ("_names", "volume")

    def __init__(self, *names: str, volume: int = 100) -> None:
        self._names = tuple(names)
        self.volume = volume

    @property
    def lookup_names(self) -> tuple[str, ...]:
        return self._names

    @property
    def bare_name(self) -> str | None:
        return None

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, SampleInfo) or type(other) is not type(self):
            return NotImplemented
        return self.lookup_names == other.lookup_names and self.volume == other.volume

    def __hash__(self) -> int:
        return hash((type(self).__name__, self.lookup_names, self.volume))

    def __repr__(self) -> str:
        return f"{type(self).__name__}{self._names!r}"


class HitSampleInfo(SampleInfo):
    """Gameplay hit sound: bank-qualified names first, then the bare name as last resort."""

    __slots__ = ("name", "bank", "suffix")

    def __init__(self, name: str, *, bank: str = "normal", suffix: str | None = None, volume: int = 100) -> None:
        self.name = name
        self.bank = bank
        self.suffix = suffix
        names = []
        if suffix:
            names.append(f"{bank}-{name}{suffix}")
        names.append(f"{bank}-{name}")
        super().__init__(*names, volume=volume)

    @property
    def bare_name(self) -> str | None:
        return self.name

    def __repr__(self) -> str:
        return f"HitSampleInfo(name={self.name!r}, bank={self.bank!r}, suffix={self.suffix!r})"
