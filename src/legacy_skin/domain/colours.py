from __future__ import annotations

from dataclasses import dataclass

from .errors import ValueParseError


@dataclass(frozen=True, slots=True)
class Colour:
    # RGBA colour with 8-bit channels, as written in legacy skin files.
    r: int
    g: int
    b: int
    a: int = 255

    def __post_init__(self) -> None:
        for channel in (self.r, self.g, self.b, self.a):
            if not 0 <= channel <= 255:
                raise ValueError("Colour channels must be within 0..255")

    def __str__(self) -> str:
        return f"{self.r},{self.g},{self.b},{self.a}"


def parse_colour(text: str) -> Colour:
    # Legacy colours are "r,g,b" or "r,g,b,a"; alpha defaults to opaque.
    if not isinstance(text, str):
        raise ValueParseError(text, Colour)

    parts = [part.strip() for part in text.split(",")]
    if len(parts) not in (3, 4):
        raise ValueParseError(text, Colour)

    try:
        channels = [int(part) for part in parts]
        return Colour(*channels)
    except ValueError as exc:
        raise ValueParseError(text, Colour) from exc
