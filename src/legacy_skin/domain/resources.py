from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Union


@dataclass(frozen=True, slots=True)
class ScaledTexture:
    # Store handle plus the density it was authored for (2.0 for "@2x" assets).
    name: str
    texture: Any
    scale_adjust: float


@dataclass(frozen=True, slots=True)
class StaticSprite:
    name: str
    texture: ScaledTexture


@dataclass(frozen=True, slots=True)
class TextureAnimation:
    name: str
    frames: tuple[ScaledTexture, ...]
    frame_length_ms: float
    looping: bool


Drawable = Union[StaticSprite, TextureAnimation]
