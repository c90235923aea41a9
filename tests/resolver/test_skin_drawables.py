from __future__ import annotations

from typing import Any

import pytest

from legacy_skin.domain.components import HitResult, HitResultComponent, SkinComponent
from legacy_skin.domain.configuration import SkinConfiguration
from legacy_skin.domain.resources import StaticSprite, TextureAnimation
from legacy_skin.resolver.skin import DEFAULT_FRAME_LENGTH_MS, LegacySkin


class _RecordingStore:
    def __init__(self, items: dict[str, Any]) -> None:
        self.items = dict(items)
        self.probed: list[str] = []

    def get(self, name: str) -> Any | None:
        self.probed.append(name)
        return self.items.get(name)


@pytest.mark.parametrize(
    ("result", "texture"),
    [
        (HitResult.MISS, "hit0"),
        (HitResult.MEH, "hit50"),
        (HitResult.GOOD, "hit100"),
        (HitResult.GREAT, "hit300"),
    ],
)
def test_hit_results_map_to_legacy_textures(result: HitResult, texture: str) -> None:
    skin = LegacySkin(textures=_RecordingStore({texture: "tex"}))
    drawable = skin.get_drawable_component(HitResultComponent(result))
    assert isinstance(drawable, StaticSprite)
    assert drawable.texture.name == texture


def test_hit_result_prefers_frame_animation() -> None:
    # Animatable results probe name-0, name-1, ... before the static texture.
    store = _RecordingStore({"hit300-0": "f0", "hit300-1@2x": "f1", "hit300": "static"})
    drawable = LegacySkin(textures=store).get_drawable_component(HitResultComponent(HitResult.GREAT))
    assert isinstance(drawable, TextureAnimation)
    assert [frame.texture for frame in drawable.frames] == ["f0", "f1"]
    assert [frame.scale_adjust for frame in drawable.frames] == [1.0, 2.0]
    assert drawable.looping is False
    assert drawable.frame_length_ms == pytest.approx(DEFAULT_FRAME_LENGTH_MS)
    assert "hit300" not in store.probed


def test_animation_frame_length_uses_configured_framerate() -> None:
    skin = LegacySkin(
        SkinConfiguration(config_entries={"AnimationFramerate": "20"}),
        textures=_RecordingStore({"hit0-0": "f0"}),
    )
    drawable = skin.get_drawable_component(HitResultComponent(HitResult.MISS))
    assert isinstance(drawable, TextureAnimation)
    assert drawable.frame_length_ms == pytest.approx(50.0)


@pytest.mark.parametrize("framerate", ["0", "-5", "fast"])
def test_animation_frame_length_ignores_invalid_framerate(framerate: str) -> None:
    skin = LegacySkin(
        SkinConfiguration(config_entries={"AnimationFramerate": framerate}),
        textures=_RecordingStore({"hit0-0": "f0"}),
    )
    drawable = skin.get_drawable_component(HitResultComponent(HitResult.MISS))
    assert isinstance(drawable, TextureAnimation)
    assert drawable.frame_length_ms == pytest.approx(DEFAULT_FRAME_LENGTH_MS)


def test_unmapped_hit_result_uses_own_lookup_name() -> None:
    store = _RecordingStore({"perfect": "tex"})
    drawable = LegacySkin(textures=store).get_drawable_component(HitResultComponent(HitResult.PERFECT))
    assert isinstance(drawable, StaticSprite)
    assert store.probed == ["perfect@2x", "perfect"]


def test_generic_component_is_not_animated() -> None:
    # Non-result components never probe frame names.
    store = _RecordingStore({"cursor-0": "frame", "cursor": "static"})
    drawable = LegacySkin(textures=store).get_drawable_component(SkinComponent("cursor"))
    assert isinstance(drawable, StaticSprite)
    assert drawable.texture.texture == "static"
    assert store.probed == ["cursor@2x", "cursor"]


def test_drawable_miss() -> None:
    store = _RecordingStore({})
    assert LegacySkin(textures=store).get_drawable_component(HitResultComponent(HitResult.MEH)) is None
    assert store.probed == ["hit50-0@2x", "hit50-0", "hit50@2x", "hit50"]


def test_get_animation_looping_flag_is_carried() -> None:
    skin = LegacySkin(textures=_RecordingStore({"spinner-0": "f0"}))
    drawable = skin.get_animation("spinner", animatable=True, looping=True)
    assert isinstance(drawable, TextureAnimation)
    assert drawable.looping is True
