from __future__ import annotations

import math
from collections.abc import Iterable
from contextlib import ExitStack
from decimal import Decimal
from typing import Any

from legacy_skin.domain.colours import Colour
from legacy_skin.domain.components import HIT_RESULT_TEXTURES, HitResultComponent, SampleInfo
from legacy_skin.domain.configuration import ManiaConfiguration, SkinConfiguration
from legacy_skin.domain.errors import LookupContractError
from legacy_skin.domain.lookups import (
    CustomColourLookup,
    GlobalSkinColour,
    GlobalSkinConfiguration,
    LegacySetting,
    ManiaLookup,
    ManiaLookupField,
    lookup_key,
)
from legacy_skin.domain.resources import Drawable, ScaledTexture, StaticSprite, TextureAnimation
from legacy_skin.domain.values import normalize_legacy_bool, parse_value
from legacy_skin.ports.sample_store import SampleStore
from legacy_skin.ports.texture_store import TextureStore
from legacy_skin.resolver.mania_cache import ManiaConfigurationCache
from legacy_skin.resolver.naming import density_candidates, legacy_texture_name
from legacy_skin.resolver.trace import LookupSpan, LookupTracer, Operation

DEFAULT_FRAME_LENGTH_MS = 1000 / 60
ANIMATION_SEPARATOR = "-"


class _ManiaDisabled:
    # Returned instead of a miss when this skin refuses mania lookups entirely.
    _instance: _ManiaDisabled | None = None

    def __new__(cls) -> _ManiaDisabled:
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __bool__(self) -> bool:
        return False

    def __repr__(self) -> str:
        return "MANIA_DISABLED"


MANIA_DISABLED = _ManiaDisabled()


class LegacySkin:
    """Resolve configuration values, drawables, textures and samples for a legacy skin.

    All four operations return ``None`` on a miss. The only state that
    changes after construction is the mania configuration cache, which
    materializes default blocks for key counts the skin never declared.
    """

    def __init__(
        self,
        configuration: SkinConfiguration | None = None,
        mania_configurations: Iterable[ManiaConfiguration] = (),
        textures: TextureStore | None = None,
        samples: SampleStore | None = None,
        *,
        allow_mania: bool = True,
        tracer: LookupTracer | None = None,
    ) -> None:
        self._configuration = configuration if configuration is not None else SkinConfiguration.default()
        self._mania = ManiaConfigurationCache(mania_configurations)
        self._textures = textures
        self._samples = samples
        self._allow_mania = allow_mania
        self._tracer = tracer

    @property
    def configuration(self) -> SkinConfiguration:
        return self._configuration

    @property
    def mania_configurations(self) -> ManiaConfigurationCache:
        return self._mania

    @property
    def allow_mania(self) -> bool:
        return self._allow_mania

    # Configuration values

    def get_config(self, lookup: object, expected: type | None = None) -> Any:
        """Resolve a configuration lookup.

        Returns the value, ``None`` on a miss, or ``MANIA_DISABLED`` for mania
        lookups on a skin that does not provide mania configuration. Raises
        ``LookupContractError`` for malformed mania lookups.
        """
        span = self._begin("config", lookup)
        candidates: list[str] = []
        try:
            value = self._resolve_config(lookup, expected, candidates)
        except LookupContractError as exc:
            self._finish(span, outcome="error", candidates=candidates, error=exc)
            raise
        except ValueError as exc:
            # Malformed decoded values are misses, not failures.
            self._finish(span, outcome="miss", candidates=candidates, error=exc)
            return None

        if value is MANIA_DISABLED:
            self._finish(span, outcome="disabled", candidates=candidates)
        elif value is None:
            self._finish(span, outcome="miss", candidates=candidates)
        else:
            self._finish(span, outcome="hit", candidates=candidates, resolved_name=candidates[-1] if candidates else None)
        return value

    def _resolve_config(self, lookup: object, expected: type | None, candidates: list[str]) -> Any:
        if isinstance(lookup, GlobalSkinColour):
            if lookup is GlobalSkinColour.COMBO_COLOURS:
                candidates.append(lookup.lookup_name)
                combo = self._configuration.combo_colours
                if combo:
                    return _as_expected(combo, tuple, expected)
                return None
            return self._custom_colour(lookup.lookup_name, expected, candidates)

        if isinstance(lookup, LegacySetting):
            candidates.append(lookup.value)
            version = self._configuration.legacy_version
            if lookup is LegacySetting.VERSION and version is not None:
                return _as_expected(version, Decimal, expected)
            return None

        if isinstance(lookup, CustomColourLookup):
            return self._custom_colour(lookup.name, expected, candidates)

        if isinstance(lookup, ManiaLookup):
            return self._mania_value(lookup, expected, candidates)

        return self._config_entry(lookup, expected, candidates)

    def _custom_colour(self, name: str, expected: type | None, candidates: list[str]) -> Colour | None:
        candidates.append(name)
        colour = self._configuration.custom_colours.get(name)
        if colour is None:
            return None
        return _as_expected(colour, Colour, expected)

    def _mania_value(self, lookup: ManiaLookup, expected: type | None, candidates: list[str]) -> Any:
        if not self._allow_mania:
            return MANIA_DISABLED

        candidates.append(f"{lookup.keys}K.{lookup.field.value}")
        configuration = self._mania.get_or_create(lookup.keys)
        field = lookup.field

        if field.column_indexed:
            if lookup.column is None:
                raise LookupContractError(f"{field.value} lookups require a target column")
            values = configuration.column_width if field is ManiaLookupField.COLUMN_WIDTH else configuration.column_spacing
            if not 0 <= lookup.column < len(values):
                raise LookupContractError(
                    f"column {lookup.column} is out of range for {field.value} with {lookup.keys} keys"
                )
            return _as_expected(float(values[lookup.column]), float, expected)

        if field is ManiaLookupField.HIT_POSITION:
            return _as_expected(float(configuration.hit_position), float, expected)

        return _as_expected(bool(configuration.show_judgement_line), bool, expected)

    def _config_entry(self, lookup: object, expected: type | None, candidates: list[str]) -> Any:
        key = lookup_key(lookup)  # type: ignore[arg-type]
        candidates.append(key)
        raw = self._configuration.config_entries.get(key)
        if raw is None:
            return None
        if expected is None:
            return raw
        if expected is bool:
            raw = normalize_legacy_bool(raw)
        return parse_value(raw, expected)

    # Drawables

    def get_drawable_component(self, component: Any) -> Drawable | None:
        # Judgement results use fixed legacy names; everything else uses its own lookup name.
        if isinstance(component, HitResultComponent):
            name = HIT_RESULT_TEXTURES.get(component.result)
            if name is not None:
                return self.get_animation(name, animatable=True, looping=False)
        return self.get_animation(component.lookup_name, animatable=False, looping=False)

    def get_animation(
        self,
        name: str,
        *,
        animatable: bool,
        looping: bool,
        separator: str = ANIMATION_SEPARATOR,
    ) -> Drawable | None:
        """Frame sequence ``name-0``, ``name-1``, ... when animatable, else the static texture."""
        span = self._begin("drawable", name)
        probed: list[str] = []

        if animatable:
            frames: list[ScaledTexture] = []
            while True:
                frame = self._texture(f"{name}{separator}{len(frames)}", probed)
                if frame is None:
                    break
                frames.append(frame)
            if frames:
                self._finish(span, outcome="hit", candidates=probed, resolved_name=frames[0].name)
                return TextureAnimation(
                    name=name,
                    frames=tuple(frames),
                    frame_length_ms=self._frame_length_ms(),
                    looping=looping,
                )

        texture = self._texture(name, probed)
        if texture is None:
            self._finish(span, outcome="miss", candidates=probed)
            return None
        self._finish(span, outcome="hit", candidates=probed, resolved_name=texture.name)
        return StaticSprite(name=name, texture=texture)

    def _frame_length_ms(self) -> float:
        try:
            framerate = self._config_entry(GlobalSkinConfiguration.ANIMATION_FRAMERATE, float, [])
        except ValueError:
            framerate = None
        if framerate is not None and math.isfinite(framerate) and framerate > 0:
            return 1000 / framerate
        return DEFAULT_FRAME_LENGTH_MS

    # Textures

    def get_texture(self, component_name: str) -> ScaledTexture | None:
        span = self._begin("texture", component_name)
        probed: list[str] = []
        texture = self._texture(component_name, probed)
        if texture is None:
            self._finish(span, outcome="miss", candidates=probed)
        else:
            self._finish(span, outcome="hit", candidates=probed, resolved_name=texture.name)
        return texture

    def _texture(self, component_name: str, probed: list[str]) -> ScaledTexture | None:
        if self._textures is None:
            return None
        for candidate, scale in density_candidates(legacy_texture_name(component_name)):
            probed.append(candidate)
            texture = self._textures.get(candidate)
            if texture is not None:
                return ScaledTexture(name=candidate, texture=texture, scale_adjust=scale)
        return None

    # Samples

    def get_sample(self, sample_info: SampleInfo) -> Any | None:
        span = self._begin("sample", sample_info)
        probed: list[str] = []
        if self._samples is None:
            self._finish(span, outcome="miss")
            return None

        for name in sample_info.lookup_names:
            probed.append(name)
            sample = self._samples.get(name)
            if sample is not None:
                self._finish(span, outcome="hit", candidates=probed, resolved_name=name)
                return sample

        # Hit samples may fall back to the bank-free name.
        bare_name = sample_info.bare_name
        if bare_name is not None:
            probed.append(bare_name)
            sample = self._samples.get(bare_name)
            if sample is not None:
                self._finish(span, outcome="hit", candidates=probed, resolved_name=bare_name)
                return sample

        self._finish(span, outcome="miss", candidates=probed)
        return None

    # Lifecycle

    def close(self) -> None:
        # Every resource is released even when an earlier close raises; the trace sink closes last.
        with ExitStack() as stack:
            if self._tracer is not None:
                stack.callback(self._tracer.close)
            for store in (self._samples, self._textures):
                close = getattr(store, "close", None)
                if callable(close):
                    stack.callback(close)

    def __enter__(self) -> LegacySkin:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    def _begin(self, operation: Operation, request: object) -> LookupSpan | None:
        if self._tracer is None:
            return None
        return self._tracer.begin(operation, request)

    def _finish(self, span: LookupSpan | None, **kwargs: Any) -> None:
        if span is not None and self._tracer is not None:
            self._tracer.finish(span, **kwargs)


def _as_expected(value: Any, produced: type, expected: type | None) -> Any:
    # A declared type that cannot hold the produced value is a miss.
    if expected is None:
        return value
    if not isinstance(expected, type):
        return None
    # bool subclasses int, but a flag is not a number.
    if produced is bool and expected is int:
        return None
    if issubclass(produced, expected):
        return value
    return None
