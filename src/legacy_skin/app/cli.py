from __future__ import annotations

import argparse
import sys
from collections.abc import Sequence
from decimal import Decimal
from pathlib import Path
from typing import Any

from legacy_skin.adapters.resource_stores import ResourceFile
from legacy_skin.app.wiring import build_skin
from legacy_skin.config.loader import ConfigError, load_settings
from legacy_skin.config.models import ResolverSettings, TraceSinkConfig, TraceSinkJsonlConfig, TracingConfig
from legacy_skin.domain.colours import Colour
from legacy_skin.domain.components import HitResult, HitResultComponent, HitSampleInfo, SampleInfo, SkinComponent
from legacy_skin.domain.errors import LookupContractError
from legacy_skin.domain.lookups import ConfigKeyLookup, CustomColourLookup, LegacySetting, ManiaLookup, ManiaLookupField
from legacy_skin.domain.resources import ScaledTexture, StaticSprite, TextureAnimation
from legacy_skin.resolver.skin import MANIA_DISABLED, LegacySkin

EXIT_HIT = 0
EXIT_MISS = 1
EXIT_ERROR = 2

VALUE_TYPES: dict[str, type] = {
    "str": str,
    "bool": bool,
    "int": int,
    "float": float,
    "decimal": Decimal,
    "colour": Colour,
}


def build_parser() -> argparse.ArgumentParser:
    # Thin inspection shell over the resolver; lookups are one subcommand each.
    parser = argparse.ArgumentParser(prog="legacy-skin", description="Inspect legacy skin lookups")
    parser.add_argument("--skin", help="Path to decoded skin YAML document")
    parser.add_argument("--assets", help="Skin directory holding textures and samples")
    parser.add_argument("--settings", help="Path to resolver settings YAML")
    parser.add_argument("--tracing", choices=["enable", "disable"], help="Override tracing enabled flag")
    parser.add_argument("--trace-path", help="Override trace JSONL file path")

    commands = parser.add_subparsers(dest="command", required=True)

    config = commands.add_parser("config", help="Resolve a raw configuration key")
    config.add_argument("key")
    config.add_argument("--type", choices=sorted(VALUE_TYPES), default="str")

    colour = commands.add_parser("colour", help="Resolve a custom colour by name")
    colour.add_argument("name")

    commands.add_parser("version", help="Resolve the legacy format version")

    mania = commands.add_parser("mania", help="Resolve a per key-count mania value")
    mania.add_argument("keys", type=int)
    mania.add_argument("field", choices=[field.value for field in ManiaLookupField])
    mania.add_argument("--column", type=int)

    texture = commands.add_parser("texture", help="Resolve a texture by component name")
    texture.add_argument("name")

    sample = commands.add_parser("sample", help="Resolve a sample from candidate names")
    sample.add_argument("names", nargs="+")
    sample.add_argument("--bank", help="Treat the single name as a hit sample in this bank")
    sample.add_argument("--suffix")

    drawable = commands.add_parser("drawable", help="Resolve a drawable component")
    drawable.add_argument("name", help="Component lookup name or a hit result (miss, meh, good, great)")
    return parser


def parse_args(argv: Sequence[str] | None) -> argparse.Namespace:
    return build_parser().parse_args(argv)


def apply_tracing_overrides(settings: ResolverSettings, args: argparse.Namespace) -> None:
    # CLI overrides take precedence over settings.
    if args.tracing is None and args.trace_path is None:
        return

    tracing = settings.tracing
    if tracing is None:
        tracing = TracingConfig(enabled=False, sink=None)
        settings.tracing = tracing

    if args.tracing is not None:
        tracing.enabled = args.tracing == "enable"

    if args.trace_path is not None:
        if tracing.sink is None or tracing.sink.kind != "jsonl":
            tracing.sink = TraceSinkConfig(kind="jsonl", jsonl=TraceSinkJsonlConfig(path=args.trace_path))
        else:
            assert tracing.sink.jsonl is not None
            tracing.sink.jsonl.path = args.trace_path


def resolve(skin: LegacySkin, args: argparse.Namespace) -> Any:
    if args.command == "config":
        return skin.get_config(ConfigKeyLookup(args.key), VALUE_TYPES[args.type])
    if args.command == "colour":
        return skin.get_config(CustomColourLookup(args.name), Colour)
    if args.command == "version":
        return skin.get_config(LegacySetting.VERSION, Decimal)
    if args.command == "mania":
        return skin.get_config(ManiaLookup(args.keys, ManiaLookupField(args.field), args.column))
    if args.command == "texture":
        return skin.get_texture(args.name)
    if args.command == "sample":
        if args.bank is not None and len(args.names) == 1:
            return skin.get_sample(HitSampleInfo(args.names[0], bank=args.bank, suffix=args.suffix))
        return skin.get_sample(SampleInfo(*args.names))
    return skin.get_drawable_component(_component(args.name))


def format_value(value: Any) -> str:
    if value is None:
        return "<miss>"
    if value is MANIA_DISABLED:
        return "<disabled>"
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, tuple) and all(isinstance(item, Colour) for item in value):
        return " ".join(str(item) for item in value)
    if isinstance(value, ScaledTexture):
        return f"{value.name} scale={value.scale_adjust:g} {format_value(value.texture)}"
    if isinstance(value, ResourceFile):
        return value.path.as_posix()
    if isinstance(value, StaticSprite):
        return f"sprite {format_value(value.texture)}"
    if isinstance(value, TextureAnimation):
        names = ",".join(frame.name for frame in value.frames)
        return f"animation {value.name} frames={names} frame_length_ms={value.frame_length_ms:g}"
    return str(value)


def run(argv: Sequence[str] | None = None) -> int:
    args = parse_args(argv)
    try:
        settings = load_settings(Path(args.settings)) if args.settings else ResolverSettings()
        apply_tracing_overrides(settings, args)
        skin = build_skin(
            skin_path=Path(args.skin) if args.skin else None,
            assets_dir=Path(args.assets) if args.assets else None,
            settings=settings,
        )
    except ConfigError as exc:
        sys.stderr.write(f"error: {exc}\n")
        return EXIT_ERROR

    with skin:
        try:
            value = resolve(skin, args)
        except LookupContractError as exc:
            sys.stderr.write(f"error: {exc}\n")
            return EXIT_ERROR

    sys.stdout.write(format_value(value) + "\n")
    return EXIT_HIT if value is not None and value is not MANIA_DISABLED else EXIT_MISS


def _component(name: str) -> HitResultComponent | SkinComponent:
    try:
        return HitResultComponent(HitResult(name.lower()))
    except ValueError:
        return SkinComponent(name)
