from __future__ import annotations

from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, ValidationError

from legacy_skin.config.models import ResolverSettings, SkinDocument
from legacy_skin.domain.configuration import ManiaConfiguration, SkinConfiguration


# ConfigError is raised for invalid documents (fail fast).
class ConfigError(ValueError):
    pass


def load_skin_document(path: Path) -> SkinDocument:
    # YAML form of an already-decoded skin configuration.
    return _validate(SkinDocument, _load_mapping(path))


def load_settings(path: Path) -> ResolverSettings:
    return _validate(ResolverSettings, _load_mapping(path))


def build_configuration(document: SkinDocument) -> tuple[SkinConfiguration, list[ManiaConfiguration]]:
    configuration = SkinConfiguration(
        legacy_version=document.version,
        config_entries=document.general,
        custom_colours=document.colours,
        combo_colours=tuple(document.combo_colours) if document.combo_colours is not None else None,
    )
    mania = [block.to_configuration() for block in document.mania]
    return configuration, mania


def _load_mapping(path: Path) -> dict[str, Any]:
    try:
        raw = yaml.safe_load(path.read_text(encoding="utf-8"))
    except yaml.YAMLError as exc:
        raise ConfigError(f"{path}: invalid YAML: {exc}") from exc
    if not isinstance(raw, dict):
        raise ConfigError(f"{path}: config root must be a mapping")
    return raw


def _validate(model: type[BaseModel], raw: dict[str, Any]) -> Any:
    try:
        return model.model_validate(raw)
    except ValidationError as exc:
        raise ConfigError(str(exc)) from exc
