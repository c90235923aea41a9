from __future__ import annotations

from decimal import Decimal
from typing import Any, Literal

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, field_validator, model_validator

from legacy_skin.domain.colours import Colour, parse_colour
from legacy_skin.domain.configuration import LATEST_VERSION, ManiaConfiguration

# Config models map the decoded skin document and resolver settings to typed structures.


def _coerce_colour(value: Any) -> Any:
    # Colours arrive as "r,g,b[,a]" strings or [r, g, b(, a)] lists; mappings go to the dataclass schema.
    if isinstance(value, str):
        return parse_colour(value)
    if isinstance(value, (list, tuple)):
        if len(value) not in (3, 4):
            raise ValueError("colour lists must have 3 or 4 channels")
        return Colour(*(int(channel) for channel in value))
    return value


def _stringify(value: Any) -> str:
    # Entries stay raw strings; YAML booleans are written the way legacy parsing expects.
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (str, int, float, Decimal)):
        return str(value)
    raise ValueError(f"general entries must be scalars, got {type(value).__name__}")


class ManiaBlock(BaseModel):
    # One decoded [Mania] block; unset fields keep the per-key-count defaults.
    model_config = ConfigDict(extra="forbid", populate_by_name=True)
    keys: int = Field(ge=1, validation_alias=AliasChoices("keys", "Keys"))
    column_width: list[float] | None = Field(
        default=None, validation_alias=AliasChoices("column_width", "ColumnWidth")
    )
    column_spacing: list[float] | None = Field(
        default=None, validation_alias=AliasChoices("column_spacing", "ColumnSpacing")
    )
    column_line_width: list[float] | None = Field(
        default=None, validation_alias=AliasChoices("column_line_width", "ColumnLineWidth")
    )
    hit_position: float | None = Field(default=None, validation_alias=AliasChoices("hit_position", "HitPosition"))
    light_position: float | None = Field(
        default=None, validation_alias=AliasChoices("light_position", "LightPosition")
    )
    show_judgement_line: bool | None = Field(
        default=None, validation_alias=AliasChoices("show_judgement_line", "JudgementLine")
    )

    @model_validator(mode="after")
    def _check_lengths(self) -> ManiaBlock:
        # Array lengths are tied to the key count; mismatches are rejected up front.
        expected = {
            "column_width": self.keys,
            "column_spacing": self.keys - 1,
            "column_line_width": self.keys + 1,
        }
        for name, length in expected.items():
            values = getattr(self, name)
            if values is not None and len(values) != length:
                raise ValueError(f"mania.{name} must have {length} entries for {self.keys} keys")
        return self

    def to_configuration(self) -> ManiaConfiguration:
        configuration = ManiaConfiguration.defaults(self.keys)
        if self.column_width is not None:
            configuration.column_width = list(self.column_width)
        if self.column_spacing is not None:
            configuration.column_spacing = list(self.column_spacing)
        if self.column_line_width is not None:
            configuration.column_line_width = list(self.column_line_width)
        if self.hit_position is not None:
            configuration.hit_position = self.hit_position
        if self.light_position is not None:
            configuration.light_position = self.light_position
        if self.show_judgement_line is not None:
            configuration.show_judgement_line = self.show_judgement_line
        return configuration


class SkinDocument(BaseModel):
    # Already-decoded skin configuration; "latest" stands for the newest format version.
    model_config = ConfigDict(extra="forbid")
    version: Decimal | None = None
    general: dict[str, str] = Field(default_factory=dict)
    colours: dict[str, Colour] = Field(default_factory=dict)
    combo_colours: list[Colour] | None = None
    mania: list[ManiaBlock] = Field(default_factory=list)

    @field_validator("version", mode="before")
    @classmethod
    def _version(cls, value: Any) -> Any:
        if isinstance(value, str) and value.strip().lower() == "latest":
            return LATEST_VERSION
        if isinstance(value, float):
            # Go through str so 2.5 stays Decimal("2.5").
            return str(value)
        return value

    @field_validator("general", mode="before")
    @classmethod
    def _general(cls, value: Any) -> Any:
        if value is None:
            return {}
        if not isinstance(value, dict):
            raise ValueError("general must be a mapping")
        return {str(key): _stringify(item) for key, item in value.items()}

    @field_validator("colours", mode="before")
    @classmethod
    def _colours(cls, value: Any) -> Any:
        if value is None:
            return {}
        if not isinstance(value, dict):
            raise ValueError("colours must be a mapping")
        return {str(key): _coerce_colour(item) for key, item in value.items()}

    @field_validator("combo_colours", mode="before")
    @classmethod
    def _combo_colours(cls, value: Any) -> Any:
        if value is None:
            return None
        if not isinstance(value, list):
            raise ValueError("combo_colours must be a list")
        return [_coerce_colour(item) for item in value]


class TraceSinkJsonlConfig(BaseModel):
    model_config = ConfigDict(extra="forbid")
    path: str
    write_mode: Literal["line", "batch"] = "line"
    flush_every_n: int = 1


class TraceSinkConfig(BaseModel):
    # Only one sink is active at a time.
    model_config = ConfigDict(extra="forbid")
    kind: Literal["jsonl", "stdout"]
    jsonl: TraceSinkJsonlConfig | None = None

    @model_validator(mode="after")
    def _require_jsonl(self) -> TraceSinkConfig:
        # For jsonl kind, a jsonl section is required to avoid silent defaults.
        if self.kind == "jsonl" and self.jsonl is None:
            raise ValueError("tracing.sink.jsonl is required when kind is 'jsonl'")
        return self


class TracingConfig(BaseModel):
    model_config = ConfigDict(extra="forbid")
    enabled: bool = False
    sink: TraceSinkConfig | None = None


class ResolverSettings(BaseModel):
    # Resolver-level switches that are not part of the skin itself.
    model_config = ConfigDict(extra="forbid")
    allow_mania: bool = True
    tracing: TracingConfig | None = None
