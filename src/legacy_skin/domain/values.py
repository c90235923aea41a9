from __future__ import annotations

from decimal import Decimal, InvalidOperation
from typing import Any

from .colours import Colour, parse_colour
from .errors import ValueParseError


def normalize_legacy_bool(raw: str) -> str:
    """Map legacy integer-encoded booleans onto "true"/"false".

    Old skins write ``1``/``0`` for flags. Only the generic configuration
    path uses this; colours and mania values never go through it.
    """
    if raw == "1":
        return "true"
    if raw in ("true", "false"):
        return raw
    return "false"


def parse_value(raw: str, expected: type) -> Any:
    # Coerce a raw configuration string into the requested type.
    if not isinstance(raw, str):
        raise ValueParseError(raw, expected)

    if expected is str:
        return raw
    if expected is bool:
        text = raw.strip().lower()
        if text == "true":
            return True
        if text == "false":
            return False
        raise ValueParseError(raw, expected)
    if expected is int:
        try:
            return int(raw.strip())
        except ValueError as exc:
            raise ValueParseError(raw, expected) from exc
    if expected is float:
        try:
            return float(raw.strip())
        except ValueError as exc:
            raise ValueParseError(raw, expected) from exc
    if expected is Decimal:
        try:
            value = Decimal(raw.strip())
        except InvalidOperation as exc:
            raise ValueParseError(raw, expected) from exc
        if not value.is_finite():
            raise ValueParseError(raw, expected)
        return value
    if expected is Colour:
        return parse_colour(raw)

    raise ValueParseError(raw, expected)
