from __future__ import annotations


class ValueParseError(ValueError):
    # Raised when a raw skin value cannot be coerced into the requested type.
    def __init__(self, raw: object, expected: object) -> None:
        super().__init__(f"cannot parse {raw!r} as {getattr(expected, '__name__', expected)}")
        self.raw = raw
        self.expected = expected


class LookupContractError(ValueError):
    # Raised for structurally invalid lookups; these are caller bugs, not misses.
    pass
