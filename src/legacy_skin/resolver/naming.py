from __future__ import annotations

# Legacy taiko assets live under this virtual directory but are shipped with a "taiko-" prefix.
TAIKO_LEGACY_PREFIX = "Gameplay/taiko/"
TAIKO_NAME_PREFIX = "taiko-"
HIGH_DENSITY_SUFFIX = "@2x"
HIGH_DENSITY_SCALE = 2.0
BASE_DENSITY_SCALE = 1.0


def legacy_texture_name(component_name: str) -> str:
    # Legacy skins are flat: only the last path segment survives.
    last_piece = component_name.split("/")[-1]
    if component_name.startswith(TAIKO_LEGACY_PREFIX):
        return TAIKO_NAME_PREFIX + last_piece
    return last_piece


def density_candidates(name: str) -> tuple[tuple[str, float], ...]:
    # High-density assets must be probed before the base asset.
    return (
        (f"{name}{HIGH_DENSITY_SUFFIX}", HIGH_DENSITY_SCALE),
        (name, BASE_DENSITY_SCALE),
    )
