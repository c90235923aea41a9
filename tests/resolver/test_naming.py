from __future__ import annotations

import pytest

from legacy_skin.resolver.naming import density_candidates, legacy_texture_name


@pytest.mark.parametrize(
    ("name", "expected"),
    [
        ("hitcircle", "hitcircle"),
        ("a/b/c", "c"),
        ("Gameplay/taiko/foo", "taiko-foo"),
        ("Gameplay/osu/foo", "foo"),
        ("gameplay/taiko/foo", "foo"),
    ],
)
def test_legacy_texture_name(name: str, expected: str) -> None:
    # Only the exact taiko directory prefix triggers the "taiko-" rename.
    assert legacy_texture_name(name) == expected


def test_density_candidates_probe_high_density_first() -> None:
    assert density_candidates("cursor") == (("cursor@2x", 2.0), ("cursor", 1.0))
