from __future__ import annotations

import json
from pathlib import Path

import pytest

from legacy_skin.app.cli import EXIT_ERROR, EXIT_HIT, EXIT_MISS, parse_args, run
from legacy_skin.main import main


def _skin_file(tmp_path: Path) -> Path:
    path = tmp_path / "skin.yml"
    path.write_text(
        "\n".join(
            [
                "version: 2.0",
                "general:",
                "  CursorRotate: 1",
                "colours:",
                "  MenuGlow: 1,2,3",
                "mania:",
                "  - keys: 4",
                "    HitPosition: 100",
            ]
        ),
        encoding="utf-8",
    )
    return path


def _assets(tmp_path: Path) -> Path:
    root = tmp_path / "assets"
    root.mkdir()
    (root / "hitcircle@2x.png").write_bytes(b"")
    (root / "hit300-0.png").write_bytes(b"")
    (root / "soft-hitclap.wav").write_bytes(b"")
    return root


def test_parse_args_reads_flags() -> None:
    args = parse_args(["--skin", "s.yml", "--tracing", "enable", "mania", "4", "ColumnWidth", "--column", "1"])
    assert args.skin == "s.yml"
    assert args.tracing == "enable"
    assert args.command == "mania"
    assert args.keys == 4
    assert args.column == 1


def test_config_bool_lookup(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    code = run(["--skin", str(_skin_file(tmp_path)), "config", "CursorRotate", "--type", "bool"])
    assert code == EXIT_HIT
    assert capsys.readouterr().out.strip() == "true"


def test_config_miss_exit_code(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    code = run(["--skin", str(_skin_file(tmp_path)), "config", "Missing"])
    assert code == EXIT_MISS
    assert capsys.readouterr().out.strip() == "<miss>"


def test_colour_version_and_mania(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    skin = str(_skin_file(tmp_path))
    assert run(["--skin", skin, "colour", "MenuGlow"]) == EXIT_HIT
    assert run(["--skin", skin, "version"]) == EXIT_HIT
    assert run(["--skin", skin, "mania", "4", "HitPosition"]) == EXIT_HIT
    out = capsys.readouterr().out.strip().splitlines()
    assert out == ["1,2,3,255", "2.0", "100.0"]


def test_default_skin_without_document(capsys: pytest.CaptureFixture[str]) -> None:
    # No skin document means the latest-format defaults.
    assert run(["version"]) == EXIT_HIT
    assert capsys.readouterr().out.strip() == "2.7"


def test_mania_contract_violation_exit_code(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    code = run(["--skin", str(_skin_file(tmp_path)), "mania", "4", "ColumnWidth"])
    assert code == EXIT_ERROR
    assert "target column" in capsys.readouterr().err


def test_mania_disabled_by_settings(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    settings = tmp_path / "settings.yml"
    settings.write_text("allow_mania: false\n", encoding="utf-8")
    code = run(["--settings", str(settings), "mania", "4", "HitPosition"])
    assert code == EXIT_MISS
    assert capsys.readouterr().out.strip() == "<disabled>"


def test_texture_sample_and_drawable(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    assets = _assets(tmp_path)
    assert run(["--assets", str(assets), "texture", "hitcircle"]) == EXIT_HIT
    assert run(["--assets", str(assets), "sample", "hitclap", "--bank", "soft"]) == EXIT_HIT
    assert run(["--assets", str(assets), "drawable", "great"]) == EXIT_HIT
    assert run(["--assets", str(assets), "texture", "missing"]) == EXIT_MISS
    out = capsys.readouterr().out.strip().splitlines()
    assert out[0].startswith("hitcircle@2x scale=2 ")
    assert out[0].endswith("hitcircle@2x.png")
    assert out[1].endswith("soft-hitclap.wav")
    assert out[2].startswith("animation hit300 frames=hit300-0 ")
    assert out[3] == "<miss>"


def test_invalid_skin_document_exit_code(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    path = tmp_path / "skin.yml"
    path.write_text("unknown: 1\n", encoding="utf-8")
    assert run(["--skin", str(path), "version"]) == EXIT_ERROR
    assert "error:" in capsys.readouterr().err


def test_trace_path_override_writes_trace(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    trace = tmp_path / "trace.jsonl"
    code = run(["--tracing", "enable", "--trace-path", str(trace), "--assets", str(_assets(tmp_path)), "texture", "hitcircle"])
    assert code == EXIT_HIT
    capsys.readouterr()
    record = json.loads(trace.read_text(encoding="utf-8").strip())
    assert record["operation"] == "texture"
    assert record["resolved_name"] == "hitcircle@2x"


def test_main_delegates_to_cli(capsys: pytest.CaptureFixture[str]) -> None:
    assert main(["version"]) == EXIT_HIT
    assert capsys.readouterr().out.strip() == "2.7"
