"""Configuration dataclasses and their JSON form."""

import json
import logging
from pathlib import Path

import pytest

from orbitals.models import (
    AngleSpec,
    AppConfig,
    DiagramParams,
    Palette,
    ViewFrame,
    default_config_path,
    load_config,
)


def test_config_json_round_trip() -> None:
    cfg = AppConfig()
    cfg.params.spacing = 2.5
    cfg.ui.orbits_count = 420
    cfg.palette.special_fill = "#000000"
    assert AppConfig.from_json(cfg.to_json()) == cfg


def test_partial_config_fills_defaults() -> None:
    payload = {"params": {"spacing": 2, "canvas_width": "800"}}
    cfg = AppConfig.from_json(json.dumps(payload))
    assert cfg.params.spacing == 2.0
    assert cfg.params.canvas_width == 800
    assert cfg.params.initial_angle == "5/99"
    assert cfg.ui.orbits_count is None
    assert cfg.palette == Palette()


def test_load_config_missing_file_uses_defaults(tmp_path: Path) -> None:
    assert load_config(tmp_path / "absent.json") == AppConfig()


@pytest.mark.parametrize("content", ["{not json", "[1, 2]", '{"params": []}'])
def test_load_config_bad_file_warns_and_uses_defaults(
    tmp_path: Path, caplog: pytest.LogCaptureFixture, content: str
) -> None:
    path = tmp_path / "config.json"
    path.write_text(content, encoding="utf-8")
    with caplog.at_level(logging.WARNING, logger="orbitals"):
        cfg = load_config(path)
    assert cfg == AppConfig()
    assert "Ignoring unreadable configuration" in caplog.text


def test_load_config_reads_file(tmp_path: Path) -> None:
    path = tmp_path / "config.json"
    path.write_text(json.dumps({"params": {"initial_angle": "1/3"}}), encoding="utf-8")
    assert load_config(path).params.initial_angle == "1/3"


def test_default_config_path_honours_env(
    monkeypatch: pytest.MonkeyPatch, tmp_path: Path
) -> None:
    monkeypatch.setenv("ORBITALS_CONFIG", str(tmp_path / "x.json"))
    assert default_config_path() == tmp_path / "x.json"
    monkeypatch.delenv("ORBITALS_CONFIG")
    assert default_config_path().name == ".orbitals_config.json"


def test_orbit_count_range() -> None:
    assert DiagramParams().orbit_count_range() == (350, 1050)
    params = DiagramParams(spacing=2.0, canvas_width=800, canvas_height=600)
    assert params.orbit_count_range() == (200, 600)
    with pytest.raises(ValueError):
        DiagramParams(spacing=0.0).orbit_count_range()


def test_angle_degrees_follow_sign() -> None:
    assert AngleSpec(True, -0.25, 4).degrees == pytest.approx(-90.0)
    assert AngleSpec(True, 2.5, 2).degrees == pytest.approx(180.0)
    assert AngleSpec.invalid().degrees is None


def test_viewbox_formatting() -> None:
    assert ViewFrame(-350.0, -350.0, 700.0, 700.0).as_viewbox() == "-350 -350 700 700"
    assert ViewFrame(-0.5, -1.25, 1.0, 2.5).as_viewbox() == "-0.5 -1.25 1 2.5"
