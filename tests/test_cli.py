"""Command line entry points (no window is opened here)."""

import json
from pathlib import Path

import pytest

from orbitals import cli


def test_parse_command_prints_angle(capsys: pytest.CaptureFixture[str]) -> None:
    assert cli.main(["parse", "10/20"]) == 0
    payload = json.loads(capsys.readouterr().out.strip().splitlines()[-1])
    assert payload == {
        "is_valid": True,
        "value": 0.5,
        "denominator": 2,
        "reading": "180.00°",
    }


def test_parse_command_invalid_exit_code(capsys: pytest.CaptureFixture[str]) -> None:
    assert cli.main(["parse", "3/0"]) == 1
    payload = json.loads(capsys.readouterr().out.strip().splitlines()[-1])
    assert payload["is_valid"] is False
    assert payload["reading"] == "Invalid"


def test_export_svg(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    out = tmp_path / "diagram.svg"
    config = tmp_path / "absent.json"
    code = cli.main(
        [
            "--config",
            str(config),
            "export",
            str(out),
            "--angle",
            "1/4",
            "--orbits",
            "400",
        ]
    )
    assert code == 0
    assert out.read_text(encoding="utf-8").count("<circle") == 400
    assert "Wrote 400 orbits" in capsys.readouterr().out


def test_export_png_uses_config(tmp_path: Path) -> None:
    config = tmp_path / "config.json"
    config.write_text(
        json.dumps(
            {
                "params": {
                    "spacing": 40,
                    "canvas_width": 320,
                    "canvas_height": 320,
                    "initial_angle": "1/4",
                },
                "ui": {"orbits_count": 4},
            }
        ),
        encoding="utf-8",
    )
    out = tmp_path / "diagram.png"
    assert cli.main(["--config", str(config), "export", str(out)]) == 0
    assert out.stat().st_size > 0


def test_export_clamps_orbit_count(tmp_path: Path) -> None:
    out = tmp_path / "diagram.svg"
    config = tmp_path / "absent.json"
    assert cli.main(["--config", str(config), "export", str(out), "--orbits", "5"]) == 0
    assert out.read_text(encoding="utf-8").count("<circle") == 350


def test_export_rejects_invalid_angle(tmp_path: Path) -> None:
    with pytest.raises(SystemExit) as excinfo:
        cli.main(
            [
                "--config",
                str(tmp_path / "absent.json"),
                "export",
                str(tmp_path / "d.svg"),
                "--angle=-5/99",
            ]
        )
    assert excinfo.value.code == 2


def test_export_unknown_format_fails(tmp_path: Path) -> None:
    code = cli.main(
        ["--config", str(tmp_path / "absent.json"), "export", str(tmp_path / "d.gif")]
    )
    assert code == 1


def test_export_overflowing_angle_fails(
    tmp_path: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    huge = "1" + "0" * 307
    assert cli.main(["parse", huge]) == 0
    assert '"reading": "0.00\\u00b0"' in capsys.readouterr().out

    out = tmp_path / "d.svg"
    code = cli.main(
        ["--config", str(tmp_path / "absent.json"), "export", str(out), "--angle", huge]
    )
    assert code == 1
    assert not out.exists()
