from __future__ import annotations

import json
from pathlib import Path

import pytest
from PIL import Image

from cli import main
from config_manager import ConfigManager


@pytest.fixture
def config_manager(tmp_path: Path) -> ConfigManager:
    return ConfigManager(tmp_path / "config.json")


@pytest.fixture
def image_path(tmp_path: Path) -> Path:
    path = tmp_path / "flag.png"
    image = Image.new("RGB", (3, 2), (255, 0, 0))
    image.putpixel((2, 0), (255, 255, 255))
    image.save(path)
    return path


def test_text_output(image_path: Path, config_manager: ConfigManager, capsys) -> None:
    assert main([str(image_path)], config_manager) == 0
    lines = capsys.readouterr().out.splitlines()
    assert len(lines) == 2
    assert lines[0].startswith("#ff0000")
    assert lines[1].startswith("#ffffff")


def test_json_output_with_limit(image_path: Path, config_manager: ConfigManager, capsys) -> None:
    assert main([str(image_path), "--format", "json", "--limit", "1"], config_manager) == 0
    payload = json.loads(capsys.readouterr().out)
    assert payload == [{"hex": "#ff0000", "r": 255, "g": 0, "b": 0, "weight": 5.0}]


def test_svg_written_to_file(image_path: Path, config_manager: ConfigManager, tmp_path: Path) -> None:
    out = tmp_path / "palette.svg"
    assert main([str(image_path), "--format", "svg", "--output", str(out)], config_manager) == 0
    assert out.read_text(encoding="utf-8").count("<rect") == 2


def test_config_supplies_defaults(image_path: Path, config_manager: ConfigManager, capsys) -> None:
    config = config_manager.load()
    config.output_format = "json"
    config_manager.save(config)

    assert main([str(image_path)], config_manager) == 0
    assert len(json.loads(capsys.readouterr().out)) == 2


def test_missing_image_exits_nonzero(tmp_path: Path, config_manager: ConfigManager, capsys) -> None:
    assert main([str(tmp_path / "nope.png")], config_manager) == 1
    captured = capsys.readouterr()
    assert captured.out == ""
    assert captured.err.startswith("Error: Failed to load image")


@pytest.mark.parametrize("flag", ["--max-dimension", "--limit"])
@pytest.mark.parametrize("value", ["0", "-5", "many"])
def test_size_flags_must_be_positive(
    image_path: Path, config_manager: ConfigManager, capsys, flag: str, value: str
) -> None:
    with pytest.raises(SystemExit) as excinfo:
        main([str(image_path), flag, value], config_manager)
    assert excinfo.value.code == 2
    assert flag in capsys.readouterr().err
