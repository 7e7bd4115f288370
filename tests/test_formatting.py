from __future__ import annotations

import json

from color_extraction.formatting import (
    entries_to_json,
    entries_to_svg,
    format_entries,
    rgb_to_hex,
)
from models import ColorEntry

ENTRIES = [
    ColorEntry((250, 0, 0), 4.0),
    ColorEntry((0, 250, 0), 3.0),
    ColorEntry((0, 0, 0), 0.0),
]


def test_rgb_to_hex() -> None:
    assert rgb_to_hex((250, 0, 0)) == "#fa0000"
    assert rgb_to_hex((1, 171, 255)) == "#01abff"


def test_format_entries_respects_limit() -> None:
    lines = format_entries(ENTRIES, limit=2)
    assert len(lines) == 2
    assert lines[0].startswith("#fa0000  rgb(250, 0, 0)")
    assert lines[0].endswith("4.000")
    assert lines[1].startswith("#00fa00")
    assert len(format_entries(ENTRIES)) == 3
    assert format_entries([]) == []


def test_entries_to_json() -> None:
    payload = json.loads(entries_to_json(ENTRIES, limit=1))
    assert payload == [{"hex": "#fa0000", "r": 250, "g": 0, "b": 0, "weight": 4.0}]
    assert json.loads(entries_to_json([])) == []


def test_entries_to_svg_has_one_swatch_per_entry() -> None:
    content = entries_to_svg(ENTRIES)
    assert content.startswith("<svg")
    assert content.count("<rect") == 3
    assert 'fill="rgb(250,0,0)"' in content


def test_entries_to_svg_empty() -> None:
    content = entries_to_svg([])
    assert content.startswith("<svg")
    assert "<rect" not in content


def test_entries_to_svg_zero_weight_palette() -> None:
    content = entries_to_svg([ColorEntry((0, 0, 0), 0.0), ColorEntry((9, 9, 9), 0.0)])
    assert content.count("<rect") == 2
