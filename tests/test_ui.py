from __future__ import annotations

import os
from pathlib import Path

import pytest

os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")
QtWidgets = pytest.importorskip("PyQt6.QtWidgets")

from config_manager import ConfigManager  # noqa: E402
from models import ColorEntry, ExtractionConfig, ExtractionResult  # noqa: E402
from ui import palette_panel  # noqa: E402
from ui.main_window import PaletteWindow  # noqa: E402


@pytest.fixture(scope="module")
def qapp():
    return QtWidgets.QApplication.instance() or QtWidgets.QApplication([])


def test_extraction_thread_reports_unexpected_errors(monkeypatch: pytest.MonkeyPatch) -> None:
    def fail(self, file_path):
        raise OSError("resampler ran out of memory")

    monkeypatch.setattr(palette_panel.ColorExtractor, "process", fail)
    thread = palette_panel.ExtractionThread("image.png", ExtractionConfig())
    errors: list[str] = []
    results: list[object] = []
    thread.error.connect(errors.append)
    thread.finished.connect(results.append)

    # Call run() directly so the signals fire synchronously
    thread.run()

    assert errors == ["resampler ran out of memory"]
    assert results == []


def test_window_title_tracks_finished_extraction(qapp, tmp_path: Path) -> None:
    window = PaletteWindow(ConfigManager(tmp_path / "config.json"))
    window.palette_panel.current_image_path = str(tmp_path / "sunset.png")

    window.palette_panel.extraction_complete.emit(
        ExtractionResult(colors=[ColorEntry((255, 0, 0), 2.0), ColorEntry((0, 0, 0), 1.0)])
    )

    assert window.windowTitle() == "Color Extractor - sunset.png (2 colors)"
