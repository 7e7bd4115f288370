"""Main application window for the palette viewer."""

from pathlib import Path

from PyQt6.QtGui import QAction
from PyQt6.QtWidgets import QFileDialog, QMainWindow, QMessageBox

from color_extraction import entries_to_json, entries_to_svg
from config_manager import ConfigManager
from models import ExtractionResult
from ui.palette_panel import PalettePanel


class PaletteWindow(QMainWindow):
    """Main window: image preview plus the ranked palette."""

    def __init__(self, config_manager: ConfigManager | None = None):
        super().__init__()
        self.setWindowTitle("Color Extractor v0.1.0")
        self.setMinimumSize(480, 600)

        # Application state
        self.config_manager = config_manager or ConfigManager()
        self.config = self.config_manager.load()

        self.palette_panel: PalettePanel

        self._setup_ui()

    def _setup_ui(self):
        """Initialize the user interface."""
        self.palette_panel = PalettePanel(self.config)
        self.setCentralWidget(self.palette_panel)
        self.palette_panel.extraction_complete.connect(self._on_extraction_complete)
        self.palette_panel.extraction_failed.connect(self._show_error)

        self._create_menu_bar()

    def _create_menu_bar(self):
        """Create the File menu."""
        menubar = self.menuBar()

        if menubar is None:
            return

        file_menu = menubar.addMenu("&File")
        if file_menu is None:
            return

        open_action = QAction("&Open Image...", self)
        open_action.triggered.connect(self.palette_panel.browse)
        file_menu.addAction(open_action)

        export_json_action = QAction("Export Palette as &JSON...", self)
        export_json_action.triggered.connect(lambda: self._export("json"))
        file_menu.addAction(export_json_action)

        export_svg_action = QAction("Export Palette as &SVG...", self)
        export_svg_action.triggered.connect(lambda: self._export("svg"))
        file_menu.addAction(export_svg_action)

        file_menu.addSeparator()

        quit_action = QAction("&Quit", self)
        quit_action.triggered.connect(self.close)
        file_menu.addAction(quit_action)

    def _export(self, kind: str):
        """Write the current palette to a JSON or SVG file."""
        result = self.palette_panel.result
        if result is None:
            QMessageBox.information(self, "Export", "Open an image first.")
            return

        file_path, _ = QFileDialog.getSaveFileName(
            self, "Export Palette", f"palette.{kind}", f"{kind.upper()} (*.{kind})"
        )
        if not file_path:
            return

        limit = self.config.display_limit
        if kind == "svg":
            content = entries_to_svg(result.colors, limit)
        else:
            content = entries_to_json(result.colors, limit)

        try:
            Path(file_path).write_text(content, encoding="utf-8")
        except OSError as e:
            self._show_error(f"Could not write {file_path}: {e}")

    def _on_extraction_complete(self, result: ExtractionResult):
        """Show the image file name and palette size in the title bar."""
        name = Path(self.palette_panel.current_image_path or "").name
        self.setWindowTitle(f"Color Extractor - {name} ({len(result.colors)} colors)")

    def _show_error(self, message: str):
        QMessageBox.warning(self, "Color Extractor", message)

    def closeEvent(self, event):
        """Persist settings on exit."""
        success, error = self.config_manager.save(self.config)
        if not success:
            print(f"Warning: Could not save config file: {error}")
        super().closeEvent(event)
