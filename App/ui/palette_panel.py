"""Image selection and palette display panel."""

from __future__ import annotations

from pathlib import Path

from PyQt6.QtCore import Qt, QThread, pyqtSignal
from PyQt6.QtGui import QPixmap
from PyQt6.QtWidgets import (
    QFileDialog,
    QGroupBox,
    QHBoxLayout,
    QLabel,
    QPushButton,
    QSpinBox,
    QVBoxLayout,
    QWidget,
)

from color_extraction import ColorExtractor, rgb_to_hex
from models import ExtractionConfig, ExtractionResult
from ui.styles import FONTS, SIZES, panel_stylesheet, swatch_stylesheet


class ExtractionThread(QThread):
    """Background thread for color extraction to avoid blocking UI."""

    finished = pyqtSignal(object)  # ExtractionResult
    error = pyqtSignal(str)  # Error message

    def __init__(self, file_path: str, config: ExtractionConfig):
        super().__init__()
        self.file_path = file_path
        self.config = config

    def run(self):
        """Execute extraction in background."""
        try:
            result = ColorExtractor(self.config).process(self.file_path)
            self.finished.emit(result)
        except Exception as e:
            self.error.emit(str(e))


class PalettePanel(QGroupBox):
    """Panel for picking an image and showing its dominant colors."""

    extraction_complete = pyqtSignal(object)  # ExtractionResult
    extraction_failed = pyqtSignal(str)

    def __init__(self, config: ExtractionConfig, parent: QWidget | None = None):
        super().__init__("Dominant Colors", parent)
        self.config = config
        self.current_image_path: str | None = None
        self.result: ExtractionResult | None = None
        self.extraction_thread: ExtractionThread | None = None

        self._setup_ui()
        self._connect_signals()

    def _setup_ui(self):
        """Initialize the UI components."""
        layout = QVBoxLayout()

        # --- Image Selection Section ---
        file_layout = QHBoxLayout()
        self.file_path_label = QLabel("No image selected")
        self.file_path_label.setWordWrap(True)
        file_layout.addWidget(self.file_path_label, stretch=1)

        self.browse_btn = QPushButton("Browse...")
        self.browse_btn.setToolTip("Select an image file (PNG, JPG, etc.)")
        self.browse_btn.setMinimumWidth(SIZES.BUTTON_MIN_WIDTH)
        file_layout.addWidget(self.browse_btn)
        layout.addLayout(file_layout)

        # --- Image Preview ---
        self.preview_label = QLabel()
        self.preview_label.setMinimumSize(*SIZES.PREVIEW_MIN_SIZE)
        self.preview_label.setMaximumSize(*SIZES.PREVIEW_MAX_SIZE)
        self.preview_label.setAlignment(Qt.AlignmentFlag.AlignCenter)
        self.preview_label.setStyleSheet(panel_stylesheet())
        self.preview_label.setText("Image preview will appear here")
        layout.addWidget(self.preview_label)

        # --- Display limit ---
        limit_layout = QHBoxLayout()
        limit_layout.addWidget(QLabel("Show colors:"))
        self.limit_spin = QSpinBox()
        self.limit_spin.setRange(0, 256)
        self.limit_spin.setSpecialValueText("All")
        self.limit_spin.setValue(self.config.display_limit or 0)
        self.limit_spin.setToolTip("Maximum number of colors to list (All = no limit)")
        limit_layout.addWidget(self.limit_spin)
        limit_layout.addStretch()
        layout.addLayout(limit_layout)

        # --- Swatches ---
        self.swatch_layout = QVBoxLayout()
        layout.addLayout(self.swatch_layout)

        # --- Status ---
        self.status_label = QLabel("")
        self.status_label.setWordWrap(True)
        layout.addWidget(self.status_label)

        layout.addStretch()
        self.setLayout(layout)

    def _connect_signals(self):
        self.browse_btn.clicked.connect(self.browse)
        self.limit_spin.valueChanged.connect(self._on_limit_changed)

    def browse(self):
        """Ask for an image file and extract its colors."""
        file_path, _ = QFileDialog.getOpenFileName(
            self,
            "Select Image",
            "",
            "Images (*.png *.jpg *.jpeg *.bmp *.gif *.tiff);;All Files (*)",
        )
        if file_path:
            self.load_image(file_path)

    def load_image(self, file_path: str):
        """Show a preview of the image and start extraction."""
        self.current_image_path = file_path
        self.file_path_label.setText(f"Selected: {Path(file_path).name}")

        pixmap = QPixmap(file_path)
        if not pixmap.isNull():
            scaled = pixmap.scaled(
                *SIZES.PREVIEW_MAX_SIZE,
                Qt.AspectRatioMode.KeepAspectRatio,
                Qt.TransformationMode.SmoothTransformation,
            )
            self.preview_label.setPixmap(scaled)
        else:
            self.preview_label.setText("No preview available")

        self._start_extraction()

    def _start_extraction(self):
        """Run extraction in a background thread."""
        if not self.current_image_path:
            return

        self.browse_btn.setEnabled(False)
        self.status_label.setText("Extracting colors...")

        self.extraction_thread = ExtractionThread(self.current_image_path, self.config)
        self.extraction_thread.finished.connect(self._on_extraction_finished)
        self.extraction_thread.error.connect(self._on_extraction_error)
        self.extraction_thread.start()

    def _on_extraction_finished(self, result: ExtractionResult):
        self.result = result
        self.browse_btn.setEnabled(True)
        self.status_label.setText(
            f"{len(result.colors)} colors from {result.sampled_width}x"
            f"{result.sampled_height} pixels"
        )
        self._render_swatches()
        self.extraction_complete.emit(result)

    def _on_extraction_error(self, error_msg: str):
        self.browse_btn.setEnabled(True)
        pretty_msg = error_msg.replace("\n", " ").strip()
        self.status_label.setText(f"Error: {pretty_msg}")
        self.extraction_failed.emit(pretty_msg)

    def _on_limit_changed(self, value: int):
        self.config.display_limit = value or None
        self._render_swatches()

    def _clear_swatches(self):
        while self.swatch_layout.count():
            item = self.swatch_layout.takeAt(0)
            if item is None:
                continue
            row = item.layout()
            if row is None:
                continue
            while row.count():
                child = row.takeAt(0)
                widget = child.widget() if child else None
                if widget:
                    widget.deleteLater()

    def _render_swatches(self):
        """Rebuild the swatch rows from the current result."""
        self._clear_swatches()
        if self.result is None:
            return

        colors = self.result.colors
        if self.config.display_limit:
            colors = colors[: self.config.display_limit]

        for entry in colors:
            hex_color = rgb_to_hex(entry.rgb)
            row = QHBoxLayout()

            swatch = QLabel()
            swatch.setFixedSize(*SIZES.SWATCH_SIZE)
            swatch.setStyleSheet(swatch_stylesheet(hex_color))
            row.addWidget(swatch)

            label = QLabel(f"{hex_color}  {entry.weight:.2f}")
            label.setFont(FONTS.SWATCH_LABEL)
            row.addWidget(label)
            row.addStretch()

            self.swatch_layout.addLayout(row)
