"""Color Extractor viewer - Main entry point."""

import sys

from PyQt6.QtWidgets import QApplication

from ui.main_window import PaletteWindow


def main():
    """Launch the palette viewer application."""
    app = QApplication(sys.argv)

    app.setApplicationDisplayName("Color Extractor")
    app.setApplicationName("ColorExtractor")

    window = PaletteWindow()
    window.show()

    # Optional image path on the command line
    if len(sys.argv) > 1:
        window.palette_panel.load_image(sys.argv[1])

    sys.exit(app.exec())


if __name__ == "__main__":
    main()
