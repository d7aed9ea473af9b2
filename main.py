#!/usr/bin/env python3
"""
Geometry Transformation Workbench - Main Entry Point

Plot a polygon on a coordinate grid and apply translations, reflections,
rotations and enlargements to it.

Usage:
    python main.py
    python main.py --debug              # Enable debug logging
    python main.py --config PATH        # Use an alternate settings file
"""

import sys
import logging
import argparse
from PyQt6.QtWidgets import QApplication
from PyQt6.QtCore import Qt
from PyQt6.QtGui import QFont, QFontDatabase, QPalette, QColor

from services import get_settings
from views import MainWindow


PREFERRED_FONTS = ("Inter", "Segoe UI", "SF Pro Text", "Helvetica Neue", "Noto Sans")


def setup_logging(debug: bool = False):
    """Send application logs to the console."""
    level = logging.DEBUG if debug else logging.INFO

    handler = logging.StreamHandler()
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(
        '%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        datefmt='%H:%M:%S'
    ))

    root_logger = logging.getLogger()
    root_logger.setLevel(level)
    root_logger.addHandler(handler)

    # Qt's own modules are noisy at DEBUG
    logging.getLogger("PyQt6").setLevel(logging.WARNING)

    logging.getLogger(__name__).info(f"Logging initialized at {logging.getLevelName(level)} level")


def setup_application() -> QApplication:
    """Configure the Qt application."""
    # High DPI support
    QApplication.setHighDpiScaleFactorRoundingPolicy(
        Qt.HighDpiScaleFactorRoundingPolicy.PassThrough
    )

    app = QApplication(sys.argv)
    app.setApplicationName("Geometry Workbench")
    app.setApplicationVersion("0.1.0")
    app.setOrganizationName("geometry-workbench")

    families = set(QFontDatabase.families())
    family = next((f for f in PREFERRED_FONTS if f in families), None)
    if family:
        app.setFont(QFont(family, 10))

    palette = QPalette()
    palette.setColor(QPalette.ColorRole.Window, QColor("#F3F4F6"))
    palette.setColor(QPalette.ColorRole.WindowText, QColor("#111827"))
    palette.setColor(QPalette.ColorRole.Base, QColor("#FFFFFF"))
    palette.setColor(QPalette.ColorRole.AlternateBase, QColor("#F9FAFB"))
    palette.setColor(QPalette.ColorRole.Text, QColor("#374151"))
    palette.setColor(QPalette.ColorRole.Button, QColor("#FFFFFF"))
    palette.setColor(QPalette.ColorRole.ButtonText, QColor("#374151"))
    palette.setColor(QPalette.ColorRole.Highlight, QColor("#be185d"))
    palette.setColor(QPalette.ColorRole.HighlightedText, QColor("#FFFFFF"))
    app.setPalette(palette)

    return app


def main():
    """Main entry point."""
    parser = argparse.ArgumentParser(description='Geometry Transformation Workbench')
    parser.add_argument('--debug', action='store_true', help='Enable debug logging')
    parser.add_argument('--config', metavar='PATH', help='Settings file to use')
    args = parser.parse_args()

    setup_logging(debug=args.debug)

    # First call fixes the settings location for the session
    settings = get_settings(args.config)
    logging.getLogger(__name__).debug(f"Settings file: {settings.settings_path}")

    app = setup_application()

    window = MainWindow()
    window.show()

    # Run event loop
    sys.exit(app.exec())


if __name__ == "__main__":
    main()
