"""
Signature Pad - Main Entry Point

Demo host application: a signature canvas with Clear and Export buttons.

Usage:
    python -m signature_pad.main
    python -m signature_pad.main --debug   # verbose terminal output
"""

import logging
import sys
from pathlib import Path

from PyQt6.QtWidgets import (
    QApplication, QFileDialog, QHBoxLayout, QMainWindow,
    QMessageBox, QPushButton, QVBoxLayout, QWidget
)

from .config import Config
from .utils.logging_config import LoggingConfig
from .widgets.controllers.signature_controller import SignatureController
from .widgets.signature_widget import SignatureWidget

logger = LoggingConfig.get_logger(__name__)


class SignatureWindow(QMainWindow):
    """Main window hosting one signature canvas."""

    def __init__(self, parent=None):
        super().__init__(parent)
        self.setWindowTitle(Config.APP_NAME)
        self.resize(Config.DEFAULT_WINDOW_WIDTH, Config.DEFAULT_WINDOW_HEIGHT)

        self.controller = SignatureController(
            pen_color=Config.DEFAULT_PEN_COLOR,
            pen_stroke_width=Config.DEFAULT_PEN_STROKE_WIDTH,
            export_background_color='#FFFFFF',
            parent=self
        )
        self.canvas = SignatureWidget(self.controller)

        self._create_layout()
        self.controller.changed.connect(self._update_buttons)
        self.controller.export_finished.connect(self._on_export_finished)
        self.controller.export_failed.connect(self._on_export_failed)
        self._update_buttons()

    def _create_layout(self):
        self.clear_button = QPushButton("Clear")
        self.clear_button.clicked.connect(self.controller.clear)

        self.export_button = QPushButton("Export PNG...")
        self.export_button.clicked.connect(self._on_export_clicked)

        buttons = QHBoxLayout()
        buttons.addStretch()
        buttons.addWidget(self.clear_button)
        buttons.addWidget(self.export_button)

        layout = QVBoxLayout()
        layout.addWidget(self.canvas)
        layout.addLayout(buttons)

        central = QWidget()
        central.setLayout(layout)
        self.setCentralWidget(central)

    def _update_buttons(self):
        has_points = self.controller.is_not_empty
        self.clear_button.setEnabled(has_points)
        self.export_button.setEnabled(has_points)

    def _on_export_clicked(self):
        self.export_button.setEnabled(False)
        self.controller.export_bytes_async()

    def _on_export_finished(self, data):
        self._update_buttons()
        if data is None:
            QMessageBox.warning(self, "Nothing to Export", "Draw a signature first.")
            return

        filepath, _ = QFileDialog.getSaveFileName(
            self,
            "Export Signature",
            "signature.png",
            "PNG Images (*.png);;All Files (*)"
        )
        if not filepath:
            return

        try:
            Path(filepath).write_bytes(data)
        except OSError as e:
            logger.error(f"Could not save signature: {e}")
            QMessageBox.critical(self, "Error", f"Could not save signature:\n{e}")
            return

        logger.info(f"Signature exported to {filepath}")

    def _on_export_failed(self, message: str):
        self._update_buttons()
        QMessageBox.critical(self, "Error", message)


def console_log_level(argv) -> int:
    """Terminal log threshold: DEBUG with --debug, else INFO"""
    return logging.DEBUG if '--debug' in argv else logging.INFO


def setup_application() -> QApplication:
    """
    Initialize and configure the Qt application

    Returns:
        Configured QApplication instance
    """
    app = QApplication(sys.argv)

    # Set application metadata
    app.setApplicationName(Config.APP_NAME)
    app.setApplicationVersion(Config.APP_VERSION)
    app.setOrganizationName(Config.APP_AUTHOR)

    return app


def main():
    """
    Main entry point for Signature Pad

    Creates the application, shows the window, and runs the event loop.
    """
    # Setup logging first
    LoggingConfig.setup_logging(Config.get_log_dir(), console_level=console_log_level(sys.argv[1:]))

    logger.info(f"Starting {Config.APP_NAME} {Config.APP_VERSION}...")

    app = setup_application()

    window = SignatureWindow()
    window.show()

    logger.info("Application started successfully!")

    # Run event loop
    sys.exit(app.exec())


if __name__ == "__main__":
    main()
