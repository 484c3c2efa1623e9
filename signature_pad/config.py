"""
Global configuration for Signature Pad

Defaults for pen styling, rendering and export, plus user data paths.
"""

import os
import sys
from pathlib import Path
from typing import Final, Optional


class Config:
    """Central configuration class for all application settings"""

    # Application metadata
    APP_NAME: Final[str] = "Signature Pad"
    APP_VERSION: Final[str] = "1.0.0"
    APP_AUTHOR: Final[str] = "CGstuff"

    # Paths
    APP_ROOT: Final[Path] = Path(__file__).parent

    # Pen defaults
    DEFAULT_PEN_COLOR: Final[str] = "#000000"
    DEFAULT_PEN_STROKE_WIDTH: Final[float] = 3.0
    DEFAULT_EXPORT_BACKGROUND: Final[Optional[str]] = None  # None = transparent

    # Widget defaults
    DEFAULT_BACKGROUND_COLOR: Final[str] = "#9E9E9E"  # Material grey 500
    DEFAULT_WINDOW_WIDTH: Final[int] = 640
    DEFAULT_WINDOW_HEIGHT: Final[int] = 360

    # Rendering
    ANTIALIASING: Final[bool] = True
    PNG_COMPRESSION_LEVEL: Final[int] = 6   # 0-9, software encoder only

    # Backend override: "qt", "software" or "auto"
    RENDER_BACKEND_ENV: Final[str] = "SIGNATURE_PAD_RENDER_BACKEND"

    # Serialization
    STROKE_JSON_VERSION: Final[str] = "1.0"

    @classmethod
    def get_user_data_dir(cls) -> Path:
        """
        Get user data directory.

        Uses system AppData/Local (Windows), Application Support (macOS)
        or .local/share (Linux).
        """
        if sys.platform == 'win32':
            base_path = Path(os.environ.get('LOCALAPPDATA', os.path.expanduser('~')))
            user_dir = base_path / 'SignaturePad'
        elif sys.platform == 'darwin':
            user_dir = Path.home() / 'Library' / 'Application Support' / 'SignaturePad'
        else:
            user_dir = Path.home() / '.local' / 'share' / 'SignaturePad'

        user_dir.mkdir(parents=True, exist_ok=True)
        return user_dir

    @classmethod
    def get_log_dir(cls) -> Path:
        """Get the log folder path (created on demand by LoggingConfig)."""
        return cls.get_user_data_dir() / 'logs'

    @classmethod
    def get_render_backend_override(cls) -> Optional[str]:
        """
        Read the render backend override from the environment.

        Returns:
            'qt', 'software', or None when unset or 'auto'
        """
        value = os.environ.get(cls.RENDER_BACKEND_ENV, '').strip().lower()
        if value in ('qt', 'software'):
            return value
        return None


__all__ = ['Config']
