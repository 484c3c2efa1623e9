"""
Centralized logging configuration for Signature Pad

Library modules only call logging.getLogger(__name__); handlers are installed
once by the host application through LoggingConfig.setup_logging.
"""
import logging
import sys
from pathlib import Path
from typing import Optional

LOG_FILE_NAME = "signature_pad.log"
FILE_FORMAT = '%(asctime)s [%(levelname)s] %(name)s: %(message)s'
CONSOLE_FORMAT = '[%(levelname)s] %(message)s'


class LoggingConfig:
    """Central logging configuration"""

    _initialized = False
    _log_file_path: Optional[Path] = None
    _console_handler: Optional[logging.Handler] = None

    @classmethod
    def setup_logging(cls, log_dir: Path, console_level: int = logging.INFO) -> Path:
        """
        Install the file and console handlers on the root logger (idempotent)

        Args:
            log_dir: Folder for the log file, created if missing
            console_level: Threshold for terminal output; the file always
                receives DEBUG

        Returns:
            Path of the log file
        """
        if cls._initialized:
            return cls._log_file_path

        log_dir.mkdir(parents=True, exist_ok=True)
        cls._log_file_path = log_dir / LOG_FILE_NAME

        root = logging.getLogger()
        root.setLevel(logging.DEBUG)

        file_handler = logging.FileHandler(cls._log_file_path, encoding='utf-8')
        file_handler.setLevel(logging.DEBUG)
        file_handler.setFormatter(logging.Formatter(FILE_FORMAT, datefmt='%Y-%m-%d %H:%M:%S'))
        root.addHandler(file_handler)

        cls._console_handler = logging.StreamHandler(sys.stdout)
        cls._console_handler.setLevel(console_level)
        cls._console_handler.setFormatter(logging.Formatter(CONSOLE_FORMAT))
        root.addHandler(cls._console_handler)

        cls._initialized = True
        root.debug(
            f"Logging to {cls._log_file_path} "
            f"(console level {logging.getLevelName(console_level)})"
        )
        return cls._log_file_path

    @classmethod
    def get_console_level(cls) -> Optional[int]:
        """Current terminal threshold, or None before setup"""
        if cls._console_handler is None:
            return None
        return cls._console_handler.level

    @classmethod
    def get_logger(cls, name: str):
        """Get a logger instance"""
        return logging.getLogger(name)

    @classmethod
    def get_log_file_path(cls) -> Optional[Path]:
        """Get the log file path"""
        return cls._log_file_path


__all__ = ['LoggingConfig']
