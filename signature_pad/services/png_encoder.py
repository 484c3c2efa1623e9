"""
PNG Encoder - serialize rendered surfaces to PNG bytes

Each render path has its own encoder: Qt's image writer for QImage surfaces,
OpenCV for software surfaces. Both are deterministic for identical pixels.
"""

import io
import logging
from typing import Optional

import cv2
import numpy as np
from PIL import Image
from PyQt6.QtCore import QBuffer, QIODevice

from ..config import Config
from ..rendering.draw_surface import RasterSurface
from ..rendering.qt_surface import QImageSurface
from ..rendering.software_surface import SoftwareSurface

logger = logging.getLogger(__name__)


class EncodingError(RuntimeError):
    """Raised when an encoder backend fails to produce PNG data."""


def _encode_qimage_surface(surface: QImageSurface) -> bytes:
    buffer = QBuffer()
    buffer.open(QIODevice.OpenModeFlag.WriteOnly)
    try:
        if not surface.to_qimage().save(buffer, "PNG"):
            raise EncodingError("QImage could not be written as PNG")
        return bytes(buffer.data())
    finally:
        buffer.close()


def _encode_software_surface(surface: SoftwareSurface) -> bytes:
    bgra = cv2.cvtColor(surface.pixels, cv2.COLOR_RGBA2BGRA)
    ok, encoded = cv2.imencode(
        '.png', bgra,
        [cv2.IMWRITE_PNG_COMPRESSION, Config.PNG_COMPRESSION_LEVEL]
    )
    if not ok:
        raise EncodingError("cv2.imencode failed to produce PNG data")
    return encoded.tobytes()


def encode_png(surface: Optional[RasterSurface]) -> Optional[bytes]:
    """
    Encode a rendered surface as PNG

    Args:
        surface: Surface from render_export, or None for an empty canvas

    Returns:
        PNG bytes, or None when surface is None

    Raises:
        EncodingError: If the backend encoder fails
    """
    if surface is None:
        return None

    if isinstance(surface, QImageSurface):
        data = _encode_qimage_surface(surface)
    elif isinstance(surface, SoftwareSurface):
        data = _encode_software_surface(surface)
    else:
        # Any other raster surface goes through its pixel array
        data = encode_array(surface.to_array())

    logger.debug(f"Encoded {surface.width}x{surface.height} surface to {len(data)} PNG bytes")
    return data


def encode_array(pixels: np.ndarray) -> bytes:
    """Encode an RGBA uint8 array (H x W x 4) as PNG."""
    buffer = io.BytesIO()
    Image.fromarray(np.ascontiguousarray(pixels, dtype=np.uint8)).save(buffer, 'PNG')
    return buffer.getvalue()


def decode_png(data: bytes) -> np.ndarray:
    """
    Decode PNG bytes

    Returns:
        uint8 array of shape (height, width, 4), RGBA
    """
    with Image.open(io.BytesIO(data)) as image:
        return np.array(image.convert('RGBA'))


__all__ = ['EncodingError', 'encode_png', 'encode_array', 'decode_png']
