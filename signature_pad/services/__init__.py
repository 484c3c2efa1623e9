"""Services for Signature Pad"""

from .png_encoder import EncodingError, encode_png, encode_array, decode_png
from .export_worker import ExportSignals, ExportTask

__all__ = [
    'EncodingError',
    'encode_png',
    'encode_array',
    'decode_png',
    'ExportSignals',
    'ExportTask',
]
