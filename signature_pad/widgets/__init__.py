"""Widgets for Signature Pad"""

from .controllers.signature_controller import SignatureController
from .signature_widget import SignatureWidget

__all__ = ['SignatureController', 'SignatureWidget']
