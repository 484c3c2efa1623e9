"""Controllers for Signature Pad widgets"""

from .signature_controller import SignatureController

__all__ = ['SignatureController']
