"""Codec implementations.

This package provides the base16 and base64url codecs.
"""

from .base16 import Base16
from .base64url import Base64Url

__all__ = [
    "Base16",
    "Base64Url",
]
