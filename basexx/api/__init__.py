"""Basexx API package.

This package provides the functional operation surface and the configured
codec objects.
"""

from basexx.api.codec import (
    Base16Codec,
    Base16Config,
    Base64UrlCodec,
    Base64UrlConfig,
)
from basexx.api.functions import (
    base16_decode,
    base16_encode,
    base16_try_decode,
    base16_try_decode_into,
    base16_try_encode,
    base64url_decode,
    base64url_encode,
    base64url_try_decode,
    base64url_try_decode_into,
    base64url_try_encode,
)

__all__ = [
    # Codecs
    "Base16Codec",
    "Base64UrlCodec",
    # Configuration types
    "Base16Config",
    "Base64UrlConfig",
    # Base16 functions
    "base16_encode",
    "base16_try_encode",
    "base16_decode",
    "base16_try_decode",
    "base16_try_decode_into",
    # Base64url functions
    "base64url_encode",
    "base64url_try_encode",
    "base64url_decode",
    "base64url_try_decode",
    "base64url_try_decode_into",
]
