"""Basexx: base16 and base64url codecs.

This package provides RFC 4648 base16 (Section 8) and base64url (Section 5)
encoding and decoding, with allocation-free variants that write into
caller-supplied buffers and non-raising ``try_*`` variants.

Main Components:
    - Base16: Hexadecimal codec
    - Base64Url: URL-safe base64 codec
    - Base16Codec / Base64UrlCodec: Configured codec objects
    - Functions: base16_encode, base64url_decode, ...

Example:
    >>> from basexx import base16_encode, base64url_decode
    >>> base16_encode(b"\\x0f\\xf0")
    '0ff0'
    >>> base64url_decode("AA==")
    b'\\x00'
"""

from basexx.api import (
    Base16Codec,
    Base16Config,
    Base64UrlCodec,
    Base64UrlConfig,
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
from basexx.codecs import Base16, Base64Url
from basexx.exceptions import BaseXXError, FormatError, NullInputError
from basexx.interfaces import IBinaryTextCodec
from basexx.results import DecodeResult, WriteResult

__version__ = "0.1.0"

__all__ = [
    # Codecs
    "Base16",
    "Base64Url",
    "Base16Codec",
    "Base64UrlCodec",
    "IBinaryTextCodec",
    # Configuration
    "Base16Config",
    "Base64UrlConfig",
    # Results
    "WriteResult",
    "DecodeResult",
    # Functions
    "base16_encode",
    "base16_try_encode",
    "base16_decode",
    "base16_try_decode",
    "base16_try_decode_into",
    "base64url_encode",
    "base64url_try_encode",
    "base64url_decode",
    "base64url_try_decode",
    "base64url_try_decode_into",
    # Exceptions
    "BaseXXError",
    "NullInputError",
    "FormatError",
]
