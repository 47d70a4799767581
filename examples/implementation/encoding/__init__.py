"""Encoding example package.

This package shows the codecs in use: a token encoder that gzip-compresses
text and carries it as unpadded base64url.
"""

from .token_encoder import TokenEncoder

__all__ = [
    "TokenEncoder",
]
