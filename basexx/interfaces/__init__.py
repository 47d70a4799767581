"""Basexx interfaces package.

This package provides protocol definitions for binary-to-text codecs.
"""

from .encoding import BytesLike, IBinaryTextCodec, WritableBuffer

__all__ = [
    "BytesLike",
    "IBinaryTextCodec",
    "WritableBuffer",
]
