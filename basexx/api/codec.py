"""Configured codec objects.

This module provides codec instances that carry their output options, so a
consumer can be handed an :class:`~basexx.interfaces.IBinaryTextCodec` without
knowing which encoding or options it uses.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from basexx.codecs import Base16, Base64Url
from basexx.interfaces.encoding import BytesLike, IBinaryTextCodec, WritableBuffer
from basexx.results import DecodeResult, WriteResult


@dataclass(frozen=True)
class Base16Config:
    """Configuration for base16 output.

    Attributes:
        to_upper: Emit ``A-F`` instead of ``a-f``.
    """

    to_upper: bool = False


@dataclass(frozen=True)
class Base64UrlConfig:
    """Configuration for base64url output.

    Attributes:
        padding: Append ``=`` padding to encoded output.
    """

    padding: bool = False


@dataclass(frozen=True)
class Base16Codec(IBinaryTextCodec):
    """Base16 codec bound to a :class:`Base16Config`."""

    config: Base16Config = field(default_factory=Base16Config)

    def encode(self, data: BytesLike) -> str:
        return Base16.encode(data, self.config.to_upper)

    def try_encode(self, data: BytesLike, dest: WritableBuffer) -> WriteResult:
        return Base16.try_encode(data, dest, self.config.to_upper)

    def decode(self, input: str | None) -> bytes:
        return Base16.decode(input)

    def try_decode(self, input: str | None) -> DecodeResult:
        return Base16.try_decode(input)

    def try_decode_into(
        self, chars: str | BytesLike, dest: WritableBuffer
    ) -> WriteResult:
        return Base16.try_decode_into(chars, dest)

    def max_encoded_length(self, length: int) -> int:
        return Base16.encoded_length(length)


@dataclass(frozen=True)
class Base64UrlCodec(IBinaryTextCodec):
    """Base64url codec bound to a :class:`Base64UrlConfig`.

    Decoding accepts padded and unpadded input regardless of the configured
    padding, except in :meth:`try_decode_into`, which expects unpadded text.
    """

    config: Base64UrlConfig = field(default_factory=Base64UrlConfig)

    def encode(self, data: BytesLike) -> str:
        return Base64Url.encode(data, self.config.padding)

    def try_encode(self, data: BytesLike, dest: WritableBuffer) -> WriteResult:
        return Base64Url.try_encode(data, dest, self.config.padding)

    def decode(self, input: str | None) -> bytes:
        return Base64Url.decode(input)

    def try_decode(self, input: str | None) -> DecodeResult:
        return Base64Url.try_decode(input)

    def try_decode_into(
        self, chars: str | BytesLike, dest: WritableBuffer
    ) -> WriteResult:
        return Base64Url.try_decode_into(chars, dest)

    def max_encoded_length(self, length: int) -> int:
        return Base64Url.max_encoded_length(length)
