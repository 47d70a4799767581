"""Codec interfaces for basexx.

This module defines the protocol shared by the configured codec objects, so
consumers can accept either base16 or base64url without caring which.
"""

from __future__ import annotations

from typing import Protocol

from basexx.results import DecodeResult, WriteResult

BytesLike = bytes | bytearray | memoryview
WritableBuffer = bytearray | memoryview


class IBinaryTextCodec(Protocol):
    """Interface for binary-to-text encoding and decoding operations."""

    def encode(self, data: BytesLike) -> str:
        """Encode bytes into text.

        Args:
            data: The bytes to encode.

        Returns:
            The encoded text.
        """
        ...

    def try_encode(self, data: BytesLike, dest: WritableBuffer) -> WriteResult:
        """Encode bytes into a caller-owned buffer of ASCII codes.

        Args:
            data: The bytes to encode.
            dest: The buffer receiving one ASCII code per output character.

        Returns:
            Whether encoding succeeded and how many characters were written.
        """
        ...

    def decode(self, input: str | None) -> bytes:
        """Decode text into bytes.

        Args:
            input: The encoded text.

        Returns:
            The decoded bytes.

        Raises:
            NullInputError: When input is None.
            FormatError: When input is not valid encoded text.
        """
        ...

    def try_decode(self, input: str | None) -> DecodeResult:
        """Decode text into bytes without raising.

        Args:
            input: The encoded text, or None.

        Returns:
            Whether decoding succeeded and the decoded bytes.
        """
        ...

    def try_decode_into(
        self, chars: str | BytesLike, dest: WritableBuffer
    ) -> WriteResult:
        """Decode text into a caller-owned byte buffer.

        Args:
            chars: The encoded text.
            dest: The buffer receiving the decoded bytes.

        Returns:
            Whether decoding succeeded and how many bytes were written.
        """
        ...

    def max_encoded_length(self, length: int) -> int:
        """Get the destination capacity ``try_encode`` needs for ``length`` bytes."""
        ...
