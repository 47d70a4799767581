"""Base16 encoding utilities.

This module provides hexadecimal encoding/decoding as defined by RFC 4648
Section 8. Output case is selectable; input is accepted in either case.
"""

from __future__ import annotations

import logging

from basexx.exceptions import FormatError, NullInputError
from basexx.results import DECODE_FAILED, WRITE_FAILED, DecodeResult, WriteResult

from .buffers import as_code_units, create_decoding_map

logger = logging.getLogger(__name__)

_LOWER_ENCODING_MAP = b"0123456789abcdef"
_UPPER_ENCODING_MAP = b"0123456789ABCDEF"
_DECODING_MAP = create_decoding_map(_LOWER_ENCODING_MAP.decode("ascii"), ignore_case=True)


class Base16:
    """Base16 encoding utilities.

    This class provides static methods to encode bytes to hexadecimal strings
    and decode them back. The ``try_*`` methods never raise; they report
    failure through their result tuple. The buffer variants write into a
    caller-owned buffer so hot loops can reuse one allocation.
    """

    @staticmethod
    def encoded_length(length: int) -> int:
        """Get the number of characters produced for ``length`` input bytes."""
        return length * 2

    @staticmethod
    def decoded_length(length: int) -> int:
        """Get the number of bytes produced for ``length`` input characters."""
        return length // 2

    @staticmethod
    def encode(data: bytes | bytearray | memoryview, to_upper: bool = False) -> str:
        """Encode bytes to a base16 string.

        Each byte becomes two characters, high nibble first.

        Args:
            data: The bytes to encode.
            to_upper: Emit ``A-F`` instead of ``a-f``.

        Returns:
            The base16 string. Empty input gives an empty string.

        Example:
            >>> Base16.encode(b"\\x0f\\xf0")
            '0ff0'
        """
        data = memoryview(data).cast("B")
        if len(data) == 0:
            return ""

        chars = bytearray(Base16.encoded_length(len(data)))
        Base16.try_encode(data, chars, to_upper)

        return chars.decode("ascii")

    @staticmethod
    def try_encode(
        data: bytes | bytearray | memoryview,
        dest: bytearray | memoryview,
        to_upper: bool = False,
    ) -> WriteResult:
        """Encode bytes into a caller-owned buffer.

        The buffer receives the ASCII code of each output character. Nothing is
        written when the buffer is too small.

        Lengths count bytes, so buffers with wider items (such as
        ``array("H")``) are encoded by their raw byte content.

        Args:
            data: The bytes to encode.
            dest: Writable buffer of at least ``2 * len(data)`` slots.
            to_upper: Emit ``A-F`` instead of ``a-f``.

        Returns:
            ``(True, 2 * len(data))`` on success, ``(False, 0)`` when ``dest``
            is too short.
        """
        data = memoryview(data).cast("B")
        if len(data) == 0:
            return WriteResult(True, 0)
        if len(dest) < Base16.encoded_length(len(data)):
            return WRITE_FAILED

        encoding_map = _UPPER_ENCODING_MAP if to_upper else _LOWER_ENCODING_MAP
        chars_written = 0
        for b in data:
            dest[chars_written] = encoding_map[b >> 4]
            dest[chars_written + 1] = encoding_map[b & 0xF]
            chars_written += 2

        return WriteResult(True, chars_written)

    @staticmethod
    def decode(input: str | None) -> bytes:
        """Decode a base16 string to bytes.

        Args:
            input: The base16 string. Letters may be in either case.

        Returns:
            The decoded bytes.

        Raises:
            NullInputError: If input is None.
            FormatError: If input is not a base16 string.
        """
        if input is None:
            raise NullInputError("input must not be None")

        success, result = Base16.try_decode(input)
        if not success:
            logger.debug("rejected base16 input of length %d", len(input))
            raise FormatError("input is not a valid base16 string")
        return result

    @staticmethod
    def try_decode(input: str | None) -> DecodeResult:
        """Decode a base16 string to bytes without raising.

        Args:
            input: The base16 string, or None.

        Returns:
            ``(True, bytes)`` on success, ``(False, None)`` when input is None
            or malformed.
        """
        if input is None:
            return DECODE_FAILED
        if len(input) == 0:
            return DecodeResult(True, b"")

        data = bytearray(Base16.decoded_length(len(input)))
        if not Base16.try_decode_into(input, data).success:
            return DECODE_FAILED

        return DecodeResult(True, bytes(data))

    @staticmethod
    def try_decode_into(
        chars: str | bytes | bytearray | memoryview,
        dest: bytearray | memoryview,
    ) -> WriteResult:
        """Decode base16 text into a caller-owned byte buffer.

        Decoding fails when:
            - the input length is odd,
            - ``dest`` is shorter than half the input length,
            - a character lies outside ``0x00-0xFF``,
            - a character is not a hex digit.

        ``dest`` may hold partial output after a failure.

        Args:
            chars: The base16 text, as a string or a buffer of character codes.
            dest: Writable buffer receiving the decoded bytes.

        Returns:
            ``(True, bytes_written)`` on success, ``(False, 0)`` on failure.
        """
        codes = as_code_units(chars)
        if codes is None:
            return WRITE_FAILED
        if len(codes) == 0:
            return WriteResult(True, 0)
        if len(codes) % 2 == 1:
            return WRITE_FAILED
        if len(dest) < Base16.decoded_length(len(codes)):
            return WRITE_FAILED

        bytes_written = 0
        for i in range(0, len(codes), 2):
            hi = _DECODING_MAP[codes[i]]
            lo = _DECODING_MAP[codes[i + 1]]
            if (hi | lo) < 0:
                return WRITE_FAILED

            dest[bytes_written] = hi << 4 | lo
            bytes_written += 1

        return WriteResult(True, bytes_written)
