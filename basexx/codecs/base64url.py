"""Base64url encoding utilities.

This module provides URL-safe base64 encoding/decoding as defined by RFC 4648
Section 5, using the alphabet ``A-Z a-z 0-9 - _`` with optional ``=`` padding.
"""

from __future__ import annotations

import logging

from basexx.exceptions import FormatError, NullInputError
from basexx.results import DECODE_FAILED, WRITE_FAILED, DecodeResult, WriteResult

from .buffers import as_code_units, create_decoding_map

logger = logging.getLogger(__name__)

PADDING = "="

_ENCODING_MAP = b"ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz0123456789-_"
_DECODING_MAP = create_decoding_map(_ENCODING_MAP.decode("ascii"))
_PAD = ord(PADDING)


class Base64Url:
    """Base64url encoding utilities.

    This class provides static methods to encode bytes to base64url strings
    and decode them back. Bytes are processed in 3-byte chunks, each producing
    four characters; a trailing chunk of one or two bytes produces two or
    three characters, followed by ``=`` padding when requested.
    """

    @staticmethod
    def max_encoded_length(length: int) -> int:
        """Get the destination capacity needed to encode ``length`` bytes.

        The capacity is the padded length, whether or not padding is written.
        """
        return (length + 2) // 3 * 4

    @staticmethod
    def max_decoded_length(length: int) -> int:
        """Get the destination capacity needed to decode ``length`` unpadded characters."""
        return length * 3 // 4

    @staticmethod
    def encode(data: bytes | bytearray | memoryview, padding: bool = False) -> str:
        """Encode bytes to a base64url string.

        Args:
            data: The bytes to encode.
            padding: Append ``=`` so the length is a multiple of 4.

        Returns:
            The base64url string. Empty input gives an empty string.

        Example:
            >>> Base64Url.encode(b"\\xff\\x00", padding=True)
            '_wA='
        """
        data = memoryview(data).cast("B")
        if len(data) == 0:
            return ""

        chars = bytearray(Base64Url.max_encoded_length(len(data)))
        _, chars_written = Base64Url.try_encode(data, chars, padding)

        return chars[:chars_written].decode("ascii")

    @staticmethod
    def try_encode(
        data: bytes | bytearray | memoryview,
        dest: bytearray | memoryview,
        padding: bool = False,
    ) -> WriteResult:
        """Encode bytes into a caller-owned buffer.

        The buffer receives the ASCII code of each output character and must
        hold ``max_encoded_length(len(data))`` slots even when padding is off.
        Nothing is written when the buffer is too small.

        Lengths count bytes, so buffers with wider items (such as
        ``array("H")``) are encoded by their raw byte content.

        Args:
            data: The bytes to encode.
            dest: Writable buffer for the output characters.
            padding: Write ``=`` padding after a trailing partial chunk.

        Returns:
            ``(True, chars_written)`` on success, ``(False, 0)`` when ``dest``
            is too short.
        """
        data = memoryview(data).cast("B")
        if len(data) == 0:
            return WriteResult(True, 0)
        if len(dest) < Base64Url.max_encoded_length(len(data)):
            return WRITE_FAILED

        full = len(data) - len(data) % 3
        chars_written = 0
        for i in range(0, full, 3):
            b0, b1, b2 = data[i], data[i + 1], data[i + 2]
            dest[chars_written] = _ENCODING_MAP[b0 >> 2]
            dest[chars_written + 1] = _ENCODING_MAP[(b0 & 0b0011) << 4 | b1 >> 4]
            dest[chars_written + 2] = _ENCODING_MAP[(b1 & 0b1111) << 2 | b2 >> 6]
            dest[chars_written + 3] = _ENCODING_MAP[b2 & 0b0011_1111]
            chars_written += 4

        remaining = len(data) - full
        if remaining == 1:
            b0 = data[full]
            dest[chars_written] = _ENCODING_MAP[b0 >> 2]
            dest[chars_written + 1] = _ENCODING_MAP[(b0 & 0b0011) << 4]
            chars_written += 2
            if padding:
                dest[chars_written] = _PAD
                dest[chars_written + 1] = _PAD
                chars_written += 2
        elif remaining == 2:
            b0, b1 = data[full], data[full + 1]
            dest[chars_written] = _ENCODING_MAP[b0 >> 2]
            dest[chars_written + 1] = _ENCODING_MAP[(b0 & 0b0011) << 4 | b1 >> 4]
            dest[chars_written + 2] = _ENCODING_MAP[(b1 & 0b1111) << 2]
            chars_written += 3
            if padding:
                dest[chars_written] = _PAD
                chars_written += 1

        return WriteResult(True, chars_written)

    @staticmethod
    def decode(input: str | None) -> bytes:
        """Decode a base64url string to bytes.

        Padded and unpadded input are both accepted.

        Args:
            input: The base64url string.

        Returns:
            The decoded bytes.

        Raises:
            NullInputError: If input is None.
            FormatError: If input is not a base64url string.
        """
        if input is None:
            raise NullInputError("input must not be None")

        success, result = Base64Url.try_decode(input)
        if not success:
            logger.debug("rejected base64url input of length %d", len(input))
            raise FormatError("input is not a valid base64url string")
        return result

    @staticmethod
    def try_decode(input: str | None) -> DecodeResult:
        """Decode a base64url string to bytes without raising.

        Trailing ``=`` characters are trimmed before decoding.

        Args:
            input: The base64url string, or None.

        Returns:
            ``(True, bytes)`` on success, ``(False, None)`` when input is None
            or malformed.
        """
        if input is None:
            return DECODE_FAILED
        if len(input) == 0:
            return DecodeResult(True, b"")

        chars = input.rstrip(PADDING)
        data = bytearray(Base64Url.max_decoded_length(len(chars)))
        if not Base64Url.try_decode_into(chars, data).success:
            return DECODE_FAILED

        return DecodeResult(True, bytes(data))

    @staticmethod
    def try_decode_into(
        chars: str | bytes | bytearray | memoryview,
        dest: bytearray | memoryview,
    ) -> WriteResult:
        """Decode base64url text into a caller-owned byte buffer.

        The input must already be stripped of ``=`` padding; a ``=`` here is an
        invalid character. Decoding fails when:
            - ``dest`` is shorter than ``max_decoded_length(len(chars))``,
            - the final group holds a single character,
            - a character lies outside ``0x00-0xFF``,
            - a character is not in the base64url alphabet.

        ``dest`` may hold partial output after a failure.

        Args:
            chars: The unpadded base64url text, as a string or a buffer of
                character codes.
            dest: Writable buffer receiving the decoded bytes.

        Returns:
            ``(True, bytes_written)`` on success, ``(False, 0)`` on failure.
        """
        codes = as_code_units(chars)
        if codes is None:
            return WRITE_FAILED
        if len(codes) == 0:
            return WriteResult(True, 0)
        if len(dest) < Base64Url.max_decoded_length(len(codes)):
            return WRITE_FAILED
        if len(codes) % 4 == 1:
            return WRITE_FAILED

        bytes_written = 0
        for i in range(0, len(codes), 4):
            group = [_DECODING_MAP[code] for code in codes[i:i + 4]]
            if min(group) < 0:
                return WRITE_FAILED

            # 2 chars -> 1 byte, 3 chars -> 2 bytes, 4 chars -> 3 bytes
            dest[bytes_written] = (group[0] << 2 | group[1] >> 4) & 0xFF
            bytes_written += 1
            if len(group) > 2:
                dest[bytes_written] = (group[1] << 4 | group[2] >> 2) & 0xFF
                bytes_written += 1
            if len(group) > 3:
                dest[bytes_written] = (group[2] << 6 | group[3]) & 0xFF
                bytes_written += 1

        return WriteResult(True, bytes_written)
