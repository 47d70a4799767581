"""Result types for the non-raising codec operations."""

from __future__ import annotations

from typing import NamedTuple


class WriteResult(NamedTuple):
    """Outcome of writing into a caller-supplied buffer.

    Used by ``try_encode`` and ``try_decode_into``. Unpacks as
    ``(success, written)``.

    Attributes:
        success: Whether the operation completed.
        written: Number of slots written to the destination. Always 0 on failure.
    """

    success: bool
    written: int


class DecodeResult(NamedTuple):
    """Outcome of ``try_decode``. Unpacks as ``(success, value)``.

    Attributes:
        success: Whether the input was valid encoded text.
        value: The decoded bytes, or ``None`` on failure.
    """

    success: bool
    value: bytes | None


WRITE_FAILED = WriteResult(False, 0)
DECODE_FAILED = DecodeResult(False, None)
