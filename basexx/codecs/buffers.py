"""Helpers shared by the codecs: decoding maps and character buffers."""

from __future__ import annotations


INVALID = -1


def create_decoding_map(alphabet: str, ignore_case: bool = False) -> tuple[int, ...]:
    """Build the reverse lookup table for an encoding alphabet.

    The table has one entry per single-byte character code. Each entry holds
    the symbol value of that character, or ``INVALID`` when the character is
    not part of the alphabet.

    Args:
        alphabet: The encoding alphabet, indexed by symbol value.
        ignore_case: Map both cases of each letter to the same symbol value.

    Returns:
        An immutable 256-entry table.
    """
    decoding_map = [INVALID] * 256
    for value, ch in enumerate(alphabet):
        decoding_map[ord(ch)] = value
        if ignore_case:
            decoding_map[ord(ch.lower())] = value
            decoding_map[ord(ch.upper())] = value
    return tuple(decoding_map)


def as_code_units(chars: str | bytes | bytearray | memoryview) -> memoryview | None:
    """View encoded text as a sequence of single-byte character codes.

    Returns ``None`` when a character lies outside ``0x00-0xFF``, which makes
    the whole input undecodable.
    """
    if isinstance(chars, str):
        try:
            chars = chars.encode("latin-1")
        except UnicodeEncodeError:
            return None
    return memoryview(chars).cast("B")
