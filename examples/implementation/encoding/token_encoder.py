"""Token compression and encoding implementation.

This module provides token encoding/decoding with gzip compression and
unpadded base64url encoding.
"""

import gzip

from basexx import Base64Url


class TokenEncoder:
    """Token encoder that compresses and encodes tokens.

    Encoding:
    1. Convert the input string to UTF-8 bytes
    2. Compress with gzip at maximum compression level (9)
    3. Encode with base64url, without padding

    Decoding reverses this process. Padding does not need restoring since the
    base64url decoder accepts unpadded input.
    """

    def encode(self, object: str) -> str:
        """Encode an object string into a compressed and encoded token.

        Args:
            object: The object string to encode.

        Returns:
            The compressed and encoded token string without padding.

        Example:
            >>> encoder = TokenEncoder()
            >>> token = encoder.encode('{"user": "alice", "role": "admin"}')
            >>> "=" in token
            False
        """
        compressed_token = gzip.compress(object.encode("utf-8"), compresslevel=9)
        return Base64Url.encode(compressed_token)

    def decode(self, raw_token: str) -> str:
        """Decode a compressed and encoded token back to the original string.

        Args:
            raw_token: The raw token string to decode.

        Returns:
            The decoded and decompressed object string.

        Raises:
            FormatError: If the token is not base64url text.
            gzip.BadGzipFile: If the token is not valid gzip data.
            UnicodeDecodeError: If the decompressed data is not valid UTF-8.
        """
        compressed_token = Base64Url.decode(raw_token)
        return gzip.decompress(compressed_token).decode("utf-8")
