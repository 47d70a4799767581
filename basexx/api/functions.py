"""Module-level codec operations.

Thin functional aliases over :class:`~basexx.codecs.Base16` and
:class:`~basexx.codecs.Base64Url` for callers that prefer plain functions.
"""

from basexx.codecs import Base16, Base64Url

base16_encode = Base16.encode
base16_try_encode = Base16.try_encode
base16_decode = Base16.decode
base16_try_decode = Base16.try_decode
base16_try_decode_into = Base16.try_decode_into

base64url_encode = Base64Url.encode
base64url_try_encode = Base64Url.try_encode
base64url_decode = Base64Url.decode
base64url_try_decode = Base64Url.try_decode
base64url_try_decode_into = Base64Url.try_decode_into
