"""Reversible encoding of namespace URIs into identifier-safe text.

Encoded text only contains ASCII letters, digits, ``_``, ``-`` and the escape
character ``%``. Every other UTF-8 byte of the URI, including ``.``, ``~`` and
``%`` itself, is written as ``%XX`` with uppercase hex digits.
"""

import re
from urllib.parse import quote, unquote_to_bytes

from .errors import MalformedEncoding

_ENCODED = re.compile(r"(?:[A-Za-z0-9_-]|%[0-9A-F]{2})*")

# quote() never escapes these, the identifier alphabet does not allow them
_ALWAYS_SAFE = {".": "%2E", "~": "%7E"}


def encodeUri(uri):
    "encode a URI into the identifier alphabet"
    encoded = quote(uri, safe="", encoding="utf-8", errors="surrogatepass")
    for char, escape in _ALWAYS_SAFE.items():
        encoded = encoded.replace(char, escape)
    return encoded


def decodeUri(text):
    "decode text produced by :func:`encodeUri`, raise MalformedEncoding otherwise"
    if _ENCODED.fullmatch(text) is None:
        raise MalformedEncoding(text, "unexpected character or escape sequence")
    try:
        uri = unquote_to_bytes(text).decode("utf-8", "surrogatepass")
    except UnicodeDecodeError as ex:
        raise MalformedEncoding(text, "escaped bytes are not UTF-8 (%s)" % ex.reason) from ex
    if encodeUri(uri) != text:
        raise MalformedEncoding(text, "not in canonical escaped form")
    return uri
