"""
JSON string literal quoting.

Two routines produce the same text. The fast path handles strings whose
code points all lie in [U+0020, U+10000), where only the quote and the
backslash need escaping, with a single translate call. Everything else goes
through the per-character slow path, which applies the full JSON escaping
rules.
"""

import re

from ._profile import ProfileContext

_SHORT_ESCAPES = {
    '"': '\\"',
    "\\": "\\\\",
    "\b": "\\b",
    "\f": "\\f",
    "\n": "\\n",
    "\r": "\\r",
    "\t": "\\t",
}

_FAST_TABLE = str.maketrans({'"': '\\"', "\\": "\\\\"})

# Control characters and anything outside the Basic Multilingual Plane
_SLOW_PATH_CHARS = re.compile("[\x00-\x1f\U00010000-\U0010ffff]")

_ASCII_LIMIT = 0x7F
_BMP_LIMIT = 0xFFFF
_HIGH_SURROGATES = range(0xD800, 0xDC00)
_LOW_SURROGATES = range(0xDC00, 0xE000)


def _fast_path_safe(s: str, ensure_ascii: bool) -> bool:
    if ensure_ascii and not s.isascii():
        return False
    return _SLOW_PATH_CHARS.search(s) is None


def _quote_fast(s: str) -> str:
    return '"' + s.translate(_FAST_TABLE) + '"'


def _unicode_escape(code: int) -> str:
    """Escapes a code point as \\uXXXX, or a surrogate pair above the BMP."""
    if code > _BMP_LIMIT:
        code -= 0x10000
        high = 0xD800 | (code >> 10)
        low = 0xDC00 | (code & 0x3FF)
        return f"\\u{high:04x}\\u{low:04x}"
    return f"\\u{code:04x}"


def _quote_slow(s: str, ensure_ascii: bool) -> str:
    result = ['"']
    previous = 0
    for char in s:
        escaped = _SHORT_ESCAPES.get(char)
        code = ord(char)
        if escaped is not None:
            result.append(escaped)
        elif code in _LOW_SURROGATES and previous in _HIGH_SURROGATES:
            # Escaped, the two lone halves would decode as one code point
            result.append(char)
        elif code < 0x20 or (ensure_ascii and code > _ASCII_LIMIT):
            result.append(_unicode_escape(code))
        else:
            result.append(char)
        previous = code
    result.append('"')
    return "".join(result)


def quote(s: str, ensure_ascii: bool = False) -> str:
    """
    Returns s as a JSON string literal, including the surrounding quotes.

    Quotes, backslashes and control characters are always escaped. Other
    characters are copied verbatim unless ensure_ascii is set, in which case
    every non-ASCII code point becomes a \\uXXXX escape. Lone surrogate
    code units are copied verbatim without ensure_ascii; with it, a low
    surrogate that directly follows a high one stays verbatim so the pair
    is not read back as a single code point. Either way decoding gives back
    the same string.
    """
    with ProfileContext("quote", len(s)):
        if _fast_path_safe(s, ensure_ascii):
            return _quote_fast(s)
        return _quote_slow(s, ensure_ascii)
