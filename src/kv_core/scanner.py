"""Scanner layer: splits ``key=value`` text into pairs.

Grammar::

    document := (ws* pair)* ws*
    pair     := key ws* '=' ws* value
    key      := [A-Za-z0-9_-]+
    value    := quoted | unquoted
    unquoted := non_ws*
    quoted   := '"' ( [^\\"] | '\\' any_char )* '"'

All functions work on ``(text, pos)`` and return the position just past
what they consumed.  Nothing is copied unless a quoted value contains an
escape.
"""

from __future__ import annotations

import logging
import re
from typing import Iterator

from .errors import MalformedKey, MissingDelimiter, UnterminatedQuotedValue
from .values import Value, VBorrowed, VOwned

logger = logging.getLogger(__name__)

_WS_RE = re.compile(r"\s*")
_KEY_RE = re.compile(r"[A-Za-z0-9_-]*")
_UNQUOTED_RE = re.compile(r"\S*")
# Run of literal characters inside a quoted value.
_LITERAL_RE = re.compile(r'[^\\"]*')

QUOTE = '"'
ESCAPE = "\\"


# ---------------------------------------------------------------------------
# Primitive steps
# ---------------------------------------------------------------------------

def skip_ws(text: str, pos: int) -> int:
    return _WS_RE.match(text, pos).end()


def scan_key(text: str, pos: int) -> tuple[str, int]:
    """Take the longest run of key characters at *pos*."""
    end = _KEY_RE.match(text, pos).end()
    if end == pos:
        raise MalformedKey(text, pos)
    return text[pos:end], end


def expect_delimiter(text: str, pos: int) -> int:
    """Skip whitespace, require ``=``, skip whitespace after it."""
    pos = skip_ws(text, pos)
    if not text.startswith("=", pos):
        raise MissingDelimiter(text, pos)
    return skip_ws(text, pos + 1)


# ---------------------------------------------------------------------------
# Values
# ---------------------------------------------------------------------------

def scan_value(text: str, pos: int, capture: bool = True) -> tuple[Value | None, int]:
    """Read the value starting at *pos*.

    With ``capture=False`` the value is only traversed (escapes included)
    and ``None`` is returned in its place.
    """
    if text.startswith(QUOTE, pos):
        return _scan_quoted(text, pos, capture)
    return _scan_unquoted(text, pos, capture)


def _scan_unquoted(text: str, pos: int, capture: bool) -> tuple[Value | None, int]:
    end = _UNQUOTED_RE.match(text, pos).end()
    if not capture:
        return None, end
    return VBorrowed(text, pos, end), end


def _scan_quoted(text: str, pos: int, capture: bool) -> tuple[Value | None, int]:
    """Scan a quoted value whose opening quote sits at *pos*.

    ``\\X`` yields a literal ``X`` for any character ``X``.  The result
    stays a borrowed span until the first escape is seen; from then on
    the pieces are collected into *parts* and joined at the closing quote.
    """
    start = pos + 1
    head = start
    parts: list[str] | None = None

    while True:
        stop = _LITERAL_RE.match(text, head).end()
        if stop >= len(text):
            raise UnterminatedQuotedValue(text, pos)

        if text[stop] == QUOTE:
            if not capture:
                return None, stop + 1
            if parts is None:
                return VBorrowed(text, start, stop), stop + 1
            parts.append(text[head:stop])
            return VOwned("".join(parts)), stop + 1

        # Backslash: the next character is taken verbatim.
        if stop + 1 >= len(text):
            raise UnterminatedQuotedValue(text, pos)
        if capture:
            if parts is None:
                logger.debug("escape at offset %d, value needs a copy", stop)
                parts = []
            parts.append(text[head:stop])
            parts.append(text[stop + 1])
        head = stop + 2


# ---------------------------------------------------------------------------
# Pairs
# ---------------------------------------------------------------------------

def scan_key_and_delimiter(text: str, pos: int) -> tuple[str, int]:
    """Read ``ws* key ws* '=' ws*`` and return the key and the value position."""
    key, pos = scan_key(text, skip_ws(text, pos))
    return key, expect_delimiter(text, pos)


def scan_pair(text: str, pos: int) -> tuple[str, Value, int]:
    """Read one full pair, including surrounding whitespace."""
    key, pos = scan_key_and_delimiter(text, pos)
    value, pos = scan_value(text, pos)
    return key, value, skip_ws(text, pos)


def iter_pairs(text: str) -> Iterator[tuple[str, Value]]:
    """Yield every ``(key, value)`` pair of *text* in document order.

    Raises on the first malformed pair; pairs before it have already been
    yielded.
    """
    pos = skip_ws(text, 0)
    while pos < len(text):
        key, value, pos = scan_pair(text, pos)
        yield key, value
