"""Targeted lookup: find one key's value without building a table."""

from __future__ import annotations

import logging

from .errors import KeyNotFound
from .scanner import scan_key_and_delimiter, scan_value, skip_ws
from .values import Value

logger = logging.getLogger(__name__)


def lookup_value(text: str, key: str) -> Value:
    """Return the value of the first pair whose key is *key*.

    Scanning stops at the first match, so anything after it is never
    inspected, malformed or not.  Values of other keys are skipped
    without being captured.  A malformed pair before the match raises.
    """
    pos = skip_ws(text, 0)
    while pos < len(text):
        found, pos = scan_key_and_delimiter(text, pos)
        if found == key:
            value, _ = scan_value(text, pos)
            logger.debug("found %r at offset %d", key, pos)
            return value
        _, pos = scan_value(text, pos, capture=False)
        pos = skip_ws(text, pos)

    logger.debug("%r not found in %d chars", key, len(text))
    raise KeyNotFound(key)


def lookup_one(text: str, key: str) -> str:
    """Like :func:`lookup_value` but returns the value's text."""
    return lookup_value(text, key).text
