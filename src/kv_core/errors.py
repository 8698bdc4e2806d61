"""Exceptions raised by kv_core."""

from __future__ import annotations

_EXCERPT = 20


class KVError(Exception):
    """Base class for every kv_core error."""


class KVParseError(KVError):
    """The input does not follow the ``key=value`` grammar.

    ``offset`` is the index into the input where scanning failed and
    ``remaining`` is the unconsumed text from that point on.
    """

    reason = "parse error"

    def __init__(self, text: str, offset: int) -> None:
        self.offset = offset
        self.remaining = text[offset:]
        excerpt = self.remaining[:_EXCERPT]
        if len(self.remaining) > _EXCERPT:
            excerpt += "..."
        super().__init__(f"{self.reason} at offset {offset}: {excerpt!r}")


class MalformedKey(KVParseError):
    reason = "expected a key"


class MissingDelimiter(KVParseError):
    reason = "expected '='"


class UnterminatedQuotedValue(KVParseError):
    reason = "unterminated quoted value"


class KeyNotFound(KVError):
    def __init__(self, key: str) -> None:
        self.key = key
        super().__init__(f"key not found: {key!r}")
