"""Table — key/value mapping built from a whole document."""

from __future__ import annotations

import logging
from typing import Iterator

from .scanner import iter_pairs
from .values import Value

logger = logging.getLogger(__name__)


class Table:
    """Read-only mapping from key to value.

    Built once from a document; on duplicate keys the last occurrence
    wins.  Borrowed values keep the source text alive.

    Usage::

        table = build('name="Joe Smith" age=36')
        table.get("name")        # → "Joe Smith"
        table.get_value("age")   # → VBorrowed(start=..., end=...)
    """

    __slots__ = ("_entries",)

    def __init__(self, entries: dict[str, Value] | None = None) -> None:
        self._entries: dict[str, Value] = dict(entries) if entries else {}

    @classmethod
    def from_text(cls, text: str) -> Table:
        """Parse *text* into a Table.  Any parse error aborts the build."""
        entries: dict[str, Value] = {}
        for key, value in iter_pairs(text):
            entries[key] = value
        logger.debug("built table with %d keys from %d chars", len(entries), len(text))
        return cls(entries)

    # -- Access ---------------------------------------------------------

    def get(self, key: str) -> str | None:
        value = self._entries.get(key)
        return None if value is None else value.text

    def get_value(self, key: str) -> Value | None:
        return self._entries.get(key)

    def items(self) -> Iterator[tuple[str, str]]:
        for key, value in self._entries.items():
            yield key, value.text

    def is_empty(self) -> bool:
        return not self._entries

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, key: object) -> bool:
        return key in self._entries

    def __iter__(self) -> Iterator[str]:
        return iter(self._entries)

    def __repr__(self) -> str:
        return f"Table({dict(self.items())!r})"


def build(text: str) -> Table:
    """Build a :class:`Table` from *text*."""
    return Table.from_text(text)
