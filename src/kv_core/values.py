"""Value types produced by the scanner.

A value is either a view onto the input text (``VBorrowed``) or a freshly
built string (``VOwned``).  Which one is decided per value while scanning:
only a quoted value containing an escape needs to be rebuilt.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Union


@dataclass(frozen=True, eq=False)
class VBorrowed:
    """A ``source[start:end]`` span of the input text.

    The value holds a reference to *source*, so the input stays alive for
    as long as the value does.
    """

    source: str = field(repr=False)
    start: int
    end: int

    @property
    def text(self) -> str:
        return self.source[self.start:self.end]

    @property
    def is_borrowed(self) -> bool:
        return True

    def to_owned(self) -> VOwned:
        """Copy the span out, releasing the reference to the input."""
        return VOwned(self.text)

    def __len__(self) -> int:
        return self.end - self.start

    def __str__(self) -> str:
        return self.text

    def __eq__(self, other: object) -> bool:
        if isinstance(other, (VBorrowed, VOwned)):
            return self.text == other.text
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self.text)


@dataclass(frozen=True, eq=False)
class VOwned:
    text: str

    @property
    def is_borrowed(self) -> bool:
        return False

    def to_owned(self) -> VOwned:
        return self

    def __len__(self) -> int:
        return len(self.text)

    def __str__(self) -> str:
        return self.text

    def __eq__(self, other: object) -> bool:
        if isinstance(other, (VBorrowed, VOwned)):
            return self.text == other.text
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self.text)


Value = Union[VBorrowed, VOwned]
