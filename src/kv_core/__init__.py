"""kv_core — scanner for whitespace-separated ``key=value`` text."""

from .values import Value, VBorrowed, VOwned
from .errors import (
    KVError,
    KVParseError,
    MalformedKey,
    MissingDelimiter,
    UnterminatedQuotedValue,
    KeyNotFound,
)
from .scanner import iter_pairs, scan_pair, scan_value
from .table import Table, build
from .lookup import lookup_one, lookup_value
from .repl import KVRepl

__all__ = [
    "build",
    "lookup_one",
    "lookup_value",
    "iter_pairs",
    "scan_pair",
    "scan_value",
    "Table",
    "Value",
    "VBorrowed",
    "VOwned",
    "KVError",
    "KVParseError",
    "MalformedKey",
    "MissingDelimiter",
    "UnterminatedQuotedValue",
    "KeyNotFound",
    "KVRepl",
]
