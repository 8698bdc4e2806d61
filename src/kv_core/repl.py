"""KVRepl — interactive shell over a loaded key/value document.

Also provides the ``kv-repl`` CLI entry point via ``main()``.
"""

from __future__ import annotations

import logging
import sys
from typing import IO

from .config import Config
from .errors import KVError
from .log import setup_logging
from .lookup import lookup_one
from .table import Table, build

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# KVRepl class (programmatic use)
# ---------------------------------------------------------------------------

class KVRepl:
    """Holds the most recently loaded document and its table.

    Usage::

        repl = KVRepl()
        repl.load('name="Joe Smith" age=36')
        repl.get("name")    # → "Joe Smith"  (from the table)
        repl.find("age")    # → "36"         (targeted lookup on the source)
        repl.reset()
    """

    def __init__(self) -> None:
        self.source = ""
        self.table = Table()

    def load(self, text: str) -> Table:
        """Build a table from *text* and make it current.

        On error the previous document is kept.
        """
        table = build(text)
        self.source = text
        self.table = table
        return table

    def get(self, key: str) -> str | None:
        return self.table.get(key)

    def find(self, key: str) -> str:
        return lookup_one(self.source, key)

    def reset(self) -> None:
        self.source = ""
        self.table = Table()


# ---------------------------------------------------------------------------
# CLI helpers
# ---------------------------------------------------------------------------

def _fmt_value(text: str | None) -> str:
    if text is None:
        return "(none)"
    return '"' + text.replace("\\", "\\\\").replace('"', '\\"') + '"'


def _show_keys(repl: KVRepl, dest: IO[str]) -> None:
    """Print every key of the current table with its value."""
    if repl.table.is_empty():
        print("  (no keys loaded)", file=dest)
        return
    width = max(len(k) for k in repl.table)
    for key, text in repl.table.items():
        print(f"  {key:<{width}} = {_fmt_value(text)}", file=dest)


def _load_file(repl: KVRepl, filepath: str, dest: IO[str]) -> None:
    try:
        with open(filepath, encoding="utf-8") as fh:
            text = fh.read()
    except (OSError, UnicodeDecodeError) as exc:
        print(f"Error reading '{filepath}': {exc}", file=sys.stderr)
        return
    table = repl.load(text)
    print(f"  loaded {len(table)} keys", file=dest)


def _process_line(repl: KVRepl, line: str, dest: IO[str]) -> bool:
    """Process one input line.  Returns False when the session should end."""
    line = line.strip()
    if not line:
        return True

    # ── Exit ──────────────────────────────────────────────────────────────
    if line in (":q", ":quit"):
        return False

    # ── Control commands ──────────────────────────────────────────────────
    if line == ":keys":
        _show_keys(repl, dest)
        return True

    if line == ":reset":
        repl.reset()
        return True

    try:
        # ── ?<< file / ?? key / ? key ─────────────────────────────────────
        if line.startswith("?<< "):
            _load_file(repl, line[4:].strip(), dest)
        elif line.startswith("?? "):
            print(_fmt_value(repl.find(line[3:].strip())), file=dest)
        elif line.startswith("? "):
            print(_fmt_value(repl.get(line[2:].strip())), file=dest)
        else:
            # ── Regular document input ────────────────────────────────────
            repl.load(line)
    except KVError as exc:
        print(f"Error: {exc}", file=sys.stderr)
    return True


# ---------------------------------------------------------------------------
# CLI entry point
# ---------------------------------------------------------------------------

def main() -> None:
    """Interactive key/value shell (``kv-repl`` / ``python -m kv_core.repl``)."""
    config = Config.from_env()
    setup_logging(config.log_level)
    repl = KVRepl()
    dest: IO[str] = sys.stdout

    print("KV REPL  (:q to quit  |  :keys  :reset  |  ? <key>  ?? <key>  ?<< <file>)")

    while True:
        try:
            line = input("KV> ").strip()
        except EOFError:
            print()
            break
        except KeyboardInterrupt:
            print()
            continue

        if not _process_line(repl, line, dest):
            break

    logger.debug("session ended with %d keys loaded", len(repl.table))


if __name__ == "__main__":
    main()
