import logging


def setup_logging(level: str = "WARNING") -> None:
    """Configure the root logger for the ``kv-repl`` shell."""
    logging.basicConfig(
        level=level.upper(),
        format="%(levelname)s %(name)s: %(message)s",
    )
