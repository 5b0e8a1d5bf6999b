import os
import sys
from typing import TextIO

DEFAULT_SIZE = (80, 24)


def get_terminal_size() -> tuple[int, int]:
    """Return (columns, rows) of the terminal, or (80, 24) if not a tty."""
    if not sys.stdout.isatty():
        return DEFAULT_SIZE
    size = os.get_terminal_size()
    return (size.columns, size.lines)


def supports_colour(stream: TextIO | None = None) -> bool:
    """True when ``stream`` is a tty and the user hasn't set NO_COLOR."""
    stream = sys.stdout if stream is None else stream
    if os.environ.get("NO_COLOR"):
        return False
    return hasattr(stream, "isatty") and stream.isatty()
