"""Default file reading capability for stylesheets."""

from collections.abc import Callable
from pathlib import Path

FileReader = Callable[[str], str]


def read_text_file(path: str) -> str:
    """Read a stylesheet as UTF-8 text."""
    return Path(path).read_text(encoding="utf-8")
