"""Helpers for repo-relative paths, URIs and glob matching."""

import functools
import os
import re
from urllib.parse import quote

# Characters encodeURI leaves untouched on top of the always-safe set.
URI_SAFE = "/;,?:@&=+$!*'()#"

GLOBSTAR = "**"


def convert_path_to_uri(path: str) -> str:
    """Convert a file path to a URI-safe, forward-slash path."""
    return quote(path.replace("\\", "/"), safe=URI_SAFE)


def relative_to_repo(path: str, repo_path: str) -> str:
    """Return ``path`` relative to the repo root using forward slashes."""
    return os.path.relpath(path, repo_path).replace("\\", "/")


def _segment_regex(segment: str) -> str:
    parts = []
    for char in segment:
        if char == "*":
            parts.append("[^/]*")
        elif char == "?":
            parts.append("[^/]")
        else:
            parts.append(re.escape(char))
    # Repeated stars inside a segment behave like a single one.
    return re.sub(r"(?:\[\^/\]\*)+", "[^/]*", "".join(parts))


@functools.lru_cache(maxsize=256)
def compile_glob(pattern: str) -> re.Pattern[str]:
    """Translate a slash-separated glob into a compiled regex.

    ``*`` and ``?`` never match ``/``. A ``**`` segment matches zero or more
    whole directories, or everything below when it is the last segment.
    """
    segments = pattern.split("/")
    regex = ""
    for i, segment in enumerate(segments):
        last = i == len(segments) - 1
        if segment == GLOBSTAR:
            regex += ".*" if last else "(?:[^/]*/)*"
        else:
            regex += _segment_regex(segment) + ("" if last else "/")
    return re.compile(regex)


def glob_match(path: str, pattern: str) -> bool:
    """Return True if the whole forward-slash ``path`` matches ``pattern``."""
    return compile_glob(pattern).fullmatch(path.replace("\\", "/")) is not None


def matches_glob(path: str, pattern: str) -> bool:
    """Return True if ``pattern`` matches ``path`` below any directory.

    The pattern is anchored at a segment boundary, so ``browser/*.css``
    matches ``/repo/browser/a.css`` but not ``/repo/notbrowser/a.css``.
    """
    return glob_match(path, f"{GLOBSTAR}/{pattern}")
