"""Discovery of the stylesheets to analyze inside a repository."""

from collections.abc import Sequence
from pathlib import Path

from token_propagation.path_utils import glob_match


def find_css_files(
    repo_path: str,
    include_patterns: Sequence[str] = ("**/*.css",),
    ignore_patterns: Sequence[str] = (),
) -> list[str]:
    """Return absolute paths matching any include glob and no ignore glob.

    Ignore globs are matched against the repo-relative, forward-slash path.
    """
    root = Path(repo_path).resolve()
    found: set[str] = set()
    for pattern in include_patterns:
        for path in root.glob(pattern):
            if not path.is_file():
                continue
            rel = path.relative_to(root).as_posix()
            if _is_ignored(rel, ignore_patterns):
                continue
            found.add(str(path))
    return sorted(found)


def _is_ignored(rel: str, ignore_patterns: Sequence[str]) -> bool:
    return any(glob_match(rel, pattern) for pattern in ignore_patterns)
