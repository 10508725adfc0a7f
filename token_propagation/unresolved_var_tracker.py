"""Run-wide tracking of referenced custom properties that are never defined."""

import threading
from collections.abc import Sequence
from typing import Any

from token_propagation.declaration import Declaration
from token_propagation.path_utils import relative_to_repo
from token_propagation.value_references_token import value_references_token


class UnresolvedVarTracker:
    """Collects, per variable name, the files referencing it without a definition.

    Safe to share between threads; the report does not depend on the order in
    which files were added.
    """

    def __init__(self, token_keys: Sequence[str], repo_path: str) -> None:
        """Initialize the tracker with the design token keys to ignore."""
        self.token_keys = token_keys
        self.repo_path = repo_path
        self._vars: dict[str, set[str]] = {}
        self._lock = threading.Lock()

    def add_from_declaration(self, decl: Declaration, file_path: str) -> None:
        """Record the declaration's unresolved variables against ``file_path``."""
        names = [
            name
            for name in decl.unresolved_variables
            if not value_references_token(name, self.token_keys)
        ]
        if not names:
            return
        with self._lock:
            for name in names:
                self._vars.setdefault(name, set()).add(file_path)

    def to_report(self) -> list[dict[str, Any]]:
        """Return entries ordered by the number of files they occur in."""
        with self._lock:
            snapshot = {name: set(files) for name, files in self._vars.items()}
        entries = [
            {
                "variable": name,
                "count": len(files),
                "files": sorted(relative_to_repo(f, self.repo_path) for f in files),
            }
            for name, files in snapshot.items()
        ]
        entries.sort(key=lambda e: (-e["count"], e["variable"]))
        return entries

    def clear(self) -> None:
        """Forget everything recorded so far."""
        with self._lock:
            self._vars.clear()
