"""Logic for assembling the JSON report of a propagation run."""

import json
import time
from pathlib import Path
from typing import Any

from token_propagation.file_result import FileResult
from token_propagation.grouping import compute_global_average, group_by_directory
from token_propagation.unresolved_var_tracker import UnresolvedVarTracker


class PropagationReport:
    """Collects per-file results and summarizes them by directory."""

    def __init__(self, config_hash: str, tracker: UnresolvedVarTracker) -> None:
        """Initialize the report with run metadata."""
        self.config_hash = config_hash
        self.tracker = tracker
        self.results: list[FileResult] = []
        self.start_time = time.time()

    def add_result(self, result: FileResult) -> None:
        """Add a single file result to the report."""
        self.results.append(result)

    def build(self, include_declarations: bool = False) -> dict[str, Any]:
        """Return the report as a JSON-compatible record."""
        groups = group_by_directory(self.results)
        files = [
            r.to_dict() if include_declarations else r.summary() for r in self.results
        ]
        return {
            "meta": {
                "timestamp": time.time(),
                "duration": time.time() - self.start_time,
                "config_hash": self.config_hash,
                "total_files": len(self.results),
                "failed_files": sum(1 for r in self.results if r.error is not None),
            },
            "files": files,
            "directories": {key: g.to_dict() for key, g in groups.items()},
            "total_average_propagation": compute_global_average(groups),
            "unresolved_variables": self.tracker.to_report(),
        }

    def write(self, path: str, include_declarations: bool = False) -> None:
        """Write the report to a JSON file."""
        report = self.build(include_declarations)
        Path(path).write_text(json.dumps(report, indent=2), encoding="utf-8")

    def write_unresolved(self, path: str) -> None:
        """Write only the unresolved-variable report to a JSON file."""
        Path(path).write_text(
            json.dumps(self.tracker.to_report(), indent=2), encoding="utf-8"
        )
