"""Directory and global aggregation of per-file propagation results."""

from collections.abc import Iterable
from dataclasses import dataclass, field
from typing import Any

from token_propagation.compute_percentage import NOT_APPLICABLE
from token_propagation.file_result import FileResult

ROOT_DIR_KEY = "."


def compute_average(percentages: Iterable[float]) -> float:
    """Mean of the percentages that are not the not-applicable sentinel.

    Returns ``NOT_APPLICABLE`` when there are values but all are the sentinel,
    and 0 when there are no values at all.
    """
    values = list(percentages)
    usable = [p for p in values if p != NOT_APPLICABLE]
    if not usable:
        return NOT_APPLICABLE if values else 0
    return sum(usable) / len(usable)


@dataclass
class DirectoryGroup:
    """The analyzed files of one directory."""

    files: list[FileResult] = field(default_factory=list)

    @property
    def average_propagation(self) -> float:
        """Average percentage of the files that could be scored."""
        return compute_average(f.percentage for f in self.files)

    def stats(self) -> dict[str, float]:
        """Totals behind ``average_propagation``."""
        usable = [f.percentage for f in self.files if f.percentage != NOT_APPLICABLE]
        return {
            "total": sum(usable),
            "count": len(usable),
            "ignore_count": len(self.files) - len(usable),
            "processed_count": len(self.files),
        }

    def to_dict(self) -> dict[str, Any]:
        """Serialize the group with file summaries."""
        return {
            "files": [f.summary() for f in self.files],
            "average_propagation": self.average_propagation,
        }


def group_by_directory(results: Iterable[FileResult]) -> dict[str, DirectoryGroup]:
    """Group results by their URI-encoded directory, sorted by key."""
    grouped: dict[str, DirectoryGroup] = {}
    for result in results:
        key = result.dir_uri or ROOT_DIR_KEY
        grouped.setdefault(key, DirectoryGroup()).files.append(result)
    return dict(sorted(grouped.items()))


def compute_global_average(groups: dict[str, DirectoryGroup]) -> float:
    """Average of the directory averages, rounded to two decimals."""
    average = compute_average(g.average_propagation for g in groups.values())
    if average == NOT_APPLICABLE:
        return NOT_APPLICABLE
    return round(average, 2)
