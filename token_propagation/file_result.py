"""Data model for the analysis of a single stylesheet."""

from dataclasses import dataclass, field
from pathlib import PurePosixPath
from typing import Any

from token_propagation.binding import Binding, BindingMap
from token_propagation.compute_percentage import NOT_APPLICABLE, compute_percentage
from token_propagation.declaration import Declaration
from token_propagation.path_utils import convert_path_to_uri


@dataclass
class FileResult:
    """Per-file propagation data. ``percentage`` is derived from the counts."""

    path: str  # relative to the repo root, forward slashes
    absolute_path: str
    declarations: list[Declaration] = field(default_factory=list)
    bindings: BindingMap = field(default_factory=dict)
    error: str | None = None

    @property
    def file_name(self) -> str:
        """Base name of the stylesheet."""
        return PurePosixPath(self.path).name

    @property
    def file_uri(self) -> str:
        """URI-safe identifier for the file."""
        return convert_path_to_uri(self.path)

    @property
    def dir_uri(self) -> str:
        """URI-safe identifier for the containing directory."""
        return convert_path_to_uri(str(PurePosixPath(self.path).parent))

    @property
    def total_count(self) -> int:
        """Number of tracked declarations found in the file."""
        return len(self.declarations)

    @property
    def token_count(self) -> int:
        """Number of declarations that resolve to a design token."""
        return sum(1 for d in self.declarations if d.contains_design_token)

    @property
    def ignored_count(self) -> int:
        """Number of declarations with excluded, non-token values."""
        return sum(1 for d in self.declarations if d.is_ignored)

    @property
    def percentage(self) -> float:
        """Token propagation percentage, or the not-applicable sentinel."""
        if self.error is not None:
            return NOT_APPLICABLE
        return compute_percentage(
            self.total_count, self.token_count, self.ignored_count
        )

    def summary(self) -> dict[str, Any]:
        """Return the counts without the per-declaration detail."""
        return {
            "path": self.path,
            "file_name": self.file_name,
            "file_uri": self.file_uri,
            "dir_uri": self.dir_uri,
            "total_count": self.total_count,
            "token_count": self.token_count,
            "ignored_count": self.ignored_count,
            "percentage": self.percentage,
            "error": self.error,
        }

    def to_dict(self) -> dict[str, Any]:
        """Serialize the full result to a JSON-compatible record."""
        data = self.summary()
        data["absolute_path"] = self.absolute_path
        data["declarations"] = [d.to_dict() for d in self.declarations]
        data["bindings"] = {name: b.to_dict() for name, b in self.bindings.items()}
        return data

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "FileResult":
        """Rebuild a result from a record produced by ``to_dict``."""
        return cls(
            path=data["path"],
            absolute_path=data.get("absolute_path", data["path"]),
            declarations=[
                Declaration.from_dict(d) for d in data.get("declarations", [])
            ],
            bindings={
                name: Binding.from_dict(b)
                for name, b in data.get("bindings", {}).items()
            },
            error=data.get("error"),
        )
