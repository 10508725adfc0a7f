"""Data models for custom-property definitions."""

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class SourcePosition:
    """A 1-based line/column position inside a stylesheet."""

    line: int
    column: int

    def to_dict(self) -> dict[str, int]:
        """Serialize the position to a plain record."""
        return {"line": self.line, "column": self.column}

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "SourcePosition":
        """Rebuild a position from a plain record."""
        return cls(line=int(data["line"]), column=int(data["column"]))


@dataclass(frozen=True)
class Binding:
    """A custom-property definition, local or pulled from an external file."""

    name: str
    value: str
    is_external: bool = False
    source_file: str | None = None
    start: SourcePosition | None = None
    end: SourcePosition | None = None

    def to_dict(self) -> dict[str, Any]:
        """Serialize the binding to a plain record."""
        return {
            "name": self.name,
            "value": self.value,
            "is_external": self.is_external,
            "source_file": self.source_file,
            "start": self.start.to_dict() if self.start else None,
            "end": self.end.to_dict() if self.end else None,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Binding":
        """Rebuild a binding from a plain record."""
        start = data.get("start")
        end = data.get("end")
        return cls(
            name=data["name"],
            value=data["value"],
            is_external=bool(data.get("is_external", False)),
            source_file=data.get("source_file"),
            start=SourcePosition.from_dict(start) if start else None,
            end=SourcePosition.from_dict(end) if end else None,
        )


BindingMap = dict[str, Binding]
