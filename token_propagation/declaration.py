"""Data model for a tracked style declaration and its resolution."""

from dataclasses import dataclass, field
from typing import Any, Literal

from token_propagation.binding import SourcePosition

ResolutionType = Literal["direct", "local", "external", "mixed"]


@dataclass
class Declaration:
    """A tracked property occurrence plus the fields derived while resolving it."""

    property: str
    value: str
    start: SourcePosition | None = None
    end: SourcePosition | None = None
    resolution_trace: list[str] = field(default_factory=list)
    contains_design_token: bool = False
    contains_excluded_value: bool = False
    resolution_type: ResolutionType = "direct"
    resolution_sources: list[str] = field(default_factory=list)
    unresolved_variables: list[str] = field(default_factory=list)
    resolved_from: dict[str, str] = field(default_factory=dict)

    @property
    def is_ignored(self) -> bool:
        """Whether the value is meant to be ignored rather than penalized."""
        return self.contains_excluded_value and not self.contains_design_token

    def to_dict(self) -> dict[str, Any]:
        """Serialize the declaration to a plain record."""
        return {
            "property": self.property,
            "value": self.value,
            "start": self.start.to_dict() if self.start else None,
            "end": self.end.to_dict() if self.end else None,
            "resolution_trace": list(self.resolution_trace),
            "contains_design_token": self.contains_design_token,
            "contains_excluded_value": self.contains_excluded_value,
            "resolution_type": self.resolution_type,
            "resolution_sources": list(self.resolution_sources),
            "unresolved_variables": list(self.unresolved_variables),
            "resolved_from": dict(self.resolved_from),
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Declaration":
        """Rebuild a declaration from a plain record."""
        start = data.get("start")
        end = data.get("end")
        return cls(
            property=data["property"],
            value=data["value"],
            start=SourcePosition.from_dict(start) if start else None,
            end=SourcePosition.from_dict(end) if end else None,
            resolution_trace=list(data.get("resolution_trace", [])),
            contains_design_token=bool(data.get("contains_design_token", False)),
            contains_excluded_value=bool(data.get("contains_excluded_value", False)),
            resolution_type=data.get("resolution_type", "direct"),
            resolution_sources=list(data.get("resolution_sources", [])),
            unresolved_variables=list(data.get("unresolved_variables", [])),
            resolved_from=dict(data.get("resolved_from", {})),
        )
