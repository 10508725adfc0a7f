"""Classification and annotation of finished resolution traces."""

from collections.abc import Iterable, Mapping, Sequence
from dataclasses import dataclass

from token_propagation.binding import Binding
from token_propagation.css_variables import get_css_variables, var_call
from token_propagation.declaration import ResolutionType
from token_propagation.excluded_values import ExclusionRule, is_excluded_value
from token_propagation.path_utils import relative_to_repo
from token_propagation.value_references_token import value_references_token


@dataclass(frozen=True)
class TraceAnalysis:
    """Whether any step of a trace holds a token or an excluded value."""

    contains_design_token: bool
    contains_excluded_value: bool


def analyze_trace(
    trace: Sequence[str],
    prop: str | None,
    token_keys: Sequence[str],
    rules: Sequence[ExclusionRule],
) -> TraceAnalysis:
    """Check every trace step for design tokens and excluded values."""
    return TraceAnalysis(
        contains_design_token=any(
            value_references_token(step, token_keys) for step in trace
        ),
        contains_excluded_value=any(
            is_excluded_value(prop, step, rules) for step in trace
        ),
    )


def referenced_names(trace: Iterable[str]) -> list[str]:
    """Distinct custom-property names referenced anywhere in the trace."""
    seen: dict[str, None] = {}
    for step in trace:
        for name in get_css_variables(step):
            seen.setdefault(name, None)
    return list(seen)


def _is_external_to(binding: Binding, current_file: str) -> bool:
    return bool(binding.source_file) and binding.source_file != current_file


def classify_resolution_from_trace(
    trace: Sequence[str], bindings: Mapping[str, Binding], current_file: str
) -> ResolutionType:
    """Classify where the references in a trace were defined.

    ``direct`` when nothing is referenced. Names without a binding are
    ignored here; they are reported as unresolved instead.
    """
    names = referenced_names(trace)
    if not names:
        return "direct"

    sources: set[str] = set()
    for name in names:
        binding = bindings.get(name)
        if binding is None:
            continue
        sources.add("external" if _is_external_to(binding, current_file) else "local")

    if {"local", "external"} <= sources:
        return "mixed"
    if "external" in sources:
        return "external"
    return "local"


def get_resolution_sources(
    trace: Sequence[str],
    bindings: Mapping[str, Binding],
    current_file: str,
    repo_path: str,
) -> list[str]:
    """Relative paths of other files whose definitions appear in the trace."""
    sources: dict[str, None] = {}
    for binding in bindings.values():
        if _is_external_to(binding, current_file) and binding.value in trace:
            sources.setdefault(relative_to_repo(binding.source_file, repo_path), None)
    return list(sources)


def get_unresolved_variables_from_trace(
    trace: Sequence[str], bindings: Mapping[str, Binding], token_keys: Sequence[str]
) -> list[str]:
    """Referenced names with no binding that are not design tokens."""
    return [
        name
        for name in referenced_names(trace)
        if name not in bindings and not value_references_token(name, token_keys)
    ]


def get_resolved_var_origins(
    trace: Sequence[str], bindings: Mapping[str, Binding], repo_path: str
) -> dict[str, str]:
    """Map each directly referenced name to the relative file defining it."""
    origins: dict[str, str] = {}
    for step in trace:
        for name in get_css_variables(step):
            binding = bindings.get(name)
            if binding is None or not binding.source_file:
                continue
            if var_call(name) in step:
                origins[name] = relative_to_repo(binding.source_file, repo_path)
    return origins
