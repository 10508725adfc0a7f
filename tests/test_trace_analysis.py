"""Tests for trace classification and annotation."""

from token_propagation.binding import Binding
from token_propagation.excluded_values import parse_exclusion_rules
from token_propagation.trace_analysis import (
    analyze_trace,
    classify_resolution_from_trace,
    get_resolution_sources,
    get_resolved_var_origins,
    get_unresolved_variables_from_trace,
)

REPO = "/project"
CURRENT = "/project/src/components/button.css"
EXTERNAL = "/project/tokens/spacing.css"
TOKENS = ["--color-primary"]


def _local(name: str, value: str) -> Binding:
    return Binding(name, value, source_file=CURRENT)


def _external(name: str, value: str) -> Binding:
    return Binding(name, value, is_external=True, source_file=EXTERNAL)


def test_analyze_trace_detects_tokens_and_exclusions() -> None:
    """Verify that any step can carry a token or an excluded value."""
    rules = parse_exclusion_rules([{"values": ["inherit"]}])
    result = analyze_trace(["var(--color-primary)", "inherit"], "color", TOKENS, rules)
    assert result.contains_design_token
    assert result.contains_excluded_value

    plain = analyze_trace(["var(--a)", "12px"], "color", TOKENS, rules)
    assert not plain.contains_design_token
    assert not plain.contains_excluded_value


def test_analyze_trace_uses_declaration_property_for_rules() -> None:
    """Verify that property-specific rules see the declaration's property."""
    rules = parse_exclusion_rules([{"property": "opacity", "values": ["1"]}])
    opacity = analyze_trace(["var(--o)", "1"], "opacity", TOKENS, rules)
    weight = analyze_trace(["1"], "font-weight", TOKENS, rules)
    assert opacity.contains_excluded_value
    assert not weight.contains_excluded_value


def test_classify_direct_without_references() -> None:
    """Verify that literal values are direct."""
    assert classify_resolution_from_trace(["12px"], {}, CURRENT) == "direct"


def test_classify_local() -> None:
    """Verify that current-file bindings are local."""
    bindings = {"--a": _local("--a", "12px")}
    trace = ["var(--a)", "12px"]
    assert classify_resolution_from_trace(trace, bindings, CURRENT) == "local"


def test_classify_external() -> None:
    """Verify that other-file bindings are external."""
    bindings = {"--a": _external("--a", "12px")}
    assert (
        classify_resolution_from_trace(["var(--a)", "12px"], bindings, CURRENT)
        == "external"
    )


def test_classify_mixed() -> None:
    """Verify that local and external bindings together are mixed."""
    bindings = {"--a": _local("--a", "var(--b)"), "--b": _external("--b", "12px")}
    trace = ["var(--a)", "var(--b)", "12px"]
    assert classify_resolution_from_trace(trace, bindings, CURRENT) == "mixed"


def test_classify_unbound_names_do_not_contribute() -> None:
    """Verify that unresolved references alone classify as local."""
    assert classify_resolution_from_trace(["var(--nope)"], {}, CURRENT) == "local"


def test_resolution_sources_are_relative_and_deduplicated() -> None:
    """Verify source files of external values appearing in the trace."""
    bindings = {
        "--a": _local("--a", "var(--b)"),
        "--b": _external("--b", "var(--c)"),
        "--c": _external("--c", "12px"),
        "--unused": _external("--unused", "99px"),
    }
    trace = ["var(--a)", "var(--b)", "var(--c)", "12px"]
    assert get_resolution_sources(trace, bindings, CURRENT, REPO) == [
        "tokens/spacing.css"
    ]


def test_resolution_sources_ignore_current_file() -> None:
    """Verify that local values are not reported as sources."""
    bindings = {"--a": _local("--a", "12px")}
    assert get_resolution_sources(["var(--a)", "12px"], bindings, CURRENT, REPO) == []


def test_unresolved_variables_exclude_tokens_and_bound_names() -> None:
    """Verify that only truly missing names are reported."""
    trace = ["var(--unknown) var(--color-primary) var(--a)", "x"]
    bindings = {"--a": _local("--a", "x")}
    assert get_unresolved_variables_from_trace(trace, bindings, TOKENS) == [
        "--unknown"
    ]


def test_unresolved_variable_without_bindings() -> None:
    """Verify the single missing reference case."""
    assert get_unresolved_variables_from_trace(["var(--x)"], {}, TOKENS) == ["--x"]


def test_resolved_var_origins() -> None:
    """Verify the map of referenced names to their defining files."""
    bindings = {
        "--a": _external("--a", "var(--b)"),
        "--b": _external("--b", "4px"),
        "--c": Binding("--c", "1px"),
    }
    trace = ["var(--a) var(--c, 2px)", "var(--b) var(--c, 2px)", "4px var(--c, 2px)"]
    assert get_resolved_var_origins(trace, bindings, REPO) == {
        "--a": "tokens/spacing.css",
        "--b": "tokens/spacing.css",
    }


def test_resolved_var_origins_skip_fallback_calls() -> None:
    """Verify that fallback-bearing calls are not treated as resolved."""
    bindings = {"--a": _external("--a", "4px")}
    assert get_resolved_var_origins(["var(--a, 1px)"], bindings, REPO) == {}
