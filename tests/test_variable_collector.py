"""Tests for binding and declaration collection."""

import logging

import pytest

from token_propagation.binding import Binding
from token_propagation.css_parser import parse_stylesheet
from token_propagation.variable_collector import (
    collect_local_bindings,
    collect_scoped_bindings,
)

TRACKED = {"color", "padding"}
FILE = "/project/a.css"

CSS = """\
:root {
  --space: 4px;
  --space: 8px;
}
:host, .other {
  --ink: red;
}
.btn {
  --local-only: blue;
  color: var(--ink);
  padding: var(--space);
  cursor: pointer;
}
"""


def test_collects_scoped_bindings_and_tracked_declarations() -> None:
    """Verify one pass yields root/host bindings and tracked declarations."""
    bindings: dict[str, Binding] = {}
    declarations = collect_local_bindings(
        parse_stylesheet(CSS), bindings, FILE, TRACKED
    )

    assert [(d.property, d.value) for d in declarations] == [
        ("color", "var(--ink)"),
        ("padding", "var(--space)"),
    ]
    assert set(bindings) == {"--space", "--ink"}
    assert bindings["--ink"].source_file == FILE
    assert not bindings["--ink"].is_external
    assert bindings["--space"].start is not None
    assert bindings["--space"].start.line == 2  # noqa: PLR2004


def test_first_local_definition_wins(caplog: pytest.LogCaptureFixture) -> None:
    """Verify that duplicate local definitions are skipped and logged."""
    bindings: dict[str, Binding] = {}
    with caplog.at_level(logging.INFO):
        collect_local_bindings(
            parse_stylesheet(CSS), bindings, FILE, TRACKED, display_path="a.css"
        )

    assert bindings["--space"].value == "4px"
    assert 'a.css:3 "--space" already exists, skipping...' in caplog.text


def test_local_definitions_do_not_override_external() -> None:
    """Verify that a pre-seeded external binding is kept."""
    external = Binding("--ink", "green", is_external=True, source_file="/b.css")
    bindings = {"--ink": external}
    collect_local_bindings(parse_stylesheet(CSS), bindings, FILE, TRACKED)
    assert bindings["--ink"] is external


def test_scoped_bindings_are_external_and_last_wins() -> None:
    """Verify the external collection pass flags and overwrites bindings."""
    bindings = collect_scoped_bindings(parse_stylesheet(CSS), "/project/ext.css")
    assert set(bindings) == {"--space", "--ink"}
    assert bindings["--space"].value == "8px"
    assert all(b.is_external for b in bindings.values())
    assert all(b.source_file == "/project/ext.css" for b in bindings.values())
