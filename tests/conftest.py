"""Shared fixtures for the propagation analyzer tests."""

from collections.abc import Callable
from typing import Any

import pytest

from token_propagation.excluded_values import parse_exclusion_rules
from token_propagation.propagation_config import PropagationConfig

REPO = "/project"

TOKEN_KEYS = (
    "--color-accent-primary",
    "--border-radius-medium",
    "--border-width",
)

TRACKED = frozenset({"color", "background-color", "border", "border-radius"})


class FakeReader:
    """In-memory file reader keyed by absolute path."""

    def __init__(self, files: dict[str, str]) -> None:
        """Store the file contents to serve."""
        self.files = files
        self.calls: list[str] = []

    def __call__(self, path: str) -> str:
        """Return the contents of ``path`` or raise like a real read."""
        self.calls.append(path)
        if path not in self.files:
            raise FileNotFoundError(path)
        return self.files[path]


@pytest.fixture
def make_config() -> Callable[..., PropagationConfig]:
    """Build a small config, overridable per test."""

    def _make(**overrides: Any) -> PropagationConfig:
        values: dict[str, Any] = {
            "repo_path": REPO,
            "design_token_keys": TOKEN_KEYS,
            "design_token_properties": TRACKED,
            "excluded_values": tuple(
                parse_exclusion_rules([{"property": "*", "values": ["inherit"]}])
            ),
            "external_var_mapping": {},
        }
        values.update(overrides)
        return PropagationConfig(**values)

    return _make
