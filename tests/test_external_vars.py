"""Tests for the external variable cache."""

import pytest
from conftest import FakeReader

from token_propagation.external_vars import ExternalVarCache

EXT = "/project/theme.css"


def test_cache_parses_each_file_once() -> None:
    """Verify that repeated lookups reuse the first parse."""
    reader = FakeReader({EXT: ":root { --ink: red; }"})
    cache = ExternalVarCache(reader)

    first = cache.get(EXT)
    second = cache.get(EXT)

    assert first == second
    assert first["--ink"].is_external
    assert first["--ink"].source_file == EXT
    assert reader.calls == [EXT]


def test_cache_returns_copies() -> None:
    """Verify that callers cannot mutate cached entries."""
    cache = ExternalVarCache(FakeReader({EXT: ":root { --ink: red; }"}))
    cache.get(EXT).clear()
    assert "--ink" in cache.get(EXT)


def test_clear_forces_reparse() -> None:
    """Verify that clearing the cache drops every entry."""
    reader = FakeReader({EXT: ":root { --ink: red; }"})
    cache = ExternalVarCache(reader)
    cache.get(EXT)
    cache.clear()
    cache.get(EXT)
    assert reader.calls == [EXT, EXT]


def test_missing_file_is_not_cached() -> None:
    """Verify that read errors propagate and leave no entry behind."""
    reader = FakeReader({})
    cache = ExternalVarCache(reader)
    with pytest.raises(FileNotFoundError):
        cache.get(EXT)

    reader.files[EXT] = ":root { --ink: red; }"
    assert "--ink" in cache.get(EXT)
    assert reader.calls == [EXT, EXT]
