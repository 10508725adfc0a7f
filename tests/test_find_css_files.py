"""Tests for stylesheet discovery."""

from pathlib import Path

from token_propagation.find_css_files import find_css_files
from token_propagation.load_config import DEFAULT_CONFIG


def _touch(root: Path, rel: str) -> None:
    path = root / rel
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text("a { color: red; }", encoding="utf-8")


def test_find_css_files_applies_default_ignores(tmp_path: Path) -> None:
    """Verify discovery with the default include and ignore globs."""
    for rel in [
        "main.css",
        "src/components/button.css",
        "src/components/button.js",
        "node_modules/lib/lib.css",
        "tests/fixture.css",
        "src/storybook/story.css",
    ]:
        _touch(tmp_path, rel)

    found = find_css_files(
        str(tmp_path),
        DEFAULT_CONFIG["include_patterns"],
        DEFAULT_CONFIG["ignore_patterns"],
    )
    assert found == [
        str(tmp_path.resolve() / "main.css"),
        str(tmp_path.resolve() / "src/components/button.css"),
    ]


def test_find_css_files_deduplicates_overlapping_includes(tmp_path: Path) -> None:
    """Verify that a file matched by two include globs is listed once."""
    _touch(tmp_path, "src/a.css")
    found = find_css_files(str(tmp_path), ["**/*.css", "src/*.css"])
    assert found == [str(tmp_path.resolve() / "src/a.css")]


def test_find_css_files_empty_repo(tmp_path: Path) -> None:
    """Verify that an empty tree yields no files."""
    assert find_css_files(str(tmp_path)) == []


def test_ignore_globs_respect_segment_boundaries(tmp_path: Path) -> None:
    """Verify that ignore globs match whole directory names only."""
    for rel in ["vendor/a.css", "src/vendor/b.css", "notvendor/c.css"]:
        _touch(tmp_path, rel)

    found = find_css_files(str(tmp_path), ["**/*.css"], ["**/vendor/**"])
    assert found == [str(tmp_path.resolve() / "notvendor/c.css")]
