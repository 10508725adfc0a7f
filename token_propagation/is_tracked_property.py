"""Predicate for checking if a property is scored for token usage."""

from collections.abc import Collection


def is_tracked_property(prop: str, tracked: Collection[str]) -> bool:
    """Check if the property is on the tokenizable allow-list."""
    return prop in tracked
