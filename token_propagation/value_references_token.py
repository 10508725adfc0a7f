"""Predicate for checking if a value mentions a design token."""

from collections.abc import Iterable


def value_references_token(value: str | None, token_keys: Iterable[str]) -> bool:
    """Check if any design token key appears in the value."""
    if not value:
        return False
    return any(token in value for token in token_keys)
