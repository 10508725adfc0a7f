"""Predicate for checking if a property name is a CSS custom property."""

CUSTOM_PROPERTY_PREFIX = "--"


def is_custom_property_name(name: str | None) -> bool:
    """Check if the property name defines a custom property (``--*``)."""
    return bool(name) and name.startswith(CUSTOM_PROPERTY_PREFIX)
