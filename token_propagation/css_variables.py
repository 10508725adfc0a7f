"""Extraction of custom-property references from CSS values."""

import re

VAR_REFERENCE_RE = re.compile(r"var\(\s*(--[\w-]+)")


def get_css_variables(value: str | None) -> list[str]:
    """Return the custom-property names referenced in a value, in order.

    ``var(--a, var(--b))`` yields ``["--a", "--b"]``; fallback values are not
    otherwise interpreted.
    """
    if not value:
        return []
    return VAR_REFERENCE_RE.findall(value)


def var_call(name: str) -> str:
    """Return the exact no-fallback reference form for a custom property."""
    return f"var({name})"
