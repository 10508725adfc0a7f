"""Predicate for checking if a declaration sits in a global scope selector."""

import re

from token_propagation.css_parser import StylesheetNode

SCOPE_SELECTOR_RE = re.compile(r"^(?::root|:host)$", re.IGNORECASE)


def is_within_tracked_scope(node: StylesheetNode) -> bool:
    """Check if the node's parent rule targets ``:root`` or ``:host``."""
    parent = node.parent
    if parent is None or parent.type != "rule":
        return False
    return any(
        SCOPE_SELECTOR_RE.match(selector.strip())
        for selector in parent.selector.split(",")
    )
