"""Collection of custom-property bindings and tracked declarations."""

import logging
from collections.abc import Collection

from token_propagation.binding import Binding, BindingMap
from token_propagation.css_parser import ParsedStylesheet, StylesheetNode
from token_propagation.declaration import Declaration
from token_propagation.is_custom_property_name import is_custom_property_name
from token_propagation.is_tracked_property import is_tracked_property
from token_propagation.is_within_tracked_scope import is_within_tracked_scope

logger = logging.getLogger(__name__)


def make_binding(
    node: StylesheetNode, source_file: str, is_external: bool = False
) -> Binding:
    """Build a binding from a custom-property definition node."""
    return Binding(
        name=node.prop,
        value=node.value,
        is_external=is_external,
        source_file=source_file,
        start=node.start,
        end=node.end,
    )


def is_scoped_definition(node: StylesheetNode) -> bool:
    """Check if the node defines a custom property in ``:root``/``:host``."""
    return is_custom_property_name(node.prop) and is_within_tracked_scope(node)


def collect_local_bindings(
    stylesheet: ParsedStylesheet,
    bindings: BindingMap,
    file_path: str,
    tracked_properties: Collection[str],
    display_path: str | None = None,
) -> list[Declaration]:
    """Walk the sheet once, adding local bindings and returning declarations.

    ``bindings`` is updated in place. A name that is already bound, by an
    external file or an earlier local definition, is kept as is.
    """
    declarations: list[Declaration] = []

    def visit(node: StylesheetNode) -> None:
        if not node.prop or not node.value:
            return
        if is_tracked_property(node.prop, tracked_properties):
            declarations.append(
                Declaration(
                    property=node.prop,
                    value=node.value,
                    start=node.start,
                    end=node.end,
                )
            )
        elif is_scoped_definition(node):
            if node.prop in bindings:
                logger.info(
                    '%s:%s "%s" already exists, skipping...',
                    display_path or file_path,
                    node.start.line,
                    node.prop,
                )
            else:
                bindings[node.prop] = make_binding(node, file_path)

    stylesheet.walk(visit)
    return declarations


def collect_scoped_bindings(
    stylesheet: ParsedStylesheet, source_file: str
) -> BindingMap:
    """Return every in-scope definition of a sheet as an external binding.

    Later definitions of the same name replace earlier ones.
    """
    bindings: BindingMap = {}

    def visit(node: StylesheetNode) -> None:
        if is_scoped_definition(node):
            bindings[node.prop] = make_binding(node, source_file, is_external=True)

    stylesheet.walk(visit)
    return bindings
