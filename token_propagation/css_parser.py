"""Adapter turning stylesheet text into a walkable list of declaration nodes.

Parsing is delegated to tinycss2. The rest of the analyzer only depends on
``StylesheetNode`` (property, value, enclosing rule, source span) and the
``ParsedStylesheet.walk`` traversal.
"""

import logging
from collections.abc import Callable
from dataclasses import dataclass, field
from typing import Any

import tinycss2

from token_propagation.binding import SourcePosition
from token_propagation.errors import StylesheetParseError

logger = logging.getLogger(__name__)

# At-rules whose block holds declarations rather than rules.
DECLARATION_AT_RULES = {
    "font-face",
    "page",
    "property",
    "counter-style",
    "font-palette-values",
    "viewport",
}


@dataclass(frozen=True)
class RuleContext:
    """The rule enclosing a declaration: a style rule or an at-rule.

    ``selector`` holds the selector list of a style rule, or the at-keyword
    and prelude of an at-rule (``@media (width > 1px)``).
    """

    type: str  # "rule" or "atrule"
    selector: str = ""


@dataclass(frozen=True)
class StylesheetNode:
    """A declaration-like node: ``prop: value`` inside ``parent``."""

    prop: str
    value: str
    parent: RuleContext | None
    start: SourcePosition
    end: SourcePosition


@dataclass
class ParsedStylesheet:
    """Declaration nodes of one stylesheet in depth-first document order."""

    nodes: list[StylesheetNode] = field(default_factory=list)

    def walk(self, visit: Callable[[StylesheetNode], None]) -> None:
        """Call ``visit`` for every declaration node."""
        for node in self.nodes:
            visit(node)


def parse_stylesheet(css: str, source: str = "<string>") -> ParsedStylesheet:
    """Parse stylesheet text into a ``ParsedStylesheet``.

    Raises ``StylesheetParseError`` for errors at the top level of the sheet.
    Invalid declarations inside a block are skipped.
    """
    rules = tinycss2.parse_stylesheet(css, skip_comments=True, skip_whitespace=True)
    sheet = ParsedStylesheet()
    for rule in rules:
        if rule.type == "error":
            msg = (
                f"{source}:{rule.source_line}:{rule.source_column} "
                f"{rule.kind}: {rule.message}"
            )
            raise StylesheetParseError(msg)
        _visit_rule(rule, sheet, source, nested=False)
    return sheet


def _visit_rule(rule: Any, sheet: ParsedStylesheet, source: str, nested: bool) -> None:
    if rule.type == "qualified-rule":
        context = RuleContext("rule", selector=tinycss2.serialize(rule.prelude).strip())
        items = tinycss2.parse_blocks_contents(
            rule.content, skip_comments=True, skip_whitespace=True
        )
        _visit_block(items, context, sheet, source)
    elif rule.type == "at-rule" and rule.content is not None:
        header = f"@{rule.at_keyword} {tinycss2.serialize(rule.prelude).strip()}"
        context = RuleContext("atrule", selector=header.strip())
        if nested or rule.lower_at_keyword in DECLARATION_AT_RULES:
            items = tinycss2.parse_blocks_contents(
                rule.content, skip_comments=True, skip_whitespace=True
            )
        else:
            items = tinycss2.parse_rule_list(
                rule.content, skip_comments=True, skip_whitespace=True
            )
        _visit_block(items, context, sheet, source)


def _visit_block(
    items: list[Any], context: RuleContext, sheet: ParsedStylesheet, source: str
) -> None:
    for item in items:
        if item.type == "declaration":
            sheet.nodes.append(_to_node(item, context))
        elif item.type == "error":
            logger.debug(
                "%s:%s skipping invalid content: %s",
                source,
                item.source_line,
                item.message,
            )
        else:
            _visit_rule(item, sheet, source, nested=True)


def _to_node(decl: Any, context: RuleContext) -> StylesheetNode:
    start = SourcePosition(decl.source_line, decl.source_column)
    return StylesheetNode(
        prop=decl.name,
        value=tinycss2.serialize(_drop_comments(decl.value)).strip(),
        parent=context,
        start=start,
        end=_end_position(decl.value, start),
    )


def _drop_comments(tokens: list[Any]) -> list[Any]:
    """Remove comments and the doubled whitespace they leave behind."""
    cleaned: list[Any] = []
    for token in tokens:
        if token.type == "comment":
            continue
        doubled = cleaned and cleaned[-1].type == "whitespace"
        if token.type == "whitespace" and doubled:
            continue
        cleaned.append(token)
    return cleaned


def _end_position(tokens: list[Any], start: SourcePosition) -> SourcePosition:
    """Position of the last character of the value, or ``start`` if empty."""
    meaningful = [t for t in tokens if t.type not in {"whitespace", "comment"}]
    if not meaningful:
        return start
    last = meaningful[-1]
    text = tinycss2.serialize([last])
    if "\n" in text:
        return SourcePosition(
            last.source_line + text.count("\n"), len(text.rsplit("\n", 1)[1])
        )
    return SourcePosition(last.source_line, last.source_column + len(text) - 1)
