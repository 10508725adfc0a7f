"""Exclusion rules for values that are ignored rather than scored.

A rule names a property (or ``*`` for any property) and a list of matchers.
Rules are checked in order and the first matcher that fires decides:

- ``ExactMatcher`` excludes a value equal to its text, ignoring case.
- ``NegatedMatcher`` (written ``"!value"`` in config) marks the value as
  explicitly not excluded and stops evaluation.
- ``PatternMatcher`` (written ``{pattern: "..."}`` in config) excludes values
  the regular expression finds a match in.
"""

import re
from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from typing import Any

from token_propagation.errors import ConfigError

WILDCARD = "*"
NEGATION_PREFIX = "!"


@dataclass(frozen=True)
class ExactMatcher:
    """Excludes a value equal to ``text`` (case-insensitive)."""

    text: str

    def decide(self, value: str) -> bool | None:
        """Return True on a match, None when this matcher has no opinion."""
        return True if value.strip().lower() == self.text.lower() else None


@dataclass(frozen=True)
class NegatedMatcher:
    """Marks a value equal to ``text`` (case-insensitive) as never excluded."""

    text: str

    def decide(self, value: str) -> bool | None:
        """Return False on a match, None when this matcher has no opinion."""
        return False if value.strip().lower() == self.text.lower() else None


@dataclass(frozen=True)
class PatternMatcher:
    """Excludes any value the compiled pattern is found in."""

    pattern: re.Pattern[str]

    def decide(self, value: str) -> bool | None:
        """Return True on a match, None when this matcher has no opinion."""
        return True if self.pattern.search(value) else None


Matcher = ExactMatcher | NegatedMatcher | PatternMatcher


@dataclass(frozen=True)
class ExclusionRule:
    """Matchers applied to one property name, or to every property."""

    property: str
    matchers: tuple[Matcher, ...]

    def applies_to(self, prop: str | None) -> bool:
        """Check if the rule covers the given property."""
        return self.property == WILDCARD or self.property == prop


def parse_matcher(raw: Any) -> Matcher:
    """Build a matcher from its config representation."""
    if isinstance(raw, dict):
        if "pattern" not in raw:
            msg = f"Exclusion matcher mapping needs a 'pattern' key: {raw!r}"
            raise ConfigError(msg)
        try:
            return PatternMatcher(re.compile(str(raw["pattern"])))
        except re.error as e:
            msg = f"Invalid exclusion pattern {raw['pattern']!r}: {e}"
            raise ConfigError(msg) from e
    if isinstance(raw, re.Pattern):
        return PatternMatcher(raw)
    if isinstance(raw, bool) or raw is None:
        msg = f"Unsupported exclusion matcher: {raw!r}"
        raise ConfigError(msg)
    if isinstance(raw, (str, int, float)):
        text = str(raw)
        if text.startswith(NEGATION_PREFIX):
            return NegatedMatcher(text[len(NEGATION_PREFIX) :])
        return ExactMatcher(text)
    msg = f"Unsupported exclusion matcher: {raw!r}"
    raise ConfigError(msg)


def parse_exclusion_rules(raw_rules: Iterable[Any]) -> list[ExclusionRule]:
    """Build the ordered rule list from the ``excluded_values`` config entry."""
    rules = []
    for raw in raw_rules:
        if not isinstance(raw, dict):
            msg = f"Exclusion rule must be a mapping: {raw!r}"
            raise ConfigError(msg)
        values = raw.get("values")
        if not isinstance(values, list) or not values:
            msg = f"Exclusion rule needs a non-empty 'values' list: {raw!r}"
            raise ConfigError(msg)
        rules.append(
            ExclusionRule(
                property=str(raw.get("property", WILDCARD)),
                matchers=tuple(parse_matcher(v) for v in values),
            )
        )
    return rules


def is_excluded_value(
    prop: str | None, value: str | None, rules: Sequence[ExclusionRule]
) -> bool:
    """Check if the declaration's value should be ignored for scoring."""
    if value is None:
        return False
    for rule in rules:
        if not rule.applies_to(prop):
            continue
        for matcher in rule.matchers:
            decision = matcher.decide(value)
            if decision is not None:
                return decision
    return False
