"""Typed configuration threaded through the analyzer."""

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import yaml

from token_propagation.errors import ConfigError
from token_propagation.excluded_values import ExclusionRule, parse_exclusion_rules


@dataclass(frozen=True)
class PropagationConfig:
    """Settings for one analysis run."""

    repo_path: str
    design_token_keys: tuple[str, ...] = ()
    design_token_properties: frozenset[str] = frozenset()
    excluded_values: tuple[ExclusionRule, ...] = ()
    external_var_mapping: dict[str, list[str]] = field(default_factory=dict)
    include_patterns: tuple[str, ...] = ("**/*.css",)
    ignore_patterns: tuple[str, ...] = ()

    @classmethod
    def from_dict(cls, config: dict[str, Any]) -> "PropagationConfig":
        """Build the typed config from a dict produced by ``load_config``."""
        keys = list(config.get("design_token_keys") or [])
        keys_file = config.get("design_token_keys_file")
        if keys_file:
            keys.extend(load_token_keys(keys_file))

        mapping = config.get("external_var_mapping") or {}
        if not isinstance(mapping, dict):
            msg = "external_var_mapping must map glob patterns to file lists"
            raise ConfigError(msg)

        return cls(
            repo_path=os.path.abspath(config.get("repo_path") or "."),
            design_token_keys=tuple(dict.fromkeys(str(k) for k in keys)),
            design_token_properties=frozenset(
                config.get("design_token_properties") or []
            ),
            excluded_values=tuple(
                parse_exclusion_rules(config.get("excluded_values") or [])
            ),
            external_var_mapping={
                str(pattern): [str(p) for p in (paths or [])]
                for pattern, paths in mapping.items()
            },
            include_patterns=tuple(config.get("include_patterns") or ["**/*.css"]),
            ignore_patterns=tuple(config.get("ignore_patterns") or []),
        )


def load_token_keys(path: str) -> list[str]:
    """Read design token names from a YAML or JSON file.

    Accepts a plain list of names, or a mapping of table name to a list of
    entries that are names or ``{name: ...}`` records.
    """
    p = Path(path)
    if not p.exists():
        msg = f"Design token keys file not found: {path}"
        raise ConfigError(msg)
    data = yaml.safe_load(p.read_text(encoding="utf-8")) or []
    tables = data.values() if isinstance(data, dict) else [data]

    names = []
    for table in tables:
        if not isinstance(table, list):
            msg = f"Token table in {path} must be a list"
            raise ConfigError(msg)
        for entry in table:
            name = entry.get("name") if isinstance(entry, dict) else entry
            if not name:
                msg = f"Token entry without a name in {path}: {entry!r}"
                raise ConfigError(msg)
            names.append(str(name))
    return names
