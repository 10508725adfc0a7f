"""Logic for loading and merging configuration files."""

import copy
import os
from pathlib import Path
from typing import Any

import yaml

from token_propagation.deep_merge import deep_merge
from token_propagation.errors import ConfigError

REPO_PATH_ENV = "TOKEN_PROPAGATION_REPO_PATH"

DEFAULT_CONFIG: dict[str, Any] = {
    "repo_path": ".",
    "design_token_keys": [],
    "design_token_keys_file": None,
    "design_token_properties": [
        "background-color",
        "border",
        "border-block-end",
        "border-block-end-color",
        "border-block-end-width",
        "border-block-start",
        "border-block-start-color",
        "border-block-start-width",
        "border-top",
        "border-right",
        "border-bottom",
        "border-left",
        "border-color",
        "border-width",
        "border-radius",
        "border-top-left-radius",
        "border-top-right-radius",
        "border-bottom-left-radius",
        "border-bottom-right-radius",
        "border-inline",
        "border-inline-color",
        "border-inline-end",
        "border-inline-end-color",
        "border-inline-end-width",
        "border-inline-start",
        "border-inline-start-color",
        "border-inline-start-width",
        "border-inline-width",
        "border-start-end-radius",
        "border-start-start-radius",
        "border-end-start-radius",
        "border-end-end-radius",
        "box-shadow",
        "color",
        "fill",
        "font-size",
        "font-weight",
        "inset",
        "inset-block",
        "inset-block-end",
        "inset-block-start",
        "inset-inline",
        "inset-inline-end",
        "inset-inline-start",
        "gap",
        "grid-gap",
        "margin",
        "margin-block",
        "margin-block-end",
        "margin-block-start",
        "margin-inline",
        "margin-inline-end",
        "margin-inline-start",
        "margin-top",
        "margin-right",
        "margin-bottom",
        "margin-left",
        "opacity",
        "outline",
        "outline-offset",
        "padding",
        "padding-block",
        "padding-block-end",
        "padding-block-start",
        "padding-inline",
        "padding-inline-end",
        "padding-inline-start",
        "padding-top",
        "padding-right",
        "padding-bottom",
        "padding-left",
        "row-gap",
    ],
    "include_patterns": ["**/*.css"],
    "ignore_patterns": [
        "**/node_modules/**",
        "**/storybook/**",
        "**/test/**",
        "**/tests/**",
    ],
    "external_var_mapping": {},
    "excluded_values": [
        {
            "property": "*",
            "values": [
                "0",
                "auto",
                {"pattern": r"calc(.*?)"},
                "currentColor",
                "inherit",
                "initial",
                {"pattern": r"max(.*?)"},
                "none",
                "transparent",
                "unset",
            ],
        },
    ],
}


def load_config(path: str | None = None) -> dict[str, Any]:
    """Load configuration from a YAML file and merge it with defaults.

    ``TOKEN_PROPAGATION_REPO_PATH`` in the environment overrides ``repo_path``.
    """
    config = copy.deepcopy(DEFAULT_CONFIG)
    if path:
        p = Path(path)
        if not p.exists():
            msg = f"Config file not found: {path}"
            raise ConfigError(msg)
        user_config = yaml.safe_load(p.read_text(encoding="utf-8")) or {}
        if not isinstance(user_config, dict):
            msg = f"Config file must hold a mapping: {path}"
            raise ConfigError(msg)
        config = deep_merge(config, user_config)
    env_repo = os.environ.get(REPO_PATH_ENV)
    if env_repo:
        config["repo_path"] = env_repo
    return config
