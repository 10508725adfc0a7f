"""Logic for fingerprinting the analysis settings of a configuration."""

import hashlib
import json
from typing import Any

# Keys that locate the input rather than change how it is scored.
LOCATION_KEYS = {"repo_path", "design_token_keys_file"}


def compute_config_hash(config: dict[str, Any]) -> str:
    """Compute a stable hash of the scoring-relevant configuration.

    Uses canonical JSON (sorted keys); values JSON cannot encode are
    stringified.
    """
    relevant = {k: v for k, v in config.items() if k not in LOCATION_KEYS}
    config_json = json.dumps(relevant, sort_keys=True, ensure_ascii=True, default=str)
    return hashlib.sha256(config_json.encode("utf-8")).hexdigest()
