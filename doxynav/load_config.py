"""Logic for loading and merging configuration files."""

import copy
from pathlib import Path
from typing import Any

import yaml

from doxynav.deep_merge import deep_merge

DEFAULT_CONFIG: dict[str, Any] = {
    "validation": {
        "allow_missing_href": False,
        "warn_duplicate_href": True,
        "max_depth": 8,
    },
    "coverage": {
        "fail_under": 0.0,
        "kinds": ["typedef", "struct", "enum", "enumerator"],
    },
    "output": {
        "json_indent": 2,
        "base_url": "",
    },
    "ignore_symbols": [],
}


def load_config(path: str | None = None) -> dict[str, Any]:
    """Load configuration from a YAML file and merge it with defaults."""
    config = copy.deepcopy(DEFAULT_CONFIG)
    if path:
        p = Path(path)
        if p.exists():
            user_config = yaml.safe_load(p.read_text(encoding="utf-8")) or {}
            config = deep_merge(config, user_config)
    return config
