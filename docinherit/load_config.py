"""Logic for loading and merging configuration files."""

from pathlib import Path
from typing import Any

import yaml

from docinherit.deep_merge import deep_merge
from docinherit.diagnostic_report import INHERIT_DOC_WITHIN_INAPPROPRIATE_TAG

DEFAULT_CONFIG: dict[str, Any] = {
    "render": {
        "api_root": "/api",
        "throws_header": "#### Exceptions",
        "see_header": "#### See Also",
        "include_inherited_members": True,
    },
    "inheritance": {
        "first_sentence": False,
    },
    "throws": {
        "dedupe_within_call": True,
    },
    "messages": {
        INHERIT_DOC_WITHIN_INAPPROPRIATE_TAG: (
            "@inheritDoc cannot be combined with other content in this tag"
        ),
    },
    "suppressed_errors": [],
}


def load_config(path: str | None = None) -> dict[str, Any]:
    """Load configuration from a YAML file and merge it with defaults."""
    config = deep_merge(DEFAULT_CONFIG, {})
    if path:
        p = Path(path)
        if p.exists():
            user_config = yaml.safe_load(p.read_text(encoding="utf-8")) or {}
            config = deep_merge(config, user_config)
    return config
