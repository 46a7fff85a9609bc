"""Optional TOML configuration for the report's file locations."""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Any, Dict, Optional

import toml

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_FILE = "topup.toml"

DEFAULT_FILES = {
    "users": "users.json",
    "companies": "companies.json",
    "output": "output.txt",
}


def config_path() -> Path:
    """``$TOPUP_CONFIG`` if set, else ``topup.toml`` in the working directory."""
    return Path(os.environ.get("TOPUP_CONFIG", DEFAULT_CONFIG_FILE)).expanduser()


def load_full_config(path: Optional[Path] = None) -> Dict[str, Any]:
    """Load the entire TOML config, or ``{}`` when absent or unreadable."""
    path = path or config_path()
    if not path.exists():
        return {}
    try:
        with open(path, "r", encoding="utf-8") as f:
            return toml.load(f)
    except (OSError, toml.TomlDecodeError) as exc:
        logger.warning("Ignoring config file %s: %s", path, exc)
        return {}


def load_config(path: Optional[Path] = None) -> Dict[str, str]:
    """Return the ``[files]`` table merged over the built-in defaults.

    Relative paths in the table are taken relative to the config file's
    own folder; the defaults stay relative to the working directory.
    """
    path = path or config_path()
    files = load_full_config(path).get("files", {})
    if not isinstance(files, dict):
        logger.warning("Ignoring [files] in config: expected a table")
        files = {}
    merged = DEFAULT_FILES.copy()
    merged.update({key: str(path.parent / str(value)) for key, value in files.items() if key in DEFAULT_FILES})
    return merged
