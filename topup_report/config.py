"""Input and output locations for the top-up report."""

from __future__ import annotations

import os
from pathlib import Path

from .config_manager import load_config

# Environment variables win over topup.toml, which wins over the defaults.
_files = load_config()

USERS_FILE = Path(os.environ.get("TOPUP_USERS_FILE", _files["users"]))
COMPANIES_FILE = Path(os.environ.get("TOPUP_COMPANIES_FILE", _files["companies"]))
OUTPUT_FILE = Path(os.environ.get("TOPUP_OUTPUT_FILE", _files["output"]))
