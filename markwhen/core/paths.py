#!/usr/bin/env python3
"""
paths.py
-------------------
Path constants for the markwhen project.

Paths are resolved at import time relative to the project root:
    ROOT/
    ├── markwhen/      # Package source
    ├── logs/          # Application logs
    └── out/           # Default export directory
"""
# --- Annotations ---
from __future__ import annotations

# --- Standard library imports ---
from pathlib import Path


def _get_project_root() -> Path:
    """
    Determine project root directory.

    Assumes this file is at ROOT/markwhen/core/paths.py.
    """
    # paths.py -> core/ -> markwhen/ -> ROOT/
    return Path(__file__).resolve().parent.parent.parent


# ----- Project directory -----
ROOT: Path = _get_project_root()

# ---- Logs & Output ----
LOG_DIR = ROOT / "logs"
OUTPUT_DIR = ROOT / "out"

# ---- Input ----
TIMELINE_SUFFIXES = (".mw", ".markwhen")
