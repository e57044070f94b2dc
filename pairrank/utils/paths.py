#!/usr/bin/env python
"""
paths.py – single source of truth for project folders.
           Import these constants everywhere.
"""

import os
from pathlib import Path

# Try to get root from environment variable first
ROOT = os.environ.get('PAIRRANK_ROOT')
if ROOT:
    ROOT = Path(ROOT).resolve()
else:
    # Fallback: look for a marker file (like .git or pyproject.toml) in parent directories
    current = Path(__file__).resolve()
    while current.parent != current:
        if any((current / marker).exists() for marker in ['.git', 'pyproject.toml', 'README.md']):
            ROOT = current
            break
        current = current.parent
    else:
        # installed outside a checkout: work relative to where we were started
        ROOT = Path.cwd().resolve()

LOG_DIR = Path(os.environ.get('PAIRRANK_LOG_DIR') or ROOT / "logs")


def env_flag(name: str, default: bool = False) -> bool:
    """Read a boolean switch such as ``PAIRRANK_STRICT=1`` from the environment."""
    raw = os.environ.get(name)
    if raw is None or raw.strip() == "":
        return default
    return raw.strip().lower() in ("1", "true", "yes", "on")
