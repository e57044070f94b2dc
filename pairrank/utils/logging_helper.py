#!/usr/bin/env python
"""
logging_helper.py – one-call setup: file + stdout.

Usage:
    from pairrank.utils.logging_helper import get_logger
    log = get_logger()                  # derives name from caller's file
    log.info("It works")
"""

from __future__ import annotations
import inspect, logging, sys, os
from pathlib import Path

from .paths import LOG_DIR

DEF_FMT  = "%(asctime)s %(levelname)s [%(name)s] %(message)s"
DEF_DATE = "%Y-%m-%d %H:%M:%S"


def _env_level() -> int:
    name = os.environ.get("PAIRRANK_LOG_LEVEL", "INFO").upper()
    level = logging.getLevelName(name)
    return level if isinstance(level, int) else logging.INFO


def get_logger(level: int | None = None,
               log_dir: str | Path = LOG_DIR) -> logging.Logger:
    """
    Create (or return existing) logger whose name is the caller's module
    (e.g. 'insertion'). Writes to <log_dir>/<name>.log and echoes to stdout.
    """
    # ── derive name from caller ───────────────────────────────────────────
    caller = inspect.stack()[1]
    module = inspect.getmodule(caller[0])
    if module and module.__name__ != "__main__":
        name = module.__name__.split(".")[-1]
    else:
        # called as a script: use the file-stem (e.g., rank_items)
        name = os.path.splitext(os.path.basename(caller.filename))[0]

    logger = logging.getLogger(name)
    if logger.handlers:                 # already initialised
        return logger

    if level is None:
        level = _env_level()
    logger.setLevel(level)

    # console handler
    ch = logging.StreamHandler(sys.stdout)
    ch.setFormatter(logging.Formatter("[%(levelname)s] %(message)s"))
    ch.setLevel(level)
    logger.addHandler(ch)
    logger.propagate = False

    # file handler (read-only working dirs still get console logging)
    log_path = Path(log_dir) / f"{name}.log"
    try:
        Path(log_dir).mkdir(parents=True, exist_ok=True)
        fh = logging.FileHandler(log_path, encoding="utf-8")
    except OSError as e:
        logger.warning("File logging disabled (%s); set PAIRRANK_LOG_DIR to a writable folder", e)
        return logger
    fh.setFormatter(logging.Formatter(DEF_FMT, DEF_DATE))
    fh.setLevel(level)
    logger.addHandler(fh)
    return logger
