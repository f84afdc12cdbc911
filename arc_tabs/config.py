"""Diagnostics switch (ARC_TABS_VERBOSE) and the stderr log helper."""

import os
import sys
from datetime import datetime


def _env_flag(name: str, default: bool = False) -> bool:
    value = os.environ.get(name)
    if value is None:
        return default
    return value.strip().lower() in {"1", "true", "yes", "on", "y"}


VERBOSE = _env_flag("ARC_TABS_VERBOSE", default=False)


def log(msg: str) -> None:
    # stderr only; stdout carries the rendered tabs
    if not VERBOSE:
        return
    ts = datetime.now().strftime("%Y-%m-%d %H:%M:%S")
    print(f"[arc_tabs] {ts} {msg}", file=sys.stderr)
