"""Process memory and size formatting helpers."""

from __future__ import annotations

import os
from pathlib import Path

_STATM_PATH = Path("/proc/self/statm")
_SUFFIXES = ("B", "KB", "MB", "GB", "TB")


def process_rss() -> int:
    """Resident set size of this process in bytes, or 0 when unknown."""
    try:
        fields = _STATM_PATH.read_text().split()
        resident = int(fields[1])
        page_size = os.sysconf("SC_PAGESIZE")
    except (OSError, ValueError, IndexError, AttributeError):
        return 0
    if page_size > 0 and resident > 0:
        return resident * page_size
    return 0


def format_bytes(size: int) -> str:
    """Render a byte count with one decimal, e.g. ``1.5 GB``."""
    value = float(size)
    index = 0
    while value >= 1024.0 and index < len(_SUFFIXES) - 1:
        value /= 1024.0
        index += 1
    return f"{value:.1f} {_SUFFIXES[index]}"