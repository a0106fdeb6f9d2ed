"""Parsing and display of download progress lines."""

from __future__ import annotations

import math
import re

_PROGRESS_RE = re.compile(
    r"""
    \[download\]\s*
    (?P<percent>\d+(?:\.\d+)?)%\s+of\s+
    (?P<size>\d+(?:\.\d+)?)
    (?P<unit>KiB|MiB|GiB)
    """,
    re.VERBOSE,
)

_MULTIPLIERS = {
    "KiB": 1024.0,
    "MiB": 1024.0 * 1024.0,
    "GiB": 1024.0 * 1024.0 * 1024.0,
}

_MB_DIVISOR = 1024.0 * 1024.0
_BAR_LENGTH = 10


def parse_progress(line: str) -> tuple[int, int] | None:
    """Extract ``(downloaded_bytes, total_bytes)`` from a download line.

    Returns None when the line holds no usable progress information.
    """
    if "[download]" not in line:
        return None
    match = _PROGRESS_RE.search(line)
    if match is None:
        return None
    percent = float(match["percent"])
    size = float(match["size"])
    multiplier = _MULTIPLIERS[match["unit"]]
    total_bytes = int(size * multiplier)
    downloaded_bytes = int((percent / 100.0) * size * multiplier)
    return downloaded_bytes, total_bytes


def format_progress(current_bytes: int, total_bytes: int) -> str:
    """Render progress as a ten-character bar, a percentage and sizes in MB."""
    if current_bytes < 0 or total_bytes < 0:
        raise ValueError("byte counts must not be negative")
    if total_bytes > 0:
        percent = math.floor(current_bytes / total_bytes * 100.0 + 0.5)
    else:
        percent = 0
    if percent > 100:
        raise ValueError("current byte count exceeds the total")

    filled = percent * _BAR_LENGTH // 100
    bar = f"[{'#' * filled}{'.' * (_BAR_LENGTH - filled)}]"
    current_mb = current_bytes / _MB_DIVISOR
    total_mb = total_bytes / _MB_DIVISOR
    return f"{bar} {percent}% ({current_mb:.1f}MB / {total_mb:.1f}MB)"


def show_progress_line(line: str) -> tuple[int, int] | None:
    """Parse a line, print its formatted progress and return the parsed values."""
    parsed = parse_progress(line)
    if parsed is None:
        return None
    print(format_progress(*parsed))
    return parsed