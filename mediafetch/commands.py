"""Checks for external commands through the system shell."""

from __future__ import annotations

import subprocess


def check_command(cmd: str) -> bool:
    """Return True if ``command -v cmd`` succeeds in ``sh``."""
    try:
        result = subprocess.run(
            ["sh", "-c", f"command -v {cmd}"],
            capture_output=True,
            check=False,
        )
    except OSError:
        return False
    return result.returncode == 0