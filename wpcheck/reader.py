"""Read the installed version out of a version marker file."""

from __future__ import annotations

import logging
import re
from pathlib import Path

from wpcheck.config import WP_VERSION_VARIABLE

logger = logging.getLogger(__name__)


def _assignment_pattern(variable: str) -> re.Pattern[str]:
    """Match `$<variable> = '<value>'` anywhere, but not longer names like `$<variable>_x`."""
    return re.compile(rf"""(?<![\w$])\${re.escape(variable)}\s*=\s*(['"])([^'"]+)\1""")


def extract_version(content: str, variable: str = WP_VERSION_VARIABLE) -> str:
    """Extract the value assigned to variable from marker file content.

    The file is treated as plain text and is never executed. When the
    variable is assigned more than once the last assignment wins.
    """
    matches = _assignment_pattern(variable).findall(content)
    if not matches:
        return ""
    return matches[-1][1]


def read_installed_version(path: str | Path, variable: str = WP_VERSION_VARIABLE) -> str:
    """Figure out the installed version from a marker file.

    Returns an empty string if the file cannot be read or does not define
    the variable.
    """
    try:
        content = Path(path).read_text(encoding="utf-8", errors="replace")
    except OSError as e:
        logger.warning(f"Cannot read version file {path}: {e}")
        return ""

    version = extract_version(content, variable)
    if not version:
        logger.warning(f"No ${variable} assignment found in {path}")
    return version
