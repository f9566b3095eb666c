"""Utility for turning display names into file name segments."""

import re

# Keep letters, digits, underscore, dash and dot; everything else becomes "_".
BAD_FILENAME_CHARS_RE = re.compile(r"[^A-Za-z0-9_.-]")


def safe_filename_for_name(name: str) -> str:
    """Make a display name safe for use inside a file name."""
    return BAD_FILENAME_CHARS_RE.sub("_", name)
