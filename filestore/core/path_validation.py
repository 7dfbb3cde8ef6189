"""Key validation and filename sanitizing for stored content."""

import re
from datetime import datetime

# Runs of anything other than word characters and dots collapse to one underscore
UNSAFE_FILENAME_CHARS = re.compile(r"[^A-Za-z0-9_.]+")

# Parent-directory segment; its presence anywhere in a key rejects it
TRAVERSAL_SEGMENT = "../"

DEFAULT_FILENAME = "file"


def is_valid_path(key: str | None) -> bool:
    """Return False for blank keys and keys that could climb out of the root."""
    if key is None or not str(key).strip():
        return False
    return TRAVERSAL_SEGMENT not in str(key)


def sanitize_filename(filename: str) -> str:
    """Replace separators and other unsafe characters so the name stays one path segment."""
    return UNSAFE_FILENAME_CHARS.sub("_", filename)


def time_bucketed_path(filename: str | None, now: datetime | None = None) -> str:
    """
    Build YYYY/MM/DD/HH_MM_SS_mmm_<name> for auto-named content.
    mmm is the millisecond part of `now`, zero padded.
    """
    now = now or datetime.now()
    msec = now.microsecond // 1000
    name = sanitize_filename(filename or DEFAULT_FILENAME)
    return f"{now.strftime('%Y/%m/%d/%H_%M_%S')}_{msec:03d}_{name}"
