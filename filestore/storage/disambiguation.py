"""Alternate filenames for paths that are already taken."""

import os
import random
import time

SUFFIX_DIGITS = "0123456789abcdefghijklmnopqrstuv"


def to_base32(number: int) -> str:
    """Render a non-negative int with digits 0-9a-v."""
    if number == 0:
        return SUFFIX_DIGITS[0]
    digits = []
    while number:
        number, rem = divmod(number, 32)
        digits.append(SUFFIX_DIGITS[rem])
    return "".join(reversed(digits))


def unique_suffix() -> str:
    """Short, almost always distinct suffix from the clock's microseconds plus a little noise."""
    usec = (time.time_ns() // 1000) % 1_000_000
    return to_base32(usec * 10 + random.randrange(100))


def disambiguate(path: str) -> str:
    """dir/name.ext -> dir/name_<suffix>.ext"""
    dirname, filename = os.path.split(path)
    basename, extname = os.path.splitext(filename)
    return os.path.join(dirname, f"{basename}_{unique_suffix()}{extname}")
