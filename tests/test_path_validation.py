from datetime import datetime

import pytest

from filestore.core.path_validation import is_valid_path, sanitize_filename, time_bucketed_path


@pytest.mark.parametrize("key", [None, "", "   ", "../secret", "a/../../b", "a/b/../c"])
def test_is_valid_path_rejects_blank_and_parent_segments(key) -> None:
    assert is_valid_path(key) is False


@pytest.mark.parametrize("key", ["a.txt", "2024/01/01/x.txt", "a..b/c", "..hidden"])
def test_is_valid_path_accepts_plain_keys(key: str) -> None:
    assert is_valid_path(key) is True


def test_sanitize_filename_collapses_unsafe_runs() -> None:
    assert sanitize_filename("my file (1).tar.gz") == "my_file_1_.tar.gz"
    assert sanitize_filename("../../etc/passwd") == ".._.._etc_passwd"
    assert sanitize_filename("ok_name.TXT") == "ok_name.TXT"


def test_time_bucketed_path_layout() -> None:
    now = datetime(2024, 3, 7, 9, 5, 2, 42_000)

    assert time_bucketed_path("photo of me.jpg", now) == "2024/03/07/09_05_02_042_photo_of_me.jpg"


def test_time_bucketed_path_defaults_filename() -> None:
    now = datetime(2024, 1, 1, 0, 0, 0, 0)

    assert time_bucketed_path(None, now) == "2024/01/01/00_00_00_000_file"
