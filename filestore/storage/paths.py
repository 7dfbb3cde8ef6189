"""Translation between root-relative keys and absolute filesystem paths."""

import os
import re
from datetime import datetime
from typing import Optional

from filestore.core.path_validation import is_valid_path, time_bucketed_path

CURRENT_DIR = "."


class PathTranslator:
    """Maps keys under root_path to filesystem paths and back."""

    def __init__(self, root_path: str) -> None:
        self.root_path = root_path
        self._relative_re = re.compile(rf"^{re.escape(root_path)}/?(.*)$", re.DOTALL)

    def absolute(self, relative_path: str) -> str:
        relative_path = str(relative_path)
        if relative_path == CURRENT_DIR:
            return self.root_path
        # A leading separator must not make join() discard the root
        return os.path.join(self.root_path, relative_path.lstrip("/"))

    def relative(self, absolute_path: str) -> Optional[str]:
        """Strip root_path (and one separator) from absolute_path; None if it is not under the root."""
        match = self._relative_re.match(absolute_path)
        return match.group(1) if match else None

    def is_root(self, path: str) -> bool:
        return os.path.normpath(path) == os.path.normpath(self.root_path)

    @staticmethod
    def is_valid_path(relative_path: Optional[str]) -> bool:
        return is_valid_path(relative_path)

    @staticmethod
    def generate_relative_path(filename: Optional[str], now: Optional[datetime] = None) -> str:
        return time_bucketed_path(filename, now)
