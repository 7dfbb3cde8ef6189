"""In-memory content handed to and filled in by the data store."""

import os
from typing import Any, BinaryIO, Mapping, Optional

from pydantic import BaseModel, Field


class Content(BaseModel):
    """Raw bytes plus an optional filename and a metadata mapping."""

    data: bytes = b""
    name: Optional[str] = None
    metadata: dict[str, Any] = Field(default_factory=dict)

    def write_to_file(self, path: str) -> BinaryIO:
        """
        Write data to path and return the written file opened for reading.
        The caller owns the returned handle and must close it.
        """
        with open(path, "wb") as f:
            f.write(self.data)
        return open(path, "rb")

    def update_from(self, path: str) -> None:
        """Replace data with the file's bytes; take its basename if no name is set."""
        with open(path, "rb") as f:
            self.data = f.read()
        if self.name is None:
            self.name = os.path.basename(path)

    def add_metadata(self, metadata: Mapping[str, Any]) -> None:
        self.metadata.update(metadata)
