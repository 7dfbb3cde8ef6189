"""Pydantic schema for file data store configuration."""

from pathlib import PurePath
from typing import Any, Optional

from pydantic import BaseModel, Field, field_validator

from filestore.config import (
    MAX_DISAMBIGUATION_ATTEMPTS,
    ROOT_PATH,
    SERVER_ROOT,
    STORE_META,
    VALIDATE_STORE_PATHS,
)


class FileDataStoreSettings(BaseModel):
    """Settings a FileDataStore is built with. Fixed for the life of the store."""

    root_path: str = Field(default="dragonfly", description="Directory content is stored under")
    server_root: Optional[str] = Field(
        default=None, description="Filesystem prefix stripped from absolute paths to form urls"
    )
    store_meta: bool = True
    validate_store_paths: bool = False
    max_disambiguation_attempts: int = Field(default=1000, ge=1)

    model_config = {"frozen": True}

    @field_validator("root_path", mode="before")
    @classmethod
    def _root_path_to_str(cls, value: Any) -> Any:
        if isinstance(value, PurePath):
            value = str(value)
        if isinstance(value, str) and not value.strip():
            raise ValueError("root_path must not be empty")
        return value

    @field_validator("server_root", mode="before")
    @classmethod
    def _server_root_to_str(cls, value: Any) -> Any:
        if isinstance(value, PurePath):
            return str(value)
        if value == "":
            return None
        return value

    @classmethod
    def from_env(cls) -> "FileDataStoreSettings":
        """Settings from FILESTORE_* environment variables (see filestore.config)."""
        return cls(
            root_path=ROOT_PATH,
            server_root=SERVER_ROOT,
            store_meta=STORE_META,
            validate_store_paths=VALIDATE_STORE_PATHS,
            max_disambiguation_attempts=MAX_DISAMBIGUATION_ATTEMPTS,
        )
