"""Metadata sidecar files stored next to content files."""

import os
import pickle
from abc import ABC, abstractmethod
from typing import Any, Mapping, Optional

import yaml


def stringify_keys(value: Any) -> Any:
    """Recursively convert mapping keys to str."""
    if isinstance(value, Mapping):
        return {str(k): stringify_keys(v) for k, v in value.items()}
    return value


class MetaStore(ABC):
    """Reads, writes and removes the sidecar for a content file's absolute path."""

    def store(self, data_path: str, meta: Mapping[str, Any]) -> None:
        with open(self.meta_path(data_path), "wb") as f:
            f.write(self.dump(meta))

    def retrieve(self, data_path: str) -> Optional[dict[str, Any]]:
        """Decoded metadata, or None when no sidecar exists."""
        path = self.meta_path(data_path)
        if not os.path.exists(path):
            return None
        with open(path, "rb") as f:
            return self.load(f.read())

    def destroy(self, data_path: str) -> None:
        try:
            os.remove(self.meta_path(data_path))
        except FileNotFoundError:
            pass

    @abstractmethod
    def meta_path(self, data_path: str) -> str: ...

    @abstractmethod
    def dump(self, meta: Mapping[str, Any]) -> bytes: ...

    @abstractmethod
    def load(self, raw: bytes) -> dict[str, Any]: ...


class YAMLMetaStore(MetaStore):
    """Current format: <file>.meta.yml"""

    def meta_path(self, data_path: str) -> str:
        return f"{data_path}.meta.yml"

    def dump(self, meta: Mapping[str, Any]) -> bytes:
        return yaml.safe_dump(dict(meta), allow_unicode=True, sort_keys=False).encode("utf-8")

    def load(self, raw: bytes) -> dict[str, Any]:
        return yaml.safe_load(raw) or {}


class PickleMetaStore(MetaStore):
    """
    Legacy format: <file>.meta holding a pickled mapping.

    Only read, as a fallback for items written by older versions of the store.
    Pickled keys are not guaranteed to be strings, so they are normalized on load.
    Sidecars are only ever produced by the store itself under root_path, which is
    what makes unpickling them acceptable.
    """

    def meta_path(self, data_path: str) -> str:
        return f"{data_path}.meta"

    def dump(self, meta: Mapping[str, Any]) -> bytes:
        return pickle.dumps(dict(meta))

    def load(self, raw: bytes) -> dict[str, Any]:
        return stringify_keys(pickle.loads(raw)) or {}
