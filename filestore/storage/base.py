"""Abstract data store and the errors it raises."""

from abc import ABC, abstractmethod
from typing import Any, Mapping, Optional, Protocol


class DataNotFound(Exception):
    """
    Expected outcome when a key is unsafe or nothing is stored under it.
    Kept outside StorageError so callers handling fatal errors never catch it by accident.
    """

    def __init__(self, relative_path: Optional[str]) -> None:
        super().__init__(f"No data stored at {relative_path!r}")
        self.relative_path = relative_path


class StorageError(Exception):
    """Base class for fatal data store errors."""


class UnableToFormUrl(StorageError):
    """server_root is missing or does not prefix the stored file's path."""


class DisambiguationError(StorageError):
    """No free alternate name was found for a taken path."""


class UnsafePathError(StorageError, ValueError):
    """An explicit store path failed the key check."""


class StorableContent(Protocol):
    """What a data store needs from the content object it stores or fills in."""

    name: Optional[str]
    metadata: Mapping[str, Any]

    def write_to_file(self, path: str) -> Any:
        """Write content to path, returning a handle with close()."""
        ...

    def update_from(self, path: str) -> None: ...

    def add_metadata(self, metadata: Mapping[str, Any]) -> None: ...


class DataStore(ABC):
    """Interface for content storage keyed by relative path."""

    @abstractmethod
    def store(self, content: StorableContent, path: Optional[str] = None) -> str:
        """
        Persist content and return the key used to reference it.
        path is used as the key when given; otherwise one is generated.
        """
        ...

    @abstractmethod
    def retrieve(self, content: StorableContent, relative_path: str) -> None:
        """Fill content from the item at relative_path. Raises DataNotFound."""
        ...

    @abstractmethod
    def destroy(self, relative_path: str) -> None:
        """Remove the item at relative_path. Raises DataNotFound."""
        ...

    @abstractmethod
    def url_for(self, relative_path: str) -> str:
        """Public url path for a stored item. Raises UnableToFormUrl."""
        ...
