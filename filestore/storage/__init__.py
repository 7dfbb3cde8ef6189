# Storage backends

from filestore.schemas.settings import FileDataStoreSettings
from filestore.storage.base import (
    DataNotFound,
    DataStore,
    DisambiguationError,
    StorageError,
    UnableToFormUrl,
    UnsafePathError,
)
from filestore.storage.file_data_store import FileDataStore

data_store: DataStore = FileDataStore(FileDataStoreSettings.from_env())

__all__ = [
    "data_store",
    "DataStore",
    "FileDataStore",
    "DataNotFound",
    "StorageError",
    "UnableToFormUrl",
    "DisambiguationError",
    "UnsafePathError",
]
