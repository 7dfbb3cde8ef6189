"""Local filesystem data store with metadata sidecars."""

import logging
import os
from contextlib import closing
from typing import Optional

from filestore.schemas.settings import FileDataStoreSettings
from filestore.storage.base import (
    DataNotFound,
    DataStore,
    DisambiguationError,
    StorableContent,
    UnableToFormUrl,
    UnsafePathError,
)
from filestore.storage.disambiguation import disambiguate
from filestore.storage.meta_store import PickleMetaStore, YAMLMetaStore
from filestore.storage.paths import PathTranslator
from filestore.storage.purge import purge_empty_directories

logger = logging.getLogger(__name__)


class FileDataStore(DataStore):
    """
    Store content as files under root_path.

    Keys are paths relative to root_path. Auto-generated keys are bucketed by
    date (YYYY/MM/DD/...). Metadata goes to a YAML sidecar next to each file;
    pickled sidecars written by older versions are still read.
    """

    def __init__(self, settings: Optional[FileDataStoreSettings] = None, **overrides) -> None:
        if settings is None:
            settings = FileDataStoreSettings(**overrides)
        elif overrides:
            settings = FileDataStoreSettings(**{**settings.model_dump(), **overrides})
        self.settings = settings
        self.paths = PathTranslator(settings.root_path)
        self.meta_store = YAMLMetaStore()
        self.deprecated_meta_store = PickleMetaStore()

    @property
    def root_path(self) -> str:
        return self.settings.root_path

    @property
    def server_root(self) -> Optional[str]:
        return self.settings.server_root

    @property
    def store_meta(self) -> bool:
        return self.settings.store_meta

    def store(self, content: StorableContent, path: Optional[str] = None) -> str:
        if path:
            if self.settings.validate_store_paths and not self.paths.is_valid_path(path):
                raise UnsafePathError(f"Refusing to store at unsafe path {path!r}")
            relative_path = path
        else:
            relative_path = self.paths.generate_relative_path(content.name or "file")

        abs_path = self._free_path(self.paths.absolute(relative_path))
        os.makedirs(os.path.dirname(abs_path) or ".", exist_ok=True)
        try:
            with closing(content.write_to_file(abs_path)):
                pass
        except Exception:
            # Drop bucket directories this write created and left empty
            purge_empty_directories(self.paths, self.paths.relative(abs_path) or relative_path)
            raise
        if self.store_meta:
            self.meta_store.store(abs_path, content.metadata)

        stored_path = self.paths.relative(abs_path)
        logger.debug("Stored %s", stored_path)
        return stored_path

    def retrieve(self, content: StorableContent, relative_path: str) -> None:
        if not self.paths.is_valid_path(relative_path):
            raise DataNotFound(relative_path)
        abs_path = self.paths.absolute(relative_path)
        if not os.path.isfile(abs_path):
            raise DataNotFound(relative_path)

        content.update_from(abs_path)
        if self.store_meta:
            meta = self.meta_store.retrieve(abs_path)
            if meta is None:
                meta = self.deprecated_meta_store.retrieve(abs_path)
            content.add_metadata(meta if meta is not None else {})
        logger.debug("Retrieved %s", relative_path)

    def destroy(self, relative_path: str) -> None:
        if not self.paths.is_valid_path(relative_path):
            raise DataNotFound(relative_path)
        abs_path = self.paths.absolute(relative_path)
        if os.path.isdir(abs_path):
            raise DataNotFound(relative_path)
        try:
            os.remove(abs_path)
        except FileNotFoundError as e:
            raise DataNotFound(relative_path) from e

        self.meta_store.destroy(abs_path)
        self.deprecated_meta_store.destroy(abs_path)
        purge_empty_directories(self.paths, relative_path)
        logger.debug("Destroyed %s", relative_path)

    def url_for(self, relative_path: str) -> str:
        if self.server_root is None:
            raise UnableToFormUrl(
                f"you need to configure server_root for {type(self).__name__} in order to form urls"
            )
        _, _, url = self.paths.absolute(relative_path).partition(self.server_root)
        if not url:
            raise UnableToFormUrl(
                f"couldn't form url for uid {relative_path!r} with root_path "
                f"{self.root_path!r} and server_root {self.server_root!r}"
            )
        return url

    def _free_path(self, abs_path: str) -> str:
        """abs_path itself if nothing is there, otherwise the first untaken alternate name."""
        if not os.path.exists(abs_path):
            return abs_path
        for _ in range(self.settings.max_disambiguation_attempts):
            candidate = disambiguate(abs_path)
            if not os.path.exists(candidate):
                logger.info("Path %s taken, storing at %s", abs_path, candidate)
                return candidate
        raise DisambiguationError(
            f"No free path found for {abs_path} after "
            f"{self.settings.max_disambiguation_attempts} attempts"
        )
