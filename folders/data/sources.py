"""
Read-only providers of folder records.
"""

import logging
from collections.abc import Sequence
from pathlib import Path
from typing import Protocol

from pydantic import TypeAdapter

from folders.data.sample import generate_sample_folders
from folders.models.folder import Folder
from settings import settings

logger = logging.getLogger(__name__)

_folder_list_adapter = TypeAdapter(list[Folder])


class FolderSource(Protocol):
    """Anything able to hand out the full, ordered folder dataset."""

    def get_all_folders(self) -> Sequence[Folder]: ...


class InMemoryFolderSource:
    """Folder source over an already materialized list."""

    def __init__(self, folders: Sequence[Folder]) -> None:
        self._folders = tuple(folders)

    def get_all_folders(self) -> Sequence[Folder]:
        return self._folders


class JsonFileFolderSource(InMemoryFolderSource):
    """Folder source loaded once from a JSON array file."""

    def __init__(self, path: str | Path) -> None:
        self.path = Path(path)
        folders = _folder_list_adapter.validate_json(self.path.read_bytes())
        logger.info(f"Loaded {len(folders)} folders from {self.path}")
        super().__init__(folders)


def load_folder_source() -> FolderSource:
    """Build the folder source described by the settings."""
    if settings.folders.data_file:
        return JsonFileFolderSource(settings.folders.data_file)

    folders = generate_sample_folders(
        size=settings.folders.sample_size,
        seed=settings.folders.sample_seed,
        org_count=settings.folders.sample_org_count,
    )
    logger.info(f"Using {len(folders)} generated sample folders")
    return InMemoryFolderSource(folders)
