import logging

from folders.data.sources import FolderSource
from folders.exceptions import FolderValidationError
from folders.models.folder import Folder
from folders.repos.base import BaseRepo
from folders.utils.identifiers import is_valid_uuid_v4

logger = logging.getLogger(__name__)


class FolderRepo(BaseRepo[Folder]):
    """Repository for Folder records."""

    def __init__(self, source: FolderSource) -> None:
        super().__init__(source.get_all_folders)

    def fetch_by_org(self, org_id: str) -> list[Folder]:
        """
        Get every folder owned by an organization.

        Args:
            org_id: The organization ID to filter on

        Returns:
            The matching folders in dataset order, possibly empty

        Raises:
            FolderValidationError: If a matching folder has a malformed ID
        """
        folders = []
        for folder in self.iter_where(lambda f: f.org_id == org_id):
            if not is_valid_uuid_v4(folder.id):
                logger.warning(f"Folder {folder.name!r} of org {org_id} has a malformed ID: {folder.id!r}")
                raise FolderValidationError(org_id, folder.name)
            folders.append(folder)

        logger.debug(f"Found {len(folders)} folders for org {org_id}")
        return folders
