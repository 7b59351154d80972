import logging

from folders.controllers.pagination import paginate
from folders.exceptions import FolderNotFoundError, InvalidOrgIdError, InvalidPageLimitError
from folders.models import (
    FetchFolderRequest,
    FetchFolderRequestWithPag,
    FetchFolderResponse,
    FetchFolderResponseWithPag,
)
from folders.repos.folder import FolderRepo
from folders.utils.identifiers import is_valid_uuid_v4

logger = logging.getLogger(__name__)

DEFAULT_MAX_PAGE_LIMIT = 1000


class FolderController:
    """Controller for fetching an organization's folders."""

    def __init__(self, folder_repo: FolderRepo, max_page_limit: int = DEFAULT_MAX_PAGE_LIMIT) -> None:
        self.folder_repo = folder_repo
        self.max_page_limit = max_page_limit

    def fetch_all_folders(self, req: FetchFolderRequest) -> FetchFolderResponse:
        """
        Fetch every folder of the requested organization.

        Raises:
            InvalidOrgIdError: If the org ID is not a version-4 UUID
            FolderValidationError: If one of the org's folders has a malformed ID
            FolderNotFoundError: If the org has no folders
        """
        self._validate_org_id(req.org_id)

        folders = self.folder_repo.fetch_by_org(req.org_id)
        if not folders:
            raise FolderNotFoundError(req.org_id)

        return FetchFolderResponse(folders=folders)

    def fetch_folders_paginated(self, req: FetchFolderRequestWithPag) -> FetchFolderResponseWithPag:
        """
        Fetch one page of the requested organization's folders.

        Raises:
            InvalidOrgIdError: If the org ID is not a version-4 UUID
            InvalidPageLimitError: If the page limit is not in ``(0, max_page_limit)``
            FolderValidationError: If one of the org's folders has a malformed ID
            FolderNotFoundError: If the org has no folders
            InvalidTokenError: If the token cannot be decoded or holds a negative offset
        """
        self._validate_org_id(req.org_id)

        if req.page_limit <= 0 or req.page_limit >= self.max_page_limit:
            logger.warning(f"Rejected page limit {req.page_limit} for org {req.org_id}")
            raise InvalidPageLimitError(self.max_page_limit, org_id=req.org_id)

        folders = self.folder_repo.fetch_by_org(req.org_id)
        if not folders:
            raise FolderNotFoundError(req.org_id)

        page = paginate(folders, req.page_limit, req.token)
        return FetchFolderResponseWithPag(
            folders=page.folders, next_token=page.next_token, prev_token=page.prev_token
        )

    def _validate_org_id(self, org_id: str) -> None:
        if not is_valid_uuid_v4(org_id):
            logger.warning(f"Rejected malformed org ID: {org_id!r}")
            raise InvalidOrgIdError()
