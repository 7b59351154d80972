"""
Folders API router - lists the folders of an organization, whole or one page at a time.
"""

from dependency_injector.wiring import Provide, inject
from fastapi import APIRouter, Depends, Path, Query

from folders.api.payloads import APIError, FolderListResponse
from folders.container import ApplicationContainer
from folders.controllers.folder_controller import FolderController
from folders.data.sample import DEFAULT_ORG_ID
from folders.models import FetchFolderRequest, FetchFolderRequestWithPag

router = APIRouter()


@router.get(
    "",
    response_model=FolderListResponse,
    responses={
        400: {"model": APIError, "description": "Invalid org ID, page limit or page token"},
        422: {"model": APIError, "description": "Malformed query parameter"},
        404: {"model": APIError, "description": "No folders found for the org"},
        500: {"model": APIError, "description": "Stored folder data is invalid"},
    },
    summary="List folders",
    description="Lists the folders of an organization. Pass `limit` to get a single page.",
)
@inject
async def list_folders(
    org_id: str = Path(..., examples=[DEFAULT_ORG_ID]),
    limit: int | None = Query(None, description="Page size; omit to get every folder"),
    page_token: str = Query("", description="Token from a previous next_cursor or prev_cursor"),
    folder_controller: FolderController = Depends(Provide[ApplicationContainer.controllers.folder_controller]),
) -> FolderListResponse:
    if limit is None:
        response = folder_controller.fetch_all_folders(FetchFolderRequest(org_id=org_id))
        return FolderListResponse(data=response.folders)

    paged = folder_controller.fetch_folders_paginated(
        FetchFolderRequestWithPag(org_id=org_id, page_limit=limit, token=page_token)
    )
    return FolderListResponse(
        data=paged.folders,
        next_cursor=paged.next_token or None,
        prev_cursor=paged.prev_token or None,
    )
