"""
Request and response models for the folder controller.
"""

import uuid

from pydantic import BaseModel, field_validator

from folders.models.folder import Folder
from folders.utils.identifiers import normalize_org_id


class FetchFolderRequest(BaseModel):
    """Request for every folder of an organization."""

    org_id: str

    @field_validator("org_id", mode="before")
    def set_org_id(cls, org_id: str | uuid.UUID) -> str:
        return normalize_org_id(org_id)


class FetchFolderResponse(BaseModel):
    folders: list[Folder]


class FetchFolderRequestWithPag(FetchFolderRequest):
    """Request for a single page of an organization's folders."""

    page_limit: int
    token: str = ""


class FetchFolderResponseWithPag(BaseModel):
    folders: list[Folder]
    next_token: str = ""
    prev_token: str = ""
