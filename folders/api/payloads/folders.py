import uuid

from pydantic import BaseModel, Field

from folders.models.folder import Folder


class FolderListResponse(BaseModel):
    """Response model for listing an organization's folders."""

    request_id: str = Field(default_factory=lambda: str(uuid.uuid4()))
    data: list[Folder]
    next_cursor: str | None = None
    prev_cursor: str | None = None
