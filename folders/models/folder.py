from pydantic import BaseModel, ConfigDict, Field


class Folder(BaseModel):
    """A folder record owned by an organization."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    id: str
    name: str
    org_id: str = Field(..., alias="orgId")
    deleted: bool = False
