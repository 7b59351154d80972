from .folder import Folder
from .requests import (
    FetchFolderRequest,
    FetchFolderRequestWithPag,
    FetchFolderResponse,
    FetchFolderResponseWithPag,
)

__all__ = [
    "FetchFolderRequest",
    "FetchFolderRequestWithPag",
    "FetchFolderResponse",
    "FetchFolderResponseWithPag",
    "Folder",
]
