from .folder_controller import FolderController
from .pagination import Page, paginate

__all__ = [
    "FolderController",
    "Page",
    "paginate",
]
