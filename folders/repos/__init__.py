from .folder import FolderRepo

__all__ = [
    "FolderRepo",
]
