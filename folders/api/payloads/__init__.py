"""
API models package for Pydantic response models.
"""

from .error import APIError
from .folders import FolderListResponse

__all__ = [
    "APIError",
    "FolderListResponse",
]
