import enum
from http import HTTPStatus
from typing import Any


class ErrorType(enum.Enum):
    ENTITY_NOT_FOUND = "entity_not_found"
    INVALID_DATA = "invalid_data"
    INVALID_STATE = "invalid_state"
    INVALID_TOKEN = "invalid_token"
    UNHANDLED_EXCEPTION = "unhandled_exception"
    UNSPECIFIED = "unspecified"


class BaseError(Exception):
    extra: dict[str, Any]

    def __init__(
        self,
        message: str,
        error_type: ErrorType = ErrorType.UNSPECIFIED,
        status_code: HTTPStatus = HTTPStatus.INTERNAL_SERVER_ERROR,
        **kwargs: Any,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.error_type = error_type
        self.status_code = status_code
        self.extra = {}

        org_id = kwargs.get("org_id")
        if org_id:
            self.extra["org_id"] = org_id
        folder_name = kwargs.get("folder_name")
        if folder_name:
            self.extra["folder_name"] = folder_name

    def __str__(self) -> str:
        return f"error: {self.error_type.value}; description: {self.message}"


class EntityNotFoundError(BaseError):
    def __init__(
        self,
        message: str,
        error_type: ErrorType = ErrorType.ENTITY_NOT_FOUND,
        status_code: HTTPStatus = HTTPStatus.NOT_FOUND,
        **kwargs: Any,
    ) -> None:
        super().__init__(message, error_type, status_code, **kwargs)


class InvalidDataError(BaseError):
    def __init__(
        self,
        message: str,
        error_type: ErrorType = ErrorType.INVALID_DATA,
        status_code: HTTPStatus = HTTPStatus.BAD_REQUEST,
        **kwargs: Any,
    ) -> None:
        super().__init__(message, error_type, status_code, **kwargs)


class InvalidOrgIdError(InvalidDataError):
    def __init__(self, message: str = "invalid OrgID: must be valid UUID", **kwargs: Any) -> None:
        super().__init__(message, **kwargs)


class InvalidPageLimitError(InvalidDataError):
    def __init__(self, max_page_limit: int, **kwargs: Any) -> None:
        super().__init__(f"invalid page limit: must be non-negative and below {max_page_limit} items", **kwargs)
        self.max_page_limit = max_page_limit


class InvalidTokenError(InvalidDataError):
    def __init__(self, message: str, error_type: ErrorType = ErrorType.INVALID_TOKEN, **kwargs: Any) -> None:
        super().__init__(message, error_type, **kwargs)


class InvalidTokenFormatError(InvalidTokenError):
    """Raised when a token is not a base64-encoded decimal offset."""


class FolderValidationError(BaseError):
    """A stored folder owned by the requested org has a malformed ID."""

    def __init__(self, org_id: str, folder_name: str, **kwargs: Any) -> None:
        super().__init__(
            f"folder with non-valid ID found for OrgID: {org_id} on folder named {folder_name}",
            ErrorType.INVALID_STATE,
            HTTPStatus.INTERNAL_SERVER_ERROR,
            org_id=org_id,
            folder_name=folder_name,
            **kwargs,
        )
        self.org_id = org_id
        self.folder_name = folder_name


class FolderNotFoundError(EntityNotFoundError):
    def __init__(self, org_id: str, **kwargs: Any) -> None:
        super().__init__(f"no folders found for OrgID: {org_id}", org_id=org_id, **kwargs)
        self.org_id = org_id
