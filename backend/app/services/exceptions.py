"""
Service Exceptions

Error taxonomy shared by the auth, authorization, media and store layers.
Every error carries the HTTP status it maps to and a message that is safe to
show to the caller; internal detail goes to the log, never into `message`.
"""
from http import HTTPStatus


class AppError(Exception):
    """Base exception for client-visible service errors"""
    status_code: int = HTTPStatus.INTERNAL_SERVER_ERROR
    default_message: str = "Internal server error"

    def __init__(self, message: str = None):
        self.message = message or self.default_message
        super().__init__(self.message)


class UnauthorizedError(AppError):
    """No credential, or an invalid/expired one"""
    status_code = HTTPStatus.UNAUTHORIZED
    default_message = "Unauthorized"


class ForbiddenError(AppError):
    """Credential is valid but does not own the resource"""
    status_code = HTTPStatus.FORBIDDEN
    default_message = "Forbidden"


class NotFoundError(AppError):
    """Resource id is absent from the store"""
    status_code = HTTPStatus.NOT_FOUND
    default_message = "Not found"


class ValidationError(AppError):
    """Missing or malformed client input"""
    status_code = HTTPStatus.BAD_REQUEST
    default_message = "Invalid request"


class UploadTooLargeError(ValidationError):
    """Media exceeds the configured byte limit"""
    status_code = HTTPStatus.REQUEST_ENTITY_TOO_LARGE
    default_message = "File too large"


class ConflictError(AppError):
    """Uniqueness violation, e.g. an email already registered"""
    status_code = HTTPStatus.CONFLICT
    default_message = "Conflict"


class InternalError(AppError):
    """Hashing, signing, storage or network failure"""
    status_code = HTTPStatus.INTERNAL_SERVER_ERROR
    default_message = "Internal server error"


class DownloadError(InternalError):
    """Remote image could not be fetched"""
    default_message = "Failed to download image"
