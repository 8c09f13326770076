"""Domain layer errors.

Every error carries a stable ``code`` and ``http_status`` plus a message key
and parameters so the interface layer can render it in the caller's locale.
``str(error)`` is the English message.
"""

from typing import Any, ClassVar


class DomainError(Exception):
    """Base domain error."""

    code: ClassVar[str] = "DOMAIN_ERROR"
    http_status: ClassVar[int] = 400

    def __init__(self, message: str, message_key: str | None = None, **params: Any):
        self.message = message
        self.message_key = message_key or self.code.lower()
        self.params = params
        super().__init__(message)


class ValidationError(DomainError):
    """Malformed or missing input."""

    code = "VALIDATION_ERROR"
    http_status = 400

    def __init__(self, message: str = "Invalid request data"):
        super().__init__(message, "validation_error")


class NotFoundError(DomainError):
    """Raised when a requested resource is not found."""

    code = "NOT_FOUND"
    http_status = 404

    def __init__(self, resource: str, identifier: str):
        self.resource = resource
        self.identifier = identifier
        super().__init__(
            f"{resource} not found: {identifier}",
            f"{resource.lower()}_not_found",
            identifier=identifier,
        )


class DuplicateFieldError(DomainError):
    """Raised when a username or email is already taken by another user."""

    code = "DUPLICATE_FIELD"
    http_status = 409

    def __init__(self, field: str):
        self.field = field
        super().__init__(f"{field} is already in use", f"duplicate_{field}", field=field)


class InvalidCredentialsError(DomainError):
    """Raised on login failure.

    Unknown identifier and wrong password produce the same error.
    """

    code = "INVALID_CREDENTIALS"
    http_status = 400

    def __init__(self):
        super().__init__("Invalid email/username or password", "invalid_credentials")


class UnauthorizedError(DomainError):
    """Raised when a token is missing, invalid, or belongs to another user."""

    code = "UNAUTHORIZED"
    http_status = 401

    def __init__(
        self, reason: str = "User not authorized", message_key: str = "unauthorized"
    ):
        self.reason = reason
        super().__init__(reason, message_key)


class InternalError(DomainError):
    """Hashing, signing or storage failure."""

    code = "INTERNAL_ERROR"
    http_status = 500

    def __init__(self, operation: str):
        self.operation = operation
        super().__init__(f"Internal error during {operation}", "internal_error")
