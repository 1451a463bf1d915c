# app/core/errors.py
"""
Domain errors raised by the services.

Each error carries the HTTP status the API should answer with, so services
stay free of FastAPI while `app.main` renders them in one place.
"""


class DomainError(Exception):
    """Base class for business rule violations."""

    status_code: int = 400
    default_detail: str = "Request could not be processed"

    def __init__(self, detail: str | None = None):
        self.detail = detail or self.default_detail
        super().__init__(self.detail)


class NotFound(DomainError):
    """Referenced entity does not exist."""

    status_code = 404
    default_detail = "Not found"


class NotAuthorized(DomainError):
    """Actor lacks the required role or ownership."""

    status_code = 403
    default_detail = "Not authorized"


class DuplicateIdentity(DomainError):
    """Email already registered."""

    status_code = 409
    default_detail = "User already exists"


class AlreadySubscribed(DomainError):
    status_code = 409
    default_detail = "Already subscribed"


class InvalidCredentials(DomainError):
    """
    Authentication failed.

    Deliberately generic: never says whether the email exists.
    """

    status_code = 401
    default_detail = "Invalid credentials"
