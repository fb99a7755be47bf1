"""
Domain error taxonomy.

Every error carries a stable machine-checkable ``kind`` and the HTTP status it
maps to. The API layer turns these into JSON error bodies (see
``portfolio.api.v1.helpers.responses``); nothing below the API layer knows
about HTTP beyond the status code attached here.
"""

from fastapi import status


class PortfolioError(Exception):
    kind: str = "internal_error"
    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR
    default_message: str = "An error occurred"
    retryable: bool = False

    def __init__(self, message: str | None = None, errors: list[str] | None = None):
        self.message = message or self.default_message
        self.errors = errors or []
        super().__init__(self.message)


class ValidationError(PortfolioError):
    kind = "validation_error"
    status_code = status.HTTP_422_UNPROCESSABLE_ENTITY
    default_message = "Validation failed"


class NotFound(PortfolioError):
    kind = "not_found"
    status_code = status.HTTP_404_NOT_FOUND
    default_message = "Resource not found"


class InvalidCredentials(PortfolioError):
    kind = "invalid_credentials"
    status_code = status.HTTP_401_UNAUTHORIZED
    default_message = "Invalid email or password"


class InvalidToken(PortfolioError):
    kind = "invalid_token"
    status_code = status.HTTP_401_UNAUTHORIZED
    default_message = "Invalid or missing token"


class TokenExpired(PortfolioError):
    kind = "token_expired"
    status_code = status.HTTP_401_UNAUTHORIZED
    default_message = "Token has expired"


class DuplicateKey(PortfolioError):
    kind = "duplicate_key"
    status_code = status.HTTP_409_CONFLICT
    default_message = "Resource conflict"
    retryable = True


class StoreUnavailable(PortfolioError):
    """Body for driver connection failures (OperationalError, InterfaceError)."""

    kind = "store_unavailable"
    status_code = status.HTTP_503_SERVICE_UNAVAILABLE
    default_message = "Storage is temporarily unavailable"
