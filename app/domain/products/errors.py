"""
Domain-specific errors for the products bounded context.

The product service reports failures by raising one of these errors.
Each error carries a fixed ErrorKind so the interface layer can map it
to an HTTP status without looking at the message text.
No framework imports allowed.
"""

from enum import Enum


class ErrorKind(Enum):
    """Closed set of failure classifications a product service may report."""

    AUTH_FAILED = "auth_failed"
    EXPIRED_TOKEN = "expired_token"
    BAD_PARAM_INPUT = "bad_param_input"
    CONFLICT = "conflict"
    NOT_FOUND = "not_found"
    INTERNAL = "internal"


class ProductDomainError(Exception):
    """Base error for all product domain errors."""

    kind: ErrorKind = ErrorKind.INTERNAL

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(self.message)


class AuthenticationFailedError(ProductDomainError):
    """Raised when the caller's credentials are rejected."""

    kind = ErrorKind.AUTH_FAILED

    def __init__(self, message: str = "Authentication failed") -> None:
        super().__init__(message)


class ExpiredTokenError(ProductDomainError):
    """Raised when the caller's credential has expired."""

    kind = ErrorKind.EXPIRED_TOKEN

    def __init__(self, message: str = "Token has expired") -> None:
        super().__init__(message)


class BadParamInputError(ProductDomainError):
    """Raised when the service rejects input the handler already accepted."""

    kind = ErrorKind.BAD_PARAM_INPUT

    def __init__(self, message: str = "Given param is not valid") -> None:
        super().__init__(message)


class ConflictError(ProductDomainError):
    """Raised on duplicate identity or concurrent modification."""

    kind = ErrorKind.CONFLICT

    def __init__(self, product_id: str) -> None:
        super().__init__(f"Product already exists: {product_id}")
        self.product_id = product_id


class ResourceNotFoundError(ProductDomainError):
    """Raised when a product cannot be found."""

    kind = ErrorKind.NOT_FOUND

    def __init__(self, product_id: str) -> None:
        super().__init__(f"Product not found: {product_id}")
        self.product_id = product_id


class InternalServiceError(ProductDomainError):
    """Raised when the backing store fails in an unclassified way."""

    kind = ErrorKind.INTERNAL

    def __init__(self, reason: str) -> None:
        super().__init__(f"Internal server error: {reason}")
        self.reason = reason
