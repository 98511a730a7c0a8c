"""
FinEdge - Custom Exceptions
Domain exceptions and their default HTTP status codes
"""
from typing import Optional

from fastapi import status


class FinEdgeException(Exception):
    """Base exception for FinEdge."""

    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR

    def __init__(
        self,
        message: str = "An error occurred",
        code: Optional[str] = None,
    ):
        self.message = message
        self.code = code
        super().__init__(self.message)


# =========================
# Authentication Exceptions
# =========================

class UnauthenticatedError(FinEdgeException):
    """No valid credentials on the request. Rendered as 401 with no body."""

    status_code = status.HTTP_401_UNAUTHORIZED

    def __init__(self, message: str = "Not authenticated"):
        super().__init__(message=message, code="UNAUTHENTICATED")


class InvalidCredentialsError(UnauthenticatedError):
    """Invalid username or password."""

    def __init__(self, message: str = "Invalid username or password"):
        super().__init__(message=message)


class PermissionDeniedError(FinEdgeException):
    """User lacks the required role."""

    status_code = status.HTTP_403_FORBIDDEN

    def __init__(self, message: str = "Insufficient permissions"):
        super().__init__(message=message, code="PERMISSION_DENIED")


# =========================
# Request Exceptions
# =========================

class InvalidArgumentError(FinEdgeException):
    """Missing or malformed input."""

    status_code = status.HTTP_400_BAD_REQUEST

    def __init__(self, message: str = "Invalid argument"):
        super().__init__(message=message, code="INVALID_ARGUMENT")


class UsernameTakenError(InvalidArgumentError):
    """Username already registered."""

    def __init__(self, message: str = "Username already exists"):
        super().__init__(message=message)


# =========================
# Lookup Exceptions
# =========================

class NotFoundError(FinEdgeException):
    """Requested resource does not exist."""

    status_code = status.HTTP_404_NOT_FOUND

    def __init__(self, message: str = "Resource not found", code: str = "NOT_FOUND"):
        super().__init__(message=message, code=code)


class UserNotFoundError(NotFoundError):
    """User not found."""

    def __init__(self, message: str = "User not found"):
        super().__init__(message=message, code="USER_NOT_FOUND")


class PortfolioNotFoundError(NotFoundError):
    """Portfolio not found."""

    def __init__(self, message: str = "Portfolio not found"):
        super().__init__(message=message, code="PORTFOLIO_NOT_FOUND")


class StockNotFoundError(NotFoundError):
    """No quote for the symbol."""

    def __init__(self, symbol: str = ""):
        self.symbol = symbol
        super().__init__(message="Stock not found", code="STOCK_NOT_FOUND")


# =========================
# Trading Exceptions
# =========================

class TradingError(FinEdgeException):
    """Trade rejected by validation."""

    status_code = status.HTTP_400_BAD_REQUEST


class InsufficientFundsError(TradingError):
    """Cost of the order exceeds the cash balance."""

    def __init__(self, message: str = "Insufficient funds"):
        super().__init__(message=message, code="INSUFFICIENT_FUNDS")


class InsufficientSharesError(TradingError):
    """Sell quantity exceeds owned shares."""

    def __init__(self, message: str = "Insufficient shares"):
        super().__init__(message=message, code="INSUFFICIENT_SHARES")


# =========================
# Storage Exceptions
# =========================

class StorageUnavailableError(FinEdgeException):
    """Backing database could not complete the operation."""

    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR

    def __init__(self, message: str = "Storage unavailable"):
        super().__init__(message=message, code="STORAGE_UNAVAILABLE")


# =========================
# HTTP Helpers
# =========================

class ApiError(Exception):
    """
    Error with an explicit HTTP status, raised by routes whose convention
    differs from the exception's default status.
    """

    def __init__(self, status_code: int, message: str):
        self.status_code = status_code
        self.message = message
        super().__init__(message)


def with_status(exc: FinEdgeException, status_code: int) -> ApiError:
    """Re-map a domain exception to a route-specific status code."""
    return ApiError(status_code=status_code, message=exc.message)
