"""Application exception hierarchy.

Every error the API reports deliberately derives from ``InventoryException``
so a single handler can turn it into a response.

Error codes follow pattern: [CATEGORY][NUMBER]
- PRD: Product errors (001-099)
- USR: User/Auth errors (100-199)
- SYS: Storage and system errors (400-499)
"""

from __future__ import annotations

from typing import Any


class InventoryException(Exception):
    """Base exception for all inventory-api application errors."""

    def __init__(
        self,
        message: str,
        code: str,
        status_code: int = 400,
        details: dict[str, Any] | None = None,
    ):
        """Initialize exception with a client-facing message and metadata.

        Args:
            message: Client-facing error message
            code: Unique error code (e.g., "PRD001")
            status_code: HTTP status code (default: 400 Bad Request)
            details: Optional additional context
        """
        super().__init__(message)
        self.message = message
        self.code = code
        self.status_code = status_code
        self.details = details or {}

    def to_dict(self) -> dict[str, Any]:
        """Convert exception to API response format."""
        return {
            "error": {
                "message": self.message,
                "code": self.code,
                "details": self.details,
            }
        }


# ============================================================================
# PRODUCT ERRORS (PRD001-099)
# ============================================================================

class ProductError(InventoryException):
    """Base class for product-related errors."""
    pass


class ProductNotFoundError(ProductError):
    """Product does not exist or has been deleted."""

    def __init__(self, product_id: int | None = None):
        super().__init__(
            message="Product not found",
            code="PRD001",
            status_code=404,
            details={"product_id": product_id} if product_id is not None else {},
        )


# ============================================================================
# USER/AUTH ERRORS (USR100-199)
# ============================================================================

class UserError(InventoryException):
    """Base class for user/authentication errors."""
    pass


class UserAlreadyExistsError(UserError):
    def __init__(self, email: str):
        super().__init__(
            message="user already exists",
            code="USR100",
            status_code=409,
            details={"email": email},
        )


class InvalidCredentialsError(UserError):
    """Unknown email or wrong password; the two cases are indistinguishable on purpose."""

    def __init__(self):
        super().__init__(
            message="invalid credentials",
            code="USR101",
            status_code=401,
        )


class UserNotFoundError(UserError):
    def __init__(self, user_id: int | None = None):
        super().__init__(
            message="User not found",
            code="USR102",
            status_code=404,
            details={"user_id": user_id} if user_id is not None else {},
        )


# ============================================================================
# STORAGE/SYSTEM ERRORS (SYS400-499)
# ============================================================================

class SystemError(InventoryException):
    """Base class for storage/infrastructure errors."""
    pass


class StoreError(SystemError):
    """The product store could not complete a read or write.

    The message stays generic; the driver error is kept as ``__cause__``
    and only reaches the logs.
    """

    def __init__(self, operation: str):
        super().__init__(
            message=f"Failed to {operation}",
            code="SYS400",
            status_code=500,
            details={"operation": operation},
        )
        self.operation = operation


class AlertGenerationTimeoutError(SystemError):
    def __init__(self, timeout: float, pending: int):
        super().__init__(
            message=f"Alert generation did not finish within {timeout:g} seconds",
            code="SYS401",
            status_code=504,
            details={"timeout_seconds": timeout, "pending_units": pending},
        )
