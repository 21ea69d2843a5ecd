"""Error Hierarchy - typed, categorized exceptions for all BeaverNet failure modes.

Invariants:
    - Every error has a code (str), category (ErrorCategory), severity (ErrorSeverity)
    - Client errors (400-level) are recoverable; infrastructure errors (500-level) are critical
    - to_response() produces the REST envelope used by every error handler
    - headers carries response headers the handler must send (WWW-Authenticate on 401)

Design Decisions:
    - Single hierarchy with BeaverNetError base: one FastAPI handler catches all
    - ErrorContext as dataclass: observability data without coupling to logging
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any
from datetime import datetime, timezone


class ErrorSeverity(str, Enum):
    """Error severity for observability and client handling."""
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"
    CRITICAL = "critical"


class ErrorCategory(str, Enum):
    """High-level error categories for routing and handling."""
    AUTHENTICATION = "authentication"
    AUTHORIZATION = "authorization"
    VALIDATION = "validation"
    RESOURCE_NOT_FOUND = "resource_not_found"
    CONFLICT = "conflict"
    DATABASE = "database"
    EXTERNAL_API = "external_api"
    INTERNAL = "internal"


@dataclass
class ErrorContext:
    """Request-side details attached to an error."""
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    username: str | None = None
    resource: str | None = None
    debug_info: dict[str, Any] | None = None


class BeaverNetError(Exception):
    """Base exception for all BeaverNet errors."""

    def __init__(
        self,
        message: str,
        code: str,
        category: ErrorCategory,
        severity: ErrorSeverity = ErrorSeverity.ERROR,
        context: ErrorContext | None = None,
        http_status: int = 500,
        headers: dict[str, str] | None = None,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.category = category
        self.severity = severity
        self.context = context or ErrorContext()
        self.http_status = http_status
        self.headers = headers or {}

    def to_response(self) -> dict:
        """Convert to standardized REST error response."""
        return {
            "error": {
                "code": self.code,
                "message": self.message,
                "category": self.category.value,
                "severity": self.severity.value,
                "timestamp": self.context.timestamp.isoformat(),
            }
        }


# --- Client Errors (400-level) -----------------------------------

class AuthenticationError(BeaverNetError):
    """Missing, malformed, or rejected Basic credentials."""
    def __init__(self, message: str, realm: str, context: ErrorContext | None = None):
        super().__init__(
            message, "AUTHENTICATION_REQUIRED", ErrorCategory.AUTHENTICATION,
            ErrorSeverity.WARNING, context, 401,
            headers={"WWW-Authenticate": f'Basic realm="{realm}"'},
        )


class AccessDeniedError(BeaverNetError):
    """Authenticated identity lacks an allowed access level."""
    def __init__(
        self,
        allowed_levels: list[str],
        user_level: str | None,
        context: ErrorContext | None = None,
    ):
        if user_level:
            message = (
                "Access denied: Requires one of the following access levels: "
                f"{', '.join(allowed_levels)}"
            )
        else:
            message = "Access denied: No access level specified"
        super().__init__(
            message, "ACCESS_DENIED", ErrorCategory.AUTHORIZATION,
            ErrorSeverity.WARNING, context, 403,
        )
        self.allowed_levels = allowed_levels
        self.user_level = user_level

    def to_response(self) -> dict:
        body = super().to_response()
        body["error"]["user_level"] = self.user_level
        return body


class ResourceNotFoundError(BeaverNetError):
    """Requested resource does not exist."""
    def __init__(
        self, resource_type: str, resource_id: object, context: ErrorContext | None = None,
    ):
        super().__init__(
            f"{resource_type} '{resource_id}' not found",
            "RESOURCE_NOT_FOUND", ErrorCategory.RESOURCE_NOT_FOUND,
            ErrorSeverity.ERROR, context, 404,
        )
        self.resource_type = resource_type
        self.resource_id = resource_id


class DuplicateRecordError(BeaverNetError):
    """A unique column already holds the submitted value."""
    def __init__(self, collection: str, context: ErrorContext | None = None):
        super().__init__(
            f"A {collection} record with the same unique value already exists",
            "DUPLICATE_RECORD", ErrorCategory.CONFLICT,
            ErrorSeverity.ERROR, context, 409,
        )
        self.collection = collection


class ConstraintViolationError(BeaverNetError):
    """A write broke a NOT NULL or other non-unique constraint."""
    def __init__(self, collection: str, context: ErrorContext | None = None):
        super().__init__(
            f"The {collection} record breaks a database constraint",
            "CONSTRAINT_VIOLATION", ErrorCategory.VALIDATION,
            ErrorSeverity.ERROR, context, 400,
        )
        self.collection = collection


class CallTakerVerificationError(BeaverNetError):
    """Employee PIN or chip card did not match (no Basic challenge)."""
    def __init__(self, method: str, context: ErrorContext | None = None):
        super().__init__(
            f"Invalid {method}", "CALL_TAKER_VERIFICATION_FAILED",
            ErrorCategory.AUTHENTICATION, ErrorSeverity.WARNING, context, 401,
        )
        self.method = method


# --- Infrastructure Errors (500-level) ---------------------------

class DatabaseError(BeaverNetError):
    """Database operation failed."""
    def __init__(self, message: str, operation: str, context: ErrorContext | None = None):
        super().__init__(
            f"Database {operation} failed: {message}",
            "DATABASE_ERROR", ErrorCategory.DATABASE,
            ErrorSeverity.CRITICAL, context, 503,
        )
        self.operation = operation


class PaymentNotConfiguredError(BeaverNetError):
    """PayPal credentials are absent from the settings."""
    def __init__(self, context: ErrorContext | None = None):
        super().__init__(
            "PayPal is not configured",
            "PAYMENT_NOT_CONFIGURED", ErrorCategory.EXTERNAL_API,
            ErrorSeverity.ERROR, context, 503,
        )

    def to_response(self) -> dict:
        return {"error": self.message}


class PaymentGatewayError(BeaverNetError):
    """PayPal could not be reached or answered with an unreadable body."""
    def __init__(self, message: str, operation: str, context: ErrorContext | None = None):
        super().__init__(
            message, "PAYMENT_GATEWAY_ERROR", ErrorCategory.EXTERNAL_API,
            ErrorSeverity.CRITICAL, context, 500,
        )
        self.operation = operation

    def to_response(self) -> dict:
        return {"error": self.message}
