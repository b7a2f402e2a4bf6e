"""
Custom Exceptions.

Application-specific exception classes for consistent error handling.

Business-rule failures raised by the note creation operation form a
closed set, told apart by type and by BusinessRuleKind rather than by
inspecting error codes.
"""

from enum import Enum


class ApplicationError(Exception):
    """Base exception for all application errors."""

    def __init__(self, message: str, code: str = "SYS_INTERNAL_ERROR") -> None:
        self.message = message
        self.code = code
        super().__init__(self.message)


class DatabaseError(ApplicationError):
    """Raised when the database cannot be reached."""

    def __init__(self, message: str = "Database error") -> None:
        super().__init__(message, code="SYS_DATABASE_ERROR")


class BusinessRuleKind(str, Enum):
    """Named business-rule failure kinds."""

    PARAMETER_REQUIRED = "ParameterRequired"
    VALUE_TOO_LONG = "ValueTooLong"
    AUTHORIZATION_VIOLATION = "AuthorizationViolation"


class BusinessRuleError(ApplicationError):
    """
    Raised when a business rule rejects an otherwise well-formed request.

    Attributes:
        kind: Which rule was violated
        field: Offending field, or the violated relation for authorization failures
    """

    kind: BusinessRuleKind

    def __init__(self, message: str, field: str) -> None:
        self.field = field
        super().__init__(message, code="BUSINESS_RULE_ERROR")

    @property
    def details(self) -> dict:
        return {"kind": self.kind.value, "field": self.field}


class ParameterRequiredError(BusinessRuleError):
    """Raised when a required value is missing or blank."""

    kind = BusinessRuleKind.PARAMETER_REQUIRED

    def __init__(self, field: str) -> None:
        super().__init__(f"{field}Required", field)


class ValueTooLongError(BusinessRuleError):
    """Raised when a value exceeds its maximum length."""

    kind = BusinessRuleKind.VALUE_TOO_LONG

    def __init__(self, field: str, limit: int) -> None:
        self.limit = limit
        super().__init__(f"{field}ExceedsMaxLength", field)

    @property
    def details(self) -> dict:
        return {**super().details, "limit": self.limit}


class AuthorizationViolationError(BusinessRuleError):
    """Raised when a cross-entity ownership check fails."""

    kind = BusinessRuleKind.AUTHORIZATION_VIOLATION

    def __init__(self, reason: str) -> None:
        self.reason = reason
        super().__init__(reason, reason)
