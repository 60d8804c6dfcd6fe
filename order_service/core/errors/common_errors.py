"""Common error classes used across all layers.

Error Types:
- ValidationError: Caller input is malformed (client fault, never retried)
- NotFoundError: Referenced resource does not exist
- ConflictError: Resource already exists (duplicate id)

Usage:
    from order_service.core.errors import ValidationError
    from order_service.core.enums import ErrorCode
    from order_service.core.result import Failure

    return Failure(error=ValidationError(
        code=ErrorCode.INVALID_USER_ID,
        message="User ID must not be empty",
        field="user_id",
    ))
"""

from dataclasses import dataclass

from order_service.core.errors.domain_error import DomainError


@dataclass(frozen=True, slots=True, kw_only=True)
class ValidationError(DomainError):
    """Input validation failure.

    Attributes:
        code: ErrorCode enum.
        message: Human-readable message.
        field: Field name that failed validation.
        details: Additional context.
    """

    field: str | None = None


@dataclass(frozen=True, slots=True, kw_only=True)
class NotFoundError(DomainError):
    """Resource not found.

    Attributes:
        code: ErrorCode enum.
        message: Human-readable message.
        resource_type: Type of resource (Order).
        resource_id: ID of the resource that was not found.
        details: Additional context.
    """

    resource_type: str
    resource_id: str


@dataclass(frozen=True, slots=True, kw_only=True)
class ConflictError(DomainError):
    """Resource conflict (duplicate identifier).

    Attributes:
        code: ErrorCode enum.
        message: Human-readable message.
        resource_type: Type of resource in conflict.
        conflicting_field: Field that has conflict (id).
        details: Additional context.
    """

    resource_type: str
    conflicting_field: str | None = None
