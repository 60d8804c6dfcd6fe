"""Infrastructure layer error types.

Infrastructure errors represent failures in external systems (order store,
notification bus).

Architecture:
- Infrastructure catches exceptions and maps to DomainError
- Infrastructure errors inherit from DomainError (not Exception)
- Uses InfrastructureErrorCode for internal error tracking
- Used with Result types for error propagation
"""

from dataclasses import dataclass
from typing import Any

from order_service.core.errors import DomainError
from order_service.infrastructure.enums import InfrastructureErrorCode


@dataclass(frozen=True, slots=True, kw_only=True)
class InfrastructureError(DomainError):
    """Base infrastructure error.

    Attributes:
        code: Domain ErrorCode (maps from InfrastructureErrorCode).
        message: Human-readable message.
        infrastructure_code: Original infrastructure error code.
        details: Additional context.
    """

    infrastructure_code: InfrastructureErrorCode | None = None
    details: dict[str, Any] | None = None


@dataclass(frozen=True, slots=True, kw_only=True)
class StoreError(InfrastructureError):
    """Order store failure (StoreFailure).

    Wraps Redis exceptions and undecodable documents. Not retried by the use
    cases; surfaced to callers as an internal fault.
    """

    pass


@dataclass(frozen=True, slots=True, kw_only=True)
class NotificationError(InfrastructureError):
    """Notification bus failure (PublishFailure).

    Contained in the detached notification path; never returned to an
    order use case caller.

    Attributes:
        channel: Pub/sub channel the publish targeted.
    """

    channel: str | None = None
