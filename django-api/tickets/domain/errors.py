"""Domain error codes for the tickets module."""

from datetime import datetime
from enum import Enum
from typing import Any

from core.errors import DomainError


class ErrorCode(Enum):
    """Domain error codes."""

    TICKET_NOT_FOUND = "TICKET_NOT_FOUND"
    INVALID_TICKET_CODE = "INVALID_TICKET_CODE"
    INVALID_TICKET_PRICE = "INVALID_TICKET_PRICE"
    INVALID_TRANSITION = "INVALID_TRANSITION"
    INVALID_TICKET_STATE = "INVALID_TICKET_STATE"
    TICKET_EXPIRED = "TICKET_EXPIRED"
    CAPACITY_EXCEEDED = "CAPACITY_EXCEEDED"
    DUPLICATE_TICKET = "DUPLICATE_TICKET"
    INVALID_USER_ID = "INVALID_USER_ID"
    INVALID_PAGINATION = "INVALID_PAGINATION"
    TICKET_ID_EXHAUSTED = "TICKET_ID_EXHAUSTED"


class TicketNotFoundError(DomainError):
    """Raised when no ticket matches a code or an identifying triple."""

    def __init__(self) -> None:
        super().__init__(
            code=ErrorCode.TICKET_NOT_FOUND,
            message="Ticket not found",
        )


class InvalidTicketCodeError(DomainError):
    """Raised for malformed or tampered QR payloads.

    The message is deliberately generic: callers must not learn which part
    of the check failed.
    """

    def __init__(self) -> None:
        super().__init__(
            code=ErrorCode.INVALID_TICKET_CODE,
            message="Invalid QR code",
        )


class InvalidTicketPriceError(DomainError):
    """Raised when the price contradicts the ticket type."""

    def __init__(self, message: str) -> None:
        super().__init__(
            code=ErrorCode.INVALID_TICKET_PRICE,
            message=message,
        )


class InvalidTransitionError(DomainError):
    """Raised when mark-used or cancel is attempted on a non-valid ticket."""

    def __init__(self, current_status: str, action: str) -> None:
        super().__init__(
            code=ErrorCode.INVALID_TRANSITION,
            message=f"Ticket is {current_status} and cannot be {action}",
        )
        self.current_status = current_status

    def public_details(self) -> dict[str, Any]:
        return {"status": self.current_status}


class InvalidTicketStateError(DomainError):
    """Raised when a presented ticket is no longer valid."""

    def __init__(
        self,
        ticket_id: str,
        status: str,
        used_at: datetime | None = None,
        cancelled_at: datetime | None = None,
    ) -> None:
        super().__init__(
            code=ErrorCode.INVALID_TICKET_STATE,
            message=f"Ticket is {status}",
        )
        self.ticket_id = ticket_id
        self.status = status
        self.used_at = used_at
        self.cancelled_at = cancelled_at

    def public_details(self) -> dict[str, Any]:
        return {
            "ticket_id": self.ticket_id,
            "status": self.status,
            "used_at": self.used_at.isoformat() if self.used_at else None,
            "cancelled_at": self.cancelled_at.isoformat() if self.cancelled_at else None,
        }


class TicketExpiredError(DomainError):
    """Raised when a presented ticket is older than one year."""

    def __init__(self) -> None:
        super().__init__(
            code=ErrorCode.TICKET_EXPIRED,
            message="Ticket has expired",
        )


class CapacityExceededError(DomainError):
    """Raised when an event has no seats left."""

    def __init__(self, event_id: str) -> None:
        super().__init__(
            code=ErrorCode.CAPACITY_EXCEEDED,
            message="Event is at full capacity",
        )
        self.event_id = event_id


class DuplicateTicketError(DomainError):
    """Raised when the user already holds a valid ticket for the event."""

    def __init__(self) -> None:
        super().__init__(
            code=ErrorCode.DUPLICATE_TICKET,
            message="User already has a valid ticket for this event",
        )


class InvalidUserIdError(DomainError):
    """Raised when a user ID is invalid."""

    def __init__(self) -> None:
        super().__init__(
            code=ErrorCode.INVALID_USER_ID,
            message="Invalid user ID format",
        )


class InvalidPaginationError(DomainError):
    """Raised for out-of-range page or limit values."""

    def __init__(self, message: str) -> None:
        super().__init__(
            code=ErrorCode.INVALID_PAGINATION,
            message=message,
        )


class TicketIdExhaustedError(DomainError):
    """Raised when every generated ticket ID collided with an existing one."""

    def __init__(self) -> None:
        super().__init__(
            code=ErrorCode.TICKET_ID_EXHAUSTED,
            message="Could not allocate a ticket ID, please retry",
        )
