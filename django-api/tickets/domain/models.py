"""Domain models representing persisted state.

These are pure domain objects with no API input rules.
Django ORM models are in tickets/models.py (persistence layer).

A ticket moves from ``valid`` to exactly one of ``used`` or ``cancelled`` and
never leaves those states. Transitions return a new Ticket; the original is
left untouched.
"""

from dataclasses import dataclass, replace
from datetime import datetime
from decimal import Decimal
from enum import Enum
from typing import Self

from events.domain import EmployerId, EventId
from tickets.domain.errors import InvalidTicketPriceError, InvalidTransitionError
from tickets.domain.value_objects import Money, UserId


class TicketStatus(Enum):
    VALID = "valid"
    USED = "used"
    CANCELLED = "cancelled"


class TicketType(Enum):
    FREE = "Free"
    PAID = "Paid"


class TicketSource(Enum):
    WEB = "web"
    MOBILE = "mobile"
    API = "api"


ACTIVE_STATUSES = (TicketStatus.VALID, TicketStatus.USED)


def validate_price(ticket_type: TicketType, price: Money) -> None:
    """Free tickets cost nothing; paid tickets cost something."""
    if ticket_type is TicketType.FREE and price.amount != 0:
        raise InvalidTicketPriceError("Free tickets must have price 0")
    if ticket_type is TicketType.PAID and price.amount <= 0:
        raise InvalidTicketPriceError("Paid tickets must have price greater than 0")


def one_year_before(moment: datetime) -> datetime:
    try:
        return moment.replace(year=moment.year - 1)
    except ValueError:
        # 29 February
        return moment.replace(year=moment.year - 1, day=28)


@dataclass(frozen=True)
class TicketView:
    """What a scanner sees after a successful validation."""

    ticket_id: str
    status: TicketStatus
    ticket_type: TicketType
    ticket_price: Money
    issued_at: datetime
    event_id: EventId
    user_id: UserId
    employer_id: EmployerId


@dataclass(frozen=True)
class Ticket:
    """Domain representation of an issued ticket.

    ``employer_id`` is copied from the event when the ticket is issued and is
    never refreshed afterwards.
    """

    ticket_id: str
    qr_payload: str
    event_id: EventId
    user_id: UserId
    employer_id: EmployerId
    ticket_type: TicketType
    ticket_price: Money
    status: TicketStatus
    issued_at: datetime
    used_at: datetime | None = None
    cancelled_at: datetime | None = None
    source: TicketSource = TicketSource.WEB

    def __post_init__(self) -> None:
        validate_price(self.ticket_type, self.ticket_price)

    @classmethod
    def issue(
        cls,
        *,
        ticket_id: str,
        qr_payload: str,
        event_id: EventId,
        user_id: UserId,
        employer_id: EmployerId,
        ticket_type: TicketType,
        ticket_price: Money,
        issued_at: datetime,
        source: TicketSource = TicketSource.WEB,
    ) -> Self:
        return cls(
            ticket_id=ticket_id,
            qr_payload=qr_payload,
            event_id=event_id,
            user_id=user_id,
            employer_id=employer_id,
            ticket_type=ticket_type,
            ticket_price=ticket_price,
            status=TicketStatus.VALID,
            issued_at=issued_at,
            source=source,
        )

    def is_expired(self, now: datetime) -> bool:
        return self.issued_at < one_year_before(now)

    def mark_used(self, now: datetime) -> Self:
        if self.status is not TicketStatus.VALID:
            raise InvalidTransitionError(self.status.value, "used")
        return replace(self, status=TicketStatus.USED, used_at=now)

    def cancel(self, now: datetime) -> Self:
        if self.status is not TicketStatus.VALID:
            raise InvalidTransitionError(self.status.value, "cancelled")
        return replace(self, status=TicketStatus.CANCELLED, cancelled_at=now)

    def public_view(self) -> TicketView:
        return TicketView(
            ticket_id=self.ticket_id,
            status=self.status,
            ticket_type=self.ticket_type,
            ticket_price=self.ticket_price,
            issued_at=self.issued_at,
            event_id=self.event_id,
            user_id=self.user_id,
            employer_id=self.employer_id,
        )


@dataclass(frozen=True)
class CapacityStatus:
    """Seat usage for an event; ``seats_limit`` None means unlimited."""

    seats_limit: int | None
    taken: int

    @property
    def remaining(self) -> int | None:
        if self.seats_limit is None:
            return None
        return max(0, self.seats_limit - self.taken)

    @property
    def is_full(self) -> bool:
        return self.seats_limit is not None and self.taken >= self.seats_limit


@dataclass(frozen=True)
class TicketStats:
    """Per-event ticket counts and revenue."""

    total_tickets: int = 0
    valid_tickets: int = 0
    used_tickets: int = 0
    cancelled_tickets: int = 0
    free_tickets: int = 0
    paid_tickets: int = 0
    total_revenue: Decimal = Decimal("0")
