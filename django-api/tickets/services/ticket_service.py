"""Ticket service - all business logic lives here.

Services:
- Depend only on interfaces (stores)
- Validate domain invariants
- Perform orchestration and error mapping
- Return domain models or domain errors

Capacity admission is two-step: a count of valid and used tickets against
the event's seat limit, then an atomic conditional increment of the event's
attendee counter inside the same unit of work as the ticket insert. The
counter is what closes the race between concurrent issuers.
"""

import logging

from core.clock import Clock
from core.pagination import Page, PageRequest
from events.domain import EmployerId, Event, EventId
from events.domain.errors import EventNotFoundError, EventNotOpenError, InvalidEventIdError
from events.stores.interfaces import EventStore
from tickets.domain import (
    CapacityStatus,
    Money,
    QRSigner,
    Ticket,
    TicketIdGenerator,
    TicketSource,
    TicketStats,
    TicketStatus,
    TicketType,
    TicketView,
    UserId,
    is_ticket_code,
)
from tickets.domain.errors import (
    CapacityExceededError,
    DuplicateTicketError,
    InvalidPaginationError,
    InvalidTicketCodeError,
    InvalidTicketStateError,
    InvalidTransitionError,
    InvalidUserIdError,
    TicketExpiredError,
    TicketIdExhaustedError,
    TicketNotFoundError,
)
from tickets.domain.models import validate_price
from tickets.stores.interfaces import TicketIdCollisionError, TicketStore

logger = logging.getLogger(__name__)

DEFAULT_MAX_ID_ATTEMPTS = 5


class TicketService:
    """Service for ticket issuance, check-in and reporting."""

    def __init__(
        self,
        tickets: TicketStore,
        events: EventStore,
        signer: QRSigner,
        id_generator: TicketIdGenerator,
        clock: Clock,
        max_id_attempts: int = DEFAULT_MAX_ID_ATTEMPTS,
    ) -> None:
        self._tickets = tickets
        self._events = events
        self._signer = signer
        self._id_generator = id_generator
        self._clock = clock
        self._max_id_attempts = max_id_attempts

    def issue(
        self,
        event_id: EventId,
        user_id: UserId,
        employer_id: EmployerId,
        ticket_type: TicketType,
        price: Money,
        source: TicketSource = TicketSource.WEB,
    ) -> Ticket:
        """Create and persist a valid ticket with a fresh code and QR payload.

        Raises:
            InvalidTicketPriceError: If the price contradicts the ticket type.
            TicketIdExhaustedError: If every generated code was already taken.
        """
        validate_price(ticket_type, price)
        now = self._clock.now()
        for attempt in range(1, self._max_id_attempts + 1):
            ticket_id = self._id_generator.generate(now)
            ticket = Ticket.issue(
                ticket_id=ticket_id,
                qr_payload=self._signer.sign(ticket_id, str(event_id), str(user_id)),
                event_id=event_id,
                user_id=user_id,
                employer_id=employer_id,
                ticket_type=ticket_type,
                ticket_price=price,
                issued_at=now,
                source=source,
            )
            try:
                self._tickets.add(ticket)
            except TicketIdCollisionError:
                logger.warning(
                    "Ticket ID collision, regenerating",
                    extra={"ticket_id": ticket_id, "attempt": attempt},
                )
                continue
            logger.info(
                "Ticket issued",
                extra={
                    "ticket_id": ticket.ticket_id,
                    "event_id": str(event_id),
                    "ticket_type": ticket_type.value,
                },
            )
            return ticket
        raise TicketIdExhaustedError()

    def issue_for_event(
        self,
        event_id: str,
        user_id: str,
        ticket_type: TicketType,
        price: Money,
        source: TicketSource = TicketSource.WEB,
    ) -> Ticket:
        """Register a user for an event and issue their ticket.

        The employer is copied from the event at this point and never
        re-derived later.

        Raises:
            InvalidTicketPriceError: If the price contradicts the ticket type.
            InvalidEventIdError / InvalidUserIdError: For malformed IDs.
            EventNotFoundError: If the event does not exist.
            EventNotOpenError: If the event is not approved.
            DuplicateTicketError: If the user already holds a valid ticket.
            CapacityExceededError: If the event has no seats left.
        """
        validate_price(ticket_type, price)
        event = self._load_event(event_id)
        if not event.is_open_for_tickets:
            raise EventNotOpenError(event_id)
        uid = _parse_user_id(user_id)

        with self._tickets.atomic():
            if self._tickets.has_valid_ticket(event.id, uid):
                raise DuplicateTicketError()
            self._admit(event)
            return self.issue(event.id, uid, event.employer_id, ticket_type, price, source)

    def capacity_status(self, event_id: str) -> CapacityStatus:
        event = self._load_event(event_id)
        return self._capacity_of(event)

    def check_capacity(self, event_id: str) -> CapacityStatus:
        """Admission check without reserving a seat.

        Raises:
            CapacityExceededError: If the event is full.
        """
        event = self._load_event(event_id)
        status = self._capacity_of(event)
        if status.is_full:
            raise CapacityExceededError(event_id)
        return status

    def get_ticket(self, ticket_id: str) -> Ticket:
        if not is_ticket_code(ticket_id):
            raise TicketNotFoundError()
        ticket = self._tickets.get_by_ticket_id(ticket_id)
        if ticket is None:
            raise TicketNotFoundError()
        return ticket

    def mark_used(self, ticket_id: str) -> Ticket:
        """Check a ticket in. Not idempotent: a second call fails.

        Raises:
            TicketNotFoundError: If the ticket does not exist.
            InvalidTransitionError: If the ticket is not valid.
        """
        ticket = self.get_ticket(ticket_id)
        used = ticket.mark_used(self._clock.now())
        if not self._tickets.save_transition(used, expected=TicketStatus.VALID):
            raise InvalidTransitionError(self.get_ticket(ticket_id).status.value, "used")
        logger.info("Ticket marked as used", extra={"ticket_id": ticket_id})
        return used

    def cancel(self, ticket_id: str) -> Ticket:
        """Cancel a ticket and release its seat. Not idempotent.

        Raises:
            TicketNotFoundError: If the ticket does not exist.
            InvalidTransitionError: If the ticket is not valid.
        """
        ticket = self.get_ticket(ticket_id)
        cancelled = ticket.cancel(self._clock.now())
        with self._tickets.atomic():
            if not self._tickets.save_transition(cancelled, expected=TicketStatus.VALID):
                raise InvalidTransitionError(
                    self.get_ticket(ticket_id).status.value, "cancelled"
                )
            self._events.release_seat(ticket.event_id)
        logger.info("Ticket cancelled", extra={"ticket_id": ticket_id})
        return cancelled

    def validate(self, payload: str) -> TicketView:
        """Verify a scanned QR payload and return the ticket's public view.

        Raises:
            InvalidTicketCodeError: If the payload is malformed or tampered.
            TicketNotFoundError: If no ticket matches the embedded identifiers.
            InvalidTicketStateError: If the ticket was used or cancelled.
            TicketExpiredError: If the ticket is more than a year old.
        """
        identity = self._signer.verify(payload)
        if identity is None:
            logger.warning("Rejected QR payload")
            raise InvalidTicketCodeError()

        try:
            event_id = EventId.from_string(identity.event_id)
            user_id = UserId.from_string(identity.user_id)
        except ValueError:
            raise TicketNotFoundError() from None

        ticket = self._tickets.get_by_identity(identity.ticket_id, event_id, user_id)
        if ticket is None:
            raise TicketNotFoundError()
        if ticket.status is not TicketStatus.VALID:
            logger.info(
                "Presented ticket is not valid",
                extra={"ticket_id": ticket.ticket_id, "status": ticket.status.value},
            )
            raise InvalidTicketStateError(
                ticket.ticket_id,
                ticket.status.value,
                used_at=ticket.used_at,
                cancelled_at=ticket.cancelled_at,
            )
        if ticket.is_expired(self._clock.now()):
            raise TicketExpiredError()
        return ticket.public_view()

    def list_user_tickets(
        self,
        user_id: str,
        status: TicketStatus | None = None,
        event_id: str | None = None,
        page: int = 1,
        limit: int = 10,
    ) -> Page[Ticket]:
        uid = _parse_user_id(user_id)
        eid = _parse_event_id(event_id) if event_id is not None else None
        return self._tickets.list_for_user(uid, _page_request(page, limit), status, eid)

    def list_event_tickets(
        self,
        event_id: str,
        status: TicketStatus | None = None,
        page: int = 1,
        limit: int = 10,
    ) -> Page[Ticket]:
        event = self._load_event(event_id)
        return self._tickets.list_for_event(event.id, _page_request(page, limit), status)

    def event_ticket_stats(self, event_id: str) -> TicketStats:
        event = self._load_event(event_id)
        return self._tickets.stats_for_event(event.id)

    def _load_event(self, event_id: str) -> Event:
        event = self._events.get_event(_parse_event_id(event_id))
        if event is None:
            raise EventNotFoundError(event_id)
        return event

    def _capacity_of(self, event: Event) -> CapacityStatus:
        limit = event.seats_limit.value if event.seats_limit is not None else None
        return CapacityStatus(
            seats_limit=limit,
            taken=self._tickets.count_active_for_event(event.id),
        )

    def _admit(self, event: Event) -> None:
        if self._capacity_of(event).is_full or not self._events.reserve_seat(event.id):
            logger.info("Event at capacity", extra={"event_id": str(event.id)})
            raise CapacityExceededError(str(event.id))


def _parse_event_id(value: str) -> EventId:
    try:
        return EventId.from_string(value)
    except (AttributeError, TypeError, ValueError):
        raise InvalidEventIdError() from None


def _parse_user_id(value: str) -> UserId:
    try:
        return UserId.from_string(value)
    except (AttributeError, TypeError, ValueError):
        raise InvalidUserIdError() from None


def _page_request(page: int, limit: int) -> PageRequest:
    try:
        return PageRequest(page=page, limit=limit)
    except ValueError as exc:
        raise InvalidPaginationError(str(exc)) from None
