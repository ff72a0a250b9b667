"""Store interfaces (repository pattern).

Stores must be swappable and return domain models.
"""

from abc import ABC, abstractmethod
from contextlib import AbstractContextManager

from core.pagination import Page, PageRequest
from events.domain import EventId
from tickets.domain import Ticket, TicketStats, TicketStatus, UserId


class TicketIdCollisionError(Exception):
    """Raised by TicketStore.add when the ticket ID or QR payload is taken."""

    def __init__(self, ticket_id: str) -> None:
        super().__init__(f"Ticket identifier already in use: {ticket_id}")
        self.ticket_id = ticket_id


class TicketStore(ABC):
    """Interface for ticket persistence operations."""

    @abstractmethod
    def atomic(self) -> AbstractContextManager:
        """Unit of work: everything inside commits or rolls back together."""
        ...

    @abstractmethod
    def add(self, ticket: Ticket) -> None:
        """Insert a new ticket.

        Raises:
            TicketIdCollisionError: If ticket_id or qr_payload already exists.
        """
        ...

    @abstractmethod
    def get_by_ticket_id(self, ticket_id: str) -> Ticket | None:
        """Return a ticket by its human-readable code, or None."""
        ...

    @abstractmethod
    def get_by_identity(
        self, ticket_id: str, event_id: EventId, user_id: UserId
    ) -> Ticket | None:
        """Return the ticket matching all three identifiers, or None."""
        ...

    @abstractmethod
    def save_transition(self, ticket: Ticket, expected: TicketStatus) -> bool:
        """Persist ticket's status and timestamps if the stored status is still ``expected``.

        Returns False when another writer changed the status first.
        """
        ...

    @abstractmethod
    def count_active_for_event(self, event_id: EventId) -> int:
        """Count tickets for an event that are valid or used."""
        ...

    @abstractmethod
    def has_valid_ticket(self, event_id: EventId, user_id: UserId) -> bool:
        """Check if the user already holds a valid ticket for the event."""
        ...

    @abstractmethod
    def list_for_user(
        self,
        user_id: UserId,
        page: PageRequest,
        status: TicketStatus | None = None,
        event_id: EventId | None = None,
    ) -> Page[Ticket]:
        """Return a user's tickets, newest first."""
        ...

    @abstractmethod
    def list_for_event(
        self,
        event_id: EventId,
        page: PageRequest,
        status: TicketStatus | None = None,
    ) -> Page[Ticket]:
        """Return an event's tickets, newest first."""
        ...

    @abstractmethod
    def stats_for_event(self, event_id: EventId) -> TicketStats:
        """Aggregate counts and revenue for an event."""
        ...
