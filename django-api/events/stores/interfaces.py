"""Store interfaces (repository pattern).

Stores must be swappable and return domain models.
"""

from abc import ABC, abstractmethod

from events.domain import Event, EventId


class EventStore(ABC):
    """Interface for event persistence operations."""

    @abstractmethod
    def get_event(self, event_id: EventId) -> Event | None:
        """Return an event by ID, or None if not found."""
        ...

    @abstractmethod
    def reserve_seat(self, event_id: EventId) -> bool:
        """Atomically increment attendees_count if below seats_limit.

        Events without a seats limit always accept. Returns False when the
        event is full.
        """
        ...

    @abstractmethod
    def release_seat(self, event_id: EventId) -> None:
        """Atomically decrement attendees_count, never below zero."""
        ...
