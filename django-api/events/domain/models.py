"""Domain models representing persisted state.

These are pure domain objects with no API input rules.
Django ORM models are in events/models.py (persistence layer).
"""

from dataclasses import dataclass
from datetime import datetime
from enum import Enum

from events.domain.value_objects import Capacity, EmployerId, EventId


class EventStatus(Enum):
    PENDING = "pending"
    APPROVED = "approved"
    REJECTED = "rejected"


@dataclass(frozen=True)
class Event:
    """Domain representation of an Event.

    Only the fields ticketing needs: ownership, moderation status and seats.
    """

    id: EventId
    employer_id: EmployerId
    title: str
    status: EventStatus
    seats_limit: Capacity | None
    attendees_count: int
    created_at: datetime
    updated_at: datetime

    @property
    def is_open_for_tickets(self) -> bool:
        return self.status is EventStatus.APPROVED
