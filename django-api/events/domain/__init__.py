from events.domain.models import Event, EventStatus
from events.domain.value_objects import Capacity, EmployerId, EventId

__all__ = [
    "Event",
    "EventStatus",
    "EventId",
    "EmployerId",
    "Capacity",
]
