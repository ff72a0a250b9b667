"""Django ORM implementation of the EventStore."""

from django.db.models import F, Q

from events import models
from events.domain import Capacity, EmployerId, Event, EventId, EventStatus
from events.stores.interfaces import EventStore


class DjangoEventStore(EventStore):
    """Database-backed event store using Django ORM."""

    def get_event(self, event_id: EventId) -> Event | None:
        row = models.Event.objects.filter(pk=event_id.value).first()
        if row is None:
            return None
        return to_domain(row)

    def reserve_seat(self, event_id: EventId) -> bool:
        updated = (
            models.Event.objects.filter(pk=event_id.value)
            .filter(
                Q(seats_limit__isnull=True)
                | Q(attendees_count__lt=F("seats_limit"))
            )
            .update(attendees_count=F("attendees_count") + 1)
        )
        return updated == 1

    def release_seat(self, event_id: EventId) -> None:
        models.Event.objects.filter(
            pk=event_id.value, attendees_count__gt=0
        ).update(attendees_count=F("attendees_count") - 1)


def to_domain(row: models.Event) -> Event:
    return Event(
        id=EventId(row.id),
        employer_id=EmployerId(row.employer_id),
        title=row.title,
        status=EventStatus(row.status),
        seats_limit=Capacity(row.seats_limit) if row.seats_limit is not None else None,
        attendees_count=row.attendees_count,
        created_at=row.created_at,
        updated_at=row.updated_at,
    )
