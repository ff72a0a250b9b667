"""Django ORM implementation of the TicketStore."""

from contextlib import AbstractContextManager
from decimal import Decimal

from django.db import IntegrityError, transaction
from django.db.models import Count, Q, QuerySet, Sum
from django.utils import timezone

from core.pagination import Page, PageRequest
from events.domain import EmployerId, EventId
from tickets import models
from tickets.domain import (
    ACTIVE_STATUSES,
    Money,
    Ticket,
    TicketSource,
    TicketStats,
    TicketStatus,
    TicketType,
    UserId,
)
from tickets.stores.interfaces import TicketIdCollisionError, TicketStore


class DjangoTicketStore(TicketStore):
    """Database-backed ticket store using Django ORM."""

    def atomic(self) -> AbstractContextManager:
        return transaction.atomic()

    def add(self, ticket: Ticket) -> None:
        try:
            # Savepoint, so a collision leaves any outer transaction usable
            with transaction.atomic():
                models.Ticket.objects.create(
                    ticket_id=ticket.ticket_id,
                    qr_payload=ticket.qr_payload,
                    event_id=ticket.event_id.value,
                    user_id=ticket.user_id.value,
                    employer_id=ticket.employer_id.value,
                    ticket_type=ticket.ticket_type.value,
                    ticket_price=ticket.ticket_price.amount,
                    status=ticket.status.value,
                    source=ticket.source.value,
                    issued_at=ticket.issued_at,
                    used_at=ticket.used_at,
                    cancelled_at=ticket.cancelled_at,
                )
        except IntegrityError:
            taken = models.Ticket.objects.filter(
                Q(ticket_id=ticket.ticket_id) | Q(qr_payload=ticket.qr_payload)
            ).exists()
            if taken:
                raise TicketIdCollisionError(ticket.ticket_id) from None
            raise

    def get_by_ticket_id(self, ticket_id: str) -> Ticket | None:
        row = models.Ticket.objects.filter(ticket_id=ticket_id).first()
        return to_domain(row) if row is not None else None

    def get_by_identity(
        self, ticket_id: str, event_id: EventId, user_id: UserId
    ) -> Ticket | None:
        row = models.Ticket.objects.filter(
            ticket_id=ticket_id,
            event_id=event_id.value,
            user_id=user_id.value,
        ).first()
        return to_domain(row) if row is not None else None

    def save_transition(self, ticket: Ticket, expected: TicketStatus) -> bool:
        updated = models.Ticket.objects.filter(
            ticket_id=ticket.ticket_id, status=expected.value
        ).update(
            status=ticket.status.value,
            used_at=ticket.used_at,
            cancelled_at=ticket.cancelled_at,
            updated_at=timezone.now(),
        )
        return updated == 1

    def count_active_for_event(self, event_id: EventId) -> int:
        return models.Ticket.objects.filter(
            event_id=event_id.value,
            status__in=[status.value for status in ACTIVE_STATUSES],
        ).count()

    def has_valid_ticket(self, event_id: EventId, user_id: UserId) -> bool:
        return models.Ticket.objects.filter(
            event_id=event_id.value,
            user_id=user_id.value,
            status=TicketStatus.VALID.value,
        ).exists()

    def list_for_user(
        self,
        user_id: UserId,
        page: PageRequest,
        status: TicketStatus | None = None,
        event_id: EventId | None = None,
    ) -> Page[Ticket]:
        queryset = models.Ticket.objects.filter(user_id=user_id.value)
        if status is not None:
            queryset = queryset.filter(status=status.value)
        if event_id is not None:
            queryset = queryset.filter(event_id=event_id.value)
        return _paginate(queryset, page)

    def list_for_event(
        self,
        event_id: EventId,
        page: PageRequest,
        status: TicketStatus | None = None,
    ) -> Page[Ticket]:
        queryset = models.Ticket.objects.filter(event_id=event_id.value)
        if status is not None:
            queryset = queryset.filter(status=status.value)
        return _paginate(queryset, page)

    def stats_for_event(self, event_id: EventId) -> TicketStats:
        paid = Q(ticket_type=TicketType.PAID.value)
        totals = models.Ticket.objects.filter(event_id=event_id.value).aggregate(
            total_tickets=Count("id"),
            valid_tickets=Count("id", filter=Q(status=TicketStatus.VALID.value)),
            used_tickets=Count("id", filter=Q(status=TicketStatus.USED.value)),
            cancelled_tickets=Count("id", filter=Q(status=TicketStatus.CANCELLED.value)),
            free_tickets=Count("id", filter=Q(ticket_type=TicketType.FREE.value)),
            paid_tickets=Count("id", filter=paid),
            total_revenue=Sum("ticket_price", filter=paid),
        )
        return TicketStats(
            total_tickets=totals["total_tickets"],
            valid_tickets=totals["valid_tickets"],
            used_tickets=totals["used_tickets"],
            cancelled_tickets=totals["cancelled_tickets"],
            free_tickets=totals["free_tickets"],
            paid_tickets=totals["paid_tickets"],
            total_revenue=totals["total_revenue"] or Decimal("0"),
        )


def _paginate(queryset: QuerySet, page: PageRequest) -> Page[Ticket]:
    queryset = queryset.order_by("-issued_at")
    total = queryset.count()
    rows = queryset[page.offset : page.offset + page.limit]
    return Page(items=tuple(to_domain(row) for row in rows), total=total, request=page)


def to_domain(row: models.Ticket) -> Ticket:
    return Ticket(
        ticket_id=row.ticket_id,
        qr_payload=row.qr_payload,
        event_id=EventId(row.event_id),
        user_id=UserId(row.user_id),
        employer_id=EmployerId(row.employer_id),
        ticket_type=TicketType(row.ticket_type),
        ticket_price=Money(Decimal(row.ticket_price)),
        status=TicketStatus(row.status),
        issued_at=row.issued_at,
        used_at=row.used_at,
        cancelled_at=row.cancelled_at,
        source=TicketSource(row.source),
    )
