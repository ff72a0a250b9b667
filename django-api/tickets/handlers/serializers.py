"""Serializers for request parsing and for rendering ticket domain models."""

from rest_framework import serializers

from core.pagination import MAX_PAGE_SIZE
from tickets.domain import TicketSource, TicketStatus, TicketType


class IssueTicketSerializer(serializers.Serializer):
    event_id = serializers.UUIDField()
    user_id = serializers.UUIDField()
    ticket_type = serializers.ChoiceField(choices=[t.value for t in TicketType])
    ticket_price = serializers.DecimalField(
        max_digits=10, decimal_places=2, min_value=0, default=0
    )
    source = serializers.ChoiceField(
        choices=[s.value for s in TicketSource], default=TicketSource.WEB.value
    )


class ValidateTicketSerializer(serializers.Serializer):
    qr_payload = serializers.CharField(max_length=512, trim_whitespace=True)


class TicketListQuerySerializer(serializers.Serializer):
    status = serializers.ChoiceField(
        choices=[s.value for s in TicketStatus], required=False
    )
    event_id = serializers.UUIDField(required=False)
    page = serializers.IntegerField(min_value=1, default=1)
    limit = serializers.IntegerField(min_value=1, max_value=MAX_PAGE_SIZE, default=10)


class TicketSerializer(serializers.Serializer):
    """Full ticket for its holder or the event owner, QR payload included."""

    ticket_id = serializers.CharField()
    qr_payload = serializers.CharField()
    event_id = serializers.CharField()
    user_id = serializers.CharField()
    employer_id = serializers.CharField()
    ticket_type = serializers.CharField(source="ticket_type.value")
    ticket_price = serializers.DecimalField(
        source="ticket_price.amount", max_digits=10, decimal_places=2
    )
    status = serializers.CharField(source="status.value")
    source = serializers.CharField(source="source.value")
    issued_at = serializers.DateTimeField()
    used_at = serializers.DateTimeField(allow_null=True)
    cancelled_at = serializers.DateTimeField(allow_null=True)


class TicketViewSerializer(serializers.Serializer):
    """Public view returned to scanners after validation."""

    ticket_id = serializers.CharField()
    status = serializers.CharField(source="status.value")
    ticket_type = serializers.CharField(source="ticket_type.value")
    ticket_price = serializers.DecimalField(
        source="ticket_price.amount", max_digits=10, decimal_places=2
    )
    issued_at = serializers.DateTimeField()
    event_id = serializers.CharField()
    user_id = serializers.CharField()
    employer_id = serializers.CharField()


class TicketStatsSerializer(serializers.Serializer):
    total_tickets = serializers.IntegerField()
    valid_tickets = serializers.IntegerField()
    used_tickets = serializers.IntegerField()
    cancelled_tickets = serializers.IntegerField()
    free_tickets = serializers.IntegerField()
    paid_tickets = serializers.IntegerField()
    total_revenue = serializers.DecimalField(max_digits=12, decimal_places=2)


class CapacityStatusSerializer(serializers.Serializer):
    seats_limit = serializers.IntegerField(allow_null=True)
    taken = serializers.IntegerField()
    remaining = serializers.IntegerField(allow_null=True)
    is_full = serializers.BooleanField()


def serialize_page(page) -> dict:
    return {
        "tickets": TicketSerializer(page.items, many=True).data,
        "pagination": {
            "current": page.request.page,
            "pages": page.pages,
            "total": page.total,
            "has_next": page.has_next,
            "has_prev": page.has_prev,
        },
    }
