"""Django ORM models (persistence layer).

These models handle database concerns. Domain logic lives in domain/models.py.
Tickets are audit records: the event foreign key is PROTECT and nothing in
the codebase deletes them.
"""

import uuid

from django.db import models


class Ticket(models.Model):
    """Persistence model for tickets."""

    class Type(models.TextChoices):
        FREE = "Free"
        PAID = "Paid"

    class Status(models.TextChoices):
        VALID = "valid"
        USED = "used"
        CANCELLED = "cancelled"

    class Source(models.TextChoices):
        WEB = "web"
        MOBILE = "mobile"
        API = "api"

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    ticket_id = models.CharField(max_length=32, unique=True)
    qr_payload = models.CharField(max_length=255, unique=True)
    event = models.ForeignKey(
        "events.Event", on_delete=models.PROTECT, related_name="tickets"
    )
    user_id = models.UUIDField(db_index=True)
    employer_id = models.UUIDField(db_index=True)
    ticket_type = models.CharField(max_length=8, choices=Type.choices)
    ticket_price = models.DecimalField(max_digits=10, decimal_places=2, default=0)
    status = models.CharField(
        max_length=16, choices=Status.choices, default=Status.VALID, db_index=True
    )
    source = models.CharField(max_length=8, choices=Source.choices, default=Source.WEB)
    issued_at = models.DateTimeField(db_index=True)
    used_at = models.DateTimeField(null=True, blank=True)
    cancelled_at = models.DateTimeField(null=True, blank=True)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ["-issued_at"]
        indexes = [
            models.Index(fields=["event", "user_id"], name="tickets_event_user_idx"),
            models.Index(fields=["event", "status"], name="tickets_event_status_idx"),
            models.Index(
                fields=["employer_id", "status"], name="tickets_employer_status_idx"
            ),
        ]
        constraints = [
            models.CheckConstraint(
                condition=(
                    models.Q(ticket_type="Free", ticket_price=0)
                    | models.Q(ticket_type="Paid", ticket_price__gt=0)
                ),
                name="tickets_price_matches_type",
            ),
        ]

    def __str__(self) -> str:
        return self.ticket_id
