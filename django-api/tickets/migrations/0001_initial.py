import uuid

import django.db.models.deletion
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        ("events", "0001_initial"),
    ]

    operations = [
        migrations.CreateModel(
            name="Ticket",
            fields=[
                (
                    "id",
                    models.UUIDField(
                        default=uuid.uuid4,
                        editable=False,
                        primary_key=True,
                        serialize=False,
                    ),
                ),
                ("ticket_id", models.CharField(max_length=32, unique=True)),
                ("qr_payload", models.CharField(max_length=255, unique=True)),
                ("user_id", models.UUIDField(db_index=True)),
                ("employer_id", models.UUIDField(db_index=True)),
                (
                    "ticket_type",
                    models.CharField(
                        choices=[("Free", "Free"), ("Paid", "Paid")], max_length=8
                    ),
                ),
                (
                    "ticket_price",
                    models.DecimalField(decimal_places=2, default=0, max_digits=10),
                ),
                (
                    "status",
                    models.CharField(
                        choices=[
                            ("valid", "Valid"),
                            ("used", "Used"),
                            ("cancelled", "Cancelled"),
                        ],
                        db_index=True,
                        default="valid",
                        max_length=16,
                    ),
                ),
                (
                    "source",
                    models.CharField(
                        choices=[("web", "Web"), ("mobile", "Mobile"), ("api", "Api")],
                        default="web",
                        max_length=8,
                    ),
                ),
                ("issued_at", models.DateTimeField(db_index=True)),
                ("used_at", models.DateTimeField(blank=True, null=True)),
                ("cancelled_at", models.DateTimeField(blank=True, null=True)),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("updated_at", models.DateTimeField(auto_now=True)),
                (
                    "event",
                    models.ForeignKey(
                        on_delete=django.db.models.deletion.PROTECT,
                        related_name="tickets",
                        to="events.event",
                    ),
                ),
            ],
            options={
                "ordering": ["-issued_at"],
                "indexes": [
                    models.Index(
                        fields=["event", "user_id"], name="tickets_event_user_idx"
                    ),
                    models.Index(
                        fields=["event", "status"], name="tickets_event_status_idx"
                    ),
                    models.Index(
                        fields=["employer_id", "status"],
                        name="tickets_employer_status_idx",
                    ),
                ],
                "constraints": [
                    models.CheckConstraint(
                        condition=(
                            models.Q(ticket_type="Free", ticket_price=0)
                            | models.Q(ticket_type="Paid", ticket_price__gt=0)
                        ),
                        name="tickets_price_matches_type",
                    ),
                ],
            },
        ),
    ]
