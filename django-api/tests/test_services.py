"""Unit tests for TicketService.

These test orchestration and domain error mapping against in-memory stores.
Run with: pytest tests/test_services.py -v
"""

import uuid
from dataclasses import replace
from datetime import timedelta
from decimal import Decimal

import pytest
from django.core.exceptions import ImproperlyConfigured

from events.domain import EventStatus
from events.domain.errors import EventNotFoundError, EventNotOpenError, InvalidEventIdError
from tests.fakes import SequenceIdGenerator, make_event
from tickets.domain import Money, TicketStatus, TicketType
from tickets.domain.errors import (
    CapacityExceededError,
    DuplicateTicketError,
    InvalidPaginationError,
    InvalidTicketCodeError,
    InvalidTicketPriceError,
    InvalidTicketStateError,
    InvalidTransitionError,
    InvalidUserIdError,
    TicketExpiredError,
    TicketIdExhaustedError,
    TicketNotFoundError,
)
from tickets.services import TicketService
from tickets.services.factory import INSECURE_DEVELOPMENT_SECRET, resolve_signing_secret

FREE = Money.zero()


def issue(service, event, user_id=None, ticket_type=TicketType.FREE, price=FREE):
    return service.issue_for_event(
        str(event.id), user_id or str(uuid.uuid4()), ticket_type, price
    )


class TestIssue:
    """Tests for issuing tickets."""

    def test_issue_creates_valid_ticket(self, service, event, user_id, clock):
        ticket = issue(service, event, user_id)
        assert ticket.status is TicketStatus.VALID
        assert ticket.issued_at == clock.now()
        assert str(ticket.user_id) == user_id

    def test_issue_copies_employer_from_event(self, service, event):
        assert issue(service, event).employer_id == event.employer_id

    def test_issue_embeds_verifiable_payload(self, service, event, signer):
        ticket = issue(service, event)
        identity = signer.verify(ticket.qr_payload)
        assert identity.ticket_id == ticket.ticket_id
        assert identity.event_id == str(event.id)
        assert identity.user_id == str(ticket.user_id)

    def test_paid_ticket(self, service, event):
        ticket = issue(service, event, ticket_type=TicketType.PAID, price=Money(Decimal("25")))
        assert ticket.ticket_price.amount == Decimal("25")

    def test_free_ticket_with_price_is_rejected(self, service, event, ticket_store):
        with pytest.raises(InvalidTicketPriceError):
            issue(service, event, price=Money(Decimal("10")))
        assert ticket_store.tickets == {}

    def test_paid_ticket_without_price_is_rejected(self, service, event):
        with pytest.raises(InvalidTicketPriceError):
            issue(service, event, ticket_type=TicketType.PAID)

    def test_unknown_event(self, service):
        with pytest.raises(EventNotFoundError):
            service.issue_for_event(str(uuid.uuid4()), str(uuid.uuid4()), TicketType.FREE, FREE)

    def test_malformed_event_id(self, service):
        with pytest.raises(InvalidEventIdError):
            service.issue_for_event("nope", str(uuid.uuid4()), TicketType.FREE, FREE)

    def test_malformed_user_id(self, service, event):
        with pytest.raises(InvalidUserIdError):
            issue(service, event, user_id="nope")

    def test_pending_event_is_not_open(self, service, event_store):
        pending = make_event(status=EventStatus.PENDING)
        event_store.events[pending.id] = pending
        with pytest.raises(EventNotOpenError):
            issue(service, pending)

    def test_second_valid_ticket_for_same_user_is_rejected(self, service, event, user_id):
        issue(service, event, user_id)
        with pytest.raises(DuplicateTicketError):
            issue(service, event, user_id)

    def test_user_can_reissue_after_cancel(self, service, event, user_id):
        first = issue(service, event, user_id)
        service.cancel(first.ticket_id)
        assert issue(service, event, user_id).status is TicketStatus.VALID


class TestCapacity:
    """Tests for capacity admission."""

    @pytest.fixture
    def event(self):
        return make_event(seats_limit=1)

    def test_second_ticket_exceeds_single_seat(self, service, event):
        issue(service, event)
        with pytest.raises(CapacityExceededError):
            issue(service, event)

    def test_rejected_issue_creates_nothing(self, service, event, ticket_store):
        issue(service, event)
        with pytest.raises(CapacityExceededError):
            issue(service, event)
        assert len(ticket_store.tickets) == 1

    def test_used_ticket_still_holds_seat(self, service, event):
        ticket = issue(service, event)
        service.mark_used(ticket.ticket_id)
        with pytest.raises(CapacityExceededError):
            issue(service, event)

    def test_cancel_frees_seat(self, service, event, event_store):
        ticket = issue(service, event)
        service.cancel(ticket.ticket_id)
        assert event_store.events[event.id].attendees_count == 0
        assert issue(service, event).status is TicketStatus.VALID

    def test_counter_rejects_when_count_passes(self, service, event, event_store):
        event_store.events[event.id] = replace(event, attendees_count=1)
        with pytest.raises(CapacityExceededError):
            issue(service, event)

    def test_capacity_status(self, service, event):
        issue(service, event)
        status = service.capacity_status(str(event.id))
        assert status.seats_limit == 1
        assert status.taken == 1
        assert status.remaining == 0

    def test_check_capacity_raises_when_full(self, service, event):
        issue(service, event)
        with pytest.raises(CapacityExceededError):
            service.check_capacity(str(event.id))

    def test_unlimited_event_admits(self, service, event_store):
        unlimited = make_event()
        event_store.events[unlimited.id] = unlimited
        for _ in range(3):
            issue(service, unlimited)
        assert service.check_capacity(str(unlimited.id)).remaining is None


class TestTicketIdCollision:
    """Generated IDs are retried when they collide."""

    def make_service(self, ticket_store, event_store, signer, clock, *codes):
        return TicketService(
            tickets=ticket_store,
            events=event_store,
            signer=signer,
            id_generator=SequenceIdGenerator(*codes),
            clock=clock,
            max_id_attempts=3,
        )

    def test_collision_is_retried(self, ticket_store, event_store, signer, clock, event):
        service = self.make_service(
            ticket_store, event_store, signer, clock,
            "TCKT-20250314-0001", "TCKT-20250314-0001", "TCKT-20250314-0002",
        )  # fmt: skip
        issue(service, event)
        second = issue(service, event)
        assert second.ticket_id == "TCKT-20250314-0002"

    def test_exhausted_attempts(self, ticket_store, event_store, signer, clock, event):
        service = self.make_service(
            ticket_store, event_store, signer, clock, "TCKT-20250314-0001"
        )
        issue(service, event)
        with pytest.raises(TicketIdExhaustedError):
            issue(service, event)


class TestTransitions:
    """Tests for mark_used and cancel."""

    def test_mark_used(self, service, event, clock):
        ticket = issue(service, event)
        clock.current += timedelta(hours=1)
        used = service.mark_used(ticket.ticket_id)
        assert used.status is TicketStatus.USED
        assert used.used_at == clock.now()

    def test_mark_used_twice_fails(self, service, event, clock, ticket_store):
        ticket = issue(service, event)
        first = service.mark_used(ticket.ticket_id)
        clock.current += timedelta(hours=1)
        with pytest.raises(InvalidTransitionError):
            service.mark_used(ticket.ticket_id)
        assert ticket_store.tickets[ticket.ticket_id].used_at == first.used_at

    def test_cancel_after_use_fails(self, service, event):
        ticket = issue(service, event)
        service.mark_used(ticket.ticket_id)
        with pytest.raises(InvalidTransitionError) as exc_info:
            service.cancel(ticket.ticket_id)
        assert "used" in exc_info.value.message

    def test_cancel_twice_fails(self, service, event):
        ticket = issue(service, event)
        service.cancel(ticket.ticket_id)
        with pytest.raises(InvalidTransitionError):
            service.cancel(ticket.ticket_id)

    def test_unknown_ticket(self, service):
        with pytest.raises(TicketNotFoundError):
            service.mark_used("TCKT-20250314-9999")

    def test_malformed_ticket_code_is_not_looked_up(self, service):
        with pytest.raises(TicketNotFoundError):
            service.get_ticket("DROP TABLE")


class TestValidate:
    """Tests for validating scanned QR payloads."""

    def test_valid_ticket_returns_public_view(self, service, event):
        ticket = issue(service, event)
        view = service.validate(ticket.qr_payload)
        assert view.ticket_id == ticket.ticket_id
        assert view.status is TicketStatus.VALID

    @pytest.mark.parametrize(
        "payload", ["", "garbage", "a|b|c|0123456789abcdef", "t|e|u|\ud800"]
    )
    def test_bad_payload_is_generic_invalid_code(self, service, payload):
        with pytest.raises(InvalidTicketCodeError) as exc_info:
            service.validate(payload)
        assert exc_info.value.message == "Invalid QR code"

    def test_tampered_signature(self, service, event):
        payload = issue(service, event).qr_payload
        tampered = payload[:-1] + ("0" if payload[-1] != "0" else "1")
        with pytest.raises(InvalidTicketCodeError):
            service.validate(tampered)

    def test_signed_but_unknown_ticket(self, service, signer):
        payload = signer.sign("TCKT-20250314-0001", str(uuid.uuid4()), str(uuid.uuid4()))
        with pytest.raises(TicketNotFoundError):
            service.validate(payload)

    def test_signed_with_non_uuid_ids(self, service, signer):
        payload = signer.sign("TCKT-20250314-0001", "event", "user")
        with pytest.raises(TicketNotFoundError):
            service.validate(payload)

    def test_used_ticket_reports_status(self, service, event):
        ticket = issue(service, event)
        service.mark_used(ticket.ticket_id)
        with pytest.raises(InvalidTicketStateError) as exc_info:
            service.validate(ticket.qr_payload)
        assert "used" in exc_info.value.message
        assert exc_info.value.public_details()["used_at"] is not None

    def test_cancelled_ticket_reports_status(self, service, event):
        ticket = issue(service, event)
        service.cancel(ticket.ticket_id)
        with pytest.raises(InvalidTicketStateError) as exc_info:
            service.validate(ticket.qr_payload)
        assert exc_info.value.status == "cancelled"

    def test_expired_ticket(self, service, event, clock):
        ticket = issue(service, event)
        clock.current += timedelta(days=400)
        with pytest.raises(TicketExpiredError):
            service.validate(ticket.qr_payload)

    def test_ticket_100_days_old_is_valid(self, service, event, clock):
        ticket = issue(service, event)
        clock.current += timedelta(days=100)
        assert service.validate(ticket.qr_payload).ticket_id == ticket.ticket_id


class TestListingAndStats:
    """Tests for listing and aggregate queries."""

    def test_list_user_tickets_filters_by_status(self, service, event, user_id):
        ticket = issue(service, event, user_id)
        service.cancel(ticket.ticket_id)
        issue(service, event, user_id)

        page = service.list_user_tickets(user_id, status=TicketStatus.CANCELLED)
        assert page.total == 1
        assert page.items[0].ticket_id == ticket.ticket_id

    def test_list_event_tickets_paginates(self, service, event):
        for _ in range(3):
            issue(service, event)
        page = service.list_event_tickets(str(event.id), page=2, limit=2)
        assert page.total == 3
        assert len(page.items) == 1
        assert page.has_prev and not page.has_next

    def test_invalid_pagination(self, service, event):
        with pytest.raises(InvalidPaginationError):
            service.list_event_tickets(str(event.id), limit=0)

    def test_list_for_unknown_event(self, service):
        with pytest.raises(EventNotFoundError):
            service.list_event_tickets(str(uuid.uuid4()))

    def test_stats(self, service, event):
        issue(service, event, ticket_type=TicketType.PAID, price=Money(Decimal("25")))
        issue(service, event, ticket_type=TicketType.PAID, price=Money(Decimal("15.50")))
        used = issue(service, event)
        service.mark_used(used.ticket_id)

        stats = service.event_ticket_stats(str(event.id))
        assert stats.total_tickets == 3
        assert stats.paid_tickets == 2
        assert stats.free_tickets == 1
        assert stats.used_tickets == 1
        assert stats.valid_tickets == 2
        assert stats.total_revenue == Decimal("40.50")


class TestSigningSecret:
    """Tests for resolving TICKET_SECRET from settings."""

    def test_configured_secret_is_used(self, settings):
        settings.TICKET_SECRET = "configured"
        assert resolve_signing_secret() == "configured"

    def test_missing_secret_is_fatal_in_production(self, settings):
        settings.TICKET_SECRET = None
        settings.DEPLOYMENT_ENVIRONMENT = "production"
        with pytest.raises(ImproperlyConfigured):
            resolve_signing_secret()

    def test_missing_secret_falls_back_in_development(self, settings):
        settings.TICKET_SECRET = ""
        settings.DEPLOYMENT_ENVIRONMENT = "development"
        assert resolve_signing_secret() == INSECURE_DEVELOPMENT_SECRET
