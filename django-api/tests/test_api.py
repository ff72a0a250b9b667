"""Integration tests for the HTTP API.

These validate status codes and response shapes, including domain error mapping.
Run with: pytest tests/test_api.py -v
"""

import uuid
from datetime import timedelta

import pytest
from django.apps import apps
from django.utils import timezone
from rest_framework.test import APIClient

from events import models as event_models
from salary.estimator import SalaryEstimator
from tickets import models as ticket_models


@pytest.fixture
def event_row():
    return event_models.Event.objects.create(
        employer_id=uuid.uuid4(),
        title="Data Engineering Summit",
        status=event_models.Event.Status.APPROVED,
        seats_limit=1,
    )


def issue(api_client: APIClient, event_row, **overrides):
    payload = {
        "event_id": str(event_row.id),
        "user_id": str(uuid.uuid4()),
        "ticket_type": "Free",
    }
    payload.update(overrides)
    return api_client.post("/api/tickets", payload, format="json")


@pytest.mark.django_db
class TestIssueTicket:
    """Tests for POST /api/tickets"""

    def test_issue_returns_created_ticket(self, api_client, event_row):
        response = issue(api_client, event_row)
        assert response.status_code == 201
        body = response.json()
        assert body["status"] == "valid"
        assert body["ticket_type"] == "Free"
        assert body["ticket_price"] == "0.00"
        assert body["employer_id"] == str(event_row.employer_id)
        assert body["qr_payload"].startswith(body["ticket_id"] + "|")

    def test_free_ticket_with_price(self, api_client, event_row):
        response = issue(api_client, event_row, ticket_price="10.00")
        assert response.status_code == 400
        assert response.json()["code"] == "INVALID_TICKET_PRICE"

    def test_unknown_event(self, api_client):
        response = api_client.post(
            "/api/tickets",
            {"event_id": str(uuid.uuid4()), "user_id": str(uuid.uuid4()), "ticket_type": "Free"},
            format="json",
        )
        assert response.status_code == 404
        assert response.json() == {"code": "EVENT_NOT_FOUND", "message": "Event not found"}

    def test_capacity_exceeded(self, api_client, event_row):
        assert issue(api_client, event_row).status_code == 201
        response = issue(api_client, event_row)
        assert response.status_code == 409
        assert response.json()["code"] == "CAPACITY_EXCEEDED"

    def test_pending_event(self, api_client, event_row):
        event_row.status = event_models.Event.Status.PENDING
        event_row.save()
        response = issue(api_client, event_row)
        assert response.status_code == 409
        assert response.json()["code"] == "EVENT_NOT_OPEN"

    def test_malformed_request(self, api_client, event_row):
        response = issue(api_client, event_row, ticket_type="VIP")
        assert response.status_code == 400
        assert "ticket_type" in response.json()


@pytest.mark.django_db
class TestValidateTicket:
    """Tests for POST /api/tickets/validate"""

    def validate(self, api_client, payload):
        return api_client.post("/api/tickets/validate", {"qr_payload": payload}, format="json")

    def test_valid_ticket(self, api_client, event_row):
        ticket = issue(api_client, event_row).json()
        response = self.validate(api_client, ticket["qr_payload"])
        assert response.status_code == 200
        body = response.json()
        assert body["message"] == "Ticket is valid"
        assert body["ticket"]["ticket_id"] == ticket["ticket_id"]
        assert "qr_payload" not in body["ticket"]

    def test_tampered_payload(self, api_client, event_row):
        payload = issue(api_client, event_row).json()["qr_payload"]
        tampered = payload[:-1] + ("0" if payload[-1] != "0" else "1")
        response = self.validate(api_client, tampered)
        assert response.status_code == 400
        assert response.json() == {"code": "INVALID_TICKET_CODE", "message": "Invalid QR code"}

    def test_used_ticket(self, api_client, event_row):
        ticket = issue(api_client, event_row).json()
        api_client.post(f"/api/tickets/{ticket['ticket_id']}/use")
        response = self.validate(api_client, ticket["qr_payload"])
        assert response.status_code == 409
        body = response.json()
        assert body["code"] == "INVALID_TICKET_STATE"
        assert body["details"]["status"] == "used"
        assert body["details"]["used_at"] is not None

    def test_expired_ticket(self, api_client, event_row):
        ticket = issue(api_client, event_row).json()
        ticket_models.Ticket.objects.filter(ticket_id=ticket["ticket_id"]).update(
            issued_at=timezone.now() - timedelta(days=400)
        )
        response = self.validate(api_client, ticket["qr_payload"])
        assert response.status_code == 410
        assert response.json()["code"] == "TICKET_EXPIRED"


@pytest.mark.django_db
class TestTicketTransitions:
    """Tests for GET /api/tickets/{id}, POST .../use and .../cancel"""

    def test_get_ticket(self, api_client, event_row):
        ticket = issue(api_client, event_row).json()
        response = api_client.get(f"/api/tickets/{ticket['ticket_id']}")
        assert response.status_code == 200
        assert response.json()["ticket_id"] == ticket["ticket_id"]

    def test_get_unknown_ticket(self, api_client):
        response = api_client.get("/api/tickets/TCKT-20250314-0000")
        assert response.status_code == 404
        assert response.json()["code"] == "TICKET_NOT_FOUND"

    def test_use_twice(self, api_client, event_row):
        ticket_id = issue(api_client, event_row).json()["ticket_id"]
        first = api_client.post(f"/api/tickets/{ticket_id}/use")
        assert first.status_code == 200
        assert first.json()["status"] == "used"

        second = api_client.post(f"/api/tickets/{ticket_id}/use")
        assert second.status_code == 409
        assert second.json()["code"] == "INVALID_TRANSITION"
        assert second.json()["details"] == {"status": "used"}

    def test_cancel_frees_seat(self, api_client, event_row):
        ticket_id = issue(api_client, event_row).json()["ticket_id"]
        response = api_client.post(f"/api/tickets/{ticket_id}/cancel")
        assert response.status_code == 200
        assert response.json()["cancelled_at"] is not None
        assert issue(api_client, event_row).status_code == 201


@pytest.mark.django_db
class TestListings:
    """Tests for user and event listings, stats and capacity."""

    def test_user_tickets(self, api_client, event_row):
        user_id = str(uuid.uuid4())
        issue(api_client, event_row, user_id=user_id)
        response = api_client.get(f"/api/users/{user_id}/tickets")
        assert response.status_code == 200
        body = response.json()
        assert len(body["tickets"]) == 1
        assert body["pagination"] == {
            "current": 1,
            "pages": 1,
            "total": 1,
            "has_next": False,
            "has_prev": False,
        }

    def test_user_tickets_invalid_user(self, api_client):
        response = api_client.get("/api/users/not-a-uuid/tickets")
        assert response.status_code == 400
        assert response.json()["code"] == "INVALID_USER_ID"

    def test_event_tickets_limit_out_of_range(self, api_client, event_row):
        response = api_client.get(f"/api/events/{event_row.id}/tickets?limit=500")
        assert response.status_code == 400

    def test_event_stats(self, api_client, event_row):
        issue(api_client, event_row)
        response = api_client.get(f"/api/events/{event_row.id}/ticket-stats")
        assert response.status_code == 200
        assert response.json()["total_tickets"] == 1
        assert response.json()["total_revenue"] == "0.00"

    def test_event_capacity(self, api_client, event_row):
        issue(api_client, event_row)
        response = api_client.get(f"/api/events/{event_row.id}/capacity")
        assert response.json() == {"seats_limit": 1, "taken": 1, "remaining": 0, "is_full": True}

    def test_capacity_invalid_event_id(self, api_client):
        response = api_client.get("/api/events/123/capacity")
        assert response.status_code == 400
        assert response.json()["code"] == "INVALID_EVENT_ID"


class TestSalaryPredict:
    """Tests for POST /api/salary/predict"""

    PROFILE = {
        "skills": ["Python", "AWS", "Docker"],
        "location": "Bangalore, Karnataka",
        "experience_level": "senior",
        "education": [{"degree": "Master of Technology"}],
        "category": "technology",
        "title": "Backend Engineer",
    }

    def test_untrained_model_is_unavailable(self, api_client, monkeypatch):
        monkeypatch.setattr(apps.get_app_config("salary"), "estimator", SalaryEstimator(seed=1))
        response = api_client.post("/api/salary/predict", self.PROFILE, format="json")
        assert response.status_code == 503
        assert response.json()["code"] == "MODEL_NOT_READY"

    def test_prediction_report(self, api_client, monkeypatch, trained_estimator):
        monkeypatch.setattr(apps.get_app_config("salary"), "estimator", trained_estimator)
        response = api_client.post("/api/salary/predict", self.PROFILE, format="json")
        assert response.status_code == 200
        body = response.json()
        predicted = body["predicted"]
        assert predicted["currency"] == "INR"
        assert predicted["min"] <= predicted["average"] <= predicted["max"]
        assert 50 <= body["confidence"] <= 95
        assert body["market_comparison"]["status"] in {"above", "below", "at"}
        assert {i["factor"] for i in body["market_insights"]} == {"Location", "Skills", "Experience"}
        assert body["breakdown"]["total"] == round(predicted["average"])

    def test_empty_profile_is_accepted(self, api_client, monkeypatch, trained_estimator):
        monkeypatch.setattr(apps.get_app_config("salary"), "estimator", trained_estimator)
        response = api_client.post("/api/salary/predict", {}, format="json")
        assert response.status_code == 200
        assert response.json()["market_insights"] == []

    def test_invalid_skills_type(self, api_client, monkeypatch, trained_estimator):
        monkeypatch.setattr(apps.get_app_config("salary"), "estimator", trained_estimator)
        response = api_client.post("/api/salary/predict", {"skills": "python"}, format="json")
        assert response.status_code == 400
