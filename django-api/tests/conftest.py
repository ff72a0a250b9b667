"""Pytest configuration and shared fixtures."""

import uuid

import pytest
from rest_framework.test import APIClient

from events.domain import Event
from salary.estimator import SalaryEstimator
from tests.fakes import NOW, FixedClock, InMemoryEventStore, InMemoryTicketStore, make_event
from tickets.domain import QRSigner, TicketIdGenerator
from tickets.services import TicketService

SECRET = "unit-test-secret"


@pytest.fixture
def api_client() -> APIClient:
    return APIClient()


@pytest.fixture
def clock() -> FixedClock:
    return FixedClock(NOW)


@pytest.fixture
def signer() -> QRSigner:
    return QRSigner(SECRET)


@pytest.fixture
def event() -> Event:
    return make_event()


@pytest.fixture
def event_store(event: Event) -> InMemoryEventStore:
    return InMemoryEventStore(event)


@pytest.fixture
def ticket_store() -> InMemoryTicketStore:
    return InMemoryTicketStore()


@pytest.fixture
def service(ticket_store, event_store, signer, clock) -> TicketService:
    return TicketService(
        tickets=ticket_store,
        events=event_store,
        signer=signer,
        id_generator=TicketIdGenerator(),
        clock=clock,
    )


@pytest.fixture
def user_id() -> str:
    return str(uuid.uuid4())


@pytest.fixture(scope="session")
def trained_estimator():
    estimator = SalaryEstimator(seed=7)
    estimator.train_on_reference_data(epochs=20)
    return estimator
