"""Wiring of TicketService from Django settings."""

import logging

from django.conf import settings
from django.core.exceptions import ImproperlyConfigured

from core.clock import SystemClock
from events.stores.django_store import DjangoEventStore
from tickets.domain import QRSigner, TicketIdGenerator
from tickets.services.ticket_service import TicketService
from tickets.stores.django_store import DjangoTicketStore

logger = logging.getLogger(__name__)

# Never acceptable outside development and test deployments
INSECURE_DEVELOPMENT_SECRET = "insecure-development-ticket-secret"


def resolve_signing_secret() -> str:
    """Return TICKET_SECRET, failing loudly when it is missing in production."""
    secret = getattr(settings, "TICKET_SECRET", None)
    if secret:
        return secret
    if getattr(settings, "DEPLOYMENT_ENVIRONMENT", "production") == "production":
        raise ImproperlyConfigured("TICKET_SECRET must be set in production")
    logger.warning("TICKET_SECRET is not set, using the insecure development secret")
    return INSECURE_DEVELOPMENT_SECRET


def build_ticket_service() -> TicketService:
    return TicketService(
        tickets=DjangoTicketStore(),
        events=DjangoEventStore(),
        signer=QRSigner(resolve_signing_secret()),
        id_generator=TicketIdGenerator(),
        clock=SystemClock(),
        max_id_attempts=settings.TICKET_ID_MAX_ATTEMPTS,
    )
