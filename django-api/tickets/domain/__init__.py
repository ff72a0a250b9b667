from tickets.domain.identifiers import TicketIdGenerator, is_ticket_code
from tickets.domain.models import (
    ACTIVE_STATUSES,
    CapacityStatus,
    Ticket,
    TicketSource,
    TicketStats,
    TicketStatus,
    TicketType,
    TicketView,
)
from tickets.domain.signing import QRSigner
from tickets.domain.value_objects import Money, QRIdentity, UserId

__all__ = [
    "ACTIVE_STATUSES",
    "CapacityStatus",
    "Ticket",
    "TicketSource",
    "TicketStats",
    "TicketStatus",
    "TicketType",
    "TicketView",
    "TicketIdGenerator",
    "is_ticket_code",
    "QRSigner",
    "Money",
    "QRIdentity",
    "UserId",
]
