from tickets.handlers.views import (
    EventCapacityView,
    EventTicketListView,
    EventTicketStatsView,
    TicketCancelView,
    TicketDetailView,
    TicketIssueView,
    TicketUseView,
    TicketValidateView,
    UserTicketListView,
)

__all__ = [
    "EventCapacityView",
    "EventTicketListView",
    "EventTicketStatsView",
    "TicketCancelView",
    "TicketDetailView",
    "TicketIssueView",
    "TicketUseView",
    "TicketValidateView",
    "UserTicketListView",
]
