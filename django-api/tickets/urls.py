from django.urls import path

from tickets.handlers import (
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

urlpatterns = [
    path("tickets", TicketIssueView.as_view(), name="ticket-issue"),
    path("tickets/validate", TicketValidateView.as_view(), name="ticket-validate"),
    path("tickets/<str:ticket_id>", TicketDetailView.as_view(), name="ticket-detail"),
    path("tickets/<str:ticket_id>/use", TicketUseView.as_view(), name="ticket-use"),
    path(
        "tickets/<str:ticket_id>/cancel",
        TicketCancelView.as_view(),
        name="ticket-cancel",
    ),
    path(
        "users/<str:user_id>/tickets",
        UserTicketListView.as_view(),
        name="user-ticket-list",
    ),
    path(
        "events/<str:event_id>/tickets",
        EventTicketListView.as_view(),
        name="event-ticket-list",
    ),
    path(
        "events/<str:event_id>/ticket-stats",
        EventTicketStatsView.as_view(),
        name="event-ticket-stats",
    ),
    path(
        "events/<str:event_id>/capacity",
        EventCapacityView.as_view(),
        name="event-capacity",
    ),
]
