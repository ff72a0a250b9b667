"""HTTP handlers (views) - handle HTTP concerns only.

Handlers:
- Parse requests and validate input format
- Call services for business logic
- Never contain business logic
- Never expose internal error details

Domain errors propagate to core.handlers.domain_exception_handler, which maps
them to HTTP responses.
"""

from decimal import Decimal

from rest_framework import status
from rest_framework.request import Request
from rest_framework.response import Response
from rest_framework.views import APIView

from tickets.domain import Money, TicketSource, TicketStatus, TicketType
from tickets.handlers.serializers import (
    CapacityStatusSerializer,
    IssueTicketSerializer,
    TicketListQuerySerializer,
    TicketSerializer,
    TicketStatsSerializer,
    TicketViewSerializer,
    ValidateTicketSerializer,
    serialize_page,
)
from tickets.services import TicketService
from tickets.services.factory import build_ticket_service


class TicketServiceMixin:
    def get_service(self) -> TicketService:
        return build_ticket_service()


def _list_query(request: Request) -> dict:
    query = TicketListQuerySerializer(data=request.query_params)
    query.is_valid(raise_exception=True)
    data = dict(query.validated_data)
    if "status" in data:
        data["status"] = TicketStatus(data["status"])
    if "event_id" in data:
        data["event_id"] = str(data["event_id"])
    return data


class TicketIssueView(TicketServiceMixin, APIView):
    """Handler for POST /api/tickets"""

    def post(self, request: Request) -> Response:
        payload = IssueTicketSerializer(data=request.data)
        payload.is_valid(raise_exception=True)
        data = payload.validated_data
        ticket = self.get_service().issue_for_event(
            event_id=str(data["event_id"]),
            user_id=str(data["user_id"]),
            ticket_type=TicketType(data["ticket_type"]),
            price=Money(Decimal(data["ticket_price"])),
            source=TicketSource(data["source"]),
        )
        return Response(TicketSerializer(ticket).data, status=status.HTTP_201_CREATED)


class TicketValidateView(TicketServiceMixin, APIView):
    """Handler for POST /api/tickets/validate"""

    def post(self, request: Request) -> Response:
        payload = ValidateTicketSerializer(data=request.data)
        payload.is_valid(raise_exception=True)
        view = self.get_service().validate(payload.validated_data["qr_payload"])
        return Response({"message": "Ticket is valid", "ticket": TicketViewSerializer(view).data})


class TicketDetailView(TicketServiceMixin, APIView):
    """Handler for GET /api/tickets/{ticket_id}"""

    def get(self, request: Request, ticket_id: str) -> Response:
        ticket = self.get_service().get_ticket(ticket_id)
        return Response(TicketSerializer(ticket).data)


class TicketUseView(TicketServiceMixin, APIView):
    """Handler for POST /api/tickets/{ticket_id}/use"""

    def post(self, request: Request, ticket_id: str) -> Response:
        ticket = self.get_service().mark_used(ticket_id)
        return Response(TicketSerializer(ticket).data)


class TicketCancelView(TicketServiceMixin, APIView):
    """Handler for POST /api/tickets/{ticket_id}/cancel"""

    def post(self, request: Request, ticket_id: str) -> Response:
        ticket = self.get_service().cancel(ticket_id)
        return Response(TicketSerializer(ticket).data)


class UserTicketListView(TicketServiceMixin, APIView):
    """Handler for GET /api/users/{user_id}/tickets"""

    def get(self, request: Request, user_id: str) -> Response:
        page = self.get_service().list_user_tickets(user_id, **_list_query(request))
        return Response(serialize_page(page))


class EventTicketListView(TicketServiceMixin, APIView):
    """Handler for GET /api/events/{event_id}/tickets"""

    def get(self, request: Request, event_id: str) -> Response:
        query = _list_query(request)
        query.pop("event_id", None)
        page = self.get_service().list_event_tickets(event_id, **query)
        return Response(serialize_page(page))


class EventTicketStatsView(TicketServiceMixin, APIView):
    """Handler for GET /api/events/{event_id}/ticket-stats"""

    def get(self, request: Request, event_id: str) -> Response:
        stats = self.get_service().event_ticket_stats(event_id)
        return Response(TicketStatsSerializer(stats).data)


class EventCapacityView(TicketServiceMixin, APIView):
    """Handler for GET /api/events/{event_id}/capacity"""

    def get(self, request: Request, event_id: str) -> Response:
        capacity = self.get_service().capacity_status(event_id)
        return Response(CapacityStatusSerializer(capacity).data)
