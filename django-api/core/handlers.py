"""DRF exception handler that maps domain errors to HTTP responses.

Handlers never expose internal error details: only the error code, the
user-safe message and any fields the error explicitly marks as public.
"""

import logging

from rest_framework import status
from rest_framework.response import Response
from rest_framework.views import exception_handler

from core.errors import DomainError

logger = logging.getLogger(__name__)

STATUS_BY_CODE = {
    "EVENT_NOT_FOUND": status.HTTP_404_NOT_FOUND,
    "TICKET_NOT_FOUND": status.HTTP_404_NOT_FOUND,
    "INVALID_EVENT_ID": status.HTTP_400_BAD_REQUEST,
    "INVALID_USER_ID": status.HTTP_400_BAD_REQUEST,
    "INVALID_TICKET_CODE": status.HTTP_400_BAD_REQUEST,
    "INVALID_TICKET_PRICE": status.HTTP_400_BAD_REQUEST,
    "INVALID_PAGINATION": status.HTTP_400_BAD_REQUEST,
    "INVALID_TRANSITION": status.HTTP_409_CONFLICT,
    "INVALID_TICKET_STATE": status.HTTP_409_CONFLICT,
    "CAPACITY_EXCEEDED": status.HTTP_409_CONFLICT,
    "EVENT_NOT_OPEN": status.HTTP_409_CONFLICT,
    "DUPLICATE_TICKET": status.HTTP_409_CONFLICT,
    "TICKET_EXPIRED": status.HTTP_410_GONE,
    "TICKET_ID_EXHAUSTED": status.HTTP_503_SERVICE_UNAVAILABLE,
    "MODEL_NOT_READY": status.HTTP_503_SERVICE_UNAVAILABLE,
}


def domain_exception_handler(exc, context):
    if not isinstance(exc, DomainError):
        return exception_handler(exc, context)

    code = exc.code.value
    http_status = STATUS_BY_CODE.get(code, status.HTTP_400_BAD_REQUEST)
    view = context.get("view")
    logger.info(
        "Domain error",
        extra={
            "code": code,
            "status_code": http_status,
            "view": type(view).__name__ if view is not None else None,
        },
    )
    body = {"code": code, "message": exc.message}
    public = exc.public_details()
    if public:
        body["details"] = public
    return Response(body, status=http_status)
