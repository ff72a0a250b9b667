"""Tamper-evident QR payloads.

A payload is ``ticket_id|event_id|user_id|signature`` where the signature is
the first 16 hex characters of HMAC-SHA256 over ``ticket_id|event_id|user_id``.
"""

import hashlib
import hmac

from tickets.domain.value_objects import QRIdentity

SEPARATOR = "|"
SIGNATURE_LENGTH = 16
FIELD_COUNT = 4


class QRSigner:
    """Signs and verifies QR payloads with a server-held secret."""

    def __init__(self, secret: str | bytes) -> None:
        if not secret:
            raise ValueError("Signing secret must not be empty")
        self._key = secret.encode("utf-8") if isinstance(secret, str) else secret

    def __repr__(self) -> str:
        return f"{type(self).__name__}(secret=***)"

    def sign(self, ticket_id: str, event_id: str, user_id: str) -> str:
        fields = (ticket_id, event_id, user_id)
        for field in fields:
            if not field or SEPARATOR in field:
                raise ValueError("Payload fields must be non-empty and free of separators")
        message = SEPARATOR.join(fields)
        return f"{message}{SEPARATOR}{self._signature(message)}"

    def verify(self, payload: object) -> QRIdentity | None:
        """Return the embedded identity, or None for anything not signed by us."""
        if not isinstance(payload, str):
            return None
        parts = payload.split(SEPARATOR)
        if len(parts) != FIELD_COUNT:
            return None
        ticket_id, event_id, user_id, signature = parts
        if not (ticket_id and event_id and user_id):
            return None
        try:
            expected = self._signature(SEPARATOR.join((ticket_id, event_id, user_id)))
            matches = hmac.compare_digest(signature.encode("utf-8"), expected.encode("utf-8"))
        except UnicodeEncodeError:
            # Lone surrogates cannot come from a payload we signed
            return None
        if not matches:
            return None
        return QRIdentity(ticket_id=ticket_id, event_id=event_id, user_id=user_id)

    def _signature(self, message: str) -> str:
        digest = hmac.new(self._key, message.encode("utf-8"), hashlib.sha256)
        return digest.hexdigest()[:SIGNATURE_LENGTH]
