"""Human-readable ticket identifiers.

Format: ``TCKT-<YYYYMMDD>-<NNNN>``. The four-digit suffix is random, so
identifiers collide; uniqueness is enforced by the store and the service
retries generation on collision.
"""

import random
import re
from datetime import datetime

TICKET_CODE_PREFIX = "TCKT"
SUFFIX_SPACE = 10_000

TICKET_CODE_PATTERN = re.compile(r"TCKT-[0-9]{8}-[0-9]{4}")


class TicketIdGenerator:
    def __init__(self, rng: random.Random | None = None) -> None:
        self._rng = rng or random.SystemRandom()

    def generate(self, on: datetime) -> str:
        suffix = self._rng.randrange(SUFFIX_SPACE)
        return f"{TICKET_CODE_PREFIX}-{on:%Y%m%d}-{suffix:04d}"


def is_ticket_code(value: str) -> bool:
    return TICKET_CODE_PATTERN.fullmatch(value) is not None
