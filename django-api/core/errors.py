"""Base domain error shared by every app."""

from dataclasses import dataclass
from enum import Enum
from typing import Any


@dataclass(frozen=True)
class DomainError(Exception):
    """Base domain error with code and user-safe message."""

    code: Enum
    message: str

    def __str__(self) -> str:
        return f"{self.code.value}: {self.message}"

    def public_details(self) -> dict[str, Any]:
        """Extra fields that are safe to return to API clients."""
        return {}
