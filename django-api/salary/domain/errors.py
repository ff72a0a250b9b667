"""Domain error codes for the salary module."""

from enum import Enum

from core.errors import DomainError


class ErrorCode(Enum):
    """Domain error codes."""

    MODEL_NOT_READY = "MODEL_NOT_READY"


class ModelNotReadyError(DomainError):
    """Raised when an estimate is requested before the model was trained."""

    def __init__(self) -> None:
        super().__init__(
            code=ErrorCode.MODEL_NOT_READY,
            message="Salary model is not trained yet",
        )
