"""Operation result dataclass.

Store writes, DynamoDB calls and translation manager writes report their
outcome as an OperationResult instead of raising.
"""

from dataclasses import dataclass
from typing import Any, Optional

from localization.operations.status import OperationStatus


@dataclass
class OperationResult:
    """Outcome of one store or AWS operation.

    Attributes:
        status: High-level outcome.
        message: Human-readable summary for logs and import reports.
        data: Optional payload (a TranslationRecord, a DynamoDB response...).
        error_code: Machine error code, e.g. "ThrottlingException" or "not_found".
    """

    status: OperationStatus
    message: str
    data: Optional[Any] = None
    error_code: Optional[str] = None

    @property
    def is_success(self) -> bool:
        return self.status == OperationStatus.SUCCESS

    @property
    def is_retryable(self) -> bool:
        return self.status.is_retryable

    @classmethod
    def success(cls, data: Optional[Any] = None, message: str = "ok") -> "OperationResult":
        return cls(status=OperationStatus.SUCCESS, message=message, data=data)

    @classmethod
    def error(
        cls,
        status: OperationStatus,
        message: str,
        error_code: Optional[str] = None,
        data: Optional[Any] = None,
    ) -> "OperationResult":
        return cls(status=status, message=message, error_code=error_code, data=data)

    @classmethod
    def transient_error(
        cls, message: str, error_code: Optional[str] = None
    ) -> "OperationResult":
        """Retryable failure: throttling, timeouts, store temporarily down."""
        return cls.error(OperationStatus.TRANSIENT_ERROR, message, error_code)

    @classmethod
    def permanent_error(
        cls, message: str, error_code: Optional[str] = None
    ) -> "OperationResult":
        """Non-retryable failure: validation, malformed rows, access denied."""
        return cls.error(OperationStatus.PERMANENT_ERROR, message, error_code)

    @classmethod
    def not_found(cls, message: str) -> "OperationResult":
        return cls.error(OperationStatus.NOT_FOUND, message, "not_found")
