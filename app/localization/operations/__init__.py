"""Operation results and status codes."""

from localization.operations.result import OperationResult
from localization.operations.status import OperationStatus

__all__ = ["OperationResult", "OperationStatus"]
