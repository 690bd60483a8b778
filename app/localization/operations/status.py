"""Outcome classes for translation store writes.

A DynamoDB throttle or timeout on a translation row is worth retrying; a row
rejected by validation, or a key missing from its (language, market) pair,
is reported back to the caller as is.
"""

from enum import Enum


class OperationStatus(Enum):
    """How a write against a translation row ended.

    Attributes:
        SUCCESS: Row written or deleted
        TRANSIENT_ERROR: Store throttled or timed out
        PERMANENT_ERROR: Row rejected (malformed, access denied)
        NOT_FOUND: No row for the (key, language, market) triple
    """

    SUCCESS = "success"
    TRANSIENT_ERROR = "transient_error"
    PERMANENT_ERROR = "permanent_error"
    NOT_FOUND = "not_found"

    @property
    def is_retryable(self) -> bool:
        return self is OperationStatus.TRANSIENT_ERROR
