"""Operation status enumeration.

Status codes used to classify the outcome of catalog operations so callers
can pick their own fallback without catching exceptions.
"""

from enum import Enum


class OperationStatus(Enum):
    """Status codes for operation results.

    Attributes:
        SUCCESS: Operation completed successfully
        NOT_FOUND: Catalog source missing or unreadable
        PERMANENT_ERROR: Non-recoverable error (malformed catalog, failed bootstrap)
    """

    SUCCESS = "success"
    NOT_FOUND = "not_found"
    PERMANENT_ERROR = "permanent_error"
