"""Operation result types and status enums.

Standardized result types returned by catalog operations instead of
raising, so that load failures reach the caller as values.
"""

from localekit.operations.result import OperationResult
from localekit.operations.status import OperationStatus

__all__ = [
    "OperationResult",
    "OperationStatus",
]
