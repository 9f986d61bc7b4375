"""Operation result types and status enums.

Standardized result types returned by infrastructure clients.
"""

from infrastructure.operations.result import OperationResult
from infrastructure.operations.status import OperationStatus

__all__ = [
    "OperationResult",
    "OperationStatus",
]
