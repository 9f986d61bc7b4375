"""Operation status enumeration.

Status codes used to classify the outcome of an operation, e.g. a
geolocation lookup, so callers can decide between the happy path, a
non-terminal fallback and a terminal error.
"""

from enum import Enum


class OperationStatus(Enum):
    """Status codes for operation results.

    Attributes:
        SUCCESS: Operation completed successfully
        TRANSIENT_ERROR: Failure of a backing resource (database, I/O)
        PERMANENT_ERROR: Failure caused by the input (validation, parsing)
        NOT_FOUND: Operation succeeded but yielded nothing
    """

    SUCCESS = "success"
    TRANSIENT_ERROR = "transient_error"
    PERMANENT_ERROR = "permanent_error"
    NOT_FOUND = "not_found"
