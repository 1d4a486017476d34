"""
Library exceptions.

Defines the error kinds raised by the vector, matrix and geometry routines.
Each one also derives from the matching builtin so callers can catch either.
"""

from typing import Any, Dict, Optional


class PtsError(Exception):
    """Base exception for pts errors"""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        self.message = message
        self.details = details or {}
        super().__init__(self.message)


class DimensionMismatchError(PtsError, ValueError):
    """Raised when an operation needs more dimensions than a vector has"""

    def __init__(self, operation: str, required: int, actual: int):
        super().__init__(
            message=f"{operation} requires at least {required} dimensions, got {actual}",
            details={"operation": operation, "required": required, "actual": actual}
        )


class InvalidShapeError(PtsError, ValueError):
    """Raised when matrix operands have incompatible shapes"""

    def __init__(self, message: str, **details: Any):
        super().__init__(message=message, details=details)


class IndexOutOfRangeError(PtsError, IndexError):
    """Raised when a column is read past the end of a row with no default"""

    def __init__(self, index: int, row: int, length: int):
        super().__init__(
            message=f"Index {index} is out of bounds for row {row} (length {length})",
            details={"index": index, "row": row, "length": length}
        )


class DegenerateInputError(PtsError, ValueError):
    """Raised for input that has no well-defined geometric result"""

    def __init__(self, message: str, **details: Any):
        super().__init__(message=message, details=details)
