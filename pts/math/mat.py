"""
Matrix algebra over sequences of rows.

A Group (or any sequence of numeric rows) is read as a row-major matrix: each
Pt is a row and each component index is a column. Results are always new
values; operands are never modified.
"""

from __future__ import annotations

import builtins
from typing import TYPE_CHECKING, Any, Optional

import numpy as np

from pts.core.errors import IndexOutOfRangeError, InvalidShapeError
from pts.core.logging import get_logger

from .args import get_args, is_number

if TYPE_CHECKING:
    from .geometric import Group, Pt

logger = get_logger(__name__)


def _rows(matrix: Any) -> list[np.ndarray]:
    """Read every row of matrix as a float64 array."""
    return [np.asarray(get_args((row,)), dtype=np.float64) for row in matrix]


def _shape_error(message: str, **details: Any) -> InvalidShapeError:
    logger.debug(message, extra={"extra_data": details})
    return InvalidShapeError(message, **details)


def _check_same_shape(a: list[np.ndarray], b: list[np.ndarray], operation: str) -> None:
    if len(a) != len(b):
        raise _shape_error(
            f"Cannot {operation}: row counts differ ({len(a)} vs {len(b)})",
            operation=operation, rows_a=len(a), rows_b=len(b),
        )
    for i, (ra, rb) in enumerate(builtins.zip(a, b)):
        if len(ra) != len(rb):
            raise _shape_error(
                f"Cannot {operation}: row {i} lengths differ ({len(ra)} vs {len(rb)})",
                operation=operation, row=i, cols_a=len(ra), cols_b=len(rb),
            )


def _group(rows: list[np.ndarray]) -> Group:
    from .geometric import Group, Pt

    return Group(*(Pt.from_sequence(row) for row in rows))


def add(a: Any, b: Any) -> Group:
    """
    Matrix addition.

    Args:
        a: the matrix
        b: a scalar, or a matrix of exactly the same shape

    Returns:
        New Group

    Raises:
        InvalidShapeError: if b's rows or columns don't line up with a's
    """
    rows = _rows(a)
    if is_number(b):
        return _group([row + float(b) for row in rows])
    other = _rows(b)
    _check_same_shape(rows, other, "add matrices")
    return _group([ra + rb for ra, rb in builtins.zip(rows, other)])


def multiply(a: Any, b: Any, transposed: bool = False, elementwise: bool = False) -> Group:
    """
    Matrix multiplication.

    Args:
        a: M rows of K columns
        b: a scalar; or K rows of N columns; or, when transposed, N rows of
           K columns (each row of b is a column of the right-hand matrix)
        transposed: b is given pre-transposed (ignored for elementwise)
        elementwise: Hadamard product instead of the matrix product

    Returns:
        New Group of M rows (N columns for the matrix product)

    Raises:
        InvalidShapeError: if the operand shapes are incompatible
    """
    rows = _rows(a)
    if is_number(b):
        return _group([row * float(b) for row in rows])

    other = _rows(b)
    if elementwise:
        _check_same_shape(rows, other, "multiply matrices elementwise")
        return _group([ra * rb for ra, rb in builtins.zip(rows, other)])

    if other and any(len(row) != len(other[0]) for row in other):
        raise _shape_error("Cannot multiply: right-hand matrix is ragged", operation="multiply")

    # columns of the right-hand matrix, each of length K
    columns = other if transposed else [np.array(col) for col in builtins.zip(*other)]
    inner = len(other[0]) if transposed and other else len(other)

    for i, row in enumerate(rows):
        if len(row) != inner:
            if transposed:
                message = f"Cannot multiply transposed: row {i} has {len(row)} columns, b's rows have {inner}"
            else:
                message = f"Cannot multiply: row {i} has {len(row)} columns, b has {inner} rows"
            raise _shape_error(message, operation="multiply", row=i, cols_a=len(row), inner=inner)

    return _group([np.array([float(np.dot(row, col)) for col in columns]) for row in rows])


def zip_slice(matrix: Any, index: int, default: Optional[float] = None) -> Pt:
    """
    Take one column across all rows.

    Args:
        matrix: sequence of rows
        index: column index
        default: value for rows too short to have the column

    Returns:
        New Pt with one value per row

    Raises:
        IndexOutOfRangeError: if a row is too short and no default is given
    """
    from .geometric import Pt

    values = []
    for i, row in enumerate(_rows(matrix)):
        if 0 <= index < len(row):
            values.append(row[index])
        elif default is not None:
            values.append(float(default))
        else:
            raise IndexOutOfRangeError(index, i, len(row))
    return Pt.from_sequence(values)


def zip(matrix: Any, default: Optional[float] = None, use_longest: bool = False) -> Group:
    """
    Transpose rows into columns, e.g. [[1,2],[3,4],[5,6]] -> [[1,3,5],[2,4,6]].

    Args:
        matrix: sequence of rows
        default: value used to pad short rows
        use_longest: size the output by the longest row instead of the first

    Raises:
        IndexOutOfRangeError: if a row needs padding and no default is given
    """
    from .geometric import Group

    rows = _rows(matrix)
    if not rows:
        return Group()
    length = max(len(row) for row in rows) if use_longest else len(rows[0])
    return Group(*(zip_slice(rows, i, default) for i in range(length)))


def transpose(matrix: Any) -> Group:
    """Transpose a rectangular matrix."""
    return zip(matrix)
