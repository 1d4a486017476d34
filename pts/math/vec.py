"""
Vector algebra on fixed-length numeric buffers.

Every function takes a 1-D numpy buffer (normally the float32 storage of a Pt)
and updates it in place, returning the same buffer so calls can be chained.
Elementwise operations against a sequence only touch the overlapping
positions; trailing components of the longer operand are left as they are.

Scalar arithmetic and unit() follow IEEE-754: dividing by zero yields inf or
nan instead of raising.
"""

from __future__ import annotations

import builtins
import math
from typing import Any, NamedTuple

import numpy as np

from pts.core.errors import DegenerateInputError, DimensionMismatchError

from .args import is_number

PT_DTYPE = np.float32


class ValueIndex(NamedTuple):
    """An extreme component value and the index where it was found."""

    value: float
    index: int


def as_buffer(values: Any) -> np.ndarray:
    """Copy values into a new float32 buffer."""
    return np.array(values, dtype=PT_DTYPE).ravel()


def _as_operand(other: Any) -> np.ndarray:
    return np.asarray(other, dtype=np.float64).ravel()


def _apply(buf: np.ndarray, other: Any, ufunc: np.ufunc) -> np.ndarray:
    with np.errstate(divide="ignore", invalid="ignore", over="ignore"):
        if is_number(other):
            ufunc(buf, float(other), out=buf, casting="same_kind")
        else:
            values = _as_operand(other)
            n = builtins.min(len(buf), len(values))
            ufunc(buf[:n], values[:n], out=buf[:n], casting="same_kind")
    return buf


def add(buf: np.ndarray, other: Any) -> np.ndarray:
    """Add a scalar or another vector to buf."""
    return _apply(buf, other, np.add)


def subtract(buf: np.ndarray, other: Any) -> np.ndarray:
    """Subtract a scalar or another vector from buf."""
    return _apply(buf, other, np.subtract)


def multiply(buf: np.ndarray, other: Any) -> np.ndarray:
    """Multiply buf by a scalar or elementwise by another vector."""
    return _apply(buf, other, np.multiply)


def divide(buf: np.ndarray, other: Any) -> np.ndarray:
    """Divide buf by a scalar or elementwise by another vector."""
    return _apply(buf, other, np.divide)


def dot(a: Any, b: Any) -> float:
    """Dot product over the overlapping components."""
    va, vb = _as_operand(a), _as_operand(b)
    n = builtins.min(len(va), len(vb))
    return float(np.dot(va[:n], vb[:n]))


def cross(a: Any, b: Any) -> np.ndarray:
    """
    3D cross product.

    Args:
        a: vector with at least 3 components
        b: vector with at least 3 components

    Returns:
        New 3-component buffer

    Raises:
        DimensionMismatchError: if either operand has fewer than 3 components
    """
    va, vb = _as_operand(a), _as_operand(b)
    if len(va) < 3 or len(vb) < 3:
        raise DimensionMismatchError("cross product", 3, builtins.min(len(va), len(vb)))
    return as_buffer([
        va[1] * vb[2] - va[2] * vb[1],
        va[2] * vb[0] - va[0] * vb[2],
        va[0] * vb[1] - va[1] * vb[0],
    ])


def magnitude_sq(buf: Any) -> float:
    return dot(buf, buf)


def magnitude(buf: Any) -> float:
    """Euclidean norm."""
    return math.sqrt(magnitude_sq(buf))


def unit(buf: np.ndarray, known_magnitude: float | None = None) -> np.ndarray:
    """
    Normalize buf in place.

    A zero magnitude is not guarded: 0/0 leaves every component as nan.
    """
    m = magnitude(buf) if known_magnitude is None else known_magnitude
    return divide(buf, m)


def abs(buf: np.ndarray) -> np.ndarray:
    np.absolute(buf, out=buf)
    return buf


def floor(buf: np.ndarray) -> np.ndarray:
    np.floor(buf, out=buf)
    return buf


def ceil(buf: np.ndarray) -> np.ndarray:
    np.ceil(buf, out=buf)
    return buf


def round(buf: np.ndarray) -> np.ndarray:
    """Round halves up, so 2.5 -> 3 and -2.5 -> -2."""
    # the half step runs in float64; float32 would round the sum first
    buf[:] = np.floor(buf.astype(np.float64) + 0.5)
    return buf


def _extreme_input(buf: Any, operation: str) -> np.ndarray:
    values = np.asarray(buf)
    if values.size == 0:
        raise DegenerateInputError(f"Cannot take the {operation} of a zero-length vector", operation=operation)
    return values


def min(buf: Any) -> ValueIndex:
    """
    Smallest component; the first one wins on ties.

    Raises:
        DegenerateInputError: if buf has no components
    """
    values = _extreme_input(buf, "minimum")
    index = int(np.argmin(values))
    return ValueIndex(float(values[index]), index)


def max(buf: Any) -> ValueIndex:
    """Largest component; the first one wins on ties. Empty input raises like min()."""
    values = _extreme_input(buf, "maximum")
    index = int(np.argmax(values))
    return ValueIndex(float(values[index]), index)
