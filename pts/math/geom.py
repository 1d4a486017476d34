"""
Geometric transforms over Pt values.

Transforms (scale, rotate2d, shear2d, reflect2d, anchor) take a single Pt or
any sequence of Pts (such as a Group) and update them in place. The anchor is
read once before any point moves, so anchoring on a member of the sequence
being transformed never drifts. A missing anchor means the origin; anchor
components beyond the anchor's length count as 0.

2D transforms act on an axis pair, given as indices or as letters ("xy",
"yz", "xz"); the default is the first two dimensions.
"""

from __future__ import annotations

import math
from typing import TYPE_CHECKING, Any, Iterable, Optional

import numpy as np

from pts.core.errors import DegenerateInputError, DimensionMismatchError

from . import vec
from .args import get_args, is_number, parse_axis, parse_indices

if TYPE_CHECKING:
    from .geometric import Group, Pt

TWO_PI = math.pi * 2


# Scalar helpers

def clamp(value: float, lo: float, hi: float) -> float:
    """Limit value to the closed range [lo, hi]."""
    return max(lo, min(value, hi))


def bound_value(value: float, lo: float, hi: float) -> float:
    """Wrap value into [lo, hi)."""
    span = hi - lo
    result = (value - lo) % span + lo
    return lo if result >= hi else result


def bound_radian(angle: float) -> float:
    """Normalize an angle in radians into [0, 2π)."""
    return bound_value(angle, 0.0, TWO_PI)


def bound_angle(angle: float) -> float:
    """Normalize an angle in degrees into [0, 360)."""
    return bound_value(angle, 0.0, 360.0)


def to_radian(degrees: float) -> float:
    return math.radians(degrees)


def to_degree(radians: float) -> float:
    return math.degrees(radians)


# Internal helpers

def _targets(ps: Any) -> list[Pt]:
    from .geometric import Pt

    if isinstance(ps, Pt):
        return [ps]
    return list(ps)


def _snapshot(anchor: Any) -> Optional[np.ndarray]:
    if anchor is None:
        return None
    return np.asarray(get_args((anchor,)), dtype=np.float64)


def _padded(values: Optional[np.ndarray], n: int, fill: float = 0.0) -> np.ndarray:
    out = np.full(n, fill, dtype=np.float64)
    if values is not None:
        k = min(n, len(values))
        out[:k] = values[:k]
    return out


def _plane(buf: np.ndarray, axis: Any, operation: str) -> tuple[int, int]:
    i, j = parse_axis(axis)
    needed = max(i, j) + 1
    if len(buf) < needed:
        raise DimensionMismatchError(operation, needed, len(buf))
    return i, j


def _shear_factors(shear: Any) -> tuple[float, float]:
    if is_number(shear):
        return float(shear), float(shear)
    values = get_args((shear,))
    if len(values) < 2:
        raise ValueError("Shear needs a number or two values")
    return values[0], values[1]


# Transforms

def scale(ps: Any, factor: Any, anchor: Any = None, axis: Any = None) -> None:
    """
    Scale points away from (or towards) an anchor.

    Every component is scaled unless axis selects specific indices. A
    per-component factor shorter than the point leaves the remaining
    components unchanged.
    """
    origin = _snapshot(anchor)
    factors = None if is_number(factor) else np.asarray(get_args((factor,)), dtype=np.float64)

    for p in _targets(ps):
        buf = p.buffer
        n = len(buf)
        a = _padded(origin, n)
        f = np.full(n, float(factor)) if factors is None else _padded(factors, n, fill=1.0)
        if axis is None:
            idx = np.arange(n)
        else:
            idx = np.array([i for i in parse_indices(axis) if 0 <= i < n], dtype=np.intp)
        values = buf.astype(np.float64)
        values[idx] = a[idx] + (values[idx] - a[idx]) * f[idx]
        buf[:] = values


def rotate2d(ps: Any, angle: float, anchor: Any = None, axis: Any = None) -> None:
    """Rotate points by angle (radians) around an anchor in a 2D plane."""
    origin = _snapshot(anchor)
    cos, sin = math.cos(angle), math.sin(angle)

    targets = _targets(ps)
    planes = [_plane(p.buffer, axis, "rotate2d") for p in targets]

    for p, (i, j) in zip(targets, planes):
        buf = p.buffer
        a = _padded(origin, len(buf))
        dx, dy = float(buf[i]) - a[i], float(buf[j]) - a[j]
        buf[i] = a[i] + dx * cos - dy * sin
        buf[j] = a[j] + dx * sin + dy * cos


def shear2d(ps: Any, shear: Any, anchor: Any = None, axis: Any = None) -> None:
    """
    Shear points around an anchor with the matrix [[1, shx], [shy, 1]].

    A single number shears both directions by the same amount.
    """
    origin = _snapshot(anchor)
    shx, shy = _shear_factors(shear)

    targets = _targets(ps)
    planes = [_plane(p.buffer, axis, "shear2d") for p in targets]

    for p, (i, j) in zip(targets, planes):
        buf = p.buffer
        a = _padded(origin, len(buf))
        dx, dy = float(buf[i]) - a[i], float(buf[j]) - a[j]
        buf[i] = a[i] + dx + shx * dy
        buf[j] = a[j] + shy * dx + dy


def reflect2d(ps: Any, line: Any, axis: Any = None) -> None:
    """
    Reflect points across the infinite line through line[0] and line[1].

    Raises:
        DegenerateInputError: if the line has fewer than two points or its
            two points coincide in the selected plane
    """
    if len(line) < 2:
        raise DegenerateInputError("Reflection line needs two points", points=len(line))
    i, j = parse_axis(axis)
    start = _padded(_snapshot(line[0]), max(i, j) + 1)
    end = _padded(_snapshot(line[1]), max(i, j) + 1)
    dx, dy = end[i] - start[i], end[j] - start[j]
    length_sq = dx * dx + dy * dy
    if length_sq == 0:
        raise DegenerateInputError("Reflection line points coincide", point=start.tolist())

    targets = _targets(ps)
    for p in targets:
        _plane(p.buffer, (i, j), "reflect2d")

    for p in targets:
        buf = p.buffer
        vx, vy = float(buf[i]) - start[i], float(buf[j]) - start[j]
        proj = (vx * dx + vy * dy) / length_sq
        buf[i] = start[i] + 2 * proj * dx - vx
        buf[j] = start[j] + 2 * proj * dy - vy


def anchor(group: Any, pt_or_index: Any = 0, direction: str = "to") -> None:
    """
    Re-express every point relative to an anchor ("to", subtract it) or back
    to absolute positions ("from", add it).

    Args:
        group: sequence of Pts, updated in place
        pt_or_index: the anchor, or the index of a member of group
        direction: "to" or "from"
    """
    if direction not in ("to", "from"):
        raise ValueError(f"Anchor direction must be 'to' or 'from', got {direction!r}")
    points = _targets(group)
    ref = points[pt_or_index] if isinstance(pt_or_index, (int, np.integer)) else pt_or_index
    offset = _snapshot(ref)
    apply = vec.subtract if direction == "to" else vec.add
    for p in points:
        apply(p.buffer, offset)


# Aggregates

def centroid(group: Iterable[Pt]) -> Pt:
    """
    Component-wise mean of all points.

    The result has the first point's dimension. On ragged input each
    component sums whatever rows have it, but always divides by the number of
    points; components past the first point's length are ignored.

    Raises:
        DegenerateInputError: if group is empty
    """
    from .geometric import Pt

    points = list(group)
    if not points:
        raise DegenerateInputError("Cannot take the centroid of an empty group")
    total = points[0].buffer.astype(np.float64)
    for p in points[1:]:
        vec.add(total, p.buffer)
    return Pt.from_sequence(total / len(points))


def bounding_box(group: Iterable[Pt]) -> Group:
    """
    Axis-aligned bounds of all points.

    Both corners have the first point's dimension. On ragged input a
    component is bounded by the rows that have it; components past the first
    point's length are ignored.

    Returns:
        Group of two Pts: per-component minimum, then per-component maximum

    Raises:
        DegenerateInputError: if group is empty
    """
    from .geometric import Group, Pt

    points = list(group)
    if not points:
        raise DegenerateInputError("Cannot take the bounding box of an empty group")
    lo = points[0].buffer.copy()
    hi = points[0].buffer.copy()
    for p in points[1:]:
        n = min(len(lo), len(p))
        np.minimum(lo[:n], p.buffer[:n], out=lo[:n])
        np.maximum(hi[:n], p.buffer[:n], out=hi[:n])
    return Group(Pt.from_sequence(lo), Pt.from_sequence(hi))


def interpolate(a: Pt, b: Any, t: float) -> Pt:
    """New Pt at a + (b - a) * t, with t clamped to [0, 1]."""
    t = clamp(t, 0.0, 1.0)
    result = a.clone()
    start = a.buffer.astype(np.float64)
    end = _snapshot(b)
    n = min(len(start), len(end))
    result.buffer[:n] = start[:n] + (end[:n] - start[:n]) * t
    return result
