"""
Geometric value types: Pt, Group.

Pt is a fixed-length float32 vector; Group is an ordered, mutable collection
of Pts that doubles as a row-major matrix and as a polyline.

Mutating methods update the value in place and return it for chaining. Each
one has a ``*_copy`` twin that clones first and returns the new value, so
``p.add_copy(q)`` is always ``p.clone().add(q)``.
"""

from __future__ import annotations

import math
from collections.abc import Mapping
from typing import Any, Iterable, Iterator, Optional

import numpy as np

from pts.core.errors import DegenerateInputError, DimensionMismatchError
from pts.core.logging import get_logger

from . import geom, mat, vec
from .args import NamedFields, get_args, is_number, parse_axis, parse_indices
from .value import GeometricValue, default_threshold
from .vec import PT_DTYPE, ValueIndex, as_buffer

logger = get_logger(__name__)


def _format_component(value: float) -> str:
    return np.format_float_positional(PT_DTYPE(value), trim="-")


def _operand(args: tuple[Any, ...]) -> Any:
    """A lone number stays a scalar; anything else is read as a vector."""
    if len(args) == 1 and is_number(args[0]):
        return float(args[0])
    return get_args(args)


def _is_vector_like(value: Any) -> bool:
    return is_number(value) or isinstance(value, (Pt, np.ndarray, list, tuple, Mapping))


def _component(index: int, name: str) -> property:
    def getter(self: Pt) -> Optional[float]:
        if index < len(self._data):
            return float(self._data[index])
        return None

    def setter(self: Pt, value: float) -> None:
        if index >= len(self._data):
            raise IndexError(f"Pt of {len(self._data)} dimensions has no '{name}' component")
        self._data[index] = value

    return property(getter, setter, doc=f"Component {index} ('{name}'), or None if absent.")


class Pt(GeometricValue):
    """
    Fixed-length numeric vector.

    The length is set at construction and never changes; only component
    values do. Components are stored as float32.

    Examples:
        >>> Pt()                  # Pt(0, 0)
        >>> Pt(1, 2, 3)
        >>> Pt([1, 2])
        >>> Pt({"x": 1, "y": 2})
        >>> Pt(3)                 # three zeros, NOT Pt([3])
    """

    # numpy defers arithmetic with a Pt to the Pt operators
    __array_ufunc__ = None

    def __init__(self, *args: Any, id: Optional[str] = None) -> None:
        if len(args) == 1 and isinstance(args[0], (int, np.integer)) and not isinstance(args[0], bool):
            self._data = np.zeros(int(args[0]), dtype=PT_DTYPE)
        else:
            self._data = as_buffer(get_args(args) if args else [0.0, 0.0])
        self.id = id

    # Explicit constructors

    @classmethod
    def _from_buffer(cls, buf: np.ndarray, id: Optional[str] = None) -> Pt:
        pt = cls.__new__(cls)
        pt._data = buf
        pt.id = id
        return pt

    @classmethod
    def from_components(cls, *values: float, id: Optional[str] = None) -> Pt:
        """Pt from individual numbers; a single number gives a 1D Pt."""
        return cls._from_buffer(as_buffer(get_args(values)), id)

    @classmethod
    def from_sequence(cls, values: Iterable[float], id: Optional[str] = None) -> Pt:
        return cls._from_buffer(as_buffer(get_args((values,))), id)

    @classmethod
    def from_fields(cls, obj: Any, id: Optional[str] = None) -> Pt:
        """Pt from a mapping or object with x/y/z/w fields, skipping absent ones."""
        return cls._from_buffer(as_buffer(NamedFields.from_object(obj).values()), id)

    @classmethod
    def from_pt(cls, other: Pt) -> Pt:
        return other.clone()

    @classmethod
    def make(cls, dimensions: int, value: float = 0, randomize: bool = False) -> Pt:
        """
        Pt of the given dimensions filled with value.

        With randomize, each component is value scaled by a random factor in
        [0, 1).
        """
        buf = np.full(dimensions, value, dtype=PT_DTYPE)
        if randomize:
            buf *= np.random.random(dimensions).astype(PT_DTYPE)
        return cls._from_buffer(buf)

    @classmethod
    def _coerce(cls, other: Any) -> Pt:
        if is_number(other):
            raise TypeError("Cannot compare Pt with a bare number")
        return cls.from_sequence(other)

    # Access

    x = _component(0, "x")
    y = _component(1, "y")
    z = _component(2, "z")
    w = _component(3, "w")

    @property
    def buffer(self) -> np.ndarray:
        """The live float32 storage. Writes go straight into this Pt."""
        return self._data

    def __len__(self) -> int:
        return len(self._data)

    def __iter__(self) -> Iterator[float]:
        return (float(v) for v in self._data)

    def __getitem__(self, index: int | slice) -> float | list[float]:
        if isinstance(index, slice):
            return [float(v) for v in self._data[index]]
        return float(self._data[index])

    def __setitem__(self, index: int | slice, value: Any) -> None:
        self._data[index] = value

    def __array__(self, dtype: Any = None, copy: Optional[bool] = None) -> np.ndarray:
        if copy:
            return np.array(self._data, dtype=dtype)
        return np.asarray(self._data, dtype=dtype)

    def clone(self) -> Pt:
        return self._from_buffer(self._data.copy(), self.id)

    def equals(self, other: Any, threshold: Optional[float] = None) -> bool:
        """
        Compare component-wise within threshold.

        Only the overlapping components are compared, so Pt(1, 2) equals
        Pt(1, 2, 3). NaN components never compare equal.
        """
        if threshold is None:
            threshold = default_threshold()
        a = self._data.astype(np.float64)
        b = np.asarray(get_args((other,)), dtype=np.float64)
        n = min(len(a), len(b))
        return bool(np.all(np.abs(a[:n] - b[:n]) <= threshold))

    # Conversions

    def to_list(self) -> list[float]:
        return [float(v) for v in self._data]

    def to_numpy(self) -> np.ndarray:
        """Copy of the components as a float32 array."""
        return self._data.copy()

    def to_string(self) -> str:
        return f"Pt({', '.join(_format_component(v) for v in self._data)})"

    # Setting values

    def to(self, *args: Any) -> Pt:
        """Overwrite components from vector-like input (overlapping positions only)."""
        values = get_args(args)
        n = min(len(self._data), len(values))
        self._data[:n] = values[:n]
        return self

    def to_copy(self, *args: Any) -> Pt:
        return self.clone().to(*args)

    def to_angle(self, angle: float, magnitude: Optional[float] = None, anchor_from_pt: bool = False) -> Pt:
        """
        Point this vector at angle (radians).

        Args:
            angle: target angle
            magnitude: length to use; defaults to the current magnitude
            anchor_from_pt: add the new vector to the current position
                instead of replacing it
        """
        m = self.magnitude() if magnitude is None else magnitude
        change = [math.cos(angle) * m, math.sin(angle) * m]
        return self.add(change) if anchor_from_pt else self.to(change)

    def to_angle_copy(self, angle: float, magnitude: Optional[float] = None, anchor_from_pt: bool = False) -> Pt:
        return self.clone().to_angle(angle, magnitude, anchor_from_pt)

    # Arithmetic

    def add(self, *args: Any) -> Pt:
        """Add a scalar or a vector."""
        vec.add(self._data, _operand(args))
        return self

    def add_copy(self, *args: Any) -> Pt:
        return self.clone().add(*args)

    def subtract(self, *args: Any) -> Pt:
        vec.subtract(self._data, _operand(args))
        return self

    def subtract_copy(self, *args: Any) -> Pt:
        return self.clone().subtract(*args)

    def multiply(self, *args: Any) -> Pt:
        """Multiply by a scalar, or elementwise by a vector."""
        vec.multiply(self._data, _operand(args))
        return self

    def multiply_copy(self, *args: Any) -> Pt:
        return self.clone().multiply(*args)

    def divide(self, *args: Any) -> Pt:
        """Divide by a scalar, or elementwise by a vector. Zero gives inf/nan."""
        vec.divide(self._data, _operand(args))
        return self

    def divide_copy(self, *args: Any) -> Pt:
        return self.clone().divide(*args)

    def magnitude_sq(self) -> float:
        return vec.magnitude_sq(self._data)

    def magnitude(self) -> float:
        return vec.magnitude(self._data)

    def unit(self, magnitude: Optional[float] = None) -> Pt:
        """Scale to length 1. A zero vector becomes all nan."""
        vec.unit(self._data, magnitude)
        return self

    def unit_copy(self, magnitude: Optional[float] = None) -> Pt:
        return self.clone().unit(magnitude)

    def dot(self, *args: Any) -> float:
        return vec.dot(self._data, get_args(args))

    def cross(self, *args: Any) -> Pt:
        """3D cross product as a new Pt; both sides need 3 or more components."""
        return self._from_buffer(vec.cross(self._data, get_args(args)))

    def project(self, *args: Any) -> Pt:
        """
        Vector projection of this Pt onto another vector, as a new Pt.

        Projecting onto a zero vector gives nan components.
        """
        onto = Pt.from_sequence(get_args(args))
        onto_sq = onto.magnitude_sq()
        vec.multiply(onto._data, self.dot(onto))
        vec.divide(onto._data, onto_sq)
        return onto

    def abs(self) -> Pt:
        vec.abs(self._data)
        return self

    def abs_copy(self) -> Pt:
        return self.clone().abs()

    def floor(self) -> Pt:
        vec.floor(self._data)
        return self

    def floor_copy(self) -> Pt:
        return self.clone().floor()

    def ceil(self) -> Pt:
        vec.ceil(self._data)
        return self

    def ceil_copy(self) -> Pt:
        return self.clone().ceil()

    def round(self) -> Pt:
        """Round every component, halves up."""
        vec.round(self._data)
        return self

    def round_copy(self) -> Pt:
        return self.clone().round()

    def min_value(self) -> ValueIndex:
        """Smallest component and its index; a zero-length Pt raises DegenerateInputError."""
        return vec.min(self._data)

    def max_value(self) -> ValueIndex:
        return vec.max(self._data)

    def min_with(self, *args: Any) -> Pt:
        """New Pt holding the smaller of each pair of overlapping components."""
        values = np.asarray(get_args(args), dtype=PT_DTYPE)
        result = self.clone()
        n = min(len(result), len(values))
        np.minimum(result._data[:n], values[:n], out=result._data[:n])
        return result

    def max_with(self, *args: Any) -> Pt:
        """New Pt holding the larger of each pair of overlapping components."""
        values = np.asarray(get_args(args), dtype=PT_DTYPE)
        result = self.clone()
        n = min(len(result), len(values))
        np.maximum(result._data[:n], values[:n], out=result._data[:n])
        return result

    # Angles

    def angle(self, axis: Any = "xy") -> float:
        """Angle from the positive first axis, via atan2."""
        i, j = parse_axis(axis)
        if len(self._data) <= max(i, j):
            raise DimensionMismatchError("angle", max(i, j) + 1, len(self._data))
        return math.atan2(float(self._data[j]), float(self._data[i]))

    def angle_between(self, other: Any, axis: Any = "xy") -> float:
        """Difference of the two angles, each bounded to [0, 2π) first."""
        other_pt = other if isinstance(other, Pt) else Pt.from_sequence(get_args((other,)))
        return geom.bound_radian(self.angle(axis)) - geom.bound_radian(other_pt.angle(axis))

    # Dimensions

    def take(self, axis: Any) -> Pt:
        """
        New Pt built from selected components, e.g. take("xz") or take([0, 2]).

        Indices past the end read as 0.
        """
        n = len(self._data)
        return Pt.from_sequence([float(self._data[i]) if 0 <= i < n else 0.0 for i in parse_indices(axis)])

    def concat(self, *args: Any) -> Pt:
        """New Pt with extra components appended."""
        return Pt.from_sequence(self.to_list() + get_args(args))

    # Transforms (anchor defaults to the origin)

    def scale(self, factor: Any, anchor: Any = None, axis: Any = None) -> Pt:
        geom.scale(self, factor, anchor, axis)
        return self

    def scale_copy(self, factor: Any, anchor: Any = None, axis: Any = None) -> Pt:
        return self.clone().scale(factor, anchor, axis)

    def rotate2d(self, angle: float, anchor: Any = None, axis: Any = None) -> Pt:
        geom.rotate2d(self, angle, anchor, axis)
        return self

    def rotate2d_copy(self, angle: float, anchor: Any = None, axis: Any = None) -> Pt:
        return self.clone().rotate2d(angle, anchor, axis)

    def shear2d(self, shear: Any, anchor: Any = None, axis: Any = None) -> Pt:
        geom.shear2d(self, shear, anchor, axis)
        return self

    def shear2d_copy(self, shear: Any, anchor: Any = None, axis: Any = None) -> Pt:
        return self.clone().shear2d(shear, anchor, axis)

    def reflect2d(self, line: Any, axis: Any = None) -> Pt:
        geom.reflect2d(self, line, axis)
        return self

    def reflect2d_copy(self, line: Any, axis: Any = None) -> Pt:
        return self.clone().reflect2d(line, axis)

    # Operators: binary forms return new Pts, augmented forms mutate

    def __add__(self, other: Any) -> Pt:
        if not _is_vector_like(other):
            return NotImplemented
        return self.add_copy(other)

    def __radd__(self, other: Any) -> Pt:
        return self.__add__(other)

    def __iadd__(self, other: Any) -> Pt:
        if not _is_vector_like(other):
            return NotImplemented
        return self.add(other)

    def __sub__(self, other: Any) -> Pt:
        if not _is_vector_like(other):
            return NotImplemented
        return self.subtract_copy(other)

    def __rsub__(self, other: Any) -> Pt:
        if not _is_vector_like(other):
            return NotImplemented
        return self._reflected(other).subtract(self)

    def __isub__(self, other: Any) -> Pt:
        if not _is_vector_like(other):
            return NotImplemented
        return self.subtract(other)

    def __mul__(self, other: Any) -> Pt:
        if not _is_vector_like(other):
            return NotImplemented
        return self.multiply_copy(other)

    def __rmul__(self, other: Any) -> Pt:
        return self.__mul__(other)

    def __imul__(self, other: Any) -> Pt:
        if not _is_vector_like(other):
            return NotImplemented
        return self.multiply(other)

    def __truediv__(self, other: Any) -> Pt:
        if not _is_vector_like(other):
            return NotImplemented
        return self.divide_copy(other)

    def __rtruediv__(self, other: Any) -> Pt:
        if not _is_vector_like(other):
            return NotImplemented
        return self._reflected(other).divide(self)

    def __itruediv__(self, other: Any) -> Pt:
        if not _is_vector_like(other):
            return NotImplemented
        return self.divide(other)

    def __neg__(self) -> Pt:
        return self.multiply_copy(-1)

    def __pos__(self) -> Pt:
        return self.clone()

    def __abs__(self) -> float:
        """Magnitude."""
        return self.magnitude()

    def _reflected(self, other: Any) -> Pt:
        """Left operand of a reflected operator, as a Pt."""
        if is_number(other):
            return Pt.make(len(self), other)
        return Pt.from_sequence(get_args((other,)))


def _element(index: int) -> property:
    def getter(self: Group) -> Optional[Pt]:
        if -len(self._pts) <= index < len(self._pts):
            return self._pts[index]
        return None

    if index >= 0:
        doc = f"Element {index}, or None if absent."
    else:
        doc = f"Element {-index} from the end, or None if absent."
    return property(getter, doc=doc)


class Group(GeometricValue):
    """
    Ordered, mutable collection of Pts.

    Read as a matrix, each Pt is a row. Read as a path, each Pt is a vertex in
    order. The Group holds the Pts it is given (no copy); clone() copies them.
    Rows need not share a dimension, but matrix and geometry operations
    define what happens when they don't.
    """

    def __init__(self, *pts: Any, id: Optional[str] = None) -> None:
        self._pts: list[Pt] = [self._as_pt(p) for p in pts]
        self.id = id

    @staticmethod
    def _as_pt(value: Any) -> Pt:
        return value if isinstance(value, Pt) else Pt.from_sequence(get_args((value,)))

    @classmethod
    def from_array(cls, rows: Iterable[Any], id: Optional[str] = None) -> Group:
        """
        Group from numeric rows, e.g. Group.from_array([[1, 2], [3, 4]]).

        Pts in rows are kept as they are; other rows are converted.
        """
        return cls(*rows, id=id)

    @classmethod
    def from_pt_array(cls, pts: Iterable[Pt], id: Optional[str] = None) -> Group:
        return cls(*pts, id=id)

    @classmethod
    def _coerce(cls, other: Any) -> Group:
        if isinstance(other, (str, bytes, Mapping, Pt)) or not isinstance(other, Iterable):
            raise TypeError(f"Cannot compare Group with {type(other).__name__}")
        return cls.from_array(other)

    # Sequence protocol

    p1 = _element(0)
    p2 = _element(1)
    p3 = _element(2)
    p4 = _element(3)
    q1 = _element(-1)
    q2 = _element(-2)
    q3 = _element(-3)
    q4 = _element(-4)

    def __len__(self) -> int:
        return len(self._pts)

    def __iter__(self) -> Iterator[Pt]:
        return iter(self._pts)

    def __getitem__(self, index: int | slice) -> Pt | Group:
        if isinstance(index, slice):
            return Group(*self._pts[index])
        return self._pts[index]

    def __setitem__(self, index: int | slice, value: Any) -> None:
        if isinstance(index, slice):
            self._pts[index] = [self._as_pt(p) for p in value]
        else:
            self._pts[index] = self._as_pt(value)

    def __delitem__(self, index: int | slice) -> None:
        del self._pts[index]

    def append(self, pt: Any) -> Group:
        self._pts.append(self._as_pt(pt))
        return self

    def extend(self, pts: Iterable[Any]) -> Group:
        self._pts.extend(self._as_pt(p) for p in pts)
        return self

    def clone(self) -> Group:
        """Deep copy: every Pt is cloned."""
        return Group(*(p.clone() for p in self._pts), id=self.id)

    def equals(self, other: Any, threshold: Optional[float] = None) -> bool:
        """Same number of Pts, each equal to its counterpart within threshold."""
        if len(self._pts) != len(other):
            return False
        return all(a.equals(b, threshold) for a, b in zip(self._pts, other))

    # Conversions

    def to_list(self) -> list[list[float]]:
        return [p.to_list() for p in self._pts]

    def to_numpy(self) -> np.ndarray:
        """Rows as a 2D float32 array (rows must share a dimension)."""
        return np.array([p.buffer for p in self._pts], dtype=PT_DTYPE)

    def to_string(self) -> str:
        return "Group[ " + " ".join(p.to_string() for p in self._pts) + " ]"

    # Segmenting

    def split(self, chunk_size: int, stride: Optional[int] = None, loop_back: bool = False) -> list[Group]:
        """
        Cut this Group into sub-groups.

        Segments start at 0, stride, 2*stride, ... while the start is inside
        the Group. A segment that would run past the end is dropped (and the
        walk stops) unless loop_back is set, in which case it wraps around to
        the beginning so every start yields a full segment.

        Args:
            chunk_size: Pts per segment
            stride: step between segment starts (defaults to chunk_size)
            loop_back: wrap instead of dropping the tail

        Returns:
            List of Groups sharing Pts with this Group
        """
        step = chunk_size if stride is None else stride
        n = len(self._pts)
        if n == 0:
            return []
        if chunk_size <= 0 or step <= 0:
            logger.warning("split() needs positive chunk_size and stride, got %s and %s", chunk_size, step)
            return []

        chunks = []
        for start in range(0, n, step):
            if start + chunk_size <= n:
                chunks.append(Group(*self._pts[start:start + chunk_size]))
            elif loop_back:
                chunks.append(Group(*(self._pts[(start + k) % n] for k in range(chunk_size))))
            else:
                break
        return chunks

    def segments(self, pts_per_segment: int = 2, stride: int = 1, loop_back: bool = False) -> list[Group]:
        return self.split(pts_per_segment, stride, loop_back)

    def lines(self) -> list[Group]:
        """Every consecutive pair of Pts (the edges of the path)."""
        return self.segments(2, 1)

    # Editing

    def insert(self, pts: Any, index: int = 0) -> Group:
        """Insert a Pt or a sequence of Pts before index."""
        new = [pts] if isinstance(pts, Pt) else [self._as_pt(p) for p in pts]
        self._pts[index:index] = new
        return self

    def remove(self, index: int = 0, count: int = 1) -> Group:
        """
        Remove count Pts starting at index; -1 is the last Pt.

        Returns:
            The removed Pts as a Group
        """
        start = index + len(self._pts) if index < 0 else index
        start = max(start, 0)
        removed = self._pts[start:start + count]
        del self._pts[start:start + count]
        return Group(*removed)

    def sort_by_dimension(self, dim: int, descending: bool = False) -> Group:
        """Stable in-place sort by one component."""
        self._pts.sort(key=lambda p: p[dim], reverse=descending)
        return self

    # Path geometry

    def interpolate(self, t: float) -> Pt:
        """
        Point at fraction t along the path, as a new Pt.

        The path has len - 1 segments of equal weight 1/(len - 1); t is
        clamped to [0, 1].
        """
        n = len(self._pts)
        if n == 0:
            raise DegenerateInputError("Cannot interpolate an empty group")
        if n == 1:
            return self._pts[0].clone()
        t = geom.clamp(t, 0.0, 1.0)
        chunk = n - 1
        idx = min(int(math.floor(t * chunk)), chunk - 1)
        return geom.interpolate(self._pts[idx], self._pts[idx + 1], t * chunk - idx)

    def centroid(self) -> Pt:
        return geom.centroid(self._pts)

    def bounding_box(self) -> Group:
        return geom.bounding_box(self._pts)

    def anchor_to(self, pt_or_index: Any = 0) -> Group:
        """Subtract the anchor from every Pt (positions become relative)."""
        geom.anchor(self._pts, pt_or_index, "to")
        return self

    def anchor_from(self, pt_or_index: Any = 0) -> Group:
        """Add the anchor to every Pt (positions become absolute)."""
        geom.anchor(self._pts, pt_or_index, "from")
        return self

    # Moving and transforming (anchor defaults to the first Pt)

    def move_by(self, *args: Any) -> Group:
        return self.add(*args)

    def move_by_copy(self, *args: Any) -> Group:
        return self.clone().move_by(*args)

    def move_to(self, *args: Any) -> Group:
        """Translate so the first Pt lands on the target; the rest follow."""
        if not self._pts:
            raise DegenerateInputError("Cannot move an empty group")
        delta = Pt.from_sequence(get_args(args)).subtract(self._pts[0])
        return self.move_by(delta)

    def move_to_copy(self, *args: Any) -> Group:
        return self.clone().move_to(*args)

    def _default_anchor(self, anchor: Any) -> Any:
        if anchor is not None or not self._pts:
            return anchor
        return self._pts[0].clone()

    def scale(self, factor: Any, anchor: Any = None, axis: Any = None) -> Group:
        geom.scale(self._pts, factor, self._default_anchor(anchor), axis)
        return self

    def scale_copy(self, factor: Any, anchor: Any = None, axis: Any = None) -> Group:
        return self.clone().scale(factor, anchor, axis)

    def rotate2d(self, angle: float, anchor: Any = None, axis: Any = None) -> Group:
        geom.rotate2d(self._pts, angle, self._default_anchor(anchor), axis)
        return self

    def rotate2d_copy(self, angle: float, anchor: Any = None, axis: Any = None) -> Group:
        return self.clone().rotate2d(angle, anchor, axis)

    def shear2d(self, shear: Any, anchor: Any = None, axis: Any = None) -> Group:
        geom.shear2d(self._pts, shear, self._default_anchor(anchor), axis)
        return self

    def shear2d_copy(self, shear: Any, anchor: Any = None, axis: Any = None) -> Group:
        return self.clone().shear2d(shear, anchor, axis)

    def reflect2d(self, line: Any, axis: Any = None) -> Group:
        geom.reflect2d(self._pts, line, axis)
        return self

    def reflect2d_copy(self, line: Any, axis: Any = None) -> Group:
        return self.clone().reflect2d(line, axis)

    # Per-Pt arithmetic

    def for_each_pt(self, name: str, *args: Any) -> Group:
        """
        Replace every Pt with the result of calling its method name(*args).

        An unknown method name is logged and leaves the Group unchanged.
        """
        if name.startswith("_") or not callable(getattr(Pt, name, None)):
            logger.warning("%s is not a function of Pt", name)
            return self
        for i, p in enumerate(self._pts):
            result = getattr(p, name)(*args)
            if not isinstance(result, Pt):
                raise TypeError(f"Pt.{name} returned {type(result).__name__}, expected Pt")
            self._pts[i] = result
        return self

    def add(self, *args: Any) -> Group:
        return self.for_each_pt("add", *args)

    def add_copy(self, *args: Any) -> Group:
        return self.clone().add(*args)

    def subtract(self, *args: Any) -> Group:
        return self.for_each_pt("subtract", *args)

    def subtract_copy(self, *args: Any) -> Group:
        return self.clone().subtract(*args)

    def multiply(self, *args: Any) -> Group:
        return self.for_each_pt("multiply", *args)

    def multiply_copy(self, *args: Any) -> Group:
        return self.clone().multiply(*args)

    def divide(self, *args: Any) -> Group:
        return self.for_each_pt("divide", *args)

    def divide_copy(self, *args: Any) -> Group:
        return self.clone().divide(*args)

    # Matrix operations (always new values)

    def matrix_add(self, other: Any) -> Group:
        return mat.add(self, other)

    def matrix_multiply(self, other: Any, transposed: bool = False, elementwise: bool = False) -> Group:
        """
        Matrix product with other (or Hadamard product when elementwise).

        See pts.math.mat.multiply for the shape rules.
        """
        return mat.multiply(self, other, transposed, elementwise)

    def zip_slice(self, index: int, default: Optional[float] = None) -> Pt:
        return mat.zip_slice(self, index, default)

    def zip(self, default: Optional[float] = None, use_longest: bool = False) -> Group:
        return mat.zip(self, default, use_longest)

    def transpose(self) -> Group:
        return mat.transpose(self)
