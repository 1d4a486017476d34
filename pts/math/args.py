"""
Argument normalization for vector-like input.

Every constructor and mutating method that accepts "vector-like" input funnels
its arguments through get_args(), which accepts bare numbers, a sequence, a
numpy array, an existing Pt, or an object with named x/y/z/w fields.
"""

from __future__ import annotations

from collections.abc import Mapping
from numbers import Real as RealNumber
from typing import Any, Iterable, Optional

import numpy as np
from pydantic import BaseModel, ConfigDict

FIELD_NAMES = ("x", "y", "z", "w")

_AXIS_LETTERS = {name: index for index, name in enumerate(FIELD_NAMES)}


class NamedFields(BaseModel):
    """Validated x/y/z/w view of a mapping or attribute object."""

    model_config = ConfigDict(extra="ignore", frozen=True)

    x: Optional[float] = None
    y: Optional[float] = None
    z: Optional[float] = None
    w: Optional[float] = None

    @classmethod
    def from_object(cls, obj: Any) -> NamedFields:
        if isinstance(obj, Mapping):
            raw = {name: obj[name] for name in FIELD_NAMES if name in obj}
        else:
            raw = {name: getattr(obj, name) for name in FIELD_NAMES if hasattr(obj, name)}
        # numpy scalars are unwrapped so pydantic sees plain Python numbers
        return cls.model_validate(
            {name: value.item() if isinstance(value, np.generic) else value for name, value in raw.items()}
        )

    def values(self) -> list[float]:
        """Present fields in x, y, z, w order, skipping absent ones."""
        return [value for value in (self.x, self.y, self.z, self.w) if value is not None]


def is_number(value: Any) -> bool:
    """True for int/float/numpy scalars, False for bool."""
    return isinstance(value, (RealNumber, np.number)) and not isinstance(value, (bool, np.bool_))


def has_named_fields(obj: Any) -> bool:
    if isinstance(obj, Mapping):
        return any(name in obj for name in FIELD_NAMES)
    return any(hasattr(obj, name) for name in FIELD_NAMES)


def _flatten_sequence(values: Iterable[Any]) -> list[float]:
    result = []
    for value in values:
        if not is_number(value):
            raise TypeError(f"Expected a number, got {type(value).__name__}")
        result.append(float(value))
    return result


def get_args(args: tuple[Any, ...] | list[Any]) -> list[float]:
    """
    Convert a variadic call into a flat list of floats.

    Args:
        args: the positional arguments as received by the caller

    Returns:
        Ordered component values

    Examples:
        >>> get_args((1, 2, 3))
        [1.0, 2.0, 3.0]
        >>> get_args(([1, 2],))
        [1.0, 2.0]
        >>> get_args(({"x": 1, "z": 3},))
        [1.0, 3.0]
    """
    if len(args) == 0:
        return []

    if len(args) == 1:
        single = args[0]
        if is_number(single):
            return [float(single)]
        if isinstance(single, np.ndarray):
            return [float(v) for v in single.ravel()]
        if isinstance(single, (str, bytes)):
            raise TypeError(f"Cannot read vector components from {type(single).__name__}")
        if isinstance(single, Mapping):
            return NamedFields.from_object(single).values()
        if isinstance(single, Iterable):
            return _flatten_sequence(single)
        if has_named_fields(single):
            return NamedFields.from_object(single).values()
        raise TypeError(f"Cannot read vector components from {type(single).__name__}")

    return _flatten_sequence(args)


def parse_axis(axis: Any) -> tuple[int, int]:
    """
    Resolve a 2D plane selector such as "xy", "yz" or (0, 2) into an index pair.
    """
    if axis is None:
        return (0, 1)
    if isinstance(axis, str):
        try:
            indices = tuple(_AXIS_LETTERS[letter] for letter in axis.lower())
        except KeyError:
            raise ValueError(f"Unknown axis '{axis}'") from None
    else:
        indices = tuple(int(i) for i in axis)
    if len(indices) != 2:
        raise ValueError(f"Axis must select exactly two dimensions, got {axis!r}")
    return indices  # type: ignore[return-value]


def parse_indices(axis: Any) -> list[int]:
    """Like parse_axis() but accepts any number of indices."""
    if isinstance(axis, str):
        try:
            return [_AXIS_LETTERS[letter] for letter in axis.lower()]
        except KeyError:
            raise ValueError(f"Unknown axis '{axis}'") from None
    if isinstance(axis, (int, np.integer)):
        return [int(axis)]
    return [int(i) for i in axis]
