"""
Base class for the geometric value types (Pt and Group).

Provides:
- Tolerant comparison wired into == / !=
- String representations
- Operation binding (op / ops)
- The auxiliary id tag, which never takes part in comparison or arithmetic
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, Callable, Optional, Sequence

from pts.core.config import get_settings


def default_threshold() -> float:
    """Tolerance used by equals() when none is passed."""
    return get_settings().EQUALS_THRESHOLD


class GeometricValue(ABC):
    """
    Base class for mutable geometric values.

    Subclasses must implement:
    - clone: deep copy
    - equals: tolerant comparison
    - to_string / to_list: representations
    - _coerce: build a comparable value from plain Python input
    """

    id: Optional[str] = None

    # Mutable containers: no hashing
    __hash__ = None  # type: ignore[assignment]

    @abstractmethod
    def clone(self) -> GeometricValue:
        """Return a deep copy of this value."""
        pass

    @abstractmethod
    def equals(self, other: Any, threshold: Optional[float] = None) -> bool:
        """
        Tolerant comparison.

        Args:
            other: Value to compare against
            threshold: Largest component difference still considered equal

        Returns:
            True if values are equal within threshold
        """
        pass

    @abstractmethod
    def to_string(self) -> str:
        """Convert to the diagnostic text form."""
        pass

    @abstractmethod
    def to_list(self) -> list:
        """Convert to plain Python lists of floats."""
        pass

    @classmethod
    @abstractmethod
    def _coerce(cls, other: Any) -> GeometricValue:
        """Build a value of this type from plain Python input (raises TypeError/ValueError)."""
        pass

    def __str__(self) -> str:
        return self.to_string()

    def __repr__(self) -> str:
        return self.to_string()

    # Comparison operators (using tolerant comparison)

    def __eq__(self, other: Any) -> bool:
        """Equality with the configured default threshold."""
        if not isinstance(other, type(self)):
            try:
                other = self._coerce(other)
            except (TypeError, ValueError):
                return False
        return self.equals(other)

    def __ne__(self, other: Any) -> bool:
        return not self.__eq__(other)

    # Operation binding

    def op(self, fn: Callable[..., Any]) -> Callable[..., Any]:
        """
        Bind this value as the first argument of fn.

        Example:
            >>> project_on = pt.op(some_fn)
            >>> project_on([1, 2, 3])   # same as some_fn(pt, [1, 2, 3])
        """
        def bound(*params: Any, **kwargs: Any) -> Any:
            return fn(self, *params, **kwargs)

        return bound

    def ops(self, fns: Sequence[Callable[..., Any]]) -> list[Callable[..., Any]]:
        """Bind this value into each function of fns; see op()."""
        return [self.op(fn) for fn in fns]
