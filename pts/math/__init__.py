"""
pts.math - geometric values for points, vectors and matrices

- Pt: fixed-length float32 vector with in-place and copying operations
- Group: ordered collection of Pts, read as a matrix or as a path
- vec / mat / geom: the algebra behind them, usable on plain buffers and rows
"""

from . import geom, mat, vec
from .args import NamedFields, get_args
from .geometric import Group, Pt
from .value import GeometricValue
from .vec import ValueIndex

__all__ = [
    "GeometricValue",
    "Pt",
    "Group",
    "ValueIndex",
    "NamedFields",
    "get_args",
    "vec",
    "mat",
    "geom",
]
