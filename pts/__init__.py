"""pts - Points, vectors and matrices.

Main namespace package:
- pts.math: Pt and Group value types plus the vector, matrix and geometry
  algebra behind them
- pts.core: configuration, logging and errors
- pts.cli: command line diagnostics
"""

__version__ = "0.1.0"

__all__ = []
