"""
Shared pytest fixtures for the pts test suite.

This module provides:
- Fresh settings per test (environment overrides never leak)
- A clean ``pts`` logger per test so caplog sees library warnings
- Common geometric inputs
"""

import logging

import pytest

from pts.core.config import get_settings
from pts.math import Group, Pt


@pytest.fixture(autouse=True)
def fresh_settings():
    """Drop cached settings before and after every test."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture(autouse=True)
def reset_pts_logger():
    """Undo setup_logging() so records propagate to caplog again."""
    yield
    logger = logging.getLogger("pts")
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()
    logger.setLevel(logging.NOTSET)
    logger.propagate = True


@pytest.fixture
def triangle():
    """Right triangle used for centroid and bounds checks."""
    return Group(Pt(0, 0), Pt(10, 0), Pt(10, 10))


@pytest.fixture
def square():
    """Unit square traversed counter-clockwise."""
    return Group(Pt(0, 0), Pt(1, 0), Pt(1, 1), Pt(0, 1))


@pytest.fixture
def assert_pt_close():
    """Helper to assert a Pt matches expected components."""
    def _assert_close(pt: Pt, expected: list[float], tol: float = 1e-5) -> None:
        """
        Assert that pt has exactly the expected components within tol.

        Args:
            pt: The Pt to check
            expected: Expected component values
            tol: Largest allowed difference per component
        """
        assert len(pt) == len(expected), f"{pt} has {len(pt)} components, expected {len(expected)}"
        for actual, want in zip(pt, expected):
            assert actual == pytest.approx(want, abs=tol), f"{pt} != {expected}"

    return _assert_close


pytestmark = [
    pytest.mark.filterwarnings("ignore::DeprecationWarning"),
]
