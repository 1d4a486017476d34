"""Tests for geometry helpers and transforms."""

import math

import pytest

from pts.core.errors import DegenerateInputError, DimensionMismatchError
from pts.math import Group, Pt, geom


class TestScalarHelpers:
    """Test clamping, bounding and unit conversion."""

    def test_clamp(self):
        """Test values are limited to the closed range."""
        assert geom.clamp(5, 0, 1) == 1
        assert geom.clamp(-5, 0, 1) == 0
        assert geom.clamp(0.5, 0, 1) == 0.5

    def test_bound_value_wraps(self):
        """Test values wrap into [lo, hi)."""
        assert geom.bound_value(370, 0, 360) == 10
        assert geom.bound_value(-10, 0, 360) == 350
        assert geom.bound_value(360, 0, 360) == 0

    def test_bound_radian(self):
        """Test radians are normalized into [0, 2*pi)."""
        assert geom.bound_radian(-math.pi / 2) == pytest.approx(3 * math.pi / 2)
        assert geom.bound_radian(2 * math.pi) == 0
        assert 0 <= geom.bound_radian(-1e-20) < geom.TWO_PI

    def test_bound_angle(self):
        """Test degrees are normalized into [0, 360)."""
        assert geom.bound_angle(720 + 45) == 45

    def test_conversions(self):
        """Test degree and radian conversion."""
        assert geom.to_radian(180) == pytest.approx(math.pi)
        assert geom.to_degree(math.pi / 2) == pytest.approx(90)


class TestTransforms:
    """Test transforms on Pts and sequences of Pts."""

    def test_scale_sequence(self):
        """Test scaling a list of Pts in place."""
        pts = [Pt(1, 1), Pt(2, 2)]
        geom.scale(pts, 3)
        assert [p.to_list() for p in pts] == [[3, 3], [6, 6]]

    def test_scale_per_component(self):
        """Test a short factor list leaves the rest unchanged."""
        p = Pt(1, 1, 1)
        geom.scale(p, [2, 3])
        assert p.to_list() == [2, 3, 1]

    def test_scale_selected_axis(self):
        """Test only the selected components scale."""
        p = Pt(1, 1, 1)
        geom.scale(p, 5, axis="z")
        assert p.to_list() == [1, 1, 5]

    def test_scale_with_member_anchor(self):
        """Test the anchor is read before any point moves."""
        g = Group(Pt(1, 1), Pt(3, 3))
        geom.scale(g, 2, anchor=g[0])
        assert g.to_list() == [[1, 1], [5, 5]]

    def test_rotate_with_member_anchor(self, assert_pt_close):
        """Test rotation around the first member does not drift."""
        g = Group(Pt(1, 1), Pt(2, 1))
        geom.rotate2d(g, math.pi / 2, anchor=g[0])
        assert_pt_close(g[0], [1, 1])
        assert_pt_close(g[1], [1, 2])

    def test_rotate_other_plane(self, assert_pt_close):
        """Test rotation in the xz plane leaves y."""
        p = Pt(1, 7, 0)
        geom.rotate2d(p, math.pi / 2, axis="xz")
        assert_pt_close(p, [0, 7, 1])

    def test_rotate_needs_dimensions(self):
        """Test a 2D Pt cannot rotate in yz."""
        with pytest.raises(DimensionMismatchError):
            geom.rotate2d(Pt(1, 2), 1.0, axis="yz")

    def test_failed_rotate_leaves_group(self):
        """Test no member moves when a later member is too short."""
        g = Group(Pt(1, 2, 3), Pt(1, 2))
        with pytest.raises(DimensionMismatchError):
            geom.rotate2d(g, math.pi, axis="yz")
        assert g.to_list() == [[1, 2, 3], [1, 2]]

    def test_shear_scalar(self):
        """Test a single number shears both ways."""
        p = Pt(1, 2)
        geom.shear2d(p, 1)
        assert p.to_list() == [3, 3]

    def test_reflect_degenerate_line(self):
        """Test a line with coincident points."""
        with pytest.raises(DegenerateInputError):
            geom.reflect2d(Pt(1, 1), [Pt(2, 2), Pt(2, 2)])
        with pytest.raises(DegenerateInputError):
            geom.reflect2d(Pt(1, 1), [Pt(2, 2)])

    def test_reflect_diagonal(self, assert_pt_close):
        """Test reflection across y = x swaps coordinates."""
        p = Pt(3, 1)
        geom.reflect2d(p, [[0, 0], [1, 1]])
        assert_pt_close(p, [1, 3])

    def test_anchor_direction(self):
        """Test invalid directions are rejected."""
        with pytest.raises(ValueError):
            geom.anchor(Group(Pt(1, 1)), 0, "sideways")

    def test_anchor_to_member(self):
        """Test anchoring on a member leaves it at the origin."""
        g = Group(Pt(2, 3), Pt(5, 5))
        geom.anchor(g, 0, "to")
        assert g.to_list() == [[0, 0], [3, 2]]


class TestAggregates:
    """Test centroid, bounds and interpolation."""

    def test_centroid(self):
        """Test the triangle centroid."""
        c = geom.centroid([Pt(0, 0), Pt(10, 0), Pt(10, 10)])
        assert c == Pt(6.6666665, 3.3333333)

    def test_centroid_empty(self):
        """Test an empty input."""
        with pytest.raises(DegenerateInputError):
            geom.centroid([])

    def test_bounding_box(self):
        """Test per-component extremes."""
        box = geom.bounding_box([Pt(3, -1), Pt(-2, 4), Pt(0, 0)])
        assert box.to_list() == [[-2, -1], [3, 4]]

    def test_bounding_box_empty(self):
        """Test an empty input."""
        with pytest.raises(DegenerateInputError):
            geom.bounding_box(Group())

    def test_ragged_centroid(self):
        """Test the first point sets the dimension and all points count."""
        c = geom.centroid([Pt(0, 4), Pt([2]), Pt(4, 2, 9)])
        assert c.to_list() == [2, 2]

    def test_ragged_bounding_box(self):
        """Test components are bounded by the rows that have them."""
        box = geom.bounding_box([Pt(0, 4), Pt([2]), Pt(-1, 6, 9)])
        assert box.to_list() == [[-1, 4], [2, 6]]

    def test_interpolate(self):
        """Test endpoints, midpoint and clamping."""
        a, b = Pt(0, 0), Pt(10, 20)
        assert geom.interpolate(a, b, 0) == a
        assert geom.interpolate(a, b, 1) == b
        assert geom.interpolate(a, b, 0.5) == Pt(5, 10)
        assert geom.interpolate(a, b, 2) == b
        assert geom.interpolate(a, b, -1) == a

    def test_interpolate_leaves_inputs(self):
        """Test interpolation returns a new Pt."""
        a = Pt(0, 0)
        result = geom.interpolate(a, [4, 4], 0.5)
        assert result is not a
        assert a.to_list() == [0, 0]
