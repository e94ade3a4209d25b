"""Tests for RDP simplification and vertex counting."""

import math

import numpy as np

from shapedetect.utils.contour import count_vertices, rdp_simplify
from shapedetect.utils.morphology import moore_trace
from tests.conftest import RECT_BOX, rect_mask


def _regular_polygon(n: int, radius: float = 3.0) -> np.ndarray:
    return np.array(
        [
            (radius * math.cos(2 * math.pi * k / n), radius * math.sin(2 * math.pi * k / n))
            for k in range(n)
        ]
    )


def _rectangle_contour() -> np.ndarray:
    grid = rect_mask(100, 60, *RECT_BOX)
    return moore_trace(grid, (RECT_BOX[0], RECT_BOX[1]))


def test_zero_epsilon_keeps_everything():
    pts = _regular_polygon(16)
    out = rdp_simplify(pts, 0.0)
    np.testing.assert_array_equal(out, pts)


def test_short_input_returned_verbatim():
    two = [(0, 0), (5, 5)]
    assert rdp_simplify(two, 10.0) is two
    one = np.array([(3, 3)])
    assert rdp_simplify(one, 0.0) is one


def test_collinear_points_collapse():
    pts = np.array([(0, 0), (1, 0), (2, 0), (3, 0)])
    np.testing.assert_array_equal(rdp_simplify(pts, 0.0), [(0, 0), (3, 0)])


def test_junction_point_not_duplicated():
    pts = np.array([(0, 0), (5, 5), (10, 0)])
    np.testing.assert_array_equal(rdp_simplify(pts, 1.0), pts)


def test_rectangle_contour_reduces_to_corners():
    contour = _rectangle_contour()
    out = rdp_simplify(contour, len(contour) * 0.02)
    np.testing.assert_array_equal(
        out, [(10, 20), (69, 20), (69, 39), (10, 39), (10, 21)]
    )


def test_simplification_is_stable():
    contour = _rectangle_contour()
    epsilon = len(contour) * 0.02
    once = rdp_simplify(contour, epsilon)
    twice = rdp_simplify(once, epsilon)
    np.testing.assert_array_equal(once, twice)


def test_count_vertices_folds_closing_point():
    # Last point one pixel below the start: same corner
    simplified = np.array([(10, 20), (69, 20), (69, 39), (10, 39), (10, 21)])
    assert count_vertices(simplified) == 4


def test_count_vertices_keeps_distant_endpoints():
    simplified = np.array([(0, 0), (10, 0), (10, 10), (0, 2)])
    # Exactly 2 apart is not a closure
    assert count_vertices(simplified) == 4


def test_count_vertices_single_point():
    assert count_vertices(np.array([(4, 4)])) == 1
