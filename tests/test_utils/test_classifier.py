"""Tests for the vertex-count / circularity decision rule."""

import math

import numpy as np
import pytest

from shapedetect.models.shapes import ShapeType
from shapedetect.utils.classifier import classify_shape
from shapedetect.utils.geometry import circularity, polygon_area


def test_regular_16gon_is_circle():
    pts = np.array(
        [(3 * math.cos(2 * math.pi * k / 16), 3 * math.sin(2 * math.pi * k / 16)) for k in range(16)]
    )
    circ = circularity(polygon_area(pts), len(pts))
    assert circ > 0.75
    assert classify_shape(len(pts), circ) is ShapeType.CIRCLE


@pytest.mark.parametrize("circ", [0.0, 0.3, 0.6, 0.7, 0.75])
def test_three_vertices_below_gate_is_triangle(circ):
    assert classify_shape(3, circ) is ShapeType.TRIANGLE


def test_circularity_gate_beats_vertex_count():
    assert classify_shape(3, 0.76) is ShapeType.CIRCLE
    assert classify_shape(4, 0.80) is ShapeType.CIRCLE


@pytest.mark.parametrize(
    "vertices, expected",
    [
        (4, ShapeType.RECTANGLE),
        (5, ShapeType.PENTAGON),
        (10, ShapeType.STAR),
        (11, ShapeType.STAR),
        (12, ShapeType.STAR),
        (13, ShapeType.CIRCLE),
        (40, ShapeType.CIRCLE),
    ],
)
def test_vertex_count_rules(vertices, expected):
    assert classify_shape(vertices, 0.3) is expected


@pytest.mark.parametrize("vertices", [8, 9])
@pytest.mark.parametrize("circ", [0.2, 0.66, 0.74])
def test_eight_and_nine_vertices_are_circles(vertices, circ):
    # The >= 8 rule fires before the 6-9 band is consulted
    assert classify_shape(vertices, circ) is ShapeType.CIRCLE


@pytest.mark.parametrize("vertices", [6, 7])
def test_six_and_seven_vertices(vertices):
    assert classify_shape(vertices, 0.70) is ShapeType.CIRCLE
    assert classify_shape(vertices, 0.65) is ShapeType.PENTAGON
    assert classify_shape(vertices, 0.40) is ShapeType.PENTAGON


@pytest.mark.parametrize("vertices", [0, 1, 2])
def test_too_few_vertices_unclassified(vertices):
    assert classify_shape(vertices, 0.5) is None
