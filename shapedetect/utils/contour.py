"""Contour simplification: RDP and closing-point handling."""

from __future__ import annotations

import numpy as np
from numpy.typing import NDArray

from shapedetect.utils.geometry import point_distance, segment_distances


def rdp_simplify(
    points: NDArray,
    epsilon: float,
) -> NDArray:
    """Ramer-Douglas-Peucker polyline simplification.

    Keeps the endpoints and every point that deviates from the chord of its
    sub-segment by more than epsilon. Fewer than 3 points are returned as-is.
    """
    if len(points) < 3:
        return points

    points = np.asarray(points)
    start = points[0]
    end = points[-1]

    # Interior points only; argmax picks the first of equal maxima
    distances = segment_distances(points[1:-1], start, end)
    max_idx = int(np.argmax(distances)) + 1
    max_dist = float(distances[max_idx - 1])

    if max_dist > epsilon:
        left = rdp_simplify(points[: max_idx + 1], epsilon)
        right = rdp_simplify(points[max_idx:], epsilon)
        return np.concatenate([left[:-1], right])
    return points[[0, -1]]


def count_vertices(simplified: NDArray, closure_distance: float = 2.0) -> int:
    """Vertex count of a simplified closed contour.

    The last point is dropped from the count when it sits within
    ``closure_distance`` of the first (the walk came back to its start).
    """
    vertices = len(simplified)
    if vertices > 1 and point_distance(simplified[0], simplified[-1]) < closure_distance:
        vertices -= 1
    return vertices
