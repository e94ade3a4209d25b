"""Leaf-node geometry helpers. No engine imports."""

from __future__ import annotations

import math
from dataclasses import dataclass

import numpy as np
from numpy.typing import ArrayLike, NDArray


@dataclass(frozen=True)
class ShapeProperties:
    """Area, inclusive pixel bounding box (x, y, width, height) and bbox center."""

    area: float
    bbox: tuple[int, int, int, int]
    center: tuple[float, float]


def segment_distances(
    points: ArrayLike,
    start: ArrayLike,
    end: ArrayLike,
) -> NDArray[np.float64]:
    """Distance from each point to the closed segment [start, end].

    A zero-length segment degrades to point-to-point distance from start.
    """
    pts = np.asarray(points, dtype=np.float64).reshape(-1, 2)
    x1, y1 = (float(v) for v in np.asarray(start, dtype=np.float64))
    x2, y2 = (float(v) for v in np.asarray(end, dtype=np.float64))

    a = pts[:, 0] - x1
    b = pts[:, 1] - y1
    c = x2 - x1
    d = y2 - y1
    len_sq = c * c + d * d

    if len_sq == 0.0:
        return np.sqrt(a * a + b * b)

    param = np.clip((a * c + b * d) / len_sq, 0.0, 1.0)
    dx = pts[:, 0] - (x1 + param * c)
    dy = pts[:, 1] - (y1 + param * d)
    return np.sqrt(dx * dx + dy * dy)


def point_segment_distance(
    point: ArrayLike,
    start: ArrayLike,
    end: ArrayLike,
) -> float:
    """Distance from a single point to the segment [start, end]."""
    return float(segment_distances([point], start, end)[0])


def polygon_area(points: ArrayLike) -> float:
    """Shoelace area of the closed polygon through ``points`` (always >= 0)."""
    pts = np.asarray(points, dtype=np.float64).reshape(-1, 2)
    if len(pts) < 3:
        return 0.0
    x = pts[:, 0]
    y = pts[:, 1]
    # np.roll closes the ring: last vertex pairs with the first
    x_next = np.roll(x, -1)
    y_next = np.roll(y, -1)
    return float(abs(np.sum(x * y_next - x_next * y)) / 2)


def bounding_box(points: ArrayLike) -> tuple[int, int, int, int]:
    """Inclusive pixel bounding box as (x, y, width, height).

    width/height count pixels, so a single point has a 1x1 box.
    """
    pts = np.asarray(points).reshape(-1, 2)
    if len(pts) == 0:
        return (0, 0, 0, 0)
    min_x, min_y = (int(v) for v in pts.min(axis=0))
    max_x, max_y = (int(v) for v in pts.max(axis=0))
    return (min_x, min_y, max_x - min_x + 1, max_y - min_y + 1)


def bbox_center(bbox: tuple[int, int, int, int]) -> tuple[float, float]:
    """Geometric center of an (x, y, width, height) box."""
    x, y, w, h = bbox
    return (x + w / 2, y + h / 2)


def shape_properties(points: ArrayLike) -> ShapeProperties:
    """Area, bbox and center of a raw contour. Empty input gives all zeros."""
    pts = np.asarray(points).reshape(-1, 2)
    if len(pts) == 0:
        return ShapeProperties(area=0.0, bbox=(0, 0, 0, 0), center=(0.0, 0.0))
    box = bounding_box(pts)
    return ShapeProperties(area=polygon_area(pts), bbox=box, center=bbox_center(box))


def circularity(area: float, perimeter: float) -> float:
    """Isoperimetric ratio 4π·area/perimeter². Circle=1.0, 0 for no perimeter."""
    if perimeter <= 0:
        return 0.0
    return 4 * math.pi * area / (perimeter * perimeter)


def normalized_aspect_ratio(width: float, height: float) -> float:
    """min(w/h, h/w) in [0, 1]. Degenerate boxes score 0."""
    if width <= 0 or height <= 0:
        return 0.0
    ratio = width / height
    return min(ratio, 1 / ratio)


def point_distance(p: ArrayLike, q: ArrayLike) -> float:
    px, py = (float(v) for v in np.asarray(p, dtype=np.float64))
    qx, qy = (float(v) for v in np.asarray(q, dtype=np.float64))
    return math.sqrt((px - qx) ** 2 + (py - qy) ** 2)
