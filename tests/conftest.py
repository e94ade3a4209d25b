"""Shared test fixtures: synthetic black-on-white RGBA rasters."""

from __future__ import annotations

import numpy as np
import pytest


def blank(width: int, height: int) -> np.ndarray:
    """Opaque white RGBA canvas."""
    return np.full((height, width, 4), 255, dtype=np.uint8)


def paint(raster: np.ndarray, mask: np.ndarray) -> np.ndarray:
    """Paint ``mask`` pixels black (RGB = 0), keeping alpha."""
    raster[mask, :3] = 0
    return raster


def rect_mask(width: int, height: int, x0: int, y0: int, x1: int, y1: int) -> np.ndarray:
    """Filled rectangle, both corners inclusive."""
    mask = np.zeros((height, width), dtype=bool)
    mask[y0 : y1 + 1, x0 : x1 + 1] = True
    return mask


def disk_mask(width: int, height: int, cx: int, cy: int, r: int) -> np.ndarray:
    yy, xx = np.mgrid[0:height, 0:width]
    return (xx - cx) ** 2 + (yy - cy) ** 2 <= r * r


def right_triangle_mask(width: int, height: int) -> np.ndarray:
    """Apex (10, 10), right angle at (10, 89), far corner (39, 89)."""
    mask = np.zeros((height, width), dtype=bool)
    for y in range(10, 90):
        mask[y, 10 : 10 + (y - 10) * 30 // 80 + 1] = True
    return mask


# 60x20 bar at x 10..69, y 20..39
RECT_BOX = (10, 20, 69, 39)


def rectangle_raster() -> np.ndarray:
    return paint(blank(100, 60), rect_mask(100, 60, *RECT_BOX))


def triangle_raster() -> np.ndarray:
    return paint(blank(60, 100), right_triangle_mask(60, 100))


def circle_raster() -> np.ndarray:
    return paint(blank(101, 101), disk_mask(101, 101, 50, 50, 30))


def two_squares_raster() -> np.ndarray:
    mask = rect_mask(70, 40, 5, 5, 24, 24) | rect_mask(70, 40, 40, 10, 59, 29)
    return paint(blank(70, 40), mask)


@pytest.fixture
def rectangle() -> np.ndarray:
    return rectangle_raster()


@pytest.fixture
def triangle() -> np.ndarray:
    return triangle_raster()


@pytest.fixture
def circle() -> np.ndarray:
    return circle_raster()


@pytest.fixture
def two_squares() -> np.ndarray:
    return two_squares_raster()
