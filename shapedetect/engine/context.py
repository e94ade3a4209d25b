"""DetectionContext: the per-call mutable state flowing through all transforms.

Per-component results → ContourData
Image-level state     → DetectionContext.* (binary map, contour list)

A context is created by one detect_shapes() call and never shared.
"""

from __future__ import annotations

from dataclasses import dataclass, field

import numpy as np
from numpy.typing import NDArray

from shapedetect.engine.config import DetectorConfig
from shapedetect.models.shapes import ShapeType


@dataclass
class ContourData:
    """One traced foreground component and everything derived from it."""

    index: int
    # Raw boundary walk: Nx2 int array of (x, y), start pixel first
    points: NDArray[np.int64] = field(default_factory=lambda: np.empty((0, 2), dtype=np.int64))
    # Below the minimum point count; skipped by every later stage
    is_noise: bool = False
    # RDP output, may end near its first point
    simplified: NDArray[np.int64] | None = None
    vertex_count: int = 0
    area: float = 0.0
    # (x, y, width, height), inclusive pixel extents
    bbox: tuple[int, int, int, int] = (0, 0, 0, 0)
    center: tuple[float, float] = (0.0, 0.0)
    circularity: float = 0.0
    shape_type: ShapeType | None = None
    confidence: float = 0.0

    @property
    def perimeter(self) -> int:
        """Raw point count, used as the perimeter proxy."""
        return len(self.points)


@dataclass
class DetectionContext:
    """Shared state for one pass over one raster."""

    # Decoded raster: (H, W) or (H, W, C)
    raster: NDArray = field(default_factory=lambda: np.zeros((0, 0, 4), dtype=np.uint8))
    config: DetectorConfig = field(default_factory=DetectorConfig)

    # Foreground mask; consumed (cleared) by contour tracing
    binary_map: NDArray[np.bool_] | None = None
    contours: list[ContourData] = field(default_factory=list)

    # --- Pipeline metadata ---
    completed_transforms: set[str] = field(default_factory=set)
    errors: dict[str, str] = field(default_factory=dict)

    @property
    def width(self) -> int:
        return int(self.raster.shape[1]) if self.raster.ndim >= 2 else 0

    @property
    def height(self) -> int:
        return int(self.raster.shape[0]) if self.raster.ndim >= 2 else 0

    @property
    def candidates(self) -> list[ContourData]:
        """Contours long enough to analyse."""
        return [cd for cd in self.contours if not cd.is_noise]

    @property
    def classified(self) -> list[ContourData]:
        return [cd for cd in self.candidates if cd.shape_type is not None]
