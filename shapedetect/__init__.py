"""Geometric shape detection on black-and-white rasters."""

from shapedetect.detector import detect_shapes
from shapedetect.engine.config import DetectorConfig
from shapedetect.models.shapes import (
    BoundingBox,
    DetectedShape,
    DetectionResult,
    Point,
    ShapeType,
)
from shapedetect.utils.raster import InvalidRasterError

__all__ = [
    "detect_shapes",
    "DetectorConfig",
    "BoundingBox",
    "DetectedShape",
    "DetectionResult",
    "Point",
    "ShapeType",
    "InvalidRasterError",
]
