"""Detection output models: what callers receive from detect_shapes()."""

from __future__ import annotations

import enum

from pydantic import BaseModel, ConfigDict, Field


class ShapeType(str, enum.Enum):
    CIRCLE = "circle"
    TRIANGLE = "triangle"
    RECTANGLE = "rectangle"
    PENTAGON = "pentagon"
    STAR = "star"


class Point(BaseModel):
    model_config = ConfigDict(frozen=True)

    x: float
    y: float


class BoundingBox(BaseModel):
    """Inclusive pixel extents: width = max_x - min_x + 1."""

    model_config = ConfigDict(frozen=True)

    x: int = 0
    y: int = 0
    width: int = 0
    height: int = 0


class DetectedShape(BaseModel):
    model_config = ConfigDict(frozen=True)

    type: ShapeType
    confidence: float = Field(ge=0.0, le=1.0)
    bounding_box: BoundingBox
    center: Point
    area: float = Field(default=0.0, ge=0.0)


class DetectionResult(BaseModel):
    model_config = ConfigDict(frozen=True)

    shapes: tuple[DetectedShape, ...] = ()
    processing_time_ms: float = 0.0
    image_width: int = 0
    image_height: int = 0
