"""detect_shapes(): raster in, DetectionResult out."""

from __future__ import annotations

import logging
import time

from shapedetect.engine.config import DetectorConfig
from shapedetect.engine.context import ContourData, DetectionContext
from shapedetect.engine.pipeline import create_pipeline
from shapedetect.models.shapes import BoundingBox, DetectedShape, DetectionResult, Point
from shapedetect.utils.raster import load_raster

logger = logging.getLogger(__name__)


def detect_shapes(raster: object, config: DetectorConfig | None = None) -> DetectionResult:
    """Detect circles, triangles, rectangles, pentagons and stars in ``raster``.

    ``raster`` is a decoded image: a numpy array shaped (H, W), (H, W, 3) or
    (H, W, 4), or a Pillow image. Dark pixels (red < 127) are the shapes.
    Raises InvalidRasterError for buffers that are not images; never raises
    on image content.
    """
    start = time.perf_counter()

    ctx = DetectionContext(raster=load_raster(raster), config=config or DetectorConfig())
    create_pipeline().run(ctx)

    shapes = tuple(_to_detected_shape(cd) for cd in ctx.classified)
    elapsed = (time.perf_counter() - start) * 1000

    if ctx.errors:
        logger.warning("Detection finished with %d failed transforms", len(ctx.errors))

    return DetectionResult(
        shapes=shapes,
        processing_time_ms=elapsed,
        image_width=ctx.width,
        image_height=ctx.height,
    )


def _to_detected_shape(cd: ContourData) -> DetectedShape:
    x, y, w, h = cd.bbox
    return DetectedShape(
        type=cd.shape_type,
        confidence=cd.confidence,
        bounding_box=BoundingBox(x=x, y=y, width=w, height=h),
        center=Point(x=cd.center[0], y=cd.center[1]),
        area=cd.area,
    )
