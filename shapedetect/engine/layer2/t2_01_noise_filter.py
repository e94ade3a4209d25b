"""T2.01: Noise Filter.

Contours with fewer than 10 raw points are specks, not shapes.
"""

from __future__ import annotations

import logging

from shapedetect.engine.context import DetectionContext
from shapedetect.engine.registry import Layer, transform

logger = logging.getLogger(__name__)


@transform(
    id="T2.01",
    layer=Layer.SIMPLIFICATION,
    dependencies=["T1.01"],
    description="Mark contours below the minimum point count as noise",
)
def noise_filter(ctx: DetectionContext) -> None:
    min_points = ctx.config.min_contour_points
    for cd in ctx.contours:
        cd.is_noise = len(cd.points) < min_points
        if cd.is_noise:
            logger.debug("Contour %d dropped: %d points", cd.index, len(cd.points))
