"""T4.01: Shape Classification.

Circularity gate first, then vertex count. See utils/classifier.py for the
rule table. Unclassifiable contours keep shape_type = None.
"""

from __future__ import annotations

import logging

from shapedetect.engine.context import DetectionContext
from shapedetect.engine.registry import Layer, transform
from shapedetect.utils.classifier import classify_shape

logger = logging.getLogger(__name__)


@transform(
    id="T4.01",
    layer=Layer.CLASSIFICATION,
    dependencies=["T2.03", "T3.02"],
    description="Label contours circle/triangle/rectangle/pentagon/star",
)
def shape_classification(ctx: DetectionContext) -> None:
    for cd in ctx.candidates:
        cd.shape_type = classify_shape(cd.vertex_count, cd.circularity)
        if cd.shape_type is None:
            logger.debug(
                "Contour %d unclassified: %d vertices, circularity %.3f",
                cd.index,
                cd.vertex_count,
                cd.circularity,
            )
