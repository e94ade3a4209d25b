"""T4.02: Confidence Scoring."""

from __future__ import annotations

from shapedetect.engine.context import DetectionContext
from shapedetect.engine.registry import Layer, transform
from shapedetect.utils.confidence import calculate_confidence


@transform(
    id="T4.02",
    layer=Layer.CLASSIFICATION,
    dependencies=["T4.01"],
    description="Score each classified contour in [0, 1]",
)
def confidence_scoring(ctx: DetectionContext) -> None:
    for cd in ctx.classified:
        cd.confidence = calculate_confidence(
            cd.shape_type,
            cd.vertex_count,
            cd.circularity,
            cd.perimeter,
            cd.bbox,
        )
