"""T2.03: Vertex Count."""

from __future__ import annotations

from shapedetect.engine.context import DetectionContext
from shapedetect.engine.registry import Layer, transform
from shapedetect.utils.contour import count_vertices


@transform(
    id="T2.03",
    layer=Layer.SIMPLIFICATION,
    dependencies=["T2.02"],
    description="Count polygon vertices, folding the closing point into the start",
)
def vertex_count(ctx: DetectionContext) -> None:
    for cd in ctx.candidates:
        if cd.simplified is None:
            continue
        cd.vertex_count = count_vertices(cd.simplified, ctx.config.closure_distance)
