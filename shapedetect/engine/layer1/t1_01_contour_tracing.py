"""T1.01: Contour Tracing.

Raster-scan the binary map; each unvisited foreground pixel seeds a
Moore-Neighbor boundary walk, then a 4-connected flood fill erases the whole
component so it is visited once. Holes are filled, never traced.
"""

from __future__ import annotations

import logging

from shapedetect.engine.context import ContourData, DetectionContext
from shapedetect.engine.registry import Layer, transform
from shapedetect.utils.morphology import trace_components

logger = logging.getLogger(__name__)


@transform(
    id="T1.01",
    layer=Layer.TRACING,
    dependencies=["T0.01"],
    description="Trace one boundary contour per foreground component",
)
def contour_tracing(ctx: DetectionContext) -> None:
    if ctx.binary_map is None:
        return

    # The tracer consumes its grid; keep the context's mask intact
    grid = ctx.binary_map.copy()
    traced = trace_components(grid, max_steps_factor=ctx.config.max_trace_steps_factor)
    ctx.contours = [ContourData(index=i, points=pts) for i, pts in enumerate(traced)]
    logger.debug("Traced %d components", len(ctx.contours))
