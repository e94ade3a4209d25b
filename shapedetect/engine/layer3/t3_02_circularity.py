"""T3.02: Circularity.

C = 4π·area/perimeter², perimeter = raw point count (not arc length).
"""

from __future__ import annotations

from shapedetect.engine.context import DetectionContext
from shapedetect.engine.registry import Layer, transform
from shapedetect.utils.geometry import circularity as compute_circularity


@transform(
    id="T3.02",
    layer=Layer.PROPERTIES,
    dependencies=["T3.01"],
    description="Compute circularity (4π·area/perimeter²)",
)
def circularity(ctx: DetectionContext) -> None:
    for cd in ctx.candidates:
        cd.circularity = compute_circularity(cd.area, cd.perimeter)
