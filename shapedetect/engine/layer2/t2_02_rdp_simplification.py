"""T2.02: RDP Simplification.

epsilon = 2% of the raw point count, so larger shapes tolerate
proportionally larger deviation.
"""

from __future__ import annotations

from shapedetect.engine.context import DetectionContext
from shapedetect.engine.registry import Layer, transform
from shapedetect.utils.contour import rdp_simplify


@transform(
    id="T2.02",
    layer=Layer.SIMPLIFICATION,
    dependencies=["T2.01"],
    description="Simplify each contour with Ramer-Douglas-Peucker",
)
def rdp_simplification(ctx: DetectionContext) -> None:
    for cd in ctx.candidates:
        epsilon = cd.perimeter * ctx.config.rdp_epsilon_pct
        cd.simplified = rdp_simplify(cd.points, epsilon)
