"""T3.01: Shape Properties.

Area (shoelace), inclusive bbox and bbox center, always from the raw
contour. The simplified polygon is too coarse for area.
"""

from __future__ import annotations

from shapedetect.engine.context import DetectionContext
from shapedetect.engine.registry import Layer, transform
from shapedetect.utils.geometry import shape_properties as compute_properties


@transform(
    id="T3.01",
    layer=Layer.PROPERTIES,
    dependencies=["T2.01"],
    description="Compute area, bounding box and center of each raw contour",
)
def shape_properties(ctx: DetectionContext) -> None:
    for cd in ctx.candidates:
        props = compute_properties(cd.points)
        cd.area = props.area
        cd.bbox = props.bbox
        cd.center = props.center
