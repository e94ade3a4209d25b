"""T0.01: Binarization.

Foreground = red channel < threshold (127). Only the red channel is read;
inputs are assumed effectively monochrome.
"""

from __future__ import annotations

from shapedetect.engine.context import DetectionContext
from shapedetect.engine.registry import Layer, transform
from shapedetect.utils.raster import binarize


@transform(
    id="T0.01",
    layer=Layer.BINARIZATION,
    description="Threshold the red channel into a foreground mask",
)
def binarization(ctx: DetectionContext) -> None:
    ctx.binary_map = binarize(ctx.raster, ctx.config.binary_threshold)
