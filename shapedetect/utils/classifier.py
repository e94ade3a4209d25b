"""Shape classification from vertex count and circularity.

Rules, first match wins:
  circularity > 0.75                    → circle
  3 / 4 / 5 vertices                    → triangle / rectangle / pentagon
  10-12 vertices                        → star
  ≥ 8 vertices (rest of the range)      → circle
  6-9 vertices: circularity > 0.65      → circle
                ≤ 7 vertices            → pentagon
                else                    → star
  anything else                         → unclassified (None)

The ≥ 8 rule shadows 8 and 9 in the 6-9 band, so only 6 and 7 reach it.
"""

from __future__ import annotations

from shapedetect.models.shapes import ShapeType

# Point-count perimeter makes digital squares score π/4 ≈ 0.785; above it reads as round.
_CIRC_CIRCLE = 0.75
# Secondary gate for 6-9 vertex polygons that are nearly round.
_CIRC_ROUNDISH = 0.65
# A 5-point star simplifies to 10 vertices, ±2 for corner merges/splits.
_STAR_MIN_VERTICES = 10
_STAR_MAX_VERTICES = 12
# Past this many vertices a contour is a sampled curve.
_MANY_VERTICES = 8
_AMBIGUOUS_MIN_VERTICES = 6
_AMBIGUOUS_MAX_VERTICES = 9
_PENTAGON_MAX_VERTICES = 7


def classify_shape(vertex_count: int, circularity: float) -> ShapeType | None:
    if circularity > _CIRC_CIRCLE:
        return ShapeType.CIRCLE

    if vertex_count == 3:
        return ShapeType.TRIANGLE
    if vertex_count == 4:
        return ShapeType.RECTANGLE
    if vertex_count == 5:
        return ShapeType.PENTAGON
    if _STAR_MIN_VERTICES <= vertex_count <= _STAR_MAX_VERTICES:
        return ShapeType.STAR
    if vertex_count >= _MANY_VERTICES:
        return ShapeType.CIRCLE
    if _AMBIGUOUS_MIN_VERTICES <= vertex_count <= _AMBIGUOUS_MAX_VERTICES:
        if circularity > _CIRC_ROUNDISH:
            return ShapeType.CIRCLE
        if vertex_count <= _PENTAGON_MAX_VERTICES:
            return ShapeType.PENTAGON
        return ShapeType.STAR
    return None
