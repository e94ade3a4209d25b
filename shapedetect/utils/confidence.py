"""Per-shape confidence heuristics.

Each shape type starts from a base score and applies additive or
multiplicative adjustments from circularity, vertex count, bbox aspect
ratio and raw contour length. The constants are empirically tuned; changing
any of them changes reported confidences.
"""

from __future__ import annotations

from shapedetect.models.shapes import ShapeType
from shapedetect.utils.geometry import normalized_aspect_ratio

# Penalty slope for a circle whose bbox is not square.
_CIRCLE_ASPECT_PENALTY = 0.2
# Short contours carry little detail; scores are multiplied by this.
_SMALL_CONTOUR_FACTOR = 0.8


def clamp_unit(value: float) -> float:
    return max(0.0, min(1.0, value))


def calculate_confidence(
    shape_type: ShapeType,
    vertex_count: int,
    circularity: float,
    contour_length: int,
    bbox: tuple[int, int, int, int],
) -> float:
    """Confidence in [0, 1] for a classified contour.

    ``contour_length`` is the raw (unsimplified) point count and ``bbox`` is
    (x, y, width, height).
    """
    aspect = normalized_aspect_ratio(bbox[2], bbox[3])

    if shape_type is ShapeType.CIRCLE:
        confidence = _circle_confidence(circularity, aspect, contour_length)
    elif shape_type is ShapeType.TRIANGLE:
        confidence = _triangle_confidence(vertex_count, circularity, contour_length)
    elif shape_type is ShapeType.RECTANGLE:
        confidence = _rectangle_confidence(vertex_count, circularity, contour_length)
    elif shape_type is ShapeType.PENTAGON:
        confidence = _pentagon_confidence(vertex_count, circularity, contour_length)
    elif shape_type is ShapeType.STAR:
        confidence = _star_confidence(vertex_count, circularity, contour_length)
    else:
        raise ValueError(f"Unknown shape type: {shape_type!r}")

    return clamp_unit(confidence)


def _circle_confidence(circularity: float, aspect: float, contour_length: int) -> float:
    if circularity > 0.85:
        confidence = 0.95
    elif circularity > 0.75:
        confidence = 0.85
    elif circularity > 0.65:
        confidence = 0.7
    else:
        confidence = 0.5

    # Circles fill a square bbox
    confidence -= (1 - aspect) * _CIRCLE_ASPECT_PENALTY

    if contour_length < 50:
        confidence *= _SMALL_CONTOUR_FACTOR
    return confidence


def _triangle_confidence(vertex_count: int, circularity: float, contour_length: int) -> float:
    confidence = 0.9 if vertex_count == 3 else 0.5

    if circularity < 0.5:
        confidence = min(confidence, 0.95)
    elif circularity > 0.7:
        confidence *= 0.7

    if contour_length < 30:
        confidence *= _SMALL_CONTOUR_FACTOR
    return confidence


def _rectangle_confidence(vertex_count: int, circularity: float, contour_length: int) -> float:
    # Any aspect ratio is a valid rectangle, so the bbox is not consulted.
    confidence = 0.9 if vertex_count == 4 else 0.5

    if circularity < 0.7:
        confidence = min(confidence, 0.95)
    elif circularity > 0.8:
        confidence *= 0.6

    if contour_length < 40:
        confidence *= _SMALL_CONTOUR_FACTOR
    return confidence


def _pentagon_confidence(vertex_count: int, circularity: float, contour_length: int) -> float:
    confidence = 0.85 if vertex_count == 5 else 0.5

    if 0.6 <= circularity <= 0.8:
        confidence = min(confidence, 0.9)
    elif circularity > 0.8 or circularity < 0.4:
        confidence *= 0.7

    if contour_length < 50:
        confidence *= _SMALL_CONTOUR_FACTOR
    return confidence


def _star_confidence(vertex_count: int, circularity: float, contour_length: int) -> float:
    # A 5-point star has 10 corners; nearby counts are partial detections.
    if 10 <= vertex_count <= 12:
        confidence = 0.85
    elif 8 <= vertex_count <= 14:
        confidence = 0.75
    else:
        confidence = 0.6

    if circularity < 0.5:
        confidence = min(confidence + 0.1, 0.95)
    elif circularity > 0.65:
        confidence *= 0.6

    if contour_length < 60:
        confidence *= _SMALL_CONTOUR_FACTOR
    return confidence
