"""Shape detection transform engine."""

from shapedetect.engine.registry import transform, Layer, get_registry
from shapedetect.engine.context import DetectionContext, ContourData
from shapedetect.engine.pipeline import Pipeline, create_pipeline

__all__ = [
    "transform",
    "Layer",
    "get_registry",
    "DetectionContext",
    "ContourData",
    "Pipeline",
    "create_pipeline",
]
