"""Tests for the pipeline orchestrator."""

import logging

from shapedetect.engine.context import DetectionContext
from shapedetect.engine.pipeline import Pipeline
from shapedetect.engine.registry import Layer, TransformRegistry, TransformSpec


def test_pipeline_runs_transforms_in_order():
    reg = TransformRegistry()
    results = []

    def first(ctx: DetectionContext) -> None:
        results.append("first")

    def second(ctx: DetectionContext) -> None:
        results.append("second")

    reg.register(TransformSpec(id="T1.01", layer=Layer.TRACING, fn=second, dependencies=["T0.01"]))
    reg.register(TransformSpec(id="T0.01", layer=Layer.BINARIZATION, fn=first))

    ctx = Pipeline(registry=reg).run(DetectionContext())

    assert results == ["first", "second"]
    assert ctx.completed_transforms == {"T0.01", "T1.01"}


def test_pipeline_records_errors_and_continues(caplog):
    reg = TransformRegistry()
    ran = []

    def fail(ctx: DetectionContext) -> None:
        raise ValueError("test error")

    reg.register(TransformSpec(id="T0.01", layer=Layer.BINARIZATION, fn=fail))
    reg.register(TransformSpec(id="T1.01", layer=Layer.TRACING, fn=lambda ctx: ran.append(1)))

    with caplog.at_level(logging.WARNING, logger="shapedetect.engine.pipeline"):
        ctx = Pipeline(registry=reg).run(DetectionContext())

    assert "test error" in ctx.errors["T0.01"]
    assert "T1.01" in ctx.completed_transforms
    assert ran == [1]
    assert "T0.01 FAILED" in caplog.text
