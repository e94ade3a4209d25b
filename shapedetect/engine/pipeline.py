"""Pipeline orchestrator: runs transforms in dependency order."""

from __future__ import annotations

import importlib
import logging
import pkgutil
import time

from shapedetect.engine.context import DetectionContext
from shapedetect.engine.registry import TransformRegistry, get_registry

logger = logging.getLogger(__name__)

_LAYER_PACKAGES = ["layer0", "layer1", "layer2", "layer3", "layer4"]


def register_transforms() -> None:
    """Import all transform modules so @transform decorators fire."""
    for layer_name in _LAYER_PACKAGES:
        package_name = f"shapedetect.engine.{layer_name}"
        package = importlib.import_module(package_name)
        for _, module_name, _ in pkgutil.iter_modules(package.__path__):
            importlib.import_module(f"{package_name}.{module_name}")
    logger.debug("Transform registry holds %d transforms", get_registry().count)


class Pipeline:
    """Runs every registered transform over one DetectionContext."""

    def __init__(self, registry: TransformRegistry | None = None) -> None:
        self.registry = registry or get_registry()

    def run(self, ctx: DetectionContext) -> DetectionContext:
        start = time.perf_counter()
        ordered = self.registry.resolve_order()

        logger.debug(
            "Pipeline: %d transforms queued for %dx%d raster",
            len(ordered),
            ctx.width,
            ctx.height,
        )

        for spec in ordered:
            t0 = time.perf_counter()
            try:
                spec.fn(ctx)
                ctx.completed_transforms.add(spec.id)
                elapsed = (time.perf_counter() - t0) * 1000
                logger.debug("  %s completed in %.1fms", spec.id, elapsed)
            except Exception as e:
                ctx.errors[spec.id] = str(e)
                logger.warning("  %s FAILED: %s", spec.id, e)

        total = (time.perf_counter() - start) * 1000
        logger.info(
            "Pipeline complete: %d/%d transforms, %d contours, %d classified in %.0fms",
            len(ctx.completed_transforms),
            len(ordered),
            len(ctx.contours),
            len(ctx.classified),
            total,
        )
        return ctx


def create_pipeline() -> Pipeline:
    """Pipeline over the global registry with every transform loaded."""
    register_transforms()
    return Pipeline()
