"""Transform registry: each pipeline stage is a function registered via decorator.

Usage:
    @transform(id="T3.02", layer=Layer.PROPERTIES, dependencies=["T3.01"])
    def circularity(ctx: DetectionContext) -> None:
        for cd in ctx.candidates:
            cd.circularity = compute(cd.area, cd.perimeter)

Adding a stage = creating one file with the decorator under engine/layerN/.
"""

from __future__ import annotations

import enum
import logging
from collections import deque
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Callable

if TYPE_CHECKING:
    from shapedetect.engine.context import DetectionContext

logger = logging.getLogger(__name__)


class Layer(enum.IntEnum):
    BINARIZATION = 0
    TRACING = 1
    SIMPLIFICATION = 2
    PROPERTIES = 3
    CLASSIFICATION = 4


@dataclass
class TransformSpec:
    id: str
    layer: Layer
    fn: Callable[["DetectionContext"], None]
    dependencies: list[str] = field(default_factory=list)
    description: str = ""


class TransformRegistry:
    """Table of transforms, filled at import time and read-only afterwards."""

    def __init__(self) -> None:
        self._transforms: dict[str, TransformSpec] = {}

    def register(self, spec: TransformSpec) -> None:
        if spec.id in self._transforms:
            raise ValueError(f"Duplicate transform ID: {spec.id}")
        self._transforms[spec.id] = spec
        logger.debug("Registered transform %s (%s)", spec.id, spec.layer.name)

    def resolve_order(self) -> list[TransformSpec]:
        """Dependency order (Kahn), ties broken by ID."""
        pool = self._transforms
        dependents: dict[str, list[str]] = {tid: [] for tid in pool}
        in_degree: dict[str, int] = {tid: 0 for tid in pool}
        for tid, spec in pool.items():
            for dep in spec.dependencies:
                if dep in pool:
                    in_degree[tid] += 1
                    dependents[dep].append(tid)

        ready = deque(sorted(tid for tid, d in in_degree.items() if d == 0))
        ordered: list[TransformSpec] = []

        while ready:
            tid = ready.popleft()
            ordered.append(pool[tid])
            released = []
            for other in dependents[tid]:
                in_degree[other] -= 1
                if in_degree[other] == 0:
                    released.append(other)
            ready = deque(sorted([*ready, *released]))

        if len(ordered) != len(pool):
            missing = set(pool) - {s.id for s in ordered}
            raise ValueError(f"Circular dependency detected among: {missing}")

        return ordered

    @property
    def count(self) -> int:
        return len(self._transforms)


# Module-level singleton
_registry = TransformRegistry()


def get_registry() -> TransformRegistry:
    return _registry


def transform(
    *,
    id: str,
    layer: Layer,
    dependencies: list[str] | None = None,
    description: str = "",
):
    """Decorator to register a transform function."""

    def decorator(fn: Callable[["DetectionContext"], None]):
        _registry.register(
            TransformSpec(
                id=id,
                layer=layer,
                fn=fn,
                dependencies=dependencies or [],
                description=description,
            )
        )
        return fn

    return decorator
