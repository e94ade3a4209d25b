"""Detector configuration: numeric knobs of the detection pipeline."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class DetectorConfig:
    """Defaults reproduce the reference labels; change them only deliberately."""

    # Red channel strictly below this is foreground (ink)
    binary_threshold: int = 127

    # Contours with fewer raw points are noise
    min_contour_points: int = 10

    # RDP epsilon as a fraction of the raw contour point count
    rdp_epsilon_pct: float = 0.02

    # First/last simplified points closer than this are one vertex
    closure_distance: float = 2.0

    # Moore trace step cap, per image pixel
    max_trace_steps_factor: int = 8
