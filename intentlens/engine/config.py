"""Engine configuration — tunable constants for annotation geometry."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class EngineConfig:
    """Controls how annotations without a visual extent are sized."""

    # Nominal text-marker box in canvas units (roughly one short line of text)
    text_marker_width: float = 100.0
    text_marker_height: float = 30.0
