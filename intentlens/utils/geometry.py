"""Leaf-node bounding-box helpers. No engine imports.

All boxes are (x1, y1, x2, y2) with the origin top-left.
"""

from __future__ import annotations

from collections.abc import Sequence

import numpy as np
from numpy.typing import NDArray

BBox = tuple[float, float, float, float]


def normalize_bbox(x1: float, y1: float, x2: float, y2: float) -> BBox:
    """Order corners so that x1 <= x2 and y1 <= y2."""
    return (float(min(x1, x2)), float(min(y1, y2)), float(max(x1, x2)), float(max(y1, y2)))


def envelope(points: NDArray[np.float64]) -> BBox:
    """Min/max envelope of an Nx2 point array."""
    if len(points) == 0:
        return (0.0, 0.0, 0.0, 0.0)
    return (
        float(np.min(points[:, 0])),
        float(np.min(points[:, 1])),
        float(np.max(points[:, 0])),
        float(np.max(points[:, 1])),
    )


def bbox_center(b: BBox) -> tuple[float, float]:
    return ((b[0] + b[2]) / 2, (b[1] + b[3]) / 2)


def bbox_overlap(a: BBox, b: BBox) -> bool:
    """True iff the boxes overlap on both axes. Touching edges do not count."""
    return a[0] < b[2] and a[2] > b[0] and a[1] < b[3] and a[3] > b[1]


def center_distances(b: BBox, others: Sequence[BBox]) -> NDArray[np.float64]:
    """Euclidean distance from the center of ``b`` to the center of each of ``others``."""
    if not others:
        return np.empty(0)
    boxes = np.asarray(others, dtype=np.float64)
    cx, cy = bbox_center(b)
    ocx = (boxes[:, 0] + boxes[:, 2]) / 2
    ocy = (boxes[:, 1] + boxes[:, 3]) / 2
    return np.sqrt((ocx - cx) ** 2 + (ocy - cy) ** 2)
