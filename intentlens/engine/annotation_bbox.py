"""Annotation geometry — canvas-space annotation → image-space bounding box.

Scale factors are independent per axis. The canvas is expected to share the
image's aspect ratio; if it doesn't, the distortion is accepted as is.
"""

from __future__ import annotations

from typing import assert_never

import numpy as np

from intentlens.engine.config import EngineConfig
from intentlens.models.annotations import (
    Annotation,
    AnnotationError,
    CircleAnnotation,
    PolylineAnnotation,
    RectangleAnnotation,
    TextAnnotation,
)
from intentlens.utils.geometry import BBox, envelope, normalize_bbox

_DEFAULT_CONFIG = EngineConfig()


def to_image_bbox(
    annotation: Annotation,
    image_width: float,
    image_height: float,
    canvas_width: float,
    canvas_height: float,
    config: EngineConfig | None = None,
) -> BBox:
    """Bounding box of ``annotation`` in source-image pixels.

    Zero-size shapes give a degenerate (zero-area) box rather than an error.
    """
    if canvas_width <= 0 or canvas_height <= 0:
        raise AnnotationError(f"Canvas size must be positive, got {canvas_width}x{canvas_height}")
    cfg = config or _DEFAULT_CONFIG

    scale_x = image_width / canvas_width
    scale_y = image_height / canvas_height
    x = annotation.x * scale_x
    y = annotation.y * scale_y

    match annotation:
        case RectangleAnnotation():
            return normalize_bbox(x, y, x + annotation.width * scale_x, y + annotation.height * scale_y)
        case CircleAnnotation():
            # Larger scale on both axes: the box encloses the ellipse the circle
            # becomes under anisotropic scaling, at the cost of some slack.
            r = annotation.radius * max(scale_x, scale_y)
            return normalize_bbox(x - r, y - r, x + r, y + r)
        case PolylineAnnotation():
            # Points are absolute canvas coordinates; the anchor plays no part.
            points = np.asarray(annotation.points, dtype=np.float64).reshape(-1, 2)
            return envelope(points * np.array([scale_x, scale_y]))
        case TextAnnotation():
            return normalize_bbox(
                x,
                y,
                x + cfg.text_marker_width * scale_x,
                y + cfg.text_marker_height * scale_y,
            )
        case _:
            assert_never(annotation)
