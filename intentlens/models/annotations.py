"""Annotation model — user-drawn marks over a displayed image, in canvas pixels.

Each annotation kind is its own model; ``Annotation`` is the discriminated
union over the ``type`` tag. The legacy canvas tags ``rect`` and ``line`` are
accepted as aliases for ``rectangle`` and ``polyline``, as is the annotator's
``arrow`` (a two-point polyline).
"""

from __future__ import annotations

import enum
from typing import Annotated, Any, ClassVar, Literal

from pydantic import BaseModel, Field, TypeAdapter, ValidationError, field_validator

# A polyline needs two points to have a direction.
MIN_POLYLINE_POINTS = 2


class AnnotationError(ValueError):
    """Raised for annotations that violate the basic shape contract."""


class AnnotationType(str, enum.Enum):
    RECTANGLE = "rectangle"
    CIRCLE = "circle"
    POLYLINE = "polyline"
    TEXT = "text"


class _AnnotationBase(BaseModel):
    kind: ClassVar[AnnotationType]

    x: float
    y: float


class RectangleAnnotation(_AnnotationBase):
    kind: ClassVar[AnnotationType] = AnnotationType.RECTANGLE

    type: Literal["rectangle", "rect"] = "rectangle"
    # Negative when the user dragged up/left of the anchor
    width: float = 0.0
    height: float = 0.0


class CircleAnnotation(_AnnotationBase):
    kind: ClassVar[AnnotationType] = AnnotationType.CIRCLE

    type: Literal["circle"] = "circle"
    radius: float = Field(default=0.0, ge=0)


class PolylineAnnotation(_AnnotationBase):
    kind: ClassVar[AnnotationType] = AnnotationType.POLYLINE

    type: Literal["polyline", "line", "arrow"] = "polyline"
    points: list[float] = Field(..., description="Flattened [x0, y0, x1, y1, ...] canvas coordinates")

    @field_validator("points")
    @classmethod
    def _check_points(cls, v: list[float]) -> list[float]:
        if len(v) % 2 != 0:
            raise ValueError(f"polyline points must be x/y pairs, got {len(v)} values")
        if len(v) < MIN_POLYLINE_POINTS * 2:
            raise ValueError(
                f"polyline needs at least {MIN_POLYLINE_POINTS} points "
                f"({MIN_POLYLINE_POINTS * 2} values), got {len(v)} values"
            )
        return v


class TextAnnotation(_AnnotationBase):
    kind: ClassVar[AnnotationType] = AnnotationType.TEXT

    type: Literal["text"] = "text"
    text: str = ""


Annotation = Annotated[
    RectangleAnnotation | CircleAnnotation | PolylineAnnotation | TextAnnotation,
    Field(discriminator="type"),
]

_annotation_adapter: TypeAdapter[Any] = TypeAdapter(Annotation)
_annotation_list_adapter: TypeAdapter[Any] = TypeAdapter(list[Annotation])


def parse_annotation(data: dict[str, Any]) -> Annotation:
    """Validate a raw annotation record, raising AnnotationError on bad shape."""
    try:
        return _annotation_adapter.validate_python(data)
    except ValidationError as e:
        raise AnnotationError(f"Invalid annotation: {_first_error(e)}") from e


def parse_annotations(data: list[dict[str, Any]]) -> list[Annotation]:
    try:
        return _annotation_list_adapter.validate_python(data)
    except ValidationError as e:
        raise AnnotationError(f"Invalid annotation batch: {_first_error(e)}") from e


def _first_error(e: ValidationError) -> str:
    err = e.errors()[0]
    loc = ".".join(str(part) for part in err.get("loc", ()))
    return f"{loc}: {err.get('msg', '')}" if loc else str(err.get("msg", ""))
