"""API request models."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from intentlens.models.annotations import Annotation


class IntentLensRequest(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    annotations: list[Annotation] = Field(default_factory=list, description="Annotations in drawing order")
    image_name: str = Field(..., description="Reference image the annotations were drawn on")
    canvas_width: float | None = Field(default=None, gt=0, description="Canvas width in pixels")
    canvas_height: float | None = Field(default=None, gt=0, description="Canvas height in pixels")


class SingleAnnotationRequest(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    annotation: Annotation
    image_name: str
    canvas_width: float | None = Field(default=None, gt=0)
    canvas_height: float | None = Field(default=None, gt=0)
