"""API response models."""

from __future__ import annotations

from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from intentlens.models.intent import BatchResult, IntentResult
from intentlens.models.regions import ImageRegionSet


class HealthResponse(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    status: str = "ok"
    version: str = "0.1.0"
    images_registered: int = 0


class TraceEvent(BaseModel):
    """One line of the agent activity log shown next to the chat."""

    agent: str = "IntentLens"
    status: Literal["started", "completed", "error"]
    message: str
    timestamp: int  # epoch milliseconds
    data: dict[str, Any] | None = None


class IntentLensResponse(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    success: bool = True
    image_name: str = ""
    output: BatchResult | None = None
    error: str | None = None
    traces: list[TraceEvent] = Field(default_factory=list)
    processing_time_ms: float = 0.0


class SingleAnnotationResponse(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    success: bool = True
    image_name: str = ""
    output: IntentResult | None = None
    error: str | None = None
    traces: list[TraceEvent] = Field(default_factory=list)
    processing_time_ms: float = 0.0


class ImageListResponse(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    images: list[str] = Field(default_factory=list)
    default_image: str


class ImageRegionsResponse(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    requested: str
    image_name: str  # after fallback
    is_fallback: bool = False
    region_set: ImageRegionSet
