"""Intent model — resolver + classifier output, per annotation and per batch."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from intentlens.models.regions import Importance


class IntentResult(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    region: str
    label: str
    importance: Importance
    action: str  # e.g. "circled", 'added note "move this"'
    summary: str
    is_minor_change: bool


class BatchResult(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    intents: list[IntentResult] = Field(default_factory=list)
    overall_summary: str = ""
    is_minor_overall: bool = True
