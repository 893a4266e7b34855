"""Semantic region model — named, importance-ranked areas of a reference image."""

from __future__ import annotations

import enum

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator


class Importance(str, enum.Enum):
    """How consequential a change to a region is.

    Total order: critical > high > medium > low. Compare through ``rank``
    rather than the string values.
    """

    CRITICAL = "critical"
    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"

    @property
    def rank(self) -> int:
        return _RANK[self]

    def outranks(self, other: Importance) -> bool:
        return self.rank > other.rank


_RANK = {
    Importance.LOW: 0,
    Importance.MEDIUM: 1,
    Importance.HIGH: 2,
    Importance.CRITICAL: 3,
}


class Region(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str
    label: str
    bbox: tuple[float, float, float, float]  # (x1, y1, x2, y2) image pixels
    importance: Importance

    @field_validator("bbox")
    @classmethod
    def _check_bbox(cls, v: tuple[float, float, float, float]) -> tuple[float, float, float, float]:
        x1, y1, x2, y2 = v
        if not (x1 < x2 and y1 < y2):
            raise ValueError(f"region bbox must satisfy x1 < x2 and y1 < y2, got {v}")
        return v


class ImageRegionSet(BaseModel):
    """All regions of one reference image. Regions may overlap; order matters for tie-breaks."""

    model_config = ConfigDict(frozen=True)

    width: float = Field(..., gt=0)
    height: float = Field(..., gt=0)
    regions: tuple[Region, ...] = Field(..., min_length=1)

    @model_validator(mode="after")
    def _unique_names(self) -> ImageRegionSet:
        seen: set[str] = set()
        for region in self.regions:
            if region.name in seen:
                raise ValueError(f"duplicate region name: {region.name}")
            seen.add(region.name)
        return self

    @property
    def region_names(self) -> list[str]:
        return [r.name for r in self.regions]
