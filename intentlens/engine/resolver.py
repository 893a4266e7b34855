"""Region resolver — which region does an annotation box refer to?

Two phases: regions the box overlaps, else the region whose center is
nearest. The winner among candidates is the most important one; equal
importance goes to the region listed first in the catalog.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence

import numpy as np

from intentlens.models.regions import ImageRegionSet, Region
from intentlens.utils.geometry import BBox, bbox_overlap, center_distances

logger = logging.getLogger(__name__)


def overlapping_regions(bbox: BBox, regions: Sequence[Region]) -> list[Region]:
    """Regions whose bbox strictly overlaps ``bbox``, in catalog order."""
    return [r for r in regions if bbox_overlap(bbox, r.bbox)]


def nearest_region(bbox: BBox, regions: Sequence[Region]) -> Region:
    """Region whose center is closest to the center of ``bbox``. First wins on ties."""
    if not regions:
        raise ValueError("Cannot pick the nearest of zero regions")
    dists = center_distances(bbox, [r.bbox for r in regions])
    # argmin returns the first index among equal minima
    return regions[int(np.argmin(dists))]


def pick_most_important(candidates: Sequence[Region]) -> Region:
    """Highest importance tier; within a tier the first in catalog order wins."""
    if not candidates:
        raise ValueError("Cannot pick from zero candidate regions")
    best = candidates[0]
    for region in candidates[1:]:
        if region.importance.outranks(best.importance):
            best = region
    return best


def resolve(bbox: BBox, region_set: ImageRegionSet) -> Region:
    """Resolve ``bbox`` to exactly one region of ``region_set``. Never fails."""
    candidates = overlapping_regions(bbox, region_set.regions)
    if not candidates:
        fallback = nearest_region(bbox, region_set.regions)
        logger.debug("No overlap for %s, nearest region is %s", bbox, fallback.name)
        candidates = [fallback]
    return pick_most_important(candidates)
