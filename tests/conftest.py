"""Shared test fixtures."""

from __future__ import annotations

import pytest

from intentlens.engine.catalog import RegionCatalog
from intentlens.models.regions import ImageRegionSet, Importance, Region


# Demo image size; canvas == image means scale 1 on both axes
IMAGE_W = 1024
IMAGE_H = 768

V2_NAMES = [
    "awning",
    "signage",
    "bench_people",
    "entrance",
    "windows_upper",
    "planters",
    "trees_left",
    "trees_right",
    "sky",
    "sidewalk",
    "street_lamp",
]

# Annotations over well-known areas of v2_with_bench.jpg at canvas 1024x768
SKY_RECT = {"type": "rectangle", "x": 900, "y": 10, "width": 50, "height": 50}
SIDEWALK_RECT = {"type": "rectangle", "x": 500, "y": 700, "width": 50, "height": 30}
BENCH_CIRCLE = {"type": "circle", "x": 100, "y": 450, "radius": 10}


def make_region(
    name: str,
    bbox: tuple[float, float, float, float],
    importance: Importance = Importance.LOW,
    label: str | None = None,
) -> Region:
    return Region(name=name, label=label or name.replace("_", " "), bbox=bbox, importance=importance)


SYNTHETIC_SET = ImageRegionSet(
    width=200,
    height=100,
    regions=(
        make_region("left_low", (0, 0, 100, 100), Importance.LOW),
        make_region("center_critical", (90, 40, 110, 60), Importance.CRITICAL),
        make_region("right_medium", (100, 0, 200, 100), Importance.MEDIUM),
    ),
)


@pytest.fixture
def synthetic_set() -> ImageRegionSet:
    return SYNTHETIC_SET


@pytest.fixture
def synthetic_catalog() -> RegionCatalog:
    return RegionCatalog({"synthetic.png": SYNTHETIC_SET}, default_image="synthetic.png")
