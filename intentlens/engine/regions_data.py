"""Pre-dissected regions for the demo reference images.

Region order within an image is significant: when several regions of the
same importance overlap an annotation, the one listed first wins. Append new
regions at the end, do not reorder existing ones.
"""

from __future__ import annotations

from intentlens.models.regions import ImageRegionSet, Importance, Region

DEFAULT_IMAGE = "v2_with_bench.jpg"

_CRITICAL = Importance.CRITICAL
_HIGH = Importance.HIGH
_MEDIUM = Importance.MEDIUM
_LOW = Importance.LOW


def _region(name: str, label: str, bbox: tuple[float, float, float, float], importance: Importance) -> Region:
    return Region(name=name, label=label, bbox=bbox, importance=importance)


V2_WITH_BENCH = ImageRegionSet(
    width=1024,
    height=768,
    regions=(
        _region("awning", "storefront awning with signage", (280, 150, 750, 280), _HIGH),
        _region("signage", "Eye Clinic of San Jose sign", (320, 180, 720, 250), _CRITICAL),
        _region("bench_people", "people sitting on bench", (30, 380, 220, 580), _CRITICAL),
        _region("entrance", "main entrance doors", (450, 280, 650, 520), _HIGH),
        _region("windows_upper", "upper floor windows", (280, 50, 700, 150), _MEDIUM),
        _region("planters", "decorative planters and greenery", (200, 400, 450, 550), _LOW),
        _region("trees_left", "trees on left side", (0, 100, 150, 450), _LOW),
        _region("trees_right", "trees on right side", (850, 100, 1024, 450), _LOW),
        _region("sky", "sky and clouds", (0, 0, 1024, 120), _LOW),
        _region("sidewalk", "sidewalk and pavement", (0, 550, 1024, 768), _LOW),
        _region("street_lamp", "street lamp", (750, 200, 820, 500), _LOW),
    ),
)

V1_NO_BENCH = ImageRegionSet(
    width=1024,
    height=768,
    regions=(
        _region("awning", "storefront awning with signage", (280, 150, 750, 280), _HIGH),
        _region("signage", "Eye Clinic of San Jose sign", (320, 180, 720, 250), _CRITICAL),
        _region("bench_empty", "empty bench area", (30, 380, 220, 580), _CRITICAL),
        _region("entrance", "main entrance doors", (450, 280, 650, 520), _HIGH),
        _region("windows_upper", "upper floor windows", (280, 50, 700, 150), _MEDIUM),
        _region("planters", "decorative planters and greenery", (200, 400, 450, 550), _LOW),
        _region("sky", "sky and clouds", (0, 0, 1024, 120), _LOW),
        _region("sidewalk", "sidewalk and pavement", (0, 550, 1024, 768), _LOW),
    ),
)

IMAGE_REGIONS: dict[str, ImageRegionSet] = {
    "v2_with_bench.jpg": V2_WITH_BENCH,
    "v1_no_bench.png": V1_NO_BENCH,
}
