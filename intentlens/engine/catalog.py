"""Region catalog — read-only lookup from image name to its region set.

Unknown names fall back to the default image instead of failing: the caller
doesn't always know which reference image an annotation batch belongs to.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from types import MappingProxyType

from intentlens.engine.regions_data import DEFAULT_IMAGE, IMAGE_REGIONS
from intentlens.models.regions import ImageRegionSet

logger = logging.getLogger(__name__)


class RegionCatalog:
    """Immutable mapping of image name → ImageRegionSet with a designated default."""

    def __init__(self, images: Mapping[str, ImageRegionSet], default_image: str) -> None:
        if default_image not in images:
            raise ValueError(f"Default image {default_image!r} is not in the catalog")
        self._images: Mapping[str, ImageRegionSet] = MappingProxyType(dict(images))
        self._default_image = default_image

    @property
    def default_image(self) -> str:
        return self._default_image

    @property
    def count(self) -> int:
        return len(self._images)

    def image_names(self) -> list[str]:
        return list(self._images)

    def contains(self, image_name: str) -> bool:
        return image_name in self._images

    def resolve_name(self, image_name: str) -> str:
        """Name of the image whose regions ``lookup`` will return."""
        if image_name in self._images:
            return image_name
        return self._default_image

    def lookup(self, image_name: str) -> ImageRegionSet:
        name = self.resolve_name(image_name)
        if name != image_name:
            logger.info("Unknown image %r, using default catalog %r", image_name, name)
        return self._images[name]


def create_default_catalog(default_image: str = DEFAULT_IMAGE) -> RegionCatalog:
    """Catalog of the bundled demo images."""
    return RegionCatalog(IMAGE_REGIONS, default_image=default_image)
