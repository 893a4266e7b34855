"""FastAPI dependency injection."""

from __future__ import annotations

from functools import lru_cache

from intentlens.config import Settings, settings
from intentlens.engine.catalog import RegionCatalog, create_default_catalog
from intentlens.engine.lens import IntentLens, create_intent_lens


def get_settings() -> Settings:
    return settings


@lru_cache(maxsize=1)
def get_catalog() -> RegionCatalog:
    return create_default_catalog(default_image=settings.default_image)


def get_intent_lens() -> IntentLens:
    return create_intent_lens(catalog=get_catalog())
