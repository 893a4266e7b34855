"""IntentLens annotation-intent resolution engine."""

from intentlens.engine.catalog import RegionCatalog, create_default_catalog
from intentlens.engine.config import EngineConfig
from intentlens.engine.lens import IntentLens, create_intent_lens

__all__ = [
    "RegionCatalog",
    "create_default_catalog",
    "EngineConfig",
    "IntentLens",
    "create_intent_lens",
]
