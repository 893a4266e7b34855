"""IntentLens orchestrator — geometry → resolver → classifier, per annotation and per batch."""

from __future__ import annotations

import logging
from collections.abc import Sequence

from intentlens.engine.annotation_bbox import to_image_bbox
from intentlens.engine.catalog import RegionCatalog, create_default_catalog
from intentlens.engine.classifier import classify
from intentlens.engine.config import EngineConfig
from intentlens.engine.resolver import resolve
from intentlens.models.annotations import Annotation
from intentlens.models.intent import BatchResult, IntentResult
from intentlens.models.regions import ImageRegionSet

logger = logging.getLogger(__name__)

EMPTY_BATCH_SUMMARY = "No annotations provided"
MINOR_BATCH_TEMPLATE = "Client feedback on {regions}. Minor adjustments only."
SIGNIFICANT_BATCH_TEMPLATE = "Client feedback on {regions}. Contains changes to key elements."


def join_labels(labels: Sequence[str]) -> str:
    """English list without an Oxford comma: "A", "A and B", "A, B and C"."""
    if not labels:
        return ""
    if len(labels) == 1:
        return labels[0]
    return ", ".join(labels[:-1]) + " and " + labels[-1]


def distinct_labels(intents: Sequence[IntentResult]) -> list[str]:
    """Region labels in order of first occurrence."""
    return list(dict.fromkeys(i.label for i in intents))


class IntentLens:
    """Resolves annotation batches against an injected region catalog."""

    def __init__(
        self,
        catalog: RegionCatalog | None = None,
        config: EngineConfig | None = None,
    ) -> None:
        self.catalog = catalog or create_default_catalog()
        self.config = config or EngineConfig()

    def analyze_annotation(
        self,
        annotation: Annotation,
        image_name: str,
        canvas_width: float,
        canvas_height: float,
    ) -> IntentResult:
        region_set = self.catalog.lookup(image_name)
        return self._analyze(annotation, region_set, canvas_width, canvas_height)

    def analyze_batch(
        self,
        annotations: Sequence[Annotation],
        image_name: str,
        canvas_width: float,
        canvas_height: float,
    ) -> BatchResult:
        if len(annotations) == 0:
            return BatchResult(intents=[], overall_summary=EMPTY_BATCH_SUMMARY, is_minor_overall=True)

        region_set = self.catalog.lookup(image_name)
        logger.info(
            "IntentLens: %d annotation(s) on %s (canvas %.0f×%.0f)",
            len(annotations),
            self.catalog.resolve_name(image_name),
            canvas_width,
            canvas_height,
        )

        intents = [self._analyze(a, region_set, canvas_width, canvas_height) for a in annotations]
        is_minor_overall = all(i.is_minor_change for i in intents)

        template = MINOR_BATCH_TEMPLATE if is_minor_overall else SIGNIFICANT_BATCH_TEMPLATE
        overall_summary = template.format(regions=join_labels(distinct_labels(intents)))

        logger.info("IntentLens complete: %s", overall_summary)
        return BatchResult(
            intents=intents,
            overall_summary=overall_summary,
            is_minor_overall=is_minor_overall,
        )

    def _analyze(
        self,
        annotation: Annotation,
        region_set: ImageRegionSet,
        canvas_width: float,
        canvas_height: float,
    ) -> IntentResult:
        bbox = to_image_bbox(
            annotation,
            region_set.width,
            region_set.height,
            canvas_width,
            canvas_height,
            config=self.config,
        )
        region = resolve(bbox, region_set)
        action, is_minor, summary = classify(annotation, region)
        logger.debug(
            "  %s at %s → %s (%s)",
            annotation.kind.value,
            tuple(round(v, 1) for v in bbox),
            region.name,
            region.importance.value,
        )
        return IntentResult(
            region=region.name,
            label=region.label,
            importance=region.importance,
            action=action,
            summary=summary,
            is_minor_change=is_minor,
        )


def create_intent_lens(
    catalog: RegionCatalog | None = None,
    config: EngineConfig | None = None,
) -> IntentLens:
    """Factory function for creating an IntentLens instance."""
    return IntentLens(catalog=catalog, config=config)
