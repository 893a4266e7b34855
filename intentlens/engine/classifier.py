"""Intent classifier — minor vs. significant verdict and a plain-English summary."""

from __future__ import annotations

from typing import NamedTuple

from intentlens.models.annotations import Annotation, AnnotationType, TextAnnotation
from intentlens.models.regions import Importance, Region

# Highest tier still treated as a minor change. Minor changes are
# auto-approved downstream; anything above goes to review.
MINOR_CHANGE_CEILING = Importance.MEDIUM

_ACTIONS: dict[AnnotationType, str] = {
    AnnotationType.RECTANGLE: "highlighted an area",
    AnnotationType.CIRCLE: "circled",
    AnnotationType.POLYLINE: "drew attention to",
    AnnotationType.TEXT: 'added note "{text}"',
}

_EMPTY_NOTE = "..."

MINOR_TEMPLATE = "Client {action} the {label}. This is a minor adjustment that won't affect the approved scope."
SIGNIFICANT_TEMPLATE = "Client {action} the {label}. This is a key element - changes may require review."


class Classification(NamedTuple):
    action: str
    is_minor: bool
    summary: str


def is_minor_change(importance: Importance) -> bool:
    return importance.rank <= MINOR_CHANGE_CEILING.rank


def describe_action(annotation: Annotation) -> str:
    """Verb phrase for what the client did, e.g. ``circled``."""
    action = _ACTIONS[annotation.kind]
    if isinstance(annotation, TextAnnotation):
        return action.format(text=annotation.text or _EMPTY_NOTE)
    return action


def classify(annotation: Annotation, region: Region) -> Classification:
    action = describe_action(annotation)
    minor = is_minor_change(region.importance)
    template = MINOR_TEMPLATE if minor else SIGNIFICANT_TEMPLATE
    return Classification(
        action=action,
        is_minor=minor,
        summary=template.format(action=action, label=region.label),
    )
