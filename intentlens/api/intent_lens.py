"""POST /api/intent-lens — resolve annotations to image regions and scope impact."""

from __future__ import annotations

import logging
import time

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse

from intentlens.config import Settings
from intentlens.dependencies import get_catalog, get_intent_lens, get_settings
from intentlens.engine.catalog import RegionCatalog
from intentlens.engine.lens import IntentLens
from intentlens.models.annotations import AnnotationError
from intentlens.models.requests import IntentLensRequest, SingleAnnotationRequest
from intentlens.models.responses import (
    ImageListResponse,
    ImageRegionsResponse,
    IntentLensResponse,
    SingleAnnotationResponse,
    TraceEvent,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/intent-lens")

_AGENT = "IntentLens"


def _now_ms() -> int:
    return int(time.time() * 1000)


def _trace(status: str, message: str, data: dict | None = None) -> TraceEvent:
    return TraceEvent(agent=_AGENT, status=status, message=message, timestamp=_now_ms(), data=data)


def _error_response(model: type, image_name: str, message: str, traces: list[TraceEvent], start: float) -> JSONResponse:
    traces.append(_trace("error", message))
    body = model(
        success=False,
        image_name=image_name,
        error=message,
        traces=traces,
        processing_time_ms=round((time.perf_counter() - start) * 1000, 1),
    )
    return JSONResponse(status_code=422, content=body.model_dump(mode="json", by_alias=True))


@router.post("", response_model=IntentLensResponse)
async def analyze_annotations(
    req: IntentLensRequest,
    lens: IntentLens = Depends(get_intent_lens),
    settings: Settings = Depends(get_settings),
):
    start = time.perf_counter()
    image_name = lens.catalog.resolve_name(req.image_name)
    traces = [
        _trace("started", f"Analyzing {len(req.annotations)} annotation(s) on {req.image_name}..."),
    ]

    try:
        result = lens.analyze_batch(
            req.annotations,
            req.image_name,
            req.canvas_width or settings.default_canvas_width,
            req.canvas_height or settings.default_canvas_height,
        )
    except AnnotationError as e:
        logger.warning("IntentLens failed on %s: %s", req.image_name, e)
        return _error_response(IntentLensResponse, image_name, str(e), traces, start)

    if not result.intents:
        traces.append(_trace("completed", "No annotations to analyze"))
    else:
        traces.append(
            _trace(
                "completed",
                result.overall_summary,
                data={
                    "regions": [i.label for i in result.intents],
                    "isMinor": result.is_minor_overall,
                },
            )
        )

    return IntentLensResponse(
        success=True,
        image_name=image_name,
        output=result,
        traces=traces,
        processing_time_ms=round((time.perf_counter() - start) * 1000, 1),
    )


@router.post("/annotation", response_model=SingleAnnotationResponse)
async def analyze_single_annotation(
    req: SingleAnnotationRequest,
    lens: IntentLens = Depends(get_intent_lens),
    settings: Settings = Depends(get_settings),
):
    start = time.perf_counter()
    image_name = lens.catalog.resolve_name(req.image_name)
    traces = [_trace("started", f"Analyzing {req.annotation.kind.value} annotation on {req.image_name}...")]

    try:
        intent = lens.analyze_annotation(
            req.annotation,
            req.image_name,
            req.canvas_width or settings.default_canvas_width,
            req.canvas_height or settings.default_canvas_height,
        )
    except AnnotationError as e:
        logger.warning("IntentLens failed on %s: %s", req.image_name, e)
        return _error_response(SingleAnnotationResponse, image_name, str(e), traces, start)

    traces.append(
        _trace(
            "completed",
            intent.summary,
            data={"regions": [intent.label], "isMinor": intent.is_minor_change},
        )
    )
    return SingleAnnotationResponse(
        success=True,
        image_name=image_name,
        output=intent,
        traces=traces,
        processing_time_ms=round((time.perf_counter() - start) * 1000, 1),
    )


@router.get("/images", response_model=ImageListResponse)
async def list_images(catalog: RegionCatalog = Depends(get_catalog)) -> ImageListResponse:
    return ImageListResponse(images=catalog.image_names(), default_image=catalog.default_image)


@router.get("/images/{image_name}", response_model=ImageRegionsResponse)
async def get_image_regions(
    image_name: str,
    catalog: RegionCatalog = Depends(get_catalog),
) -> ImageRegionsResponse:
    resolved = catalog.resolve_name(image_name)
    return ImageRegionsResponse(
        requested=image_name,
        image_name=resolved,
        is_fallback=resolved != image_name,
        region_set=catalog.lookup(image_name),
    )
