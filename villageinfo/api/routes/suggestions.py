from __future__ import annotations

from fastapi import APIRouter, Depends, Request

from villageinfo.api.dependencies import get_advisor
from villageinfo.api.schemas import (
    ErrorResponse,
    ProgressResponse,
    ScoresResponse,
    StructuredSuggestionsResponse,
    SuggestionRequest,
    SuggestionsResponse,
)
from villageinfo.services.advisor import DevelopmentAdvisor
from villageinfo.services.request_context import tag_location

router = APIRouter(
    tags=["suggestions"],
    responses={
        400: {"model": ErrorResponse, "description": "Missing location data"},
        500: {"model": ErrorResponse, "description": "Upstream LLM failure"},
    },
)


def _location(request: Request, body: SuggestionRequest | None) -> tuple:
    body = body or SuggestionRequest()
    body.require_complete()
    tag_location(request, body.state, body.district, body.block, body.village)
    return body.village, body.block, body.district, body.state, body.facilities


@router.post(
    "/gemini",
    response_model=SuggestionsResponse,
    summary="Free-text development suggestions",
)
async def suggestions(
    request: Request,
    body: SuggestionRequest | None = None,
    advisor: DevelopmentAdvisor = Depends(get_advisor),
):
    return {"suggestions": await advisor.suggest(*_location(request, body))}


@router.post(
    "/gemini-structured",
    response_model=StructuredSuggestionsResponse,
    summary="Development suggestions as a JSON array",
    description="Each element is `{title, points[]}` as produced by the model.",
)
async def structured_suggestions(
    request: Request,
    body: SuggestionRequest | None = None,
    advisor: DevelopmentAdvisor = Depends(get_advisor),
):
    return {"suggestions": await advisor.suggest_structured(*_location(request, body))}


@router.post(
    "/gemini-score",
    response_model=ScoresResponse,
    summary="Per-sector development scores",
)
async def sector_scores(
    request: Request,
    body: SuggestionRequest | None = None,
    advisor: DevelopmentAdvisor = Depends(get_advisor),
):
    return {"scores": await advisor.score_sectors(*_location(request, body))}


@router.post(
    "/gemini-progress",
    response_model=ProgressResponse,
    summary="Simulated 2019-2023 progress trend",
)
async def progress_trend(
    request: Request,
    body: SuggestionRequest | None = None,
    advisor: DevelopmentAdvisor = Depends(get_advisor),
):
    return {"progress": await advisor.simulate_progress(*_location(request, body))}
