"""Pydantic request and response models."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from villageinfo.errors import InvalidRequest

_CAMEL = ConfigDict(populate_by_name=True)


def _is_blank(value: str | None) -> bool:
    return value is None or not value.strip()


# ---------------------------------------------------------------------------
# Shared
# ---------------------------------------------------------------------------


class ErrorResponse(BaseModel):
    """Body of every non-2xx response."""

    error: str = Field(..., description="Human-readable error message")


class HealthResponse(BaseModel):
    status: str = Field(..., description="'ok' or 'degraded'")
    dataset_dir: str = Field(..., description="Configured dataset directory")
    states: int = Field(..., description="Number of state dataset files found")
    generator: str | None = Field(
        None, description="Active LLM provider, or null when no API key is set"
    )
    uptime_seconds: float = Field(..., description="Seconds since process start")


# ---------------------------------------------------------------------------
# /villageinfo
# ---------------------------------------------------------------------------


class VillageQuery(BaseModel):
    """Location triple plus state. Presence is checked by ``require_complete``
    so a missing field yields a 400 with a readable message."""

    state: str | None = None
    district: str | None = None
    block: str | None = None
    village: str | None = None

    def require_complete(self) -> None:
        if any(
            _is_blank(v) for v in (self.state, self.district, self.block, self.village)
        ):
            raise InvalidRequest(
                "State, district, block, and village are required in body"
            )


class FacilityModel(BaseModel):
    model_config = _CAMEL

    facility_name: str = Field(..., alias="facilityName")
    address: str
    category: str
    subcategory: str
    latitude: float | None = Field(
        None, description="Parsed latitude; null when the dataset value is malformed"
    )
    longitude: float | None = Field(
        None, description="Parsed longitude; null when the dataset value is malformed"
    )


class VillageInfoResponse(BaseModel):
    model_config = _CAMEL

    habitation_name: str = Field(..., alias="habitationName")
    district: str
    block: str
    facilities: list[FacilityModel]


# ---------------------------------------------------------------------------
# /api/* dropdowns
# ---------------------------------------------------------------------------


class VillageOption(BaseModel):
    name: str
    latitude: str = Field(..., description="Raw latitude text from the dataset")
    longitude: str = Field(..., description="Raw longitude text from the dataset")


# ---------------------------------------------------------------------------
# /gemini*
# ---------------------------------------------------------------------------


class FacilityContext(BaseModel):
    """Facility summary supplied by the client; extra keys are ignored."""

    model_config = _CAMEL

    facility_name: str = Field("", alias="facilityName")
    category: str = ""
    subcategory: str = ""


class SuggestionRequest(BaseModel):
    village: str | None = None
    block: str | None = None
    district: str | None = None
    state: str | None = None
    facilities: list[FacilityContext] | None = None

    def require_complete(self) -> None:
        if any(
            _is_blank(v) for v in (self.village, self.block, self.district, self.state)
        ):
            raise InvalidRequest("Missing location data")


class SuggestionsResponse(BaseModel):
    suggestions: str


class StructuredSuggestionsResponse(BaseModel):
    suggestions: Any = Field(
        ..., description="Parsed JSON, normally a list of {title, points[]}"
    )


class ScoresResponse(BaseModel):
    scores: Any = Field(
        ..., description="Parsed JSON object of per-sector {score, reason}"
    )


class ProgressResponse(BaseModel):
    progress: Any = Field(
        ..., description="Parsed JSON array of yearly sector scores, 2019-2023"
    )
