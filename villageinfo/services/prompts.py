"""Prompt templates sent to the generative model."""

from __future__ import annotations

from collections.abc import Iterable
from typing import Protocol

NO_FACILITIES = "No facilities listed."

PROGRESS_YEARS = (2019, 2020, 2021, 2022, 2023)


class FacilityLike(Protocol):
    facility_name: str
    category: str
    subcategory: str


def format_facilities(facilities: Iterable[FacilityLike] | None) -> str:
    """Bulleted ``- name (category - subcategory)`` lines, or a placeholder."""
    lines = [
        f"- {f.facility_name} ({f.category.strip()} - {f.subcategory})"
        for f in facilities or ()
    ]
    return "\n".join(lines) or NO_FACILITIES


def _location(village: str, block: str, district: str, state: str) -> str:
    return (
        f"the village '{village}', located in block '{block}', "
        f"district '{district}', state '{state}', India"
    )


def build_suggestion_prompt(
    village: str, block: str, district: str, state: str, facilities=None
) -> str:
    return (
        "You are an expert in rural development. Suggest realistic and impactful "
        f"development ideas for {_location(village, block, district, state)}.\n\n"
        "Available facilities in the village:\n"
        f"{format_facilities(facilities)}\n\n"
        "Based on this, what areas (education, healthcare, agriculture, "
        "transportation, etc.) need attention and what should be developed or "
        "improved? Present your answer in bullet points."
    )


def build_structured_prompt(
    village: str, block: str, district: str, state: str, facilities=None
) -> str:
    return (
        "You are an expert in rural development. Suggest realistic and impactful "
        f"development ideas for {_location(village, block, district, state)}.\n\n"
        "Available facilities in the village:\n"
        f"{format_facilities(facilities)}\n\n"
        "Group your suggestions by area (education, healthcare, agriculture, "
        "transportation, etc.). Respond ONLY with a JSON array, no prose and no "
        "Markdown, where each element has the shape:\n"
        '{"title": "<area>", "points": ["<suggestion>", "<suggestion>"]}'
    )


def build_score_prompt(
    village: str, block: str, district: str, state: str, facilities=None
) -> str:
    return (
        "You are an expert in rural development assessment. Rate the current "
        f"state of development for {_location(village, block, district, state)}.\n\n"
        "Available facilities in the village:\n"
        f"{format_facilities(facilities)}\n\n"
        "Give each sector (education, healthcare, water supply, electricity) a "
        "score from 0 to 100 with a one-sentence reason. Respond ONLY with a JSON "
        "object in exactly this form:\n"
        "{\n"
        '  "education": {"score": 70, "reason": "..."},\n'
        '  "healthcare": {"score": 55, "reason": "..."},\n'
        '  "waterSupply": {"score": 60, "reason": "..."},\n'
        '  "electricity": {"score": 80, "reason": "..."}\n'
        "}"
    )


def build_progress_prompt(
    village: str, block: str, district: str, state: str, facilities=None
) -> str:
    first, last = PROGRESS_YEARS[0], PROGRESS_YEARS[-1]
    return (
        "You are an expert in rural development. Simulate a realistic "
        f"{len(PROGRESS_YEARS)}-year development trend ({first}-{last}) for "
        f"{_location(village, block, district, state)}.\n\n"
        "Available facilities in the village:\n"
        f"{format_facilities(facilities)}\n\n"
        "For each year estimate a 0-100 development score for education, "
        "healthcare, water supply and electricity. Respond ONLY with a JSON "
        "array, one element per year, in this form:\n"
        "[\n"
        f'  {{"year": {first}, "education": 50, "healthcare": 40, '
        '"waterSupply": 45, "electricity": 60},\n'
        "  ...\n"
        "]"
    )
