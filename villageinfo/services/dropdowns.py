"""Distinct child locations for the cascading state/district/block/village pickers."""

from __future__ import annotations

import logging

import pandas as pd

from villageinfo.errors import InternalError, VillageInfoError
from villageinfo.services.dataset import (
    BLOCK,
    DISTRICT,
    HABITATION,
    LATITUDE,
    LONGITUDE,
    DatasetStore,
    normalize,
    select_rows,
)

logger = logging.getLogger(__name__)


def _distinct(values: pd.Series) -> list[str]:
    """Trimmed, non-blank values in first-seen order.

    Values differing only in case collapse to the first spelling seen.
    """
    seen: dict[str, str] = {}
    for value in values:
        value = value.strip()
        if value:
            seen.setdefault(normalize(value), value)
    return list(seen.values())


def _load(store: DatasetStore, state: str, what: str) -> pd.DataFrame:
    try:
        return store.load(state)
    except VillageInfoError as exc:
        logger.error("Error fetching %s for state %r: %s", what, state, exc.detail)
        raise InternalError(f"Error fetching {what}") from exc


def list_states(store: DatasetStore) -> list[str]:
    try:
        return store.list_states()
    except VillageInfoError as exc:
        logger.error("Error fetching states: %s", exc.detail)
        raise InternalError("Error fetching states") from exc


def list_districts(store: DatasetStore, state: str) -> list[str]:
    frame = _load(store, state, "districts")
    return _distinct(frame[DISTRICT])


def list_blocks(store: DatasetStore, state: str, district: str) -> list[str]:
    frame = _load(store, state, "blocks")
    return _distinct(select_rows(frame, {DISTRICT: district})[BLOCK])


def list_villages(
    store: DatasetStore, state: str, district: str, block: str
) -> list[dict[str, str]]:
    frame = _load(store, state, "villages")
    rows = select_rows(frame, {DISTRICT: district, BLOCK: block})
    return [
        {
            "name": row[HABITATION],
            "latitude": row[LATITUDE],
            "longitude": row[LONGITUDE],
        }
        for _, row in rows.iterrows()
    ]
