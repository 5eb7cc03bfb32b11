from __future__ import annotations

import math
from dataclasses import dataclass, field

from villageinfo.errors import NotFound
from villageinfo.services.dataset import (
    ADDRESS,
    BLOCK,
    CATEGORY,
    DISTRICT,
    FACILITY_NAME,
    HABITATION,
    LATITUDE,
    LONGITUDE,
    SUBCATEGORY,
    DatasetStore,
    select_rows,
)


@dataclass
class Facility:
    facility_name: str
    address: str
    category: str
    subcategory: str
    latitude: float | None
    longitude: float | None


@dataclass
class VillageInfo:
    habitation_name: str
    district: str
    block: str
    facilities: list[Facility] = field(default_factory=list)


def parse_coordinate(raw: str | None) -> float | None:
    """Parse a dataset coordinate, returning None for anything non-numeric."""
    if raw is None:
        return None
    try:
        value = float(str(raw).strip())
    except ValueError:
        return None
    return value if math.isfinite(value) else None


def lookup_village(
    store: DatasetStore, state: str, district: str, block: str, village: str
) -> VillageInfo:
    """Collect every facility row for a village.

    Raises NotFound if the state has no dataset or no row matches the
    district/block/village triple.
    """
    frame = store.load(state)
    matched = select_rows(
        frame, {DISTRICT: district, BLOCK: block, HABITATION: village}
    )
    if matched.empty:
        raise NotFound("Village not found with given district and block")

    first = matched.iloc[0]
    facilities = [
        Facility(
            facility_name=row[FACILITY_NAME],
            address=row[ADDRESS],
            category=row[CATEGORY],
            subcategory=row[SUBCATEGORY],
            latitude=parse_coordinate(row[LATITUDE]),
            longitude=parse_coordinate(row[LONGITUDE]),
        )
        for _, row in matched.iterrows()
    ]
    return VillageInfo(
        habitation_name=village,
        district=first[DISTRICT],
        block=first[BLOCK],
        facilities=facilities,
    )
