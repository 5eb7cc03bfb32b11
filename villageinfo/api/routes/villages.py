from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, Request

from villageinfo.api.dependencies import get_dataset_store
from villageinfo.api.schemas import (
    ErrorResponse,
    FacilityModel,
    VillageInfoResponse,
    VillageQuery,
)
from villageinfo.services.dataset import DatasetStore
from villageinfo.services.facility_lookup import lookup_village
from villageinfo.services.request_context import tag_location

logger = logging.getLogger(__name__)

router = APIRouter(tags=["villages"])


@router.post(
    "/villageinfo",
    summary="Facilities in a village",
    description=(
        "Look up every facility recorded for a village. District, block and "
        "village are matched case-insensitively after trimming whitespace."
    ),
    response_model=VillageInfoResponse,
    responses={
        400: {"model": ErrorResponse, "description": "Missing required field"},
        404: {"model": ErrorResponse, "description": "State or village not found"},
    },
)
def village_info(
    request: Request,
    query: VillageQuery | None = None,
    store: DatasetStore = Depends(get_dataset_store),
):
    query = query or VillageQuery()
    query.require_complete()
    tag_location(request, query.state, query.district, query.block, query.village)

    info = lookup_village(
        store, query.state, query.district, query.block, query.village
    )
    logger.info(
        "Found %d facilities for %s / %s / %s",
        len(info.facilities),
        info.district,
        info.block,
        info.habitation_name,
    )
    return VillageInfoResponse(
        habitation_name=info.habitation_name,
        district=info.district,
        block=info.block,
        facilities=[
            FacilityModel(
                facility_name=f.facility_name,
                address=f.address,
                category=f.category,
                subcategory=f.subcategory,
                latitude=f.latitude,
                longitude=f.longitude,
            )
            for f in info.facilities
        ],
    )
