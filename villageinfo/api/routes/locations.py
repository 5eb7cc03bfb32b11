from __future__ import annotations

from fastapi import APIRouter, Depends

from villageinfo.api.dependencies import get_dataset_store
from villageinfo.api.schemas import ErrorResponse, VillageOption
from villageinfo.services import dropdowns
from villageinfo.services.dataset import DatasetStore

router = APIRouter(
    prefix="/api",
    tags=["locations"],
    responses={500: {"model": ErrorResponse, "description": "Dataset unreadable"}},
)


@router.get("/states", response_model=list[str], summary="States with a dataset")
def get_states(store: DatasetStore = Depends(get_dataset_store)):
    return dropdowns.list_states(store)


@router.get(
    "/districts/{state}", response_model=list[str], summary="Districts in a state"
)
def get_districts(state: str, store: DatasetStore = Depends(get_dataset_store)):
    return dropdowns.list_districts(store, state)


@router.get(
    "/blocks/{state}/{district}",
    response_model=list[str],
    summary="Blocks in a district",
)
def get_blocks(
    state: str, district: str, store: DatasetStore = Depends(get_dataset_store)
):
    return dropdowns.list_blocks(store, state, district)


@router.get(
    "/villages/{state}/{district}/{block}",
    response_model=list[VillageOption],
    summary="Villages in a block",
    description="One entry per dataset row; coordinates are the raw dataset text.",
)
def get_villages(
    state: str,
    district: str,
    block: str,
    store: DatasetStore = Depends(get_dataset_store),
):
    return dropdowns.list_villages(store, state, district, block)
