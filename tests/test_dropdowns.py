import pytest

from helpers import write_dataset
from villageinfo.errors import InternalError
from villageinfo.services.dataset import DatasetStore
from villageinfo.services.dropdowns import (
    list_blocks,
    list_districts,
    list_states,
    list_villages,
)


def test_list_states(store):
    assert list_states(store) == ["Bihar", "Odisha"]


def test_list_states_missing_directory(tmp_path):
    with pytest.raises(InternalError, match="Error fetching states"):
        list_states(DatasetStore(tmp_path / "missing"))


def test_districts_are_distinct_in_first_seen_order(store):
    assert list_districts(store, "Bihar") == ["Patna", "Gaya"]


def test_districts_skip_blank_values(tmp_path):
    write_dataset(
        tmp_path,
        "Goa",
        [
            "North Goa,Bardez,Calangute,School,Addr,Education,Primary,15.5,73.7",
            ",Bardez,Candolim,School,Addr,Education,Primary,15.5,73.7",
            "South Goa,Salcete,Benaulim,School,Addr,Education,Primary,15.2,73.9",
        ],
    )
    assert list_districts(DatasetStore(tmp_path), "Goa") == ["North Goa", "South Goa"]


def test_districts_missing_state_is_internal_error(store):
    with pytest.raises(InternalError, match="Error fetching districts"):
        list_districts(store, "Kerala")


@pytest.mark.parametrize("district", ["Patna", " patna", "PATNA "])
def test_blocks(store, district):
    assert list_blocks(store, "Bihar", district) == ["Patna Sadar", "Danapur"]


def test_blocks_unknown_district(store):
    assert list_blocks(store, "Bihar", "Nalanda") == []


def test_blocks_missing_state(store):
    with pytest.raises(InternalError, match="Error fetching blocks"):
        list_blocks(store, "Kerala", "Patna")


def test_villages_keep_raw_coordinates(store):
    villages = list_villages(store, "Bihar", "patna", "patna sadar")
    assert villages == [
        {"name": "Digha", "latitude": "25.6412", "longitude": "85.1020"},
        {"name": "Digha", "latitude": "25.6420", "longitude": "not-a-number"},
        {"name": "Kurji", "latitude": "25.6300", "longitude": "85.1100"},
    ]


def test_villages_missing_state(store):
    with pytest.raises(InternalError, match="Error fetching villages"):
        list_villages(store, "Kerala", "Patna", "Patna Sadar")
