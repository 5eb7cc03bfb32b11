import math

import pytest

from villageinfo.errors import NotFound
from villageinfo.services.facility_lookup import lookup_village, parse_coordinate


class TestParseCoordinate:
    @pytest.mark.parametrize(
        "raw, expected",
        [("25.6412", 25.6412), (" 85.1 ", 85.1), ("-12", -12.0), ("1e1", 10.0)],
    )
    def test_numeric(self, raw, expected):
        assert parse_coordinate(raw) == pytest.approx(expected)

    @pytest.mark.parametrize("raw", ["", "not-a-number", "N/A", None, "nan", "inf"])
    def test_malformed_is_none(self, raw):
        assert parse_coordinate(raw) is None


class TestLookupVillage:
    def test_collects_all_facilities(self, store):
        info = lookup_village(store, "Bihar", "Patna", "Patna Sadar", "Digha")
        assert info.habitation_name == "Digha"
        assert info.district == "Patna"
        assert info.block == "Patna Sadar"
        assert [f.facility_name for f in info.facilities] == [
            "Govt Primary School Digha",
            "Digha PHC",
        ]
        school, phc = info.facilities
        assert school.category == " Education "
        assert school.latitude == pytest.approx(25.6412)
        assert phc.longitude is None

    @pytest.mark.parametrize("district", ["Patna", " patna ", "PATNA"])
    def test_district_matching_is_normalized(self, store, district):
        info = lookup_village(store, "Bihar", district, "patna sadar", " DIGHA")
        assert len(info.facilities) == 2

    def test_echoes_requested_village_name(self, store):
        info = lookup_village(store, "Bihar", "patna", "PATNA SADAR", "digha")
        assert info.habitation_name == "digha"
        # district/block come from the dataset row
        assert info.district == "Patna"

    def test_padded_dataset_value_matches(self, store):
        info = lookup_village(store, "Bihar", "Patna", "Patna Sadar", "Kurji")
        assert info.district == " patna "
        assert len(info.facilities) == 1

    def test_missing_coordinate_is_none(self, store):
        info = lookup_village(store, "Bihar", "Patna", "Danapur", "Shahpur")
        assert info.facilities[0].latitude is None
        assert math.isclose(info.facilities[0].longitude, 85.05)

    def test_unknown_village(self, store):
        with pytest.raises(NotFound, match="Village not found with given district and block"):
            lookup_village(store, "Bihar", "Patna", "Patna Sadar", "X")

    def test_block_from_other_district(self, store):
        with pytest.raises(NotFound):
            lookup_village(store, "Bihar", "Gaya", "Patna Sadar", "Digha")

    def test_unknown_state(self, store):
        with pytest.raises(NotFound, match="State data not found"):
            lookup_village(store, "Kerala", "Patna", "Patna Sadar", "Digha")
