"""
Tests for the Country record and FetchState snapshot.
"""

import pytest
from pydantic import ValidationError

from atlas.shared.domain.countries.models import Country, FetchState, FetchStatus
from tests.conftest import WAKANDA


class TestCountryFromApi:
    """Defaulting happens once, in Country.from_api."""

    def test_full_payload(self):
        country = Country.from_api(WAKANDA)

        assert country.name == "Wakanda"
        assert country.capital == "Birnin Zana"
        assert country.population == 6000000
        assert country.region == "Africa"
        assert country.flag == "http://x/f.png"
        assert country.area == 1000.0
        assert isinstance(country.area, float)

    def test_empty_payload_uses_defaults(self):
        country = Country.from_api({})

        assert country == Country(
            name="Unknown", capital="N/A", population=0, region="Unknown", flag="", area=0.0
        )

    @pytest.mark.parametrize("capital", [None, [], [None], "Birnin Zana"])
    def test_unusable_capital_defaults(self, capital):
        assert Country.from_api({"capital": capital}).capital == "N/A"

    def test_first_capital_wins(self):
        country = Country.from_api({"capital": ["Pretoria", "Cape Town", "Bloemfontein"]})
        assert country.capital == "Pretoria"

    def test_missing_parent_objects(self):
        country = Country.from_api({"name": None, "flags": "not-an-object"})
        assert country.name == "Unknown"
        assert country.flag == ""

    def test_numeric_fields_ignore_wrong_types(self):
        country = Country.from_api({"population": "many", "area": True})
        assert country.population == 0
        assert country.area == 0.0

    def test_float_population_is_truncated(self):
        assert Country.from_api({"population": 1234.9}).population == 1234

    def test_population_too_large_for_float_defaults(self):
        assert Country.from_api({"population": 10**400}).population == 0

    def test_area_too_large_for_float_defaults(self):
        assert Country.from_api({"area": 10**400}).area == 0.0

    def test_non_finite_area_defaults(self):
        assert Country.from_api({"area": float("inf")}).area == 0.0

    def test_records_are_frozen(self):
        country = Country.from_api(WAKANDA)
        with pytest.raises(ValidationError):
            country.name = "Genosha"


class TestFetchState:
    """Snapshots are immutable and exclusive between loading and error."""

    def test_initial_state_is_idle_and_empty(self):
        state = FetchState()
        assert state.items == ()
        assert state.is_loading is False
        assert state.error_message == ""
        assert state.status is FetchStatus.IDLE
        assert state.is_empty

    def test_loading_with_error_is_rejected(self):
        with pytest.raises(ValidationError):
            FetchState(is_loading=True, error_message="boom")

    def test_as_loading_keeps_items_and_clears_error(self, wakanda):
        failed = FetchState(items=(wakanda,), error_message="boom")
        loading = failed.as_loading()

        assert loading.items == (wakanda,)
        assert loading.is_loading is True
        assert loading.error_message == ""
        assert failed.error_message == "boom"

    def test_with_items_is_terminal(self, wakanda):
        loaded = FetchState().as_loading().with_items([wakanda])
        assert loaded.items == (wakanda,)
        assert loaded.status is FetchStatus.IDLE

    def test_with_error_keeps_items(self, wakanda):
        failed = FetchState(items=(wakanda,)).as_loading().with_error("HTTP 500")
        assert failed.items == (wakanda,)
        assert failed.is_loading is False
        assert failed.status is FetchStatus.ERROR

    def test_with_error_never_blank(self):
        assert FetchState().with_error("").error_message

    def test_states_are_frozen(self):
        state = FetchState()
        with pytest.raises(ValidationError):
            state.is_loading = True

    def test_equal_snapshots_compare_equal(self, wakanda):
        assert FetchState(items=(wakanda,)) == FetchState(items=(wakanda,))
