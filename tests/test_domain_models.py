"""Tests for the immutable domain models."""

import dataclasses
import math

import pytest

from openroute_geocoder.domain.errors import (
    CollectionIsEmpty,
    GeocoderError,
    InvalidArgument,
    OutOfBounds,
    ProviderFailure,
)
from openroute_geocoder.domain.models import (
    Address,
    AddressCollection,
    AdminLevel,
    AdminLevelCollection,
    Coordinates,
    GeocodeQuery,
    ReverseQuery,
)


def make_address(locality):
    return Address(coordinates=Coordinates(1.0, 2.0), provided_by="test", locality=locality)


class TestCoordinates:
    def test_valid_bounds(self):
        assert Coordinates(-90, 180).latitude == -90
        assert Coordinates(90, -180).longitude == -180

    @pytest.mark.parametrize(
        ("lat", "lon"),
        [(90.5, 0), (-91, 0), (0, 180.1), (0, -181), (math.nan, 0), (0, math.inf)],
    )
    def test_invalid_values_raise(self, lat, lon):
        with pytest.raises(ValueError):
            Coordinates(lat, lon)

    def test_is_immutable(self):
        with pytest.raises(dataclasses.FrozenInstanceError):
            Coordinates(1, 2).latitude = 3  # type: ignore[misc]


class TestAdminLevelCollection:
    def test_levels_sorted_by_level(self):
        levels = AdminLevelCollection(
            (AdminLevel(3, "London"), AdminLevel(1, "England", "ENG"))
        )
        assert [a.level for a in levels] == [1, 3]
        assert levels.first().name == "England"
        assert levels.all() == {
            1: AdminLevel(1, "England", "ENG"),
            3: AdminLevel(3, "London"),
        }

    def test_duplicate_level_rejected(self):
        with pytest.raises(InvalidArgument):
            AdminLevelCollection((AdminLevel(1, "A"), AdminLevel(1, "B")))

    @pytest.mark.parametrize("level", [0, 6])
    def test_level_out_of_range_rejected(self, level):
        with pytest.raises(InvalidArgument):
            AdminLevelCollection((AdminLevel(level, "A"),))
        with pytest.raises(InvalidArgument):
            AdminLevelCollection().get(level)

    def test_empty(self):
        levels = AdminLevelCollection()
        assert len(levels) == 0
        assert not levels.has(1)
        with pytest.raises(CollectionIsEmpty):
            levels.first()


class TestAddressCollection:
    def test_order_and_access(self):
        collection = AddressCollection(
            (make_address("Hanover"), make_address(None), make_address("Laurel"))
        )

        assert len(collection) == 3
        assert collection.first().locality == "Hanover"
        assert collection.get(2).locality == "Laurel"
        assert [a.locality for a in collection] == ["Hanover", None, "Laurel"]
        assert collection.has(2)
        assert not collection.has(3)
        assert [a.locality for a in collection.slice(1)] == [None, "Laurel"]
        assert len(collection.slice(0, 1)) == 1

    def test_empty_collection(self):
        collection = AddressCollection()
        assert collection.is_empty
        assert collection.all() == []
        with pytest.raises(CollectionIsEmpty):
            collection.first()
        with pytest.raises(CollectionIsEmpty):
            collection.get(0)

    def test_out_of_bounds(self):
        collection = AddressCollection((make_address("Hanover"),))
        with pytest.raises(OutOfBounds) as exc_info:
            collection.get(1)
        assert exc_info.value.index == 1


class TestQueries:
    def test_blank_geocode_text_rejected(self):
        with pytest.raises(ValueError):
            GeocodeQuery("   ")

    def test_reverse_query_from_coordinates(self):
        query = ReverseQuery.from_coordinates(54.0484068, -2.7990345, limit=3, locale="en")
        assert query.coordinates == Coordinates(54.0484068, -2.7990345)
        assert query.limit == 3
        assert query.locale == "en"

    def test_reverse_query_limit_validated(self):
        with pytest.raises(InvalidArgument):
            ReverseQuery(Coordinates(0, 0), limit=0)


class TestErrors:
    def test_message_and_cause(self):
        cause = RuntimeError("boom")
        error = ProviderFailure("Upstream failed", cause=cause, status_code=500)
        assert isinstance(error, GeocoderError)
        assert str(error) == "Upstream failed: boom"
        assert error.status_code == 500

    def test_catchable_as_exception(self):
        with pytest.raises(GeocoderError, match="nope"):
            raise InvalidArgument("nope")
