"""Tests for coordinate shape detection and normalisation."""

from __future__ import annotations

import pytest

from mapsquery.errors import ShapeMismatchError
from mapsquery.geo.coordinates import (
    CoordinateShape,
    LatLngLiteral,
    classify_coordinate,
    coordinate_components,
    to_lat_lng_literal,
)


class TestClassifyCoordinate:
    @pytest.mark.parametrize(
        ("value", "shape"),
        [
            ("38.5,-120.2", CoordinateShape.STRING),
            ([38.5, -120.2], CoordinateShape.PAIR),
            ((38.5, -120.2), CoordinateShape.PAIR),
            ({"lat": 38.5, "lng": -120.2}, CoordinateShape.LAT_LNG),
            (LatLngLiteral(lat=38.5, lng=-120.2), CoordinateShape.LAT_LNG),
            ({"latitude": 38.5, "longitude": -120.2}, CoordinateShape.LATITUDE_LONGITUDE),
        ],
    )
    def test_supported_shapes(self, value: object, shape: CoordinateShape) -> None:
        assert classify_coordinate(value) is shape

    def test_lat_lng_wins_over_latitude_longitude(self) -> None:
        value = {"lat": 1, "lng": 2, "latitude": 3, "longitude": 4}
        assert classify_coordinate(value) is CoordinateShape.LAT_LNG

    @pytest.mark.parametrize(
        "value",
        [{"foo": 1}, {"lat": 1}, {"latitude": 1}, [1, 2, 3], [1], 42, None],
    )
    def test_unsupported_shapes_raise(self, value: object) -> None:
        with pytest.raises(ShapeMismatchError):
            classify_coordinate(value)

    def test_shape_mismatch_is_type_error(self) -> None:
        with pytest.raises(TypeError):
            classify_coordinate({"foo": 1})


class TestCoordinateComponents:
    def test_pair_elements_are_not_coerced(self) -> None:
        assert coordinate_components(["38.50", "-120.20"]) == ("38.50", "-120.20")

    def test_latitude_longitude_order(self) -> None:
        assert coordinate_components({"longitude": 2, "latitude": 1}) == (1, 2)


class TestToLatLngLiteral:
    def test_string(self) -> None:
        assert to_lat_lng_literal("38.5,-120.2") == LatLngLiteral(lat=38.5, lng=-120.2)

    def test_pair_is_coerced_to_numbers(self) -> None:
        assert to_lat_lng_literal(["38.5", "-120.2"]) == LatLngLiteral(lat=38.5, lng=-120.2)

    def test_lat_lng_mapping(self) -> None:
        assert to_lat_lng_literal({"lat": 1.5, "lng": 2.5}) == LatLngLiteral(lat=1.5, lng=2.5)

    def test_latitude_longitude_remapped(self) -> None:
        literal = to_lat_lng_literal({"latitude": 1.5, "longitude": 2.5})
        assert literal == LatLngLiteral(lat=1.5, lng=2.5)

    def test_mapping_values_coerced_to_numbers(self) -> None:
        literal = to_lat_lng_literal({"lat": "38.5", "lng": "-120.2"})
        assert literal == LatLngLiteral(lat=38.5, lng=-120.2)
        assert isinstance(literal.lat, float)

    def test_latitude_longitude_values_coerced(self) -> None:
        literal = to_lat_lng_literal({"latitude": "1.5", "longitude": 2})
        assert literal == LatLngLiteral(lat=1.5, lng=2.0)

    @pytest.mark.parametrize(
        "value", [{"lat": "north", "lng": 1}, {"latitude": None, "longitude": 2}]
    )
    def test_non_numeric_mapping_values_raise(self, value: object) -> None:
        with pytest.raises(ShapeMismatchError):
            to_lat_lng_literal(value)

    def test_literal_returned_as_is(self) -> None:
        literal = LatLngLiteral(lat=1.0, lng=2.0)
        assert to_lat_lng_literal(literal) is literal

    @pytest.mark.parametrize("value", ["abc,def", "1,2,3", "38.5", ["a", "b"], {"foo": 1}])
    def test_malformed_input_raises(self, value: object) -> None:
        with pytest.raises(ShapeMismatchError):
            to_lat_lng_literal(value)
