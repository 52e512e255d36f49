import json
import math

import pytest

from app.core.trail import decode_trail, encode_trail, trail_region


@pytest.mark.parametrize(
    "coords",
    [
        [],
        [[55.7558, 37.6173]],
        [[55.7558, 37.6173], [55.75581234567891, 37.61730000000001], [-33.8688, 151.2093], [0.1, -0.2]],
    ],
)
def test_round_trip_is_exact(coords):
    assert decode_trail(encode_trail(coords)) == coords


def test_encoded_shape_is_array_of_pairs():
    data = encode_trail([(1.5, 2.5), (3.0, 4.0)])
    assert json.loads(data) == [[1.5, 2.5], [3.0, 4.0]]


def test_encode_non_finite_fails_quietly():
    assert encode_trail([(math.nan, 1.0)]) is None
    assert encode_trail([(1.0, math.inf)]) is None


def test_decode_accepts_bytes():
    assert decode_trail(b"[[1.0,2.0]]") == [[1.0, 2.0]]


@pytest.mark.parametrize(
    "data",
    [None, "", "not json", "{}", "[[1.0]]", "[[1.0, 2.0, 3.0]]", '[["a", 1.0]]', "[[true, 1.0]]", "[1.0, 2.0]"],
)
def test_decode_bad_data_is_empty(data):
    assert decode_trail(data) == []


def test_region_none_for_empty():
    assert trail_region([]) is None


def test_region_pads_extent():
    region = trail_region([[10.0, 20.0], [10.2, 20.4]])
    assert region["center_lat"] == pytest.approx(10.1)
    assert region["center_lon"] == pytest.approx(20.2)
    assert region["lat_delta"] == pytest.approx(0.3)
    assert region["lon_delta"] == pytest.approx(0.6)


def test_region_minimum_span():
    region = trail_region([[10.0, 20.0]])
    assert region["lat_delta"] == 0.01
    assert region["lon_delta"] == 0.01
