import pytest

from app.core.constants import EARTH_RADIUS_M
from app.core.geo import haversine, path_length_m


class TestHaversine:
    def test_same_point(self):
        assert haversine(55.75, 37.61, 55.75, 37.61) == 0.0

    def test_one_degree_at_equator(self):
        # 1 degree of arc = 2 * pi * R / 360
        dist = haversine(0.0, 0.0, 0.0, 1.0)
        assert dist == pytest.approx(EARTH_RADIUS_M * 3.141592653589793 / 180, rel=1e-9)

    def test_hundredth_of_degree(self):
        # ~1.11 km between (0, 0) and (0, 0.01)
        assert haversine(0.0, 0.0, 0.0, 0.01) == pytest.approx(1111.95, abs=0.01)

    def test_symmetry(self):
        assert haversine(43.0, 76.0, 44.0, 77.0) == pytest.approx(haversine(44.0, 77.0, 43.0, 76.0))

    def test_negative_coordinates(self):
        # Sydney -> Buenos Aires is roughly 11,800 km
        dist = haversine(-33.8688, 151.2093, -34.6037, -58.3816)
        assert 11_500_000 < dist < 12_100_000


class TestPathLength:
    def test_empty_and_single(self):
        assert path_length_m([]) == 0.0
        assert path_length_m([(1.0, 2.0)]) == 0.0

    def test_sums_consecutive_legs(self):
        pts = [(0.0, 0.0), (0.0, 0.01), (0.01, 0.01)]
        expected = haversine(0.0, 0.0, 0.0, 0.01) + haversine(0.0, 0.01, 0.01, 0.01)
        assert path_length_m(pts) == pytest.approx(expected)

    def test_backtracking_counts(self):
        # Out and back is twice the leg, not the 0 m endpoint distance
        pts = [(0.0, 0.0), (0.0, 0.01), (0.0, 0.0)]
        assert path_length_m(pts) == pytest.approx(2 * haversine(0.0, 0.0, 0.0, 0.01))
