"""
Tests for great-circle distance helpers.
"""
import math
import pytest
from unittest.mock import MagicMock
from geohelpers.utils.distance import (
    haversine_km, initial_bearing_deg, calculate_radius_from_map_bounds
)


def _corner(lat, lng):
    return MagicMock(**{"lat.return_value": lat, "lng.return_value": lng})


def _bounds(ne, sw):
    bounds = MagicMock()
    bounds.get_north_east.return_value = _corner(*ne)
    bounds.get_south_west.return_value = _corner(*sw)
    return bounds


class TestHaversineKm:
    """Tests for haversine distance."""
    
    def test_one_degree_of_longitude_at_equator(self):
        """Test a degree along the equator is about 111.19 km."""
        distance = haversine_km({"lat": 0, "lng": 0}, {"lat": 0, "lng": 1})
        assert distance == pytest.approx(111.19, abs=0.01)
    
    def test_same_point_is_zero(self):
        """Test distance from a point to itself."""
        for point in [{"lat": 0, "lng": 0}, {"lat": 51.5, "lng": -0.12}, {"lat": -89.9, "lng": 179.9}]:
            assert haversine_km(point, point) == 0
    
    def test_symmetry(self):
        """Test distance does not depend on direction."""
        a = {"lat": 37.7749, "lng": -122.4194}
        b = {"lat": -33.8688, "lng": 151.2093}
        assert haversine_km(a, b) == pytest.approx(haversine_km(b, a), rel=1e-12)
    
    def test_antipodal_points(self):
        """Test antipodal points are half the circumference apart."""
        distance = haversine_km({"lat": 0, "lng": 0}, {"lat": 0, "lng": 180})
        assert distance == pytest.approx(math.pi * 6371)
    
    def test_across_antimeridian(self):
        """Test points either side of the dateline are close."""
        distance = haversine_km({"lat": 0, "lng": 179.5}, {"lat": 0, "lng": -179.5})
        assert distance == pytest.approx(111.19, abs=0.01)
    
    def test_nan_propagates(self):
        """Test NaN coordinates give NaN."""
        assert math.isnan(haversine_km({"lat": float("nan"), "lng": 0}, {"lat": 0, "lng": 0}))
    
    def test_missing_key_raises(self):
        """Test a point without lng fails with KeyError."""
        with pytest.raises(KeyError):
            haversine_km({"lat": 0}, {"lat": 0, "lng": 0})


class TestInitialBearing:
    """Tests for initial bearing."""
    
    def test_cardinal_directions(self):
        """Test bearings to the four cardinal neighbours."""
        origin = {"lat": 0, "lng": 0}
        assert initial_bearing_deg(origin, {"lat": 1, "lng": 0}) == pytest.approx(0)
        assert initial_bearing_deg(origin, {"lat": 0, "lng": 1}) == pytest.approx(90)
        assert initial_bearing_deg(origin, {"lat": -1, "lng": 0}) == pytest.approx(180)
        assert initial_bearing_deg(origin, {"lat": 0, "lng": -1}) == pytest.approx(270)
    
    def test_range(self):
        """Test bearing lies in [0, 360)."""
        bearing = initial_bearing_deg({"lat": 10, "lng": 10}, {"lat": 5, "lng": 5})
        assert 0 <= bearing < 360


class TestCalculateRadiusFromMapBounds:
    """Tests for radius from map bounds."""
    
    def test_half_of_diagonal(self):
        """Test radius is exactly half the NE-SW distance."""
        bounds = _bounds((37.812, -122.3482), (37.7034, -122.527))
        expected = haversine_km(
            {"lat": 37.812, "lng": -122.3482},
            {"lat": 37.7034, "lng": -122.527}
        ) / 2
        assert calculate_radius_from_map_bounds(bounds) == expected
    
    def test_uses_corner_accessors(self):
        """Test corners are read through the accessor methods."""
        bounds = _bounds((1, 1), (0, 0))
        calculate_radius_from_map_bounds(bounds)
        bounds.get_north_east.assert_called_once()
        bounds.get_south_west.assert_called_once()
    
    def test_degenerate_bounds(self):
        """Test bounds collapsed to a point have zero radius."""
        assert calculate_radius_from_map_bounds(_bounds((5, 5), (5, 5))) == 0
    
    def test_missing_accessor_raises(self):
        """Test an object without corner accessors fails."""
        with pytest.raises(AttributeError):
            calculate_radius_from_map_bounds(object())
