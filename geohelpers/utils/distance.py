"""
Great-circle distance helpers.
"""
import math

from ..config import EARTH_RADIUS_KM
from .angles import deg2rad, rad2deg


def haversine_km(from_location: dict, to_location: dict) -> float:
    """
    Distance in km on a sphere between two points.
    
    Args:
        from_location: Point like {"lat": 1.1, "lng": 59.0}
        to_location: Point like {"lat": 1.1, "lng": 59.0}
        
    Returns:
        float: Great-circle distance in kilometers
    """
    d_lat = deg2rad(from_location["lat"] - to_location["lat"])
    d_lng = deg2rad(from_location["lng"] - to_location["lng"])
    
    a = (math.sin(d_lat / 2) * math.sin(d_lat / 2)
         + math.sin(d_lng / 2) * math.sin(d_lng / 2)
         * math.cos(deg2rad(from_location["lat"]))
         * math.cos(deg2rad(to_location["lat"])))
    
    # Rounding can push a past 1 for antipodal points
    if a > 1.0:
        a = 1.0
    c = 2 * math.asin(math.sqrt(a))
    
    return EARTH_RADIUS_KM * c


def initial_bearing_deg(from_location: dict, to_location: dict) -> float:
    """Forward azimuth from one point to another, in degrees [0, 360)."""
    phi1 = deg2rad(from_location["lat"])
    phi2 = deg2rad(to_location["lat"])
    d_lng = deg2rad(to_location["lng"] - from_location["lng"])
    
    x = math.sin(d_lng) * math.cos(phi2)
    y = math.cos(phi1) * math.sin(phi2) - math.sin(phi1) * math.cos(phi2) * math.cos(d_lng)
    
    return (rad2deg(math.atan2(x, y)) + 360) % 360


def calculate_radius_from_map_bounds(bounds) -> float:
    """
    Radius of the circle which fully encloses the given map bounds.
    
    Args:
        bounds: Object exposing get_north_east() / get_south_west(), each
            returning a corner with lat() / lng() accessors
            
    Returns:
        float: Half of the NE-SW diagonal, in kilometers
    """
    point_ne = bounds.get_north_east()
    point_sw = bounds.get_south_west()
    
    diagonal_distance_km = haversine_km(
        {"lat": point_ne.lat(), "lng": point_ne.lng()},
        {"lat": point_sw.lat(), "lng": point_sw.lng()}
    )
    
    return diagonal_distance_km / 2
