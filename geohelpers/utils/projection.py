"""
Destination-point projection and bounding corners derived from it.
"""
import logging
import math

from ..config import EARTH_RADIUS_M, NE_BEARING, SW_BEARING, NW_BEARING, SE_BEARING
from .angles import deg2rad, rad2deg

logger = logging.getLogger(__name__)


def _clamp_unit(value: float) -> float:
    # NaN falls through unchanged
    if value > 1.0:
        return 1.0
    if value < -1.0:
        return -1.0
    return value


def compute_destination_point(lat, lon, distance, bearing,
                              radius=EARTH_RADIUS_M) -> dict:
    """
    Compute the destination point given an initial point, a distance and
    a bearing, on a sphere.
    
    See http://www.movable-type.co.uk/scripts/latlong.html
    
    Args:
        lat: Latitude of the initial point in degrees
        lon: Longitude of the initial point in degrees
        distance: Distance to travel in meters
        bearing: Direction in degrees, 0 = north, 180 = south
        radius: Radius of the sphere in meters
        
    Returns:
        dict: {"lat": ..., "lng": ...} in degrees
    """
    delta = float(distance) / radius  # angular distance in radians
    theta = deg2rad(float(bearing))
    
    phi1 = deg2rad(float(lat))
    lambda1 = deg2rad(float(lon))
    
    phi2 = math.asin(_clamp_unit(
        math.sin(phi1) * math.cos(delta)
        + math.cos(phi1) * math.sin(delta) * math.cos(theta)
    ))
    
    lambda2 = lambda1 + math.atan2(
        math.sin(theta) * math.sin(delta) * math.cos(phi1),
        math.cos(delta) - math.sin(phi1) * math.sin(phi2)
    )
    
    # Normalise to -180..+180 (fmod keeps the sign of the dividend)
    lambda2 = math.fmod(lambda2 + 3 * math.pi, 2 * math.pi) - math.pi
    
    return {"lat": rad2deg(phi2), "lng": rad2deg(lambda2)}


def get_nesw_bounds_from_radius_and_center(radius, center: dict,
                                           earth_radius=EARTH_RADIUS_M) -> dict:
    """
    NE/SW corners of the box which fits inside a circle around center.
    
    Args:
        radius: Circle radius in meters
        center: Point like {"lat": ..., "lng": ...}
        earth_radius: Radius of the sphere in meters
        
    Returns:
        dict: {"ne": point, "sw": point}
    """
    point_ne = compute_destination_point(
        center["lat"], center["lng"], radius, NE_BEARING, earth_radius
    )
    point_sw = compute_destination_point(
        center["lat"], center["lng"], radius, SW_BEARING, earth_radius
    )
    logger.debug(f"NE/SW bounds for {radius}m around {center}: {point_ne}, {point_sw}")
    
    return {
        "ne": point_ne,
        "sw": point_sw
    }


def get_nwse_bounds_from_radius_and_center(radius, center: dict,
                                           earth_radius=EARTH_RADIUS_M) -> dict:
    """As get_nesw_bounds_from_radius_and_center, but for the NW/SE corners."""
    point_nw = compute_destination_point(
        center["lat"], center["lng"], radius, NW_BEARING, earth_radius
    )
    point_se = compute_destination_point(
        center["lat"], center["lng"], radius, SE_BEARING, earth_radius
    )
    logger.debug(f"NW/SE bounds for {radius}m around {center}: {point_nw}, {point_se}")
    
    return {
        "nw": point_nw,
        "se": point_se
    }
