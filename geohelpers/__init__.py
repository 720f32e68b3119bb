import logging

from . import config
from .exceptions import GeoHelpersError, ValidationError
from .models.bounds import LatLng, MapBounds
from .utils.angles import deg2rad, rad2deg
from .utils.distance import haversine_km, initial_bearing_deg, calculate_radius_from_map_bounds
from .utils.projection import (
    compute_destination_point,
    get_nesw_bounds_from_radius_and_center,
    get_nwse_bounds_from_radius_and_center,
)
from .utils.geo_helpers import is_lat_and_lng_in_rect_boundary, crosses_antimeridian
from .utils.validators import validate_coordinates, validate_point, validate_boundary, validate_radius

__all__ = [
    "GeoHelpersError", "ValidationError",
    "LatLng", "MapBounds",
    "deg2rad", "rad2deg",
    "haversine_km", "initial_bearing_deg", "calculate_radius_from_map_bounds",
    "compute_destination_point",
    "get_nesw_bounds_from_radius_and_center", "get_nwse_bounds_from_radius_and_center",
    "is_lat_and_lng_in_rect_boundary", "crosses_antimeridian",
    "validate_coordinates", "validate_point", "validate_boundary", "validate_radius",
    "init_logging",
]


def init_logging(level=None):
    """Configure root logging for applications embedding geohelpers."""
    logging.basicConfig(level=level or config.LOG_LEVEL)
    logging.getLogger(__name__).info("Logging initialized")
