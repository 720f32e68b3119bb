"""
Input validation functions for the geohelpers package.

The math helpers never validate their inputs; call these first when the
coordinates come from an untrusted source.
"""
import math
from collections.abc import Mapping
from typing import Any, Optional

from ..exceptions import ValidationError


def validate_coordinates(lat: Optional[Any], lng: Optional[Any]) -> tuple[float, float]:
    """
    Validate and convert latitude/longitude coordinates.
    
    Args:
        lat: Latitude value as number or string
        lng: Longitude value as number or string
        
    Returns:
        tuple: (latitude, longitude) as floats
        
    Raises:
        ValidationError: If coordinates are invalid
    """
    if lat is None or lng is None or lat == "" or lng == "":
        raise ValidationError("coordinates", "Latitude and longitude are required")
    
    try:
        lat_float = float(lat)
        lng_float = float(lng)
    except (ValueError, TypeError):
        raise ValidationError("coordinates", "Latitude and longitude must be numeric")
    
    if not (-90 <= lat_float <= 90):
        raise ValidationError("latitude", f"Latitude must be between -90 and 90, got {lat_float}")
    
    if not (-180 <= lng_float <= 180):
        raise ValidationError("longitude", f"Longitude must be between -180 and 180, got {lng_float}")
    
    return lat_float, lng_float


def validate_point(point: Any) -> dict:
    """
    Validate a {"lat", "lng"} point.
    
    Returns:
        dict: New point with float coordinates
        
    Raises:
        ValidationError: If the point is malformed or out of range
    """
    if not isinstance(point, Mapping):
        raise ValidationError("point", f"Point must be a mapping, got {type(point).__name__}")
    
    if "lat" not in point or "lng" not in point:
        raise ValidationError("point", "Point must have 'lat' and 'lng' keys")
    
    lat, lng = validate_coordinates(point["lat"], point["lng"])
    return {"lat": lat, "lng": lng}


def validate_boundary(boundary: Any) -> dict:
    """
    Validate a NE/SW boundary.
    
    The eastern longitude may be lower than the western one; such a
    boundary crosses the antimeridian.
    
    Returns:
        dict: New boundary with validated "NE" and "SW" points
        
    Raises:
        ValidationError: If the boundary is malformed or inverted
    """
    if not isinstance(boundary, Mapping) or "NE" not in boundary or "SW" not in boundary:
        raise ValidationError("boundary", "Boundary must have 'NE' and 'SW' corners")
    
    corners = {}
    for name in ("NE", "SW"):
        try:
            corners[name] = validate_point(boundary[name])
        except ValidationError as e:
            raise ValidationError(name, e.message)
    
    if corners["SW"]["lat"] > corners["NE"]["lat"]:
        raise ValidationError(
            "boundary",
            f"South latitude ({corners['SW']['lat']}) cannot be greater than "
            f"north latitude ({corners['NE']['lat']})"
        )
    
    return corners


def validate_radius(radius: Any) -> float:
    """
    Validate a radius in meters.
    
    Raises:
        ValidationError: If the radius is not a positive finite number
    """
    try:
        value = float(radius)
    except (ValueError, TypeError):
        raise ValidationError("radius", "Radius must be numeric")
    
    if not math.isfinite(value) or value <= 0:
        raise ValidationError("radius", f"Radius must be a positive number, got {value}")
    
    return value
