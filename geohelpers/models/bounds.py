"""
Data models for points and map bounds.
"""
from dataclasses import dataclass

from ..exceptions import ValidationError
from ..utils.distance import calculate_radius_from_map_bounds
from ..utils.geo_helpers import is_lat_and_lng_in_rect_boundary
from ..utils.validators import validate_point


@dataclass
class LatLng:
    """A corner point exposing lat() / lng() accessors."""
    latitude: float
    longitude: float
    
    def lat(self) -> float:
        return self.latitude
    
    def lng(self) -> float:
        return self.longitude
    
    @classmethod
    def from_dict(cls, point: dict) -> 'LatLng':
        """Create from a {"lat", "lng"} point."""
        return cls(latitude=point["lat"], longitude=point["lng"])
    
    def to_dict(self) -> dict:
        """Convert to a {"lat", "lng"} point."""
        return {
            "lat": self.latitude,
            "lng": self.longitude
        }


@dataclass
class MapBounds:
    """Rectangular map bounds given by their NE and SW corners."""
    north_east: LatLng
    south_west: LatLng
    
    def get_north_east(self) -> LatLng:
        return self.north_east
    
    def get_south_west(self) -> LatLng:
        return self.south_west
    
    @classmethod
    def from_corners(cls, ne: dict, sw: dict) -> 'MapBounds':
        """
        Create from two corner points.
        
        Args:
            ne: Northeast point like {"lat": ..., "lng": ...}
            sw: Southwest point like {"lat": ..., "lng": ...}
        """
        return cls(north_east=LatLng.from_dict(ne), south_west=LatLng.from_dict(sw))
    
    @classmethod
    def from_viewport(cls, viewport: dict) -> 'MapBounds':
        """
        Create from a Geocoding API viewport.
        
        Args:
            viewport: Dict like {"northeast": {"lat", "lng"}, "southwest": {"lat", "lng"}},
                as found under geometry.viewport in geocoding results
                
        Returns:
            MapBounds: Bounds with validated corners
            
        Raises:
            ValidationError: If a corner is missing or invalid
        """
        corners = {}
        for key in ("northeast", "southwest"):
            corner = viewport.get(key) if isinstance(viewport, dict) else None
            if corner is None:
                raise ValidationError("viewport", f"Viewport is missing the '{key}' corner")
            try:
                corners[key] = validate_point(corner)
            except ValidationError as e:
                raise ValidationError(key, e.message)
        
        return cls.from_corners(corners["northeast"], corners["southwest"])
    
    def to_boundary(self) -> dict:
        """Convert to the {"NE", "SW"} boundary used by the rectangle test."""
        return {
            "NE": self.north_east.to_dict(),
            "SW": self.south_west.to_dict()
        }
    
    def contains(self, point: dict) -> bool:
        """Check if a point lies strictly inside these bounds."""
        return is_lat_and_lng_in_rect_boundary(point, self.to_boundary())
    
    def radius_km(self) -> float:
        """Radius of the circle enclosing these bounds, in kilometers."""
        return calculate_radius_from_map_bounds(self)
