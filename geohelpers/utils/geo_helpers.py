"""
Geographic helper utilities for boundary checking.
"""
import logging

logger = logging.getLogger(__name__)


def is_lat_and_lng_in_rect_boundary(point: dict, boundary: dict) -> bool:
    """
    Check if a point is strictly inside a NE/SW rectangular boundary.
    
    Points lying exactly on an edge are reported as outside.
    
    Args:
        point: Point like {"lat": ..., "lng": ...}
        boundary: Dict with "NE" and "SW" corner points
        
    Returns:
        bool: True if the point is inside the boundary
    """
    north_east = boundary["NE"]
    south_west = boundary["SW"]
    
    east_bound = point["lng"] < north_east["lng"]
    west_bound = point["lng"] > south_west["lng"]
    
    # Check longitude (handle dateline crossing)
    if crosses_antimeridian(boundary):
        logger.debug(f"Boundary {boundary} crosses the antimeridian")
        in_lng = east_bound or west_bound
    else:
        in_lng = east_bound and west_bound
    
    in_lat = south_west["lat"] < point["lat"] < north_east["lat"]
    
    return in_lat and in_lng


def crosses_antimeridian(boundary: dict) -> bool:
    """
    Detect if a NE/SW boundary crosses the international dateline.
    
    Args:
        boundary: Dict with "NE" and "SW" corner points
        
    Returns:
        bool: True if the eastern edge lies west of the western edge
    """
    return boundary["NE"]["lng"] < boundary["SW"]["lng"]
