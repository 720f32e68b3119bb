"""
Angle unit conversions.
"""
import math

from ..config import RAD2DEG


def deg2rad(degrees: float) -> float:
    """Convert degrees to radians."""
    return degrees * math.pi / 180


def rad2deg(angle: float) -> float:
    """Convert radians to degrees."""
    return angle * RAD2DEG
