"""
Custom exception classes for the geohelpers package.
"""


class GeoHelpersError(Exception):
    """Base exception for all geohelpers errors."""
    pass


class ValidationError(GeoHelpersError):
    """Raised when input validation fails."""
    
    def __init__(self, field: str, message: str):
        self.field = field
        self.message = message
        super().__init__(f"{field}: {message}")
