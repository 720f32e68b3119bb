"""
Configuration constants for the geohelpers package.
"""
import os
from dotenv import load_dotenv

# Load environment variables
load_dotenv()

# Earth radii
EARTH_RADIUS_KM = 6371
EARTH_RADIUS_M = 6378137

# Angle conversion (180 / pi)
RAD2DEG = 57.29577951308232

# Corner bearings in degrees (0 = north, clockwise)
NE_BEARING = 45
SW_BEARING = 225
NW_BEARING = 315
SE_BEARING = 135

# Logging
LOG_LEVEL = os.getenv("GEOHELPERS_LOG_LEVEL", "WARNING").upper()
