# etopsplanner/geodesy/__init__.py
"""
Spherical geodesy primitives: the GeoPoint value type, Haversine distances
with date-line handling, and great-circle (SLERP) interpolation.
"""
from .constants import GeodesyConstants
from .data_models import GeoPoint
from .exceptions import GeodesyError, InvalidCoordinateError
from .coordinates import (
    deg_to_rad,
    rad_to_deg,
    longitude_delta,
    normalize_longitude,
    as_geo_point,
    haversine_distance_nm,
    haversine_distance_nm_array,
)
from .interpolation import interpolate_position

__all__ = [
    "GeodesyConstants",
    "GeoPoint",
    "GeodesyError",
    "InvalidCoordinateError",
    "deg_to_rad",
    "rad_to_deg",
    "longitude_delta",
    "normalize_longitude",
    "as_geo_point",
    "haversine_distance_nm",
    "haversine_distance_nm_array",
    "interpolate_position",
]
