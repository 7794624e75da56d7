# etopsplanner/geodesy/coordinates.py
"""
Core spherical geometry: angle conversions, date-line aware longitude
differences and Haversine distances. Logging is omitted here as these are
high-frequency, low-level functions.
"""
import math
from collections.abc import Mapping
from typing import Any

import numpy as np

from .constants import GeodesyConstants
from .data_models import GeoPoint
from .exceptions import InvalidCoordinateError

def deg_to_rad(degrees: float) -> float:
    return degrees * (math.pi / 180.0)

def rad_to_deg(radians: float) -> float:
    return radians * (180.0 / math.pi)

def longitude_delta(lng1: float, lng2: float) -> float:
    """Signed longitude change from lng1 to lng2 along the shorter arc, in degrees."""
    delta = lng2 - lng1
    if abs(delta) > GeodesyConstants.MAX_LONGITUDE_DEG:
        delta = delta - GeodesyConstants.FULL_CIRCLE_DEG if delta > 0 else delta + GeodesyConstants.FULL_CIRCLE_DEG
    return delta

def normalize_longitude(lng: float) -> float:
    """Wraps a longitude into the half-open range (-180, 180]."""
    while lng > GeodesyConstants.MAX_LONGITUDE_DEG:
        lng -= GeodesyConstants.FULL_CIRCLE_DEG
    while lng <= -GeodesyConstants.MAX_LONGITUDE_DEG:
        lng += GeodesyConstants.FULL_CIRCLE_DEG
    return lng

def as_geo_point(position: Any) -> GeoPoint:
    """
    Coerces a caller-supplied position into a validated GeoPoint.

    Accepts a GeoPoint, any record with ``lat``/``lng`` (or ``lon``)
    attributes such as an Airport, a mapping with the same keys, or a
    ``(lat, lng)`` pair.
    """
    if isinstance(position, GeoPoint):
        return position
    if isinstance(position, Mapping):
        lng = position.get('lng', position.get('lon'))
        return GeoPoint(lat=position.get('lat'), lng=lng)
    if isinstance(position, (tuple, list)) and len(position) == 2:
        return GeoPoint(lat=position[0], lng=position[1])
    if hasattr(position, 'lat') and (hasattr(position, 'lng') or hasattr(position, 'lon')):
        lng = position.lng if hasattr(position, 'lng') else position.lon
        return GeoPoint(lat=position.lat, lng=lng)
    raise InvalidCoordinateError(None, None, f"Unrecognised position record of type {type(position).__name__}")

def haversine_distance_nm(p1, p2) -> float:
    """Great-circle distance in nautical miles between any two positions accepted by as_geo_point."""
    p1 = as_geo_point(p1)
    p2 = as_geo_point(p2)
    lat1_rad = deg_to_rad(p1.lat)
    lat2_rad = deg_to_rad(p2.lat)
    dlat = deg_to_rad(p2.lat - p1.lat)
    dlon = deg_to_rad(longitude_delta(p1.lng, p2.lng))

    a = math.sin(dlat / 2)**2 + math.cos(lat1_rad) * math.cos(lat2_rad) * math.sin(dlon / 2)**2
    # Rounding can push antipodal pairs just past 1.0.
    a = min(1.0, max(0.0, a))
    c = 2 * math.atan2(math.sqrt(a), math.sqrt(1 - a))
    return GeodesyConstants.EARTH_RADIUS_NM * c

def haversine_distance_nm_array(lat: float, lng: float, lats, lngs) -> np.ndarray:
    """Distances in nautical miles from one position to many, vectorised with numpy."""
    lats = np.asarray(lats, dtype=float)
    lngs = np.asarray(lngs, dtype=float)

    d_lng = lngs - lng
    d_lng = np.where(np.abs(d_lng) > GeodesyConstants.MAX_LONGITUDE_DEG,
                     d_lng - GeodesyConstants.FULL_CIRCLE_DEG * np.sign(d_lng), d_lng)
    d_lat = np.radians(lats - lat)

    a = np.sin(d_lat / 2)**2 + np.cos(np.radians(lat)) * np.cos(np.radians(lats)) * np.sin(np.radians(d_lng) / 2)**2
    a = np.clip(a, 0.0, 1.0)
    c = 2 * np.arctan2(np.sqrt(a), np.sqrt(1 - a))
    return GeodesyConstants.EARTH_RADIUS_NM * c
