# etopsplanner/geodesy/interpolation.py
"""
Great-circle position interpolation using spherical linear interpolation
(SLERP). Points follow the true minor arc, including routes that cross the
antimeridian, where a naive lat/lng blend would sweep across the whole globe.
"""
import math

from .constants import GeodesyConstants
from .coordinates import as_geo_point, deg_to_rad, rad_to_deg, longitude_delta, normalize_longitude
from .data_models import GeoPoint

def interpolate_position(start, end, fraction: float,
                         epsilon: float = GeodesyConstants.SLERP_EPSILON_RAD) -> GeoPoint:
    """
    Returns the point at ``fraction`` (0..1) of the way from start to end
    along the great circle joining them. Endpoints may be any position
    accepted by as_geo_point.
    """
    if not 0.0 <= fraction <= 1.0:
        raise ValueError(f"Interpolation fraction must be within [0, 1], got {fraction}")
    start = as_geo_point(start)
    end = as_geo_point(end)
    if fraction == 0:
        return GeoPoint(lat=start.lat, lng=start.lng)
    if fraction == 1:
        return GeoPoint(lat=end.lat, lng=end.lng)

    lat1 = deg_to_rad(start.lat)
    lng1 = deg_to_rad(start.lng)
    lat2 = deg_to_rad(end.lat)

    # Shift the end longitude next to the start so the pair never straddles the seam.
    delta_lng = longitude_delta(start.lng, end.lng)
    lng2_adjusted = lng1 + deg_to_rad(delta_lng)

    cos_d = (math.sin(lat1) * math.sin(lat2) +
             math.cos(lat1) * math.cos(lat2) * math.cos(lng2_adjusted - lng1))
    d = math.acos(max(-1.0, min(1.0, cos_d)))

    if d < epsilon:
        return GeoPoint(
            lat=start.lat + (end.lat - start.lat) * fraction,
            lng=normalize_longitude(start.lng + delta_lng * fraction)
        )

    a = math.sin((1 - fraction) * d) / math.sin(d)
    b = math.sin(fraction * d) / math.sin(d)

    x = a * math.cos(lat1) * math.cos(lng1) + b * math.cos(lat2) * math.cos(lng2_adjusted)
    y = a * math.cos(lat1) * math.sin(lng1) + b * math.cos(lat2) * math.sin(lng2_adjusted)
    z = a * math.sin(lat1) + b * math.sin(lat2)

    lat = rad_to_deg(math.atan2(z, math.sqrt(x * x + y * y)))
    lng = rad_to_deg(math.atan2(y, x))

    # A path over a pole can land one ulp beyond +/-90 after the degree conversion.
    lat = max(-GeodesyConstants.MAX_LATITUDE_DEG, min(GeodesyConstants.MAX_LATITUDE_DEG, lat))
    return GeoPoint(lat=lat, lng=normalize_longitude(lng))
