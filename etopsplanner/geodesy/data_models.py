# etopsplanner/geodesy/data_models.py
"""
Defines the position value type shared by every package. A GeoPoint is
validated once on construction, so downstream geometry never has to re-check
its inputs.
"""
import math
from dataclasses import dataclass

from .constants import GeodesyConstants
from .exceptions import InvalidCoordinateError

@dataclass(frozen=True)
class GeoPoint:
    """An immutable latitude/longitude pair in decimal degrees."""
    lat: float
    lng: float

    def __post_init__(self):
        try:
            lat = float(self.lat)
            lng = float(self.lng)
        except (TypeError, ValueError):
            raise InvalidCoordinateError(self.lat, self.lng, "Non-numeric coordinate") from None

        if not (math.isfinite(lat) and math.isfinite(lng)):
            raise InvalidCoordinateError(lat, lng, "Non-finite coordinate")
        if abs(lat) > GeodesyConstants.MAX_LATITUDE_DEG:
            raise InvalidCoordinateError(lat, lng, "Latitude out of range")
        if abs(lng) > GeodesyConstants.MAX_LONGITUDE_DEG:
            raise InvalidCoordinateError(lat, lng, "Longitude out of range")

        object.__setattr__(self, 'lat', lat)
        object.__setattr__(self, 'lng', lng)

    def as_tuple(self):
        return (self.lat, self.lng)
