# etopsplanner/geodesy/exceptions.py
"""
Geodesy Exceptions
Error types raised while validating or converting geographic positions.
"""

class GeodesyError(Exception):
    """Base exception for all geodesy errors"""
    pass

class InvalidCoordinateError(GeodesyError, ValueError):
    """Raised when a latitude/longitude pair is outside the valid range"""
    def __init__(self, lat, lng, message="Invalid coordinate"):
        self.lat = lat
        self.lng = lng
        super().__init__(f"{message}: lat={lat}, lng={lng}")
