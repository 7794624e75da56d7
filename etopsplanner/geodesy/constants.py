# etopsplanner/geodesy/constants.py

class GeodesyConstants:
    """Spherical Earth model shared by every distance and interpolation routine."""

    EARTH_RADIUS_NM: float = 3440.065
    NM_TO_KM: float = 1.852

    MAX_LATITUDE_DEG: float = 90.0
    MAX_LONGITUDE_DEG: float = 180.0
    FULL_CIRCLE_DEG: float = 360.0

    # Below this angular separation (radians) SLERP weights divide by ~0.
    SLERP_EPSILON_RAD: float = 1e-10

    # Upper bound on numpy vs. scalar haversine disagreement, in nautical miles.
    ARRAY_DISTANCE_TOLERANCE_NM: float = 1e-6
