# etopsplanner/route_planner/constants.py
from ..geodesy.constants import GeodesyConstants

class PlannerConstants:
    EARTH_RADIUS_NM: float = GeodesyConstants.EARTH_RADIUS_NM

    # One interior waypoint roughly every 500nm along the great circle.
    WAYPOINT_INTERVAL_NM: float = 500.0
    MIN_WAYPOINTS = 2

    MINUTES_PER_HOUR: float = 60.0

    NO_ALTERNATE_ISSUE = "No alternate airports within ETOPS distance"

class CatalogFields:
    """Accepted record keys, Python names first, then the legacy JSON names."""
    AIRCRAFT = {
        'etops_minutes': ('etops_minutes', 'etopsMinutes', 'etops'),
        'cruise_speed_knots': ('cruise_speed_knots', 'cruiseSpeedKnots', 'cruiseSpeed'),
        'range_nm': ('range_nm', 'rangeNM', 'range'),
        'fuel_burn_per_hour_kg': ('fuel_burn_per_hour_kg', 'fuelBurnPerHourKg', 'fuelConsumptionPerHour'),
    }

    # OurAirports CSV 'type' column
    CSV_MAJOR_TYPES = {'large_airport'}
    CSV_ALTERNATE_TYPES = {'medium_airport'}
