# etopsplanner/route_planner/exceptions.py
"""
Route Planner Exceptions
Standardized error types for route calculation and catalog handling
"""

class RoutePlannerError(Exception):
    """Base class for all route planner errors"""
    pass

class UnknownAircraftError(RoutePlannerError, LookupError):
    """Aircraft type code is absent from the aircraft catalog"""
    def __init__(self, aircraft_type, message="Aircraft type not found"):
        self.aircraft_type = aircraft_type
        super().__init__(f"{message}: {aircraft_type}")

class CatalogError(RoutePlannerError):
    """Malformed aircraft or airport catalog data"""
    def __init__(self, source, message="Invalid catalog data"):
        self.source = source
        super().__init__(f"{message} [Source: {source}]")
