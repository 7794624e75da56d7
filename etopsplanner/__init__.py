# etopsplanner/__init__.py
"""
ETOPS Route Planner
Great-circle route generation and ETOPS diversion-range compliance checks
for twin-engine aircraft.
"""
from .geodesy import GeoPoint, InvalidCoordinateError
from .alternate_search import Airport, AirportCategory, AlternateCandidate
from .route_planner import (
    ETOPSCalculator,
    CatalogLoader,
    PlannerConfig,
    Aircraft,
    Route,
    ComplianceReport,
    UnknownAircraftError,
    CatalogError,
)

__all__ = [
    "GeoPoint",
    "InvalidCoordinateError",
    "Airport",
    "AirportCategory",
    "AlternateCandidate",
    "ETOPSCalculator",
    "CatalogLoader",
    "PlannerConfig",
    "Aircraft",
    "Route",
    "ComplianceReport",
    "UnknownAircraftError",
    "CatalogError"
]
