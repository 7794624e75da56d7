# etopsplanner/route_planner/__init__.py
"""
Initializes the route_planner module, defining its public API.

The ETOPSCalculator owns the aircraft and airport catalogs; the remaining
names are the records it returns and the helpers it is built from.
"""
# Core logic
from .core import ETOPSCalculator
from .waypoints import generate_waypoints
from .catalog_loader import CatalogLoader

# Configuration and records
from .config import PlannerConfig
from .constants import PlannerConstants
from .data_models import Aircraft, Route, Violation, WaypointAlternates, ComplianceReport
from .exceptions import RoutePlannerError, UnknownAircraftError, CatalogError

__all__ = [
    "ETOPSCalculator",
    "generate_waypoints",
    "CatalogLoader",
    "PlannerConfig",
    "PlannerConstants",
    "Aircraft",
    "Route",
    "Violation",
    "WaypointAlternates",
    "ComplianceReport",
    "RoutePlannerError",
    "UnknownAircraftError",
    "CatalogError"
]
