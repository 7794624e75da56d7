# etopsplanner/route_planner/data_models.py
"""
Defines the aircraft performance record and the route and compliance
records returned to callers. Route and ComplianceReport are created fresh by
each calculation and belong to the caller afterwards.
"""
import math
from dataclasses import dataclass, field, asdict
from enum import Enum
from typing import Any, Dict, List, Union

from .constants import PlannerConstants, CatalogFields
from ..alternate_search.data_models import Airport, AlternateCandidate
from ..geodesy.data_models import GeoPoint

def _plain_dict_factory(items) -> Dict[str, Any]:
    return {key: (value.value if isinstance(value, Enum) else value) for key, value in items}

@dataclass(frozen=True)
class Aircraft:
    """Performance figures for one aircraft type."""
    etops_minutes: int
    cruise_speed_knots: float
    range_nm: float
    fuel_burn_per_hour_kg: float

    def __post_init__(self):
        values = {}
        for name in ('etops_minutes', 'cruise_speed_knots', 'range_nm', 'fuel_burn_per_hour_kg'):
            raw = getattr(self, name)
            if isinstance(raw, bool):
                raise ValueError(f"{name} must be a number, got {raw!r}")
            try:
                value = float(raw)
            except (TypeError, ValueError):
                raise ValueError(f"{name} must be a number, got {raw!r}") from None
            if not math.isfinite(value):
                raise ValueError(f"{name} must be finite, got {raw!r}")
            values[name] = value

        if not values['etops_minutes'].is_integer():
            raise ValueError(f"etops_minutes must be a whole number, got {self.etops_minutes!r}")
        if not values['etops_minutes'] > 0:
            raise ValueError(f"etops_minutes must be positive, got {self.etops_minutes}")
        if not values['cruise_speed_knots'] > 0:
            raise ValueError(f"cruise_speed_knots must be positive, got {self.cruise_speed_knots}")

        object.__setattr__(self, 'etops_minutes', int(values['etops_minutes']))
        object.__setattr__(self, 'cruise_speed_knots', values['cruise_speed_knots'])
        object.__setattr__(self, 'range_nm', values['range_nm'])
        object.__setattr__(self, 'fuel_burn_per_hour_kg', values['fuel_burn_per_hour_kg'])

    @property
    def etops_distance_nm(self) -> float:
        """Still-air distance covered at cruise speed within the ETOPS rating."""
        return (self.etops_minutes / PlannerConstants.MINUTES_PER_HOUR) * self.cruise_speed_knots

    @classmethod
    def from_dict(cls, record: Dict[str, Any]) -> "Aircraft":
        """Builds an Aircraft from a plain record such as an entry of aircraft.json."""
        values = {}
        for field_name, keys in CatalogFields.AIRCRAFT.items():
            found = [record[key] for key in keys if key in record]
            if not found:
                raise ValueError(f"Missing aircraft field '{field_name}'")
            values[field_name] = found[0]
        return cls(**values)

@dataclass
class Route:
    """A great-circle route from departure to arrival."""
    departure: Union[Airport, GeoPoint]
    arrival: Union[Airport, GeoPoint]
    aircraft_type: str
    waypoints: List[GeoPoint]
    total_distance_nm: float
    estimated_flight_time_hours: float
    fuel_consumption_kg: float

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self, dict_factory=_plain_dict_factory)

@dataclass
class Violation:
    """A waypoint with no alternate airport inside ETOPS distance."""
    waypoint: GeoPoint
    issue: str = PlannerConstants.NO_ALTERNATE_ISSUE

@dataclass
class WaypointAlternates:
    waypoint: GeoPoint
    alternates: List[AlternateCandidate] = field(default_factory=list)

@dataclass
class ComplianceReport:
    """Per-waypoint alternate coverage for one aircraft type along a route."""
    aircraft_type: str
    etops_time_minutes: int
    etops_distance_nm: float
    compliant: bool
    violations: List[Violation] = field(default_factory=list)
    alternate_airports: List[WaypointAlternates] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self, dict_factory=_plain_dict_factory)
