# etopsplanner/route_planner/core.py
"""
The core orchestrator for route and ETOPS compliance calculations. The
calculator owns the aircraft and airport catalogs and exposes the four
operations used by presentation layers: distance, alternate search, route
calculation and compliance checking.
"""
import logging
from collections.abc import Mapping
from types import MappingProxyType
from typing import List, Optional, Tuple

from .config import PlannerConfig
from .data_models import Aircraft, Route, Violation, WaypointAlternates, ComplianceReport
from .exceptions import UnknownAircraftError, CatalogError
from .waypoints import generate_waypoints
from ..alternate_search.core import AlternateFinder
from ..alternate_search.data_models import Airport, AlternateCandidate
from ..geodesy.coordinates import as_geo_point, haversine_distance_nm
from ..geodesy.data_models import GeoPoint

logger = logging.getLogger(__name__)

class ETOPSCalculator:
    """Calculates great-circle routes and checks them against an aircraft's ETOPS rating."""

    def __init__(self, config: Optional[PlannerConfig] = None):
        self.config = config or PlannerConfig()
        self._aircraft: Mapping = MappingProxyType({})
        # Airports and the finder built from them are swapped together.
        self._airport_snapshot: Tuple[Mapping, AlternateFinder] = (MappingProxyType({}), AlternateFinder({}))

        if not logging.getLogger().hasHandlers():
            logging.basicConfig(level=logging.INFO, format='%(asctime)s - %(levelname)s - %(message)s')
        logger.info("ETOPSCalculator initialized.")

    @property
    def aircraft(self) -> Mapping:
        return self._aircraft

    @property
    def airports(self) -> Mapping:
        return self._airport_snapshot[0]

    # --- Catalog initialisation ---

    def set_aircraft_data(self, catalog: Mapping) -> None:
        """Replaces the aircraft catalog. Values may be Aircraft records or plain dicts."""
        parsed = {code: self._coerce_aircraft(code, record) for code, record in catalog.items()}
        self._aircraft = MappingProxyType(parsed)
        logger.info(f"Aircraft catalog replaced: {len(parsed)} types.")

    def set_airport_data(self, catalog: Mapping) -> None:
        """Replaces the airport catalog. Values may be Airport records or plain dicts."""
        parsed = {code: self._coerce_airport(code, record) for code, record in catalog.items()}
        airports = MappingProxyType(parsed)
        self._airport_snapshot = (airports, AlternateFinder(airports))
        logger.info(f"Airport catalog replaced: {len(parsed)} airports.")

    def get_aircraft(self, aircraft_type: str) -> Aircraft:
        aircraft = self._aircraft.get(aircraft_type)
        if aircraft is None:
            raise UnknownAircraftError(aircraft_type)
        return aircraft

    # --- Operations ---

    def calculate_distance(self, point1, point2) -> float:
        """Great-circle distance between two positions in nautical miles."""
        return haversine_distance_nm(as_geo_point(point1), as_geo_point(point2))

    def find_alternate_airports(self, position, max_distance_nm: float) -> List[AlternateCandidate]:
        """All catalog airports within range of a position, nearest first."""
        _, finder = self._airport_snapshot
        return finder.find_alternates(position, max_distance_nm)

    def calculate_optimal_route(self, departure, arrival, aircraft_type: str) -> Route:
        """Builds the great-circle route with flight time and a linear fuel estimate."""
        aircraft = self.get_aircraft(aircraft_type)
        start = as_geo_point(departure)
        end = as_geo_point(arrival)

        waypoints = generate_waypoints(start, end, self.config.waypoint_interval_nm, self.config.slerp_epsilon)
        total_distance = haversine_distance_nm(start, end)
        flight_time = total_distance / aircraft.cruise_speed_knots
        fuel = flight_time * aircraft.fuel_burn_per_hour_kg

        logger.info(
            f"Route {self._label(departure)} -> {self._label(arrival)} ({aircraft_type}): "
            f"{total_distance:.0f}nm, {flight_time:.1f}h, {len(waypoints)} waypoints."
        )
        return Route(
            departure=departure if isinstance(departure, (Airport, GeoPoint)) else start,
            arrival=arrival if isinstance(arrival, (Airport, GeoPoint)) else end,
            aircraft_type=aircraft_type,
            waypoints=waypoints,
            total_distance_nm=total_distance,
            estimated_flight_time_hours=flight_time,
            fuel_consumption_kg=fuel
        )

    def check_etops_compliance(self, aircraft_type: str, route) -> ComplianceReport:
        """
        Checks every route waypoint for at least one alternate airport within
        the aircraft's ETOPS distance.

        Args:
            aircraft_type: Key into the aircraft catalog.
            route: A Route, or any record exposing an ordered ``waypoints`` sequence.
        """
        aircraft = self.get_aircraft(aircraft_type)
        _, finder = self._airport_snapshot
        etops_distance = aircraft.etops_distance_nm

        waypoints = route['waypoints'] if isinstance(route, Mapping) else route.waypoints
        violations = []
        alternate_airports = []
        for index, waypoint in enumerate(waypoints):
            point = as_geo_point(waypoint)
            alternates = finder.find_alternates(point, etops_distance)
            alternate_airports.append(WaypointAlternates(waypoint=point, alternates=alternates))
            if not alternates:
                violations.append(Violation(waypoint=point))
                logger.debug(f"WP{index} ({point.lat:.4f}, {point.lng:.4f}) has no alternate within {etops_distance:.0f}nm.")

        report = ComplianceReport(
            aircraft_type=aircraft_type,
            etops_time_minutes=aircraft.etops_minutes,
            etops_distance_nm=etops_distance,
            compliant=not violations,
            violations=violations,
            alternate_airports=alternate_airports
        )
        if report.compliant:
            logger.info(f"ETOPS-{aircraft.etops_minutes} check for {aircraft_type}: COMPLIANT ({len(waypoints)} waypoints).")
        else:
            logger.warning(
                f"ETOPS-{aircraft.etops_minutes} check for {aircraft_type}: NON-COMPLIANT, "
                f"{len(violations)} of {len(waypoints)} waypoints beyond {etops_distance:.0f}nm of an alternate."
            )
        return report

    # --- Helpers ---

    def _coerce_aircraft(self, code: str, record) -> Aircraft:
        if isinstance(record, Aircraft):
            return record
        if not isinstance(record, Mapping):
            raise CatalogError(f"aircraft '{code}'", f"Unsupported record type {type(record).__name__}")
        try:
            return Aircraft.from_dict(record)
        except (ValueError, TypeError) as e:
            raise CatalogError(f"aircraft '{code}'", str(e)) from e

    def _coerce_airport(self, code: str, record) -> Airport:
        if isinstance(record, Airport):
            if record.code != code:
                raise CatalogError(f"airport '{code}'", f"Record code '{record.code}' does not match its key")
            return record
        if not isinstance(record, Mapping):
            raise CatalogError(f"airport '{code}'", f"Unsupported record type {type(record).__name__}")
        try:
            return Airport.from_dict(code, record)
        except (ValueError, TypeError) as e:
            raise CatalogError(f"airport '{code}'", str(e)) from e

    @staticmethod
    def _label(position) -> str:
        code = getattr(position, 'code', None)
        if code:
            return code
        point = as_geo_point(position)
        return f"({point.lat:.4f}, {point.lng:.4f})"
