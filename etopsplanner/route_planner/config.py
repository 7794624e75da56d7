# etopsplanner/route_planner/config.py
from dataclasses import dataclass, field
from pathlib import Path

from .constants import PlannerConstants
from ..geodesy.constants import GeodesyConstants

DEFAULT_DATA_DIR = Path(__file__).resolve().parent.parent / "data"

@dataclass
class PlannerConfig:
    """Configuration parameters for route and compliance calculations."""
    waypoint_interval_nm: float = PlannerConstants.WAYPOINT_INTERVAL_NM
    slerp_epsilon: float = GeodesyConstants.SLERP_EPSILON_RAD
    data_dir: Path = field(default_factory=lambda: DEFAULT_DATA_DIR)
    aircraft_file: str = "aircraft.json"
    airports_file: str = "airports.json"

    def __post_init__(self):
        if self.waypoint_interval_nm <= 0:
            raise ValueError(f"waypoint_interval_nm must be positive, got {self.waypoint_interval_nm}")
        self.data_dir = Path(self.data_dir)

    @property
    def aircraft_path(self) -> Path:
        return self.data_dir / self.aircraft_file

    @property
    def airports_path(self) -> Path:
        return self.data_dir / self.airports_file
