# etopsplanner/route_planner/waypoints.py
import math
from typing import List

from .constants import PlannerConstants
from ..geodesy.constants import GeodesyConstants
from ..geodesy.coordinates import as_geo_point, haversine_distance_nm
from ..geodesy.data_models import GeoPoint
from ..geodesy.interpolation import interpolate_position

def generate_waypoints(start, end,
                       interval_nm: float = PlannerConstants.WAYPOINT_INTERVAL_NM,
                       epsilon: float = GeodesyConstants.SLERP_EPSILON_RAD) -> List[GeoPoint]:
    """
    Samples the great circle from start to end with one interior point per
    ``interval_nm``. Routes shorter than one interval return [start, end].
    """
    start = as_geo_point(start)
    end = as_geo_point(end)

    total_distance = haversine_distance_nm(start, end)
    num_segments = math.floor(total_distance / interval_nm)

    waypoints = [start]
    for i in range(1, num_segments):
        waypoints.append(interpolate_position(start, end, i / num_segments, epsilon=epsilon))
    waypoints.append(end)
    return waypoints
