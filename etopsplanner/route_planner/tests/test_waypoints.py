#!/usr/bin/env python3
# etopsplanner/route_planner/tests/test_waypoints.py
import sys
from pathlib import Path

# Add project root to Python path
project_root = Path(__file__).resolve().parent.parent.parent.parent
sys.path.append(str(project_root))

import unittest

from etopsplanner.geodesy import GeoPoint, haversine_distance_nm
from etopsplanner.route_planner import generate_waypoints

NRT = GeoPoint(35.7647, 140.3864)
HND = GeoPoint(35.5494, 139.7798)
LAX = GeoPoint(33.9425, -118.4081)
LHR = GeoPoint(51.4700, -0.4543)
JFK = GeoPoint(40.6413, -73.7781)

class TestWaypointGeneration(unittest.TestCase):
    def test_short_route_has_no_interior_points(self):
        self.assertEqual(generate_waypoints(HND, NRT), [HND, NRT])

    def test_coincident_endpoints(self):
        self.assertEqual(generate_waypoints(NRT, NRT), [NRT, NRT])

    def test_transpacific_waypoint_count(self):
        """~4,700nm gives nine 500nm segments, so eight interior points."""
        waypoints = generate_waypoints(NRT, LAX)
        self.assertEqual(len(waypoints), 10)
        self.assertEqual(waypoints[0], NRT)
        self.assertEqual(waypoints[-1], LAX)

    def test_waypoints_are_evenly_spaced(self):
        waypoints = generate_waypoints(NRT, LAX)
        segment = haversine_distance_nm(NRT, LAX) / (len(waypoints) - 1)
        for a, b in zip(waypoints, waypoints[1:]):
            self.assertAlmostEqual(haversine_distance_nm(a, b), segment, delta=1e-6)

    def test_route_crosses_the_date_line_northwards(self):
        interior = generate_waypoints(NRT, LAX)[1:-1]
        self.assertTrue(all(abs(wp.lng) > 110 for wp in interior))
        self.assertGreater(max(wp.lat for wp in interior), 45.0)

    def test_custom_interval(self):
        waypoints = generate_waypoints(LHR, JFK, interval_nm=700)
        self.assertEqual(len(waypoints), 5)

    def test_accepts_plain_records(self):
        waypoints = generate_waypoints({'lat': HND.lat, 'lng': HND.lng}, (NRT.lat, NRT.lng))
        self.assertEqual(waypoints, [HND, NRT])

if __name__ == '__main__':
    unittest.main()
