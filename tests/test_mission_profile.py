import dataclasses
import math
import os
import sys
import unittest
from unittest import mock

# 添加项目根目录到路径
proj_root = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
if proj_root not in sys.path:
    sys.path.insert(0, proj_root)

from energy_aware_drone.energy.coefficients import EnergyCoefficients, DEFAULT_COEFFICIENTS
from energy_aware_drone.energy import mission_profile
from energy_aware_drone.energy.energy_model import distance, energy_consumption
from energy_aware_drone.energy.mission_profile import (
    compute_path_distance,
    evaluate_mission,
    segment_distances
)
from energy_aware_drone.model.waypoint import Waypoint
from energy_aware_drone.service.load_waypoints import get_default_waypoints

EXPECTED_TOTAL = 150.0 + math.sqrt(13400) + math.sqrt(33400)


class TestPathDistance(unittest.TestCase):

    def test_default_path_total(self):
        total = compute_path_distance(get_default_waypoints())
        self.assertAlmostEqual(total, EXPECTED_TOTAL, places=9)
        self.assertAlmostEqual(total, 448.515, places=3)

    def test_segments(self):
        segments = segment_distances(get_default_waypoints())
        self.assertEqual(len(segments), 3)
        self.assertAlmostEqual(segments[0], 150.0, places=10)
        self.assertAlmostEqual(segments[1], math.sqrt(13400), places=10)
        self.assertAlmostEqual(segments[2], math.sqrt(33400), places=10)

    def test_short_paths(self):
        """少于 2 个航点时距离为 0"""
        self.assertEqual(compute_path_distance([]), 0.0)
        self.assertEqual(compute_path_distance([Waypoint(1, 2, 3)]), 0.0)
        self.assertEqual(segment_distances([Waypoint(1, 2, 3)]), [])

    def test_longer_path(self):
        path = [Waypoint(0, 0, 0), Waypoint(3, 4, 0), Waypoint(3, 4, 12), Waypoint(3, 4, 0)]
        self.assertAlmostEqual(compute_path_distance(path), 29.0, places=10)


class TestEvaluateMission(unittest.TestCase):

    def test_default_mission(self):
        result = evaluate_mission(get_default_waypoints())
        self.assertAlmostEqual(result["optimal_velocity_ms"], 0.5, places=10)
        self.assertEqual(result["optimal_altitude_m"], 100.0)
        self.assertAlmostEqual(result["energy_per_meter"], 15.025, places=10)
        self.assertTrue(result["velocity_defined"])

    def test_total_energy_identity(self):
        """总能耗 = 单位距离能耗 * 总距离"""
        c = DEFAULT_COEFFICIENTS
        result = evaluate_mission(get_default_waypoints(), c)
        per_meter = energy_consumption(
            result["optimal_velocity_ms"], result["optimal_altitude_m"], c.a, c.b, c.c
        )
        self.assertEqual(result["total_energy"], per_meter * result["total_distance_m"])

    def test_zero_a(self):
        result = evaluate_mission(get_default_waypoints(), EnergyCoefficients(a=0.0, b=0.05, c=10.0))
        self.assertEqual(result["optimal_velocity_ms"], 0.0)
        self.assertAlmostEqual(result["energy_per_meter"], 15.0, places=10)

    def test_undefined_velocity_is_flagged(self):
        coefficients = EnergyCoefficients(a=0.1, b=-0.05, c=10.0)
        with self.assertLogs("energy_aware_drone.energy.mission_profile", level="WARNING"):
            result = evaluate_mission(get_default_waypoints(), coefficients)
        self.assertFalse(result["velocity_defined"])
        self.assertTrue(math.isnan(result["optimal_velocity_ms"]))
        self.assertTrue(math.isnan(result["total_energy"]))

    def test_segments_computed_once(self):
        """4 个航点只计算 3 次航段距离"""
        with mock.patch.object(mission_profile, "distance", wraps=distance) as spy:
            result = evaluate_mission(get_default_waypoints())
        self.assertEqual(spy.call_count, 3)
        self.assertEqual(result["total_distance_m"], sum(result["segment_distances_m"], 0.0))

    def test_result_keys(self):
        result = evaluate_mission(get_default_waypoints())
        keys = ["total_distance_m", "segment_distances_m", "optimal_velocity_ms",
                "optimal_altitude_m", "energy_per_meter", "total_energy", "velocity_defined"]
        for key in keys:
            self.assertIn(key, result)


class TestDefaultWaypoints(unittest.TestCase):

    def test_fixed_path(self):
        waypoints = get_default_waypoints()
        self.assertEqual([dataclasses.astuple(wp) for wp in waypoints],
                         [(0, 0, 100), (100, 100, 150), (200, 50, 120), (300, 200, 150)])

    def test_waypoint_immutable(self):
        wp = get_default_waypoints()[0]
        with self.assertRaises(dataclasses.FrozenInstanceError):
            wp.x = 5


if __name__ == "__main__":
    unittest.main()
