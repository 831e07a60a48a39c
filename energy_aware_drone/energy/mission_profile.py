# ======================
# 路径能耗估算
# ======================
import logging
import math
from typing import List

from energy_aware_drone.energy.coefficients import EnergyCoefficients, DEFAULT_COEFFICIENTS
from energy_aware_drone.energy.energy_model import distance, energy_consumption, find_optimal_speed_and_altitude
from energy_aware_drone.model.waypoint import Path

logger = logging.getLogger(__name__)


def segment_distances(path: Path) -> List[float]:
    return [distance(path[i - 1], path[i]) for i in range(1, len(path))]


def compute_path_distance(path: Path) -> float:
    """相邻航点距离之和；少于 2 个航点时为 0"""
    return sum(segment_distances(path), 0.0)


def evaluate_mission(
    path: Path,
    coefficients: EnergyCoefficients = DEFAULT_COEFFICIENTS
) -> dict:
    segments = segment_distances(path)
    total_distance = sum(segments, 0.0)

    velocity, altitude = find_optimal_speed_and_altitude(coefficients.a, coefficients.b)
    velocity_defined = not math.isnan(velocity)
    if not velocity_defined:
        logger.warning(
            "optimal velocity undefined for a=%s, b=%s (b / 2a < 0)",
            coefficients.a, coefficients.b
        )

    energy_per_meter = energy_consumption(velocity, altitude, coefficients.a, coefficients.b, coefficients.c)
    # 总能耗 = 单位距离能耗 * 总距离
    total_energy = energy_per_meter * total_distance

    logger.debug(
        "mission: %d waypoints, distance=%.3f m, v=%s m/s, energy=%s",
        len(path), total_distance, velocity, total_energy
    )

    return {
        "total_distance_m": total_distance,
        "segment_distances_m": segments,
        "optimal_velocity_ms": velocity,
        "optimal_altitude_m": altitude,
        "energy_per_meter": energy_per_meter,
        "total_energy": total_energy,
        "velocity_defined": velocity_defined
    }
