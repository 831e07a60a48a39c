# ======================
# 驱动：计算固定航线并输出四行结果
# ======================
import logging
import sys

from energy_aware_drone.config import get_log_level
from energy_aware_drone.energy.coefficients import DEFAULT_COEFFICIENTS
from energy_aware_drone.energy.mission_profile import evaluate_mission
from energy_aware_drone.service.load_waypoints import get_default_waypoints


def format_report(result: dict) -> str:
    lines = [
        f"Total Distance: {result['total_distance_m']:g} meters",
        f"Optimal Velocity: {result['optimal_velocity_ms']:g} m/s",
        f"Optimal Altitude: {result['optimal_altitude_m']:g} meters",
        f"Estimated Total Energy: {result['total_energy']:g} units",
    ]
    return "\n".join(lines)


def main() -> int:
    # 日志写 stderr，stdout 只保留四行结果
    logging.basicConfig(
        level=get_log_level(),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        stream=sys.stderr
    )

    waypoints = get_default_waypoints()
    result = evaluate_mission(waypoints, DEFAULT_COEFFICIENTS)
    print(format_report(result))
    return 0


if __name__ == "__main__":
    sys.exit(main())
