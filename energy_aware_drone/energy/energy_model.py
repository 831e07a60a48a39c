# ======================
# 能耗计算核心
# ======================
from typing import Tuple

import numpy as np

from energy_aware_drone.config import FIXED_ALTITUDE
from energy_aware_drone.model.waypoint import Waypoint


def distance(wp1: Waypoint, wp2: Waypoint) -> float:
    """
    两个航点之间的欧几里得距离
    distance = sqrt((x2 - x1)^2 + (y2 - y1)^2 + (z2 - z1)^2)
    """
    dx = wp2.x - wp1.x
    dy = wp2.y - wp1.y
    dz = wp2.z - wp1.z
    # 用乘法而不是 **，溢出时得到 inf 而不是 OverflowError
    return float(np.sqrt(dx * dx + dy * dy + dz * dz))


def energy_consumption(velocity: float, altitude: float, a: float, b: float, c: float) -> float:
    """
    单位距离能耗: E = a * v^2 + b * h + c
      a * v^2: 速度的平方影响
      b * h:   高度的线性影响
      c:       基础能耗
    """
    return a * (velocity * velocity) + b * altitude + c


def find_optimal_speed_and_altitude(a: float, b: float) -> Tuple[float, float]:
    """
    闭式求解最优速度，高度固定为 100m。

    a != 0 时 v = sqrt(b / (2a))；a == 0 时 v = 0。
    b / a < 0 时结果为 NaN，不抛异常也不告警。
    """
    optimal_velocity = 0.0
    optimal_altitude = FIXED_ALTITUDE

    if a != 0:
        # 负数开方返回 nan，而不是 math.sqrt 的 ValueError
        with np.errstate(invalid="ignore"):
            optimal_velocity = float(np.sqrt(b / (2 * a)))

    return optimal_velocity, optimal_altitude
