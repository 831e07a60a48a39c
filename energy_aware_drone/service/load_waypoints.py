import logging
from typing import List

from energy_aware_drone.model.waypoint import Waypoint

logger = logging.getLogger(__name__)


def get_default_waypoints() -> List[Waypoint]:
    """
    固定任务航点
    (0, 0, 100) -> (100, 100, 150) -> (200, 50, 120) -> (300, 200, 150)
    """
    waypoints = [
        Waypoint(0, 0, 100),        # 起点，高度 100m
        Waypoint(100, 100, 150),    # 爬升到 150m
        Waypoint(200, 50, 120),     # 转向，下降到 120m
        Waypoint(300, 200, 150),    # 终点，回到 150m
    ]

    logger.debug("加载 %d 个航点", len(waypoints))
    return waypoints
