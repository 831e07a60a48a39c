from dataclasses import dataclass
from typing import Sequence


# ======================
# 航点数据结构
# ======================

@dataclass(frozen=True)
class Waypoint:
    x: float
    y: float
    z: float    # 高度 (m)


# 有序航点序列，至少 2 个点时距离求和才有意义（不做校验）
Path = Sequence[Waypoint]
