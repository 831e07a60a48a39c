from dataclasses import dataclass

from energy_aware_drone.config import DEFAULT_A, DEFAULT_B, DEFAULT_C


# ======================
# 能耗模型系数
# ======================

@dataclass(frozen=True)
class EnergyCoefficients:
    a: float = DEFAULT_A    # 速度影响系数（平方项）
    b: float = DEFAULT_B    # 高度影响系数（线性项）
    c: float = DEFAULT_C    # 基础能耗


DEFAULT_COEFFICIENTS = EnergyCoefficients()
