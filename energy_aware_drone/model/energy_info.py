from pydantic import BaseModel
from typing import List, Optional


class Point3(BaseModel):
    x: float
    y: float
    z: float


class DistanceRequest(BaseModel):
    start: Point3
    end: Point3


class DistanceResponse(BaseModel):
    # 溢出为 inf 时返回 null
    distance: Optional[float] = None


class EnergyRequest(BaseModel):
    velocity: float
    altitude: float
    a: float = 0.1
    b: float = 0.05
    c: float = 10.0


class EnergyResponse(BaseModel):
    energy: Optional[float] = None


class OptimalRequest(BaseModel):
    a: float = 0.1
    b: float = 0.05


class OptimalResponse(BaseModel):
    # NaN 无法序列化为 JSON，速度无定义时返回 null
    velocity: Optional[float] = None
    altitude: float
    velocity_defined: bool = True


class MissionResponse(BaseModel):
    waypoints: List[Point3]
    total_distance_m: float
    segment_distances_m: List[float]
    optimal_velocity_ms: Optional[float] = None
    optimal_altitude_m: float
    energy_per_meter: Optional[float] = None
    total_energy: Optional[float] = None
    velocity_defined: bool = True
