import logging
import math
from typing import Optional

from fastapi import FastAPI, HTTPException, Query
from fastapi.middleware.cors import CORSMiddleware
from matplotlib import pyplot as plt

from energy_aware_drone.config import get_port, get_reload_flag
from energy_aware_drone.energy.coefficients import DEFAULT_COEFFICIENTS
from energy_aware_drone.energy.energy_model import distance, energy_consumption, find_optimal_speed_and_altitude
from energy_aware_drone.energy.mission_profile import evaluate_mission
from energy_aware_drone.model.energy_info import (
    DistanceRequest, DistanceResponse,
    EnergyRequest, EnergyResponse,
    OptimalRequest, OptimalResponse,
    MissionResponse, Point3,
)
from energy_aware_drone.model.waypoint import Waypoint
from energy_aware_drone.service.load_waypoints import get_default_waypoints
from energy_aware_drone.tool.plot_3d import plot_3d

logger = logging.getLogger(__name__)

app = FastAPI(title="Energy-Aware Drone API")

# Allow CORS from all origins. When using a wildcard origin, credentials must be disabled.
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=False,
    allow_methods=["*"],
    allow_headers=["*"],
)


def _finite_or_none(value: float) -> Optional[float]:
    # NaN / inf 不是合法 JSON
    return value if math.isfinite(value) else None


def _to_waypoint(p: Point3) -> Waypoint:
    return Waypoint(p.x, p.y, p.z)


@app.get("/", tags=["health"])
def root():
    return {"status": "ok", "message": "Energy-Aware Drone API"}


@app.get("/mission", response_model=MissionResponse, tags=["mission"])
def get_mission(show_pic: bool = Query(False, description="是否绘制航线图")):
    """固定航线的距离与能耗估算

    Returns:
        {
            "waypoints": [{"x": 0, "y": 0, "z": 100}, ...],
            "total_distance_m": 448.515,
            "optimal_velocity_ms": 0.5,
            "optimal_altitude_m": 100.0,
            "total_energy": 6738.94,
            ...
        }
    """
    try:
        waypoints = get_default_waypoints()
        result = evaluate_mission(waypoints, DEFAULT_COEFFICIENTS)
        if show_pic:
            fig = plot_3d(waypoints, result)
            plt.close(fig)
    except Exception as e:
        logger.exception("mission evaluation failed")
        raise HTTPException(status_code=500, detail=f"mission error: {e}")

    return MissionResponse(
        waypoints=[Point3(x=wp.x, y=wp.y, z=wp.z) for wp in waypoints],
        total_distance_m=result["total_distance_m"],
        segment_distances_m=result["segment_distances_m"],
        optimal_velocity_ms=_finite_or_none(result["optimal_velocity_ms"]),
        optimal_altitude_m=result["optimal_altitude_m"],
        energy_per_meter=_finite_or_none(result["energy_per_meter"]),
        total_energy=_finite_or_none(result["total_energy"]),
        velocity_defined=result["velocity_defined"],
    )


@app.post("/distance", response_model=DistanceResponse, tags=["energy"])
def post_distance(request: DistanceRequest):
    try:
        d = distance(_to_waypoint(request.start), _to_waypoint(request.end))
    except Exception as e:
        raise HTTPException(status_code=500, detail=f"distance error: {e}")
    return DistanceResponse(distance=_finite_or_none(d))


@app.post("/energy-consumption", response_model=EnergyResponse, tags=["energy"])
def post_energy_consumption(request: EnergyRequest):
    """单位距离能耗 E = a * v^2 + b * h + c"""
    try:
        energy = energy_consumption(request.velocity, request.altitude, request.a, request.b, request.c)
    except Exception as e:
        raise HTTPException(status_code=500, detail=f"energy error: {e}")
    return EnergyResponse(energy=_finite_or_none(energy))


@app.post("/optimal-speed-altitude", response_model=OptimalResponse, tags=["energy"])
def post_optimal_speed_altitude(request: OptimalRequest):
    try:
        velocity, altitude = find_optimal_speed_and_altitude(request.a, request.b)
    except Exception as e:
        raise HTTPException(status_code=500, detail=f"optimizer error: {e}")

    return OptimalResponse(
        velocity=_finite_or_none(velocity),
        altitude=altitude,
        velocity_defined=not math.isnan(velocity),
    )


if __name__ == "__main__":
    # Run standalone for quick testing: `python -m energy_aware_drone.api`
    import uvicorn

    uvicorn.run("energy_aware_drone.api:app", host="0.0.0.0", port=get_port(), log_level="info", reload=get_reload_flag())
