# ======================
# 计算常量与运行配置
# ======================
# 计算本身固定不变；环境变量只影响运行方式（端口、热重载、日志级别）
import logging
import os

# 能耗模型默认系数: E = a * v^2 + b * h + c
DEFAULT_A = 0.1     # 速度影响系数
DEFAULT_B = 0.05    # 高度影响系数
DEFAULT_C = 10.0    # 基础能耗

# 固定飞行高度 (m)，不作为优化变量
FIXED_ALTITUDE = 100.0

DEFAULT_PORT = 8000
DEFAULT_LOG_LEVEL = "WARNING"


def get_port() -> int:
    return int(os.getenv("UVICORN_PORT", str(DEFAULT_PORT)))


def get_reload_flag() -> bool:
    reload_env = os.getenv("UVICORN_RELOAD", "1")
    return reload_env not in ("0", "false", "False")


def get_log_level() -> str:
    level = os.getenv("EAD_LOG_LEVEL", DEFAULT_LOG_LEVEL).upper()
    # 未知级别名回退到默认值，getLevelName 对已知名称返回 int
    if not isinstance(logging.getLevelName(level), int):
        return DEFAULT_LOG_LEVEL
    return level
