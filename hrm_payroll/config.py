# 细胞配置：仅环境变量，进程启动时读取一次
from __future__ import annotations

import os
from typing import Optional


def _int_env(key: str, default: int) -> int:
    try:
        return int(os.environ.get(key, default))
    except (TypeError, ValueError):
        return default


def _flag_env(key: str, default: str = "0") -> bool:
    return (os.environ.get(key, default) or "").strip() == "1"


class Settings:
    """统一配置入口；控制台与 HTTP 两种入口共用。"""

    # 服务端口与监听地址（serve 模式）
    PORT: int = _int_env("PORT", 8004)
    HOST: str = os.environ.get("HRM_HOST", "0.0.0.0").strip() or "0.0.0.0"

    # 日志级别：未设置时由入口决定（控制台 WARNING，服务 INFO）
    LOG_LEVEL: Optional[str] = (os.environ.get("HRM_LOG_LEVEL", "").strip().upper() or None)

    # 工资计算下溢：默认截断为 0，严格模式抛 UnderflowError
    PAYROLL_STRICT: bool = _flag_env("HRM_PAYROLL_STRICT")

    # 控制台每条命令后清屏（仅 TTY 生效）
    CLEAR_SCREEN: bool = _flag_env("HRM_CLEAR_SCREEN", "1")

    CELL_NAME: str = "hrm-payroll"
    CURRENCY_LABEL: str = "VND"


settings = Settings()


LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


def configure_logging(default_level: str = "INFO") -> None:
    """入口统一调用；HRM_LOG_LEVEL 优先于入口默认值。"""
    import logging

    level = settings.LOG_LEVEL or default_level
    logging.basicConfig(level=getattr(logging, level, logging.INFO), format=LOG_FORMAT)
