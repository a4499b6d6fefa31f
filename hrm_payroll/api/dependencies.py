# 请求级依赖：request_id 上下文与服务实例，供 app 与 routers 使用，避免循环导入
from __future__ import annotations

from contextvars import ContextVar

from ..service import HRMService

request_id_ctx: ContextVar[str] = ContextVar("request_id", default="")


def get_request_id() -> str:
    return request_id_ctx.get()


_service = None


def get_service() -> HRMService:
    """进程内共享一个服务实例；测试通过 app.dependency_overrides 替换。"""
    global _service
    if _service is None:
        _service = HRMService()
    return _service
