"""
HRM 工资细胞 FastAPI 应用：员工、部门、工资单。
统一错误体 {code, message, details, requestId}；每个响应带 X-Request-ID 与 X-Response-Time（毫秒）。
"""
from __future__ import annotations

import logging
import time
import uuid

from fastapi import Depends, FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException

from ..errors import HRMError
from ..service import HRMService
from .dependencies import get_request_id, get_service, request_id_ctx
from .schemas import ErrorBody
from .routers import departments, employees, payroll

logger = logging.getLogger("hrm.api")

# OpenAPI 中声明统一错误体
ERROR_RESPONSES = {404: {"model": ErrorBody}, 409: {"model": ErrorBody}, 422: {"model": ErrorBody}}

app = FastAPI(
    title="HRM Payroll Cell API",
    description="员工与部门记录管理、工资计算；数据仅保存在进程内存",
    version="1.0.0",
)

app.include_router(employees.router, prefix="/employees", tags=["employees"], responses=ERROR_RESPONSES)
app.include_router(departments.router, prefix="/departments", tags=["departments"], responses=ERROR_RESPONSES)
app.include_router(payroll.router, prefix="/payroll", tags=["payroll"], responses=ERROR_RESPONSES)


@app.middleware("http")
async def add_request_id_and_timing(request: Request, call_next):
    rid = request.headers.get("X-Request-ID") or request.headers.get("X-Trace-Id") or str(uuid.uuid4()).replace("-", "")[:32]
    request_id_ctx.set(rid)
    start = time.perf_counter()
    response = await call_next(request)
    elapsed_ms = int((time.perf_counter() - start) * 1000)
    response.headers["X-Response-Time"] = str(elapsed_ms)
    response.headers["X-Request-ID"] = rid
    logger.info("request method=%s path=%s status=%s duration_ms=%s request_id=%s", request.method, request.url.path, response.status_code, elapsed_ms, rid)
    return response


@app.get("/health")
def health(service: HRMService = Depends(get_service)):
    """健康检查，附带当前员工数与部门数。"""
    return service.health()


def _error(status_code: int, code: str, message: str, details: str = "") -> JSONResponse:
    body = ErrorBody(code=code, message=message, details=details, requestId=get_request_id())
    return JSONResponse(status_code=status_code, content=body.model_dump())


@app.exception_handler(HRMError)
def hrm_error_handler(request: Request, exc: HRMError):
    return _error(exc.status_code, exc.code, exc.message, exc.details)


@app.exception_handler(RequestValidationError)
def validation_error_handler(request: Request, exc: RequestValidationError):
    details = "; ".join(f"{'.'.join(str(p) for p in err.get('loc', ()))}: {err.get('msg', '')}" for err in exc.errors())
    return _error(422, "VALIDATION_ERROR", "Request body is not valid", details)


@app.exception_handler(HTTPException)
def http_exception_handler(request: Request, exc: HTTPException):
    return _error(exc.status_code, "ERROR", str(exc.detail))
