# 统一请求/响应模型与错误体
from __future__ import annotations

from typing import Any, List, Optional

from pydantic import BaseModel, Field


class ErrorBody(BaseModel):
    code: str
    message: str
    details: str = ""
    requestId: str = ""


class ListResponse(BaseModel):
    data: List[Any]
    total: int


# ---------- Employee ----------
class EmployeeCreate(BaseModel):
    employeeId: str = Field(..., min_length=1)
    name: str = Field(..., min_length=1)
    departmentId: str = Field(..., min_length=1)
    salaryBase: int = Field(..., ge=0)
    workingDays: int = Field(..., ge=0)
    workingPerformance: float = Field(..., gt=0)
    bonus: int = Field(0, ge=0)
    lateComingDays: int = Field(0, ge=0)
    # 仅在部门不存在时使用
    departmentBonus: Optional[int] = Field(None, ge=0)


class EmployeeCreated(BaseModel):
    employee: dict
    createdDepartment: Optional[dict] = None
