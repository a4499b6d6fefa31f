# 部门：列表（插入顺序）、删除（有员工引用时拒绝）
from __future__ import annotations

from fastapi import APIRouter, Depends, Response

from ...service import HRMService
from ..dependencies import get_request_id, get_service
from ..schemas import ListResponse

router = APIRouter()


@router.get("", response_model=ListResponse)
def list_departments(service: HRMService = Depends(get_service)):
    data = [d.to_dict() for d in service.list_departments()]
    return ListResponse(data=data, total=len(data))


@router.delete("/{department_id}", status_code=204)
def delete_department(department_id: str, service: HRMService = Depends(get_service)):
    service.delete_department(department_id, trace_id=get_request_id())
    return Response(status_code=204)
