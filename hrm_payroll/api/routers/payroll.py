from __future__ import annotations

from fastapi import APIRouter, Depends

from ...service import HRMService
from ..dependencies import get_service
from ..schemas import ListResponse

router = APIRouter()


@router.get("", response_model=ListResponse)
def payroll(service: HRMService = Depends(get_service)):
    """全员实发工资，按员工插入顺序。"""
    data = [line.to_dict() for line in service.payroll()]
    return ListResponse(data=data, total=len(data))
