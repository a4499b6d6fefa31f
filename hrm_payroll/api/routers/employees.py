# 员工：列表（按绩效降序）、查询、新增（自动建部门）、删除、单人工资明细
from __future__ import annotations

from fastapi import APIRouter, Depends, Response

from ...errors import NotFoundError
from ...models import Employee
from ...service import HRMService
from ..dependencies import get_request_id, get_service
from ..schemas import EmployeeCreate, EmployeeCreated, ListResponse

router = APIRouter()


@router.get("", response_model=ListResponse)
def list_employees(service: HRMService = Depends(get_service)):
    data = [e.to_dict() for e in service.list_employees()]
    return ListResponse(data=data, total=len(data))


@router.get("/{employee_id}")
def get_employee(employee_id: str, service: HRMService = Depends(get_service)):
    e = service.get_employee(employee_id)
    if e is None:
        raise NotFoundError("employee", employee_id)
    return e.to_dict()


@router.post("", status_code=201, response_model=EmployeeCreated)
def create_employee(body: EmployeeCreate, service: HRMService = Depends(get_service)):
    employee = Employee(
        id=body.employeeId.strip(),
        name=body.name.strip(),
        department_id=body.departmentId.strip(),
        salary_base=body.salaryBase,
        working_days=body.workingDays,
        working_performance=body.workingPerformance,
        bonus=body.bonus,
        late_coming_days=body.lateComingDays,
    )
    _, created = service.add_employee(employee, body.departmentBonus, trace_id=get_request_id())
    return EmployeeCreated(employee=employee.to_dict(), createdDepartment=created.to_dict() if created else None)


@router.delete("/{employee_id}", status_code=204)
def delete_employee(employee_id: str, service: HRMService = Depends(get_service)):
    service.delete_employee(employee_id, trace_id=get_request_id())
    return Response(status_code=204)


@router.get("/{employee_id}/payroll")
def employee_payroll(employee_id: str, service: HRMService = Depends(get_service)):
    return service.payroll_for(employee_id).to_dict()
