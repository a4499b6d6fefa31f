# HRM 业务服务：控制台与 HTTP 共用，对接 store 层并写操作审计
from __future__ import annotations

import logging
from typing import Dict, List, Optional, Tuple

from .config import settings
from .models import Department, Employee
from .payroll import PayrollBreakdown, PayrollLine
from .store import RecordStore, get_store

_audit = logging.getLogger("hrm.audit")


def _human_audit(operation_desc: str, trace_id: str = "") -> None:
    if trace_id:
        _audit.info("%s, trace_id=%s", operation_desc, trace_id)
    else:
        _audit.info("%s", operation_desc)


class HRMService:
    """store 之上的薄封装；工资下溢策略默认取 settings.PAYROLL_STRICT。"""

    def __init__(self, store: Optional[RecordStore] = None, strict: Optional[bool] = None) -> None:
        self.store = store if store is not None else get_store()
        self.strict = settings.PAYROLL_STRICT if strict is None else strict

    def list_employees(self) -> List[Employee]:
        return self.store.list_employees()

    def list_departments(self) -> List[Department]:
        return self.store.list_departments()

    def get_employee(self, employee_id: str) -> Optional[Employee]:
        return self.store.get_employee(employee_id)

    def has_employees(self) -> bool:
        return self.store.counts()[0] > 0

    def has_departments(self) -> bool:
        return self.store.counts()[1] > 0

    def has_employee(self, employee_id: str) -> bool:
        return self.store.get_employee(employee_id) is not None

    def has_department(self, department_id: str) -> bool:
        return self.store.has_department(department_id)

    def add_employee(
        self, employee: Employee, department_bonus: Optional[int] = None, trace_id: str = ""
    ) -> Tuple[Employee, Optional[Department]]:
        created = self.store.add_employee(employee, department_bonus)
        _human_audit(f"created employee {employee.name} (employeeId={employee.id}, departmentId={employee.department_id})", trace_id)
        if created is not None:
            _human_audit(f"created department {created.id} (bonusSalary={created.bonus_salary})", trace_id)
        return employee, created

    def delete_employee(self, employee_id: str, trace_id: str = "") -> Employee:
        removed = self.store.delete_employee(employee_id)
        _human_audit(f"deleted employee {removed.name} (employeeId={removed.id})", trace_id)
        return removed

    def delete_department(self, department_id: str, trace_id: str = "") -> Department:
        removed = self.store.delete_department(department_id)
        _human_audit(f"deleted department {removed.id}", trace_id)
        return removed

    def payroll(self) -> List[PayrollLine]:
        return self.store.payroll(strict=self.strict)

    def payroll_for(self, employee_id: str) -> PayrollBreakdown:
        return self.store.payroll_for(employee_id, strict=self.strict)

    def health(self) -> Dict[str, object]:
        employees, departments = self.store.counts()
        return {"status": "up", "cell": settings.CELL_NAME, "employees": employees, "departments": departments}
