"""
HRM 内存存储：员工、部门，进程内有效，不落盘。
员工 ID、部门 ID 各自唯一；有员工引用的部门不可删除；新增员工时部门不存在则同一临界区内创建。
所有读写在同一把可重入锁内完成，HTTP 多线程访问时保证“检查-创建”原子。
"""
from __future__ import annotations

import logging
import threading
from typing import Dict, List, Optional, Tuple

from .errors import (
    DepartmentBonusRequiredError,
    DepartmentHasEmployeesError,
    DuplicateIdError,
    EmptyCollectionError,
    NotFoundError,
)
from .models import Department, Employee
from .payroll import PayrollBreakdown, PayrollLine, breakdown

logger = logging.getLogger("hrm.store")


class RecordStore:
    """员工表 employee_id -> Employee，部门表 department_id -> Department；dict 保持插入顺序。"""

    def __init__(self) -> None:
        self._lock = threading.RLock()
        self._employees: Dict[str, Employee] = {}
        self._departments: Dict[str, Department] = {}

    # ---------- 员工 ----------
    def list_employees(self) -> List[Employee]:
        """按工作绩效降序；绩效相同保持插入顺序。不改变存储顺序。"""
        with self._lock:
            return sorted(self._employees.values(), key=lambda e: e.working_performance, reverse=True)

    def get_employee(self, employee_id: str) -> Optional[Employee]:
        with self._lock:
            return self._employees.get(employee_id)

    def add_employee(self, candidate: Employee, department_bonus: Optional[int] = None) -> Optional[Department]:
        """新增员工；部门不存在时用 department_bonus 创建。返回新建的部门，已存在则返回 None。"""
        with self._lock:
            if candidate.id in self._employees:
                raise DuplicateIdError(candidate.id)
            created: Optional[Department] = None
            if candidate.department_id not in self._departments:
                if department_bonus is None:
                    raise DepartmentBonusRequiredError(candidate.department_id)
                created = Department(candidate.department_id, department_bonus)
            self._employees[candidate.id] = candidate
            if created is not None:
                self._departments[created.id] = created
            return created

    def delete_employee(self, employee_id: str) -> Employee:
        with self._lock:
            if not self._employees:
                raise EmptyCollectionError("employee")
            if employee_id not in self._employees:
                raise NotFoundError("employee", employee_id)
            return self._employees.pop(employee_id)

    # ---------- 部门 ----------
    def list_departments(self) -> List[Department]:
        with self._lock:
            return list(self._departments.values())

    def get_department(self, department_id: str) -> Optional[Department]:
        with self._lock:
            return self._departments.get(department_id)

    def has_department(self, department_id: str) -> bool:
        with self._lock:
            return department_id in self._departments

    def delete_department(self, department_id: str) -> Department:
        with self._lock:
            if not self._departments:
                raise EmptyCollectionError("department")
            if department_id not in self._departments:
                raise NotFoundError("department", department_id)
            members = sum(1 for e in self._employees.values() if e.department_id == department_id)
            if members:
                raise DepartmentHasEmployeesError(department_id, members)
            return self._departments.pop(department_id)

    # ---------- 工资 ----------
    def department_bonus_for(self, employee: Employee) -> int:
        """部门不存在时按 0 计（引用完整性正常时不会发生）。"""
        with self._lock:
            d = self._departments.get(employee.department_id)
            if d is None:
                logger.debug("department %s not found for employee %s", employee.department_id, employee.id)
                return 0
            return d.bonus_salary

    def payroll(self, strict: bool = False) -> List[PayrollLine]:
        """按插入顺序为每名员工计算实发工资。"""
        with self._lock:
            return [
                PayrollLine(e.id, e.name, e.department_id, breakdown(e, self.department_bonus_for(e), strict=strict).net_salary)
                for e in self._employees.values()
            ]

    def payroll_for(self, employee_id: str, strict: bool = False) -> PayrollBreakdown:
        with self._lock:
            e = self._employees.get(employee_id)
            if e is None:
                raise NotFoundError("employee", employee_id)
            return breakdown(e, self.department_bonus_for(e), strict=strict)

    def counts(self) -> Tuple[int, int]:
        with self._lock:
            return len(self._employees), len(self._departments)


_store: Optional[RecordStore] = None
_store_lock = threading.Lock()


def get_store() -> RecordStore:
    global _store
    if _store is not None:
        return _store
    with _store_lock:
        if _store is None:
            _store = RecordStore()
        return _store


def reset_store() -> RecordStore:
    """丢弃当前会话数据，返回新的空存储。"""
    global _store
    with _store_lock:
        _store = RecordStore()
        return _store
