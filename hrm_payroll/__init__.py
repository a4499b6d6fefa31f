"""HRM 工资细胞：员工/部门内存记录管理与工资计算。"""
from .errors import (
    DepartmentBonusRequiredError,
    DepartmentHasEmployeesError,
    DuplicateIdError,
    EmptyCollectionError,
    HRMError,
    InvalidRecordError,
    NotFoundError,
    UnderflowError,
)
from .models import Department, Employee
from .payroll import compute_net_salary
from .store import RecordStore, get_store

__all__ = [
    "Department",
    "DepartmentBonusRequiredError",
    "DepartmentHasEmployeesError",
    "DuplicateIdError",
    "EmptyCollectionError",
    "Employee",
    "HRMError",
    "InvalidRecordError",
    "NotFoundError",
    "RecordStore",
    "UnderflowError",
    "compute_net_salary",
    "get_store",
]
