"""
HRM 工资细胞单元测试公共 fixture：路径、空存储、服务与 HTTP 客户端。
"""
from __future__ import annotations

import os
import sys

import pytest

ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
if ROOT not in sys.path:
    sys.path.insert(0, ROOT)

from hrm_payroll.models import Employee
from hrm_payroll.service import HRMService
from hrm_payroll.store import RecordStore


def make_employee(employee_id: str = "E001", department_id: str = "D01", **overrides) -> Employee:
    fields = {
        "id": employee_id,
        "name": f"Employee {employee_id}",
        "department_id": department_id,
        "salary_base": 1_000_000,
        "working_days": 20,
        "working_performance": 1.0,
        "bonus": 500_000,
        "late_coming_days": 0,
    }
    fields.update(overrides)
    return Employee(**fields)


@pytest.fixture
def store():
    return RecordStore()


@pytest.fixture
def service(store):
    return HRMService(store, strict=False)


@pytest.fixture
def client(service):
    """HTTP 测试客户端，服务实例替换为每个用例独立的空存储。"""
    from fastapi.testclient import TestClient

    from hrm_payroll.api.app import app
    from hrm_payroll.api.dependencies import get_service

    app.dependency_overrides[get_service] = lambda: service
    with TestClient(app) as c:
        yield c
    app.dependency_overrides.clear()


@pytest.fixture
def employee_factory():
    return make_employee
