from __future__ import annotations

import dataclasses

import pytest

from hrm_payroll.errors import InvalidRecordError
from hrm_payroll.models import Department


@pytest.mark.parametrize(
    "overrides",
    [
        {"employee_id": "  "},
        {"name": ""},
        {"department_id": ""},
        {"salary_base": -1},
        {"working_days": 1.5},
        {"bonus": True},
        {"late_coming_days": -3},
        {"working_performance": 0},
        {"working_performance": -1.0},
        {"working_performance": float("nan")},
    ],
)
def test_invalid_employee_fields(employee_factory, overrides):
    with pytest.raises(InvalidRecordError):
        employee_factory(**overrides)


def test_invalid_record_is_value_error(employee_factory):
    with pytest.raises(ValueError):
        employee_factory(salary_base=-5)


def test_records_are_immutable(employee_factory):
    e = employee_factory()
    with pytest.raises(dataclasses.FrozenInstanceError):
        e.bonus = 1


def test_to_dict_camel_case(employee_factory):
    e = employee_factory("E1", "D1", working_performance=1.5)
    d = e.to_dict()
    assert d["employeeId"] == "E1"
    assert d["departmentId"] == "D1"
    assert d["workingPerformance"] == 1.5
    assert Department("D1", 10).to_dict() == {"departmentId": "D1", "bonusSalary": 10}


def test_department_validation():
    with pytest.raises(InvalidRecordError):
        Department("", 0)
    with pytest.raises(InvalidRecordError):
        Department("D1", -1)
