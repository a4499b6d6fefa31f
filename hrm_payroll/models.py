# 员工、部门实体：不可变记录，创建后只允许整体删除
from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Any, Dict

from .errors import InvalidRecordError


def _require_text(field: str, value: Any) -> None:
    if not isinstance(value, str) or not value.strip():
        raise InvalidRecordError(field, "must not be blank")


def _require_non_negative_int(field: str, value: Any) -> None:
    # bool 是 int 子类，单独排除
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidRecordError(field, "must be a whole number")
    if value < 0:
        raise InvalidRecordError(field, "must not be negative")


@dataclass(frozen=True)
class Employee:
    id: str
    name: str
    department_id: str
    salary_base: int
    working_days: int
    working_performance: float
    bonus: int
    late_coming_days: int

    def __post_init__(self) -> None:
        _require_text("id", self.id)
        _require_text("name", self.name)
        _require_text("departmentId", self.department_id)
        _require_non_negative_int("salaryBase", self.salary_base)
        _require_non_negative_int("workingDays", self.working_days)
        _require_non_negative_int("bonus", self.bonus)
        _require_non_negative_int("lateComingDays", self.late_coming_days)
        perf = self.working_performance
        if isinstance(perf, bool) or not isinstance(perf, (int, float)):
            raise InvalidRecordError("workingPerformance", "must be a number")
        if not math.isfinite(perf) or perf <= 0:
            raise InvalidRecordError("workingPerformance", "must be more than 0")

    def to_dict(self) -> Dict[str, Any]:
        return {
            "employeeId": self.id,
            "name": self.name,
            "departmentId": self.department_id,
            "salaryBase": self.salary_base,
            "workingDays": self.working_days,
            "workingPerformance": self.working_performance,
            "bonus": self.bonus,
            "lateComingDays": self.late_coming_days,
        }


@dataclass(frozen=True)
class Department:
    id: str
    bonus_salary: int

    def __post_init__(self) -> None:
        _require_text("departmentId", self.id)
        _require_non_negative_int("bonusSalary", self.bonus_salary)

    def to_dict(self) -> Dict[str, Any]:
        return {"departmentId": self.id, "bonusSalary": self.bonus_salary}
