"""
工资计算引擎：纯函数，不访问存储。
金额以最小货币单位的整数表示；所有系数按有理数精确计算后向零截断，不受浮点与十进制精度限制。
"""
from __future__ import annotations

import logging
import math
from dataclasses import asdict, dataclass
from fractions import Fraction
from typing import Any, Dict

from .errors import UnderflowError
from .models import Employee

logger = logging.getLogger("hrm.payroll")

# 迟到罚款：<= 3 天按 10,000/天，超过 3 天全部按 20,000/天
LATE_DAYS_THRESHOLD = 3
LATE_PENALTY_LOW = 10_000
LATE_PENALTY_HIGH = 20_000

# 固定 10.5% 非税扣除
DEDUCTION_RATE = Fraction("0.895")

# 税档：(上限含, 税率)；超过最后一档上限按 TOP_RATE
TAX_BRACKETS = (
    (11_000_000, Fraction("0")),
    (16_000_000, Fraction("0.05")),
)
TOP_RATE = Fraction("0.10")


def _trunc(value: Fraction) -> int:
    return math.trunc(value)


def _as_fraction(number: float) -> Fraction:
    # repr 给出最短十进制表示，1.1 即 Fraction("1.1") == 11/10
    return Fraction(repr(float(number)))


def late_penalty(late_coming_days: int) -> int:
    if late_coming_days <= LATE_DAYS_THRESHOLD:
        return late_coming_days * LATE_PENALTY_LOW
    return late_coming_days * LATE_PENALTY_HIGH


def tax_for(income_after_deduction: int) -> int:
    """按税档计算个税，边界值归入较低一档。"""
    for upper, rate in TAX_BRACKETS:
        if income_after_deduction <= upper:
            return _trunc(income_after_deduction * rate)
    return _trunc(income_after_deduction * TOP_RATE)


@dataclass(frozen=True)
class PayrollBreakdown:
    employee_id: str
    late_penalty: int
    income_without_bonus: int
    department_bonus: int
    total_income: int
    income_after_deduction: int
    tax: int
    net_salary: int
    clamped: bool = False

    def to_dict(self) -> Dict[str, Any]:
        d = asdict(self)
        return {
            "employeeId": d["employee_id"],
            "latePenalty": d["late_penalty"],
            "incomeWithoutBonus": d["income_without_bonus"],
            "departmentBonus": d["department_bonus"],
            "totalIncome": d["total_income"],
            "incomeAfterDeduction": d["income_after_deduction"],
            "tax": d["tax"],
            "netSalary": d["net_salary"],
            "clamped": d["clamped"],
        }


@dataclass(frozen=True)
class PayrollLine:
    employee_id: str
    name: str
    department_id: str
    net_salary: int

    def to_dict(self) -> Dict[str, Any]:
        return {
            "employeeId": self.employee_id,
            "name": self.name,
            "departmentId": self.department_id,
            "netSalary": self.net_salary,
        }


def breakdown(employee: Employee, department_bonus: int, strict: bool = False) -> PayrollBreakdown:
    """
    逐步计算一名员工的实发工资。
    罚款超过收入与奖金之和时：默认截断为 0 并记 WARNING；strict=True 时抛 UnderflowError。
    """
    penalty = late_penalty(employee.late_coming_days)
    gross = employee.salary_base * employee.working_days * _as_fraction(employee.working_performance)
    income_without_bonus = _trunc(gross)

    total_income = income_without_bonus + employee.bonus + department_bonus - penalty
    clamped = False
    if total_income < 0:
        if strict:
            raise UnderflowError(employee.id, -total_income)
        logger.warning("payroll underflow clamped to 0: employee=%s shortfall=%s", employee.id, -total_income)
        total_income = 0
        clamped = True

    income_after_deduction = _trunc(total_income * DEDUCTION_RATE)
    tax = tax_for(income_after_deduction)
    return PayrollBreakdown(
        employee_id=employee.id,
        late_penalty=penalty,
        income_without_bonus=income_without_bonus,
        department_bonus=department_bonus,
        total_income=total_income,
        income_after_deduction=income_after_deduction,
        tax=tax,
        net_salary=income_after_deduction - tax,
        clamped=clamped,
    )


def compute_net_salary(employee: Employee, department_bonus: int, strict: bool = False) -> int:
    return breakdown(employee, department_bonus, strict=strict).net_salary
