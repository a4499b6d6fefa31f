# 展示层：金额千分位、菜单与记录文本块；核心层从不自行格式化
from __future__ import annotations

from typing import List

from .config import settings
from .models import Department, Employee
from .payroll import PayrollLine

SEPARATOR = "----"

MENU_LINES = (
    "*----------PROGRAM TO MANAGE EMPLOYEES----------*",
    "|                                               |",
    "| 1. Shows list of employees.                   |",
    "| 2. Shows list of departments.                 |",
    "| 3. Add new employee.                          |",
    "| 4. Delete employee by employee's ID.          |",
    "| 5. Delete department by department's ID.      |",
    "| 6. Shows payroll.                             |",
    "| 7. Exit program.                              |",
    "|_______________________________________________|",
)


def format_number_with_commas(number: int) -> str:
    """1234567 -> "1,234,567"。"""
    return f"{number:,}"


def money(amount: int) -> str:
    return f"{format_number_with_commas(amount)} ({settings.CURRENCY_LABEL})"


def render_menu() -> str:
    return "\n" + "\n".join(MENU_LINES) + "\n"


def render_employee(e: Employee) -> str:
    lines: List[str] = [
        SEPARATOR,
        f"ID: {e.id}",
        f"Department's ID: {e.department_id}",
        f"Full name: {e.name}",
        f"Salary base: {money(e.salary_base)}",
        f"Number of working days: {e.working_days} (days)",
        f"Working performance: {e.working_performance:.1f}",
        f"Bonus: {money(e.bonus)}",
        f"Number of late working days: {e.late_coming_days} (days)",
        SEPARATOR,
    ]
    return "\n".join(lines)


def render_department(d: Department) -> str:
    return "\n".join([SEPARATOR, f"Department's ID: {d.id}", f"Department's bonus: {money(d.bonus_salary)}", SEPARATOR])


def render_payroll_line(line: PayrollLine) -> str:
    return "\n".join(["", SEPARATOR, f"ID: {line.employee_id}", f"Actual salary received: {money(line.net_salary)}", SEPARATOR])
