"""
工资计算单元测试：迟到罚款、扣除、税档边界、向零截断、下溢处理。
"""
from __future__ import annotations

import logging

import pytest

from hrm_payroll.errors import UnderflowError
from hrm_payroll.payroll import breakdown, compute_net_salary, late_penalty, tax_for


def test_reference_example(employee_factory):
    e = employee_factory(salary_base=1_000_000, working_days=20, working_performance=1.0, bonus=500_000, late_coming_days=0)
    b = breakdown(e, 200_000)
    assert b.income_without_bonus == 20_000_000
    assert b.total_income == 20_700_000
    assert b.income_after_deduction == 18_526_500
    assert b.tax == 1_852_650
    assert b.net_salary == 16_673_850
    assert b.clamped is False
    assert compute_net_salary(e, 200_000) == 16_673_850


def test_late_penalty_threshold():
    assert late_penalty(0) == 0
    assert late_penalty(3) == 30_000
    # 超过 3 天后所有天数按高档计
    assert late_penalty(4) == 80_000


@pytest.mark.parametrize(
    "amount, tax",
    [
        (0, 0),
        (11_000_000, 0),
        (11_000_001, 550_000),
        (16_000_000, 800_000),
        (16_000_001, 1_600_000),
    ],
)
def test_tax_brackets(amount, tax):
    assert tax_for(amount) == tax


def _single_term(employee_factory, total_income):
    # 只让 salary_base 贡献收入，便于构造指定的 total_income
    return employee_factory(salary_base=total_income, working_days=1, working_performance=1.0, bonus=0, late_coming_days=0)


def test_exactly_eleven_million_after_deduction_is_tax_free(employee_factory):
    b = breakdown(_single_term(employee_factory, 12_290_503), 0)
    assert b.income_after_deduction == 11_000_000
    assert b.tax == 0
    assert b.net_salary == 11_000_000


def test_just_above_eleven_million_uses_five_percent(employee_factory):
    b = breakdown(_single_term(employee_factory, 12_290_504), 0)
    assert b.income_after_deduction == 11_000_001
    assert b.tax == 550_000
    assert b.net_salary == 10_450_001


def test_exactly_sixteen_million_after_deduction_uses_five_percent(employee_factory):
    b = breakdown(_single_term(employee_factory, 17_877_095), 0)
    assert b.income_after_deduction == 16_000_000
    assert b.tax == 800_000
    assert b.net_salary == 15_200_000


def test_above_sixteen_million_uses_ten_percent(employee_factory):
    b = breakdown(_single_term(employee_factory, 17_877_097), 0)
    assert b.income_after_deduction == 16_000_001
    assert b.tax == 1_600_000
    assert b.net_salary == 14_400_001


def test_performance_product_truncates_toward_zero(employee_factory):
    e = employee_factory(salary_base=333, working_days=1, working_performance=1.5, bonus=0)
    assert breakdown(e, 0).income_without_bonus == 499


def test_performance_uses_decimal_value(employee_factory):
    e = employee_factory(salary_base=100, working_days=3, working_performance=0.7, bonus=0)
    assert breakdown(e, 0).income_without_bonus == 210


def test_underflow_clamps_to_zero_by_default(employee_factory):
    e = employee_factory(salary_base=0, working_days=0, bonus=0, late_coming_days=5)
    b = breakdown(e, 0)
    assert b.late_penalty == 100_000
    assert b.total_income == 0
    assert b.net_salary == 0
    assert b.clamped is True


def test_underflow_strict_raises(employee_factory):
    e = employee_factory(salary_base=0, working_days=0, bonus=20_000, late_coming_days=5)
    with pytest.raises(UnderflowError) as exc:
        compute_net_salary(e, 0, strict=True)
    assert exc.value.shortfall == 80_000
    assert exc.value.code == "PAYROLL_UNDERFLOW"


def test_penalty_reduces_income(employee_factory):
    e = employee_factory(salary_base=1_000_000, working_days=10, bonus=0, late_coming_days=2)
    b = breakdown(e, 0)
    assert b.total_income == 10_000_000 - 20_000
    assert b.income_after_deduction == 8_932_100
    assert b.net_salary == 8_932_100


def test_large_amounts_truncate_exactly(employee_factory):
    e = employee_factory(salary_base=999_999_999_999_999_999, working_days=1, working_performance=1.000000000000001, bonus=0)
    b = breakdown(e, 0)
    assert b.income_without_bonus == 1_000_000_000_000_000_998
    assert b.income_after_deduction == b.total_income * 895 // 1000


def test_underflow_warning_logged_on_payroll_logger(employee_factory, caplog):
    caplog.set_level(logging.WARNING, logger="hrm.payroll")
    e = employee_factory(salary_base=0, working_days=0, bonus=20_000, late_coming_days=5)
    assert compute_net_salary(e, 0) == 0
    records = [r for r in caplog.records if "underflow" in r.getMessage()]
    assert records
    assert all(r.name == "hrm.payroll" and r.levelno == logging.WARNING for r in records)
