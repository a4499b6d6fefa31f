from __future__ import annotations

import logging

import pytest

from hrm_payroll.cli import build_parser
from hrm_payroll.errors import UnderflowError
from hrm_payroll.service import HRMService


def test_mutations_are_audited(service, employee_factory, caplog):
    caplog.set_level(logging.INFO, logger="hrm.audit")
    service.add_employee(employee_factory("E1", "D1"), 100, trace_id="t-1")
    service.delete_employee("E1")
    service.delete_department("D1")
    messages = [r.getMessage() for r in caplog.records if r.name == "hrm.audit"]
    assert any("created employee" in m and "trace_id=t-1" in m for m in messages)
    assert any("created department D1" in m for m in messages)
    assert any("deleted employee" in m for m in messages)
    assert any("deleted department D1" in m for m in messages)


def test_strict_service_raises_on_underflow(store, employee_factory):
    strict = HRMService(store, strict=True)
    strict.add_employee(employee_factory("E1", "D1", salary_base=0, bonus=0, late_coming_days=4), 0)
    with pytest.raises(UnderflowError):
        strict.payroll()
    assert HRMService(store, strict=False).payroll()[0].net_salary == 0


def test_health_counts(service, employee_factory):
    service.add_employee(employee_factory("E1", "D1"), 0)
    assert service.health()["employees"] == 1
    assert service.health()["departments"] == 1


def test_cli_parser():
    args = build_parser().parse_args(["serve", "--port", "9000", "--host", "127.0.0.1"])
    assert args.command == "serve" and args.port == 9000 and args.host == "127.0.0.1"
    assert build_parser().parse_args([]).command is None


def test_emptiness_checks_do_not_list(service, employee_factory, monkeypatch):
    assert service.has_employees() is False
    assert service.has_departments() is False
    service.add_employee(employee_factory("E1", "D1"), 100)

    def fail():
        raise AssertionError("emptiness check must not build a sorted listing")

    monkeypatch.setattr(service.store, "list_employees", fail)
    monkeypatch.setattr(service.store, "list_departments", fail)
    assert service.has_employees() is True
    assert service.has_departments() is True
    service.delete_employee("E1")
    assert service.has_employees() is False
    assert service.has_departments() is True
