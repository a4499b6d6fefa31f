# HTTP 入口：hrm_payroll.api.app:app
