"""
控制台菜单：七条命令，每条命令同步调用服务层后展示结果并暂停。
核心层错误（HRMError）打印消息后回到菜单，不终止进程；非法选项重新提示。
"""
from __future__ import annotations

import logging
import sys
from typing import Callable, Dict, Optional

from .config import settings
from .errors import HRMError
from .formatting import SEPARATOR, render_department, render_employee, render_menu, render_payroll_line
from .input_handler import InputHandler
from .models import Employee
from .service import HRMService

logger = logging.getLogger("hrm.console")

EXIT_CHOICE = "7"


class Console:
    def __init__(self, service: HRMService, io: Optional[InputHandler] = None, clear: Optional[bool] = None) -> None:
        self.service = service
        self.io = io or InputHandler()
        if clear is None:
            clear = settings.CLEAR_SCREEN and sys.stdout.isatty()
        self.clear = clear
        self.commands: Dict[str, Callable[[], None]] = {
            "1": self.show_employees,
            "2": self.show_departments,
            "3": self.add_employee,
            "4": self.delete_employee,
            "5": self.delete_department,
            "6": self.show_payroll,
        }

    def out(self, text: str) -> None:
        self.io.write(text)

    def run(self) -> int:
        try:
            while True:
                self.out(render_menu())
                choice = self.io.ask_choice("Please select your desired function: ")
                self.out("---------------------------------")
                if choice == EXIT_CHOICE:
                    self.out("Exit program.")
                    return 0
                self.dispatch(choice)
                self.io.pause(self.clear)
        except (EOFError, KeyboardInterrupt):
            self.out("\nExit program.")
            return 0

    def dispatch(self, choice: str) -> None:
        command = self.commands.get(choice)
        if command is None:
            self.out("Input is not valid. Please enter again!!!")
            return
        try:
            command()
        except HRMError as e:
            logger.info("command %s rejected: %s %s", choice, e.code, e.details)
            self.out(e.message)

    # 1
    def show_employees(self) -> None:
        employees = self.service.list_employees()
        if not employees:
            self.out("No employees to show!!!")
            return
        for e in employees:
            self.out(render_employee(e))

    # 2
    def show_departments(self) -> None:
        departments = self.service.list_departments()
        if not departments:
            self.out("No department to show!!!")
            return
        for d in departments:
            self.out(render_department(d))

    # 3
    def add_employee(self) -> None:
        self.out("Adding new employee . . . ")
        while True:
            employee_id = self.io.ask_text("Enter ID: ")
            if not self.service.has_employee(employee_id):
                break
            self.out("\nID already exists!!!\n")
            self.out("Please enter another ID again.")
        department_id = self.io.ask_text("Enter department's ID: ")
        name = self.io.ask_text("Enter your full name: ")
        employee = Employee(
            id=employee_id,
            name=name,
            department_id=department_id,
            salary_base=self.io.ask_whole_number("Enter salary base: "),
            working_days=self.io.ask_whole_number("Enter number of working days: "),
            working_performance=self.io.ask_positive_float("Enter working performance: "),
            bonus=self.io.ask_whole_number("Enter bonus: "),
            late_coming_days=self.io.ask_whole_number("Enter number of late coming days: "),
        )
        department_bonus = None
        if not self.service.has_department(department_id):
            self.out("Department's ID does not exist, create a new one ...")
            department_bonus = self.io.ask_whole_number("Enter department's bonus: ")
        _, created = self.service.add_employee(employee, department_bonus)
        self.out(SEPARATOR)
        if created is not None:
            self.out("Created new department ...")
        self.out("Added new employee ...")

    # 4
    def delete_employee(self) -> None:
        if not self.service.has_employees():
            self.out("No employee to delete!!!")
            return
        employee_id = self.io.ask_text("Input employee's ID which you want to delete: ")
        self.service.delete_employee(employee_id)
        self.out("Deleted successfully . . .")

    # 5
    def delete_department(self) -> None:
        if not self.service.has_departments():
            self.out("No department to delete!!!")
            return
        department_id = self.io.ask_text("Input department's ID which you want to delete: ")
        self.service.delete_department(department_id)
        self.out("Deleted department successfully ...")

    # 6
    def show_payroll(self) -> None:
        lines = self.service.payroll()
        if not lines:
            self.out("No employee to show payroll!!!")
            return
        for line in lines:
            self.out(render_payroll_line(line))
