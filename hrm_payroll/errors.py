"""
HRM 错误码：统一 code / message / details，HTTP 层按 status_code 映射为统一错误体。
所有错误在展示层均可恢复：控制台打印 message 后回到菜单，API 返回 {code, message, details, requestId}。
"""
from __future__ import annotations


class HRMError(Exception):
    code = "ERROR"
    status_code = 400

    def __init__(self, message: str, details: str = "") -> None:
        super().__init__(message)
        self.message = message
        self.details = details

    def to_dict(self, request_id: str = "") -> dict:
        return {"code": self.code, "message": self.message, "details": self.details, "requestId": request_id}


class DuplicateIdError(HRMError):
    code = "DUPLICATE_ID"
    status_code = 409

    def __init__(self, employee_id: str) -> None:
        super().__init__("ID already exists!!!", f"employeeId={employee_id}")
        self.employee_id = employee_id


class NotFoundError(HRMError):
    code = "NOT_FOUND"
    status_code = 404

    def __init__(self, kind: str, record_id: str) -> None:
        super().__init__(f"No {kind} has ID {record_id}", f"{kind}Id={record_id}")
        self.kind = kind
        self.record_id = record_id


class DepartmentHasEmployeesError(HRMError):
    code = "DEPARTMENT_HAS_EMPLOYEES"
    status_code = 409

    def __init__(self, department_id: str, employee_count: int) -> None:
        super().__init__(
            "You cannot delete a department that has employees",
            f"departmentId={department_id} employees={employee_count}",
        )
        self.department_id = department_id
        self.employee_count = employee_count


class EmptyCollectionError(HRMError):
    """空集合：在按 ID 查找之前返回，与 NotFoundError 区分。"""

    code = "EMPTY_COLLECTION"
    status_code = 404

    def __init__(self, kind: str) -> None:
        super().__init__(f"No {kind} to delete!!!", f"collection={kind}")
        self.kind = kind


class DepartmentBonusRequiredError(HRMError):
    code = "DEPARTMENT_BONUS_REQUIRED"
    status_code = 422

    def __init__(self, department_id: str) -> None:
        super().__init__(
            "Department's ID does not exist, a department bonus is required to create it",
            f"departmentId={department_id}",
        )
        self.department_id = department_id


class UnderflowError(HRMError):
    code = "PAYROLL_UNDERFLOW"
    status_code = 422

    def __init__(self, employee_id: str, shortfall: int) -> None:
        super().__init__(
            f"Late-coming penalty exceeds the income of employee {employee_id}",
            f"shortfall={shortfall}",
        )
        self.employee_id = employee_id
        self.shortfall = shortfall


class InvalidRecordError(HRMError, ValueError):
    code = "INVALID_RECORD"
    status_code = 422

    def __init__(self, field: str, reason: str) -> None:
        super().__init__(f"{field} {reason}", f"field={field}")
        self.field = field
