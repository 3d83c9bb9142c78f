from app.domains.employees.entities import (
    Employee, StyleConfig, AppState, EmployeeNotFoundError, InvalidStyleFieldError,
    insert_placeholder, update_employee, delete_employee, change_style
)
from app.domains.employees.schemas import (
    EmployeeBase, EmployeeCreate, EmployeeUpdate, EmployeeResponse,
    EmployeeListResponse, StyleResponse, StyleChangeRequest
)
from app.domains.employees.services import EmployeeService

__all__ = [
    "Employee", "StyleConfig", "AppState", "EmployeeNotFoundError", "InvalidStyleFieldError",
    "insert_placeholder", "update_employee", "delete_employee", "change_style",
    "EmployeeBase", "EmployeeCreate", "EmployeeUpdate", "EmployeeResponse",
    "EmployeeListResponse", "StyleResponse", "StyleChangeRequest",
    "EmployeeService"
]
