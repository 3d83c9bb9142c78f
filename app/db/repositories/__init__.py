from app.db.repositories.employee_repository import EmployeeRepository

__all__ = [
    "EmployeeRepository"
]
