from app.db.models.employee import Employee

__all__ = [
    "Employee"
]
