import logging
from typing import Optional, List
from sqlalchemy.ext.asyncio import AsyncSession

from app.db.repositories.employee_repository import EmployeeRepository
from app.domains.employees.entities import AppState, Employee, StyleConfig
from app.domains.employees.schemas import EmployeeCreate, EmployeeUpdate

logger = logging.getLogger(__name__)


class EmployeeService:
    """Сервис для работы с хранилищем сотрудников"""

    def __init__(self, session: AsyncSession):
        self.session = session
        self.employee_repository = EmployeeRepository(session)

    async def list_employees(self, limit: Optional[int] = None, offset: int = 0) -> List[Employee]:
        """Получение списка сотрудников"""
        return await self.employee_repository.list_all(limit, offset)

    async def count_employees(self) -> int:
        return await self.employee_repository.count()

    async def get_employee(self, employee_id: int) -> Optional[Employee]:
        """Получение сотрудника по идентификатору"""
        return await self.employee_repository.get_by_id(employee_id)

    async def create_employee(self, employee_data: EmployeeCreate) -> Employee:
        """Создание нового сотрудника"""
        employee = await self.employee_repository.create(
            Employee(id=0, **employee_data.model_dump())
        )
        logger.info(f"Employee {employee.id} created")
        return employee

    async def update_employee(self, employee_id: int, update_data: EmployeeUpdate) -> Optional[Employee]:
        """Полная замена данных сотрудника"""
        employee = await self.employee_repository.update(update_data.to_entity(employee_id))
        if employee:
            logger.info(f"Employee {employee_id} updated")
        return employee

    async def delete_employee(self, employee_id: int) -> bool:
        """Удаление сотрудника"""
        deleted = await self.employee_repository.delete(employee_id)
        if deleted:
            logger.info(f"Employee {employee_id} deleted")
        return deleted

    async def load_initial_state(self) -> AppState:
        """Исходное состояние редактора: все сотрудники и стиль по умолчанию"""
        employees = await self.employee_repository.list_all()
        return AppState.create(employees, StyleConfig())
