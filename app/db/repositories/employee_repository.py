from typing import Optional, List, TYPE_CHECKING
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy import select, update, delete, func

from app.db.models.employee import Employee as EmployeeModel

if TYPE_CHECKING:
    from app.domains.employees.entities import Employee


class EmployeeRepository:
    """Репозиторий для работы с сотрудниками"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def create(self, employee: "Employee") -> "Employee":
        """Создание нового сотрудника; идентификатор назначает база"""
        db_employee = EmployeeModel(
            name=employee.name,
            birthday=employee.birthday,
            gender=employee.gender,
            salary=employee.salary,
            prog_lang=employee.prog_lang,
            importance=employee.importance
        )

        self.session.add(db_employee)
        await self.session.commit()
        await self.session.refresh(db_employee)
        return self._to_domain(db_employee)

    async def get_by_id(self, employee_id: int) -> Optional["Employee"]:
        """Получение сотрудника по идентификатору"""
        result = await self.session.execute(
            select(EmployeeModel).where(EmployeeModel.id == employee_id)
        )
        db_employee = result.scalar_one_or_none()
        return self._to_domain(db_employee) if db_employee else None

    async def list_all(self, limit: Optional[int] = None, offset: int = 0) -> List["Employee"]:
        """Получение списка сотрудников в порядке идентификаторов"""
        query = select(EmployeeModel).order_by(EmployeeModel.id).offset(offset)
        if limit is not None:
            query = query.limit(limit)

        result = await self.session.execute(query)
        return [self._to_domain(e) for e in result.scalars().all()]

    async def update(self, employee: "Employee") -> Optional["Employee"]:
        """Обновление сотрудника"""
        stmt = (
            update(EmployeeModel)
            .where(EmployeeModel.id == employee.id)
            .values(
                name=employee.name,
                birthday=employee.birthday,
                gender=employee.gender,
                salary=employee.salary,
                prog_lang=employee.prog_lang,
                importance=employee.importance
            )
        )

        result = await self.session.execute(stmt)
        await self.session.commit()

        if result.rowcount == 0:
            return None
        return await self.get_by_id(employee.id)

    async def delete(self, employee_id: int) -> bool:
        """Удаление сотрудника"""
        stmt = delete(EmployeeModel).where(EmployeeModel.id == employee_id)
        result = await self.session.execute(stmt)
        await self.session.commit()
        return result.rowcount > 0

    async def count(self) -> int:
        """Подсчет количества сотрудников"""
        result = await self.session.execute(select(func.count(EmployeeModel.id)))
        return result.scalar()

    def _to_domain(self, db_employee: EmployeeModel) -> "Employee":
        """Преобразование модели БД в доменную сущность"""
        from app.domains.employees.entities import Employee

        return Employee(
            id=db_employee.id,
            name=db_employee.name,
            birthday=db_employee.birthday,
            gender=db_employee.gender,
            salary=db_employee.salary,
            prog_lang=db_employee.prog_lang,
            importance=db_employee.importance
        )
