from sqlalchemy.ext.asyncio import AsyncSession

from app.db.repositories.employee_repository import EmployeeRepository
from app.domains.employees.entities import Employee, StyleConfig
from app.domains.employees.schemas import EmployeeCreate, EmployeeUpdate
from app.domains.employees.services import EmployeeService


async def test_create_assigns_ids(db_session: AsyncSession):
    repo = EmployeeRepository(db_session)

    first = await repo.create(Employee(0, "Ivan", salary="$1"))
    second = await repo.create(Employee(0, "Olena"))

    assert first.id == 1
    assert second.id == 2
    assert await repo.count() == 2


async def test_list_all_ordered_by_id(db_session: AsyncSession, employees):
    repo = EmployeeRepository(db_session)
    for employee in employees:
        await repo.create(employee)

    stored = await repo.list_all()

    assert [e.name for e in stored] == [e.name for e in employees]
    assert stored == employees


async def test_update_and_delete(db_session: AsyncSession):
    repo = EmployeeRepository(db_session)
    created = await repo.create(Employee(0, "Ivan", gender="Male"))

    updated = await repo.update(Employee(created.id, "Ivan P.", gender="Male", importance="TOP"))
    assert updated.name == "Ivan P."
    assert updated.importance == "TOP"

    assert await repo.update(Employee(999, "Nobody")) is None

    assert await repo.delete(created.id) is True
    assert await repo.delete(created.id) is False
    assert await repo.get_by_id(created.id) is None


async def test_service_load_initial_state(db_session: AsyncSession):
    service = EmployeeService(db_session)
    await service.create_employee(EmployeeCreate(name="Ivan", salary="$50,000"))
    await service.create_employee(EmployeeCreate(name="Olena", gender="Female"))

    state = await service.load_initial_state()

    assert [e.name for e in state.employees] == ["Ivan", "Olena"]
    assert state.style == StyleConfig()


async def test_service_update_employee(db_session: AsyncSession):
    service = EmployeeService(db_session)
    created = await service.create_employee(EmployeeCreate(name="Ivan"))

    updated = await service.update_employee(created.id, EmployeeUpdate(
        name=" Ivan Petrenko ", birthday="12-03-1990", salary="$50,000", prog_lang="Java"
    ))

    assert updated.name == "Ivan Petrenko"
    assert updated.gender is None
