from fastapi import APIRouter, Depends, HTTPException, status, Query
from sqlalchemy.ext.asyncio import AsyncSession
from typing import Optional

from app.core.db import get_db
from app.domains.employees.schemas import (
    EmployeeCreate, EmployeeUpdate, EmployeeResponse, EmployeeListResponse
)
from app.domains.employees.services import EmployeeService

router = APIRouter(prefix="/employees", tags=["employees"])


@router.get("/", response_model=EmployeeListResponse)
async def list_employees(
    limit: Optional[int] = Query(None, ge=1, le=1000),
    offset: int = Query(0, ge=0),
    db: AsyncSession = Depends(get_db)
):
    """Получение списка сотрудников из хранилища"""
    employee_service = EmployeeService(db)

    employees = await employee_service.list_employees(limit=limit, offset=offset)
    total = await employee_service.count_employees()

    return EmployeeListResponse(
        employees=[EmployeeResponse.model_validate(e) for e in employees],
        total=total
    )


@router.post("/", response_model=EmployeeResponse, status_code=status.HTTP_201_CREATED)
async def create_employee(
    employee_data: EmployeeCreate,
    db: AsyncSession = Depends(get_db)
):
    """Создание нового сотрудника"""
    employee_service = EmployeeService(db)

    employee = await employee_service.create_employee(employee_data)

    return EmployeeResponse.model_validate(employee)


@router.get("/{employee_id}", response_model=EmployeeResponse)
async def get_employee(
    employee_id: int,
    db: AsyncSession = Depends(get_db)
):
    """Получение сотрудника по идентификатору"""
    employee_service = EmployeeService(db)

    employee = await employee_service.get_employee(employee_id)

    if not employee:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Employee not found"
        )

    return EmployeeResponse.model_validate(employee)


@router.put("/{employee_id}", response_model=EmployeeResponse)
async def update_employee(
    employee_id: int,
    update_data: EmployeeUpdate,
    db: AsyncSession = Depends(get_db)
):
    """Обновление сотрудника"""
    employee_service = EmployeeService(db)

    employee = await employee_service.update_employee(employee_id, update_data)

    if not employee:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Employee not found"
        )

    return EmployeeResponse.model_validate(employee)


@router.delete("/{employee_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_employee(
    employee_id: int,
    db: AsyncSession = Depends(get_db)
):
    """Удаление сотрудника"""
    employee_service = EmployeeService(db)

    success = await employee_service.delete_employee(employee_id)

    if not success:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Employee not found"
        )
