from pydantic import BaseModel, Field, field_validator, ConfigDict
from typing import Optional, List, Union

from app.domains.employees.entities import Employee, StyleConfig


class EmployeeBase(BaseModel):
    """Базовая схема сотрудника"""
    name: Optional[str] = Field(None, max_length=256)
    birthday: Optional[str] = Field(None, max_length=256)
    gender: Optional[str] = Field(None, max_length=256)
    salary: Optional[str] = Field(None, max_length=256)
    prog_lang: Optional[str] = Field(None, max_length=256)
    importance: Optional[str] = Field(None, max_length=256)


class EmployeeCreate(EmployeeBase):
    """Схема для создания сотрудника в хранилище"""
    pass


class EmployeeUpdate(EmployeeBase):
    """Схема для полной замены записи сотрудника"""
    name: str = Field(..., max_length=256)
    birthday: str = Field(..., max_length=256)
    salary: str = Field(..., max_length=256)
    prog_lang: str = Field(..., max_length=256)

    @field_validator('name', 'birthday', 'salary', 'prog_lang')
    @classmethod
    def validate_required(cls, v, info):
        if not v.strip():
            raise ValueError(f'{info.field_name} cannot be empty')
        return v.strip()

    def to_entity(self, employee_id: int) -> Employee:
        return Employee(id=employee_id, **self.model_dump())


class EmployeeResponse(EmployeeBase):
    """Схема для ответа с данными сотрудника"""
    id: int

    model_config = ConfigDict(from_attributes=True)


class EmployeeListResponse(BaseModel):
    """Схема для списка сотрудников"""
    employees: List[EmployeeResponse]
    total: int


class StyleResponse(BaseModel):
    """Схема стиля таблицы"""
    cell_font_size: str
    cell_font_name: str
    cell_color: str
    header_color: str
    is_italic: bool
    is_bold: bool

    model_config = ConfigDict(from_attributes=True)


class StyleChangeRequest(BaseModel):
    """Схема для изменения одного поля стиля"""
    key: str = Field(..., pattern="^(" + "|".join(StyleConfig.field_names()) + ")$")
    value: Union[bool, str]
