from pydantic import BaseModel
from typing import List
import uuid
from datetime import datetime

from app.domains.employees.schemas import EmployeeResponse, StyleResponse


class SessionStateResponse(BaseModel):
    """Схема для ответа с текущим снимком сессии редактирования"""
    session_id: uuid.UUID
    employees: List[EmployeeResponse]
    style: StyleResponse
    position: int
    history_length: int
    can_undo: bool
    can_redo: bool
    changed: bool = True
    last_activity: datetime
