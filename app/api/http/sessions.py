from fastapi import APIRouter, Depends, HTTPException, status
from fastapi.responses import PlainTextResponse
from sqlalchemy.ext.asyncio import AsyncSession
from typing import Optional
import uuid

from app.core.config import settings
from app.core.db import get_db
from app.domains.employees.entities import EmployeeNotFoundError, InvalidStyleFieldError
from app.domains.employees.schemas import (
    EmployeeResponse, EmployeeUpdate, StyleChangeRequest, StyleResponse
)
from app.domains.employees.services import EmployeeService
from app.domains.reports.entities import ReportError
from app.domains.reports.schemas import ReportRequest, ReportResponse
from app.domains.sessions.entities import ActionResult, EditingSession, SessionRegistry
from app.domains.sessions.schemas import SessionStateResponse
from app.domains.sessions.services import SessionService

router = APIRouter(prefix="/sessions", tags=["sessions"])

# Активные сессии редактирования живут в памяти процесса
registry = SessionRegistry(ttl_minutes=settings.session_ttl_minutes)


def get_session_registry() -> SessionRegistry:
    return registry


def get_editing_session(
    session_id: uuid.UUID,
    sessions: SessionRegistry = Depends(get_session_registry)
) -> EditingSession:
    editing_session = sessions.get(session_id)

    if not editing_session:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Session not found"
        )

    return editing_session


def _state_response(editing_session: EditingSession, result: ActionResult) -> SessionStateResponse:
    history = editing_session.history

    return SessionStateResponse(
        session_id=editing_session.uuid,
        employees=[EmployeeResponse.model_validate(e) for e in result.state.employees],
        style=StyleResponse.model_validate(result.state.style),
        position=history.position,
        history_length=len(history),
        can_undo=history.can_undo,
        can_redo=history.can_redo,
        changed=result.changed,
        last_activity=editing_session.last_activity
    )


@router.post("/", response_model=SessionStateResponse, status_code=status.HTTP_201_CREATED)
async def open_session(
    db: AsyncSession = Depends(get_db),
    sessions: SessionRegistry = Depends(get_session_registry)
):
    """Открытие сессии редактирования с данными из хранилища"""
    employee_service = EmployeeService(db)

    initial_state = await employee_service.load_initial_state()
    editing_session = sessions.open(initial_state)

    return _state_response(editing_session, ActionResult(initial_state))


@router.get("/{session_id}", response_model=SessionStateResponse)
async def get_session_state(editing_session: EditingSession = Depends(get_editing_session)):
    """Текущий снимок сессии"""
    return _state_response(editing_session, SessionService(editing_session).current_state())


@router.delete("/{session_id}", status_code=status.HTTP_204_NO_CONTENT)
async def close_session(
    session_id: uuid.UUID,
    sessions: SessionRegistry = Depends(get_session_registry)
):
    """Закрытие сессии редактирования"""
    if not sessions.close(session_id):
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Session not found"
        )


@router.post("/{session_id}/employees", response_model=SessionStateResponse)
async def insert_employee(editing_session: EditingSession = Depends(get_editing_session)):
    """Добавление сотрудника-заготовки"""
    result = SessionService(editing_session).insert_employee()
    return _state_response(editing_session, result)


@router.put("/{session_id}/employees/{employee_id}", response_model=SessionStateResponse)
async def update_employee(
    employee_id: int,
    update_data: EmployeeUpdate,
    editing_session: EditingSession = Depends(get_editing_session)
):
    """Замена записи сотрудника в сессии"""
    try:
        result = SessionService(editing_session).update_employee(update_data.to_entity(employee_id))
    except EmployeeNotFoundError as e:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=str(e)
        )

    return _state_response(editing_session, result)


@router.delete("/{session_id}/employees/{employee_id}", response_model=SessionStateResponse)
async def delete_employee(
    employee_id: int,
    editing_session: EditingSession = Depends(get_editing_session)
):
    """Удаление сотрудника в сессии"""
    try:
        result = SessionService(editing_session).delete_employee(employee_id)
    except EmployeeNotFoundError as e:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=str(e)
        )

    return _state_response(editing_session, result)


@router.patch("/{session_id}/style", response_model=SessionStateResponse)
async def change_style(
    style_change: StyleChangeRequest,
    editing_session: EditingSession = Depends(get_editing_session)
):
    """Изменение одного поля стиля таблицы"""
    try:
        result = SessionService(editing_session).change_style(style_change.key, style_change.value)
    except InvalidStyleFieldError as e:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=str(e)
        )

    return _state_response(editing_session, result)


@router.post("/{session_id}/undo", response_model=SessionStateResponse)
async def undo(editing_session: EditingSession = Depends(get_editing_session)):
    """Отмена последнего действия"""
    return _state_response(editing_session, SessionService(editing_session).undo())


@router.post("/{session_id}/redo", response_model=SessionStateResponse)
async def redo(editing_session: EditingSession = Depends(get_editing_session)):
    """Повтор отмененного действия"""
    return _state_response(editing_session, SessionService(editing_session).redo())


@router.post("/{session_id}/reset", response_model=SessionStateResponse)
async def reset(editing_session: EditingSession = Depends(get_editing_session)):
    """Возврат к исходным данным"""
    return _state_response(editing_session, SessionService(editing_session).reset())


@router.post("/{session_id}/reports", response_model=ReportResponse)
async def generate_report(
    report_request: ReportRequest,
    editing_session: EditingSession = Depends(get_editing_session)
):
    """Формирование отчета по текущему состоянию сессии"""
    try:
        report = SessionService(editing_session).generate_report(
            report_request.kind,
            report_request.filter_field,
            report_request.filter_value,
            report_request.author
        )
    except ReportError as e:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=str(e)
        )

    return ReportResponse(**report)


@router.get("/{session_id}/reports/{kind}/download", response_class=PlainTextResponse)
async def download_report(
    kind: str,
    filter_field: Optional[str] = None,
    filter_value: Optional[str] = None,
    author: Optional[str] = None,
    editing_session: EditingSession = Depends(get_editing_session)
):
    """Отчет в виде текстового файла для скачивания"""
    try:
        report = SessionService(editing_session).generate_report(kind, filter_field, filter_value, author)
    except ReportError as e:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=str(e)
        )

    return PlainTextResponse(
        report["content"],
        headers={"Content-Disposition": f'attachment; filename="{report["filename"]}"'}
    )
