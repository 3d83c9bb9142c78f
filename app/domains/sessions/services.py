import logging
from datetime import datetime, timezone
from functools import partial
from typing import Optional, Union

from app.domains.employees.entities import (
    Employee, insert_placeholder, update_employee, delete_employee, change_style
)
from app.domains.reports.services import create_report, generate_report, report_filename
from app.domains.sessions.entities import ActionResult, EditingSession

logger = logging.getLogger(__name__)


class SessionService:
    """Сервис действий пользователя в сессии редактирования.

    Каждое изменяющее действие применяется к живому состоянию и фиксируется
    в истории сессии; отмена и повтор только перемещают курсор.
    """

    def __init__(self, editing_session: EditingSession):
        self.editing_session = editing_session
        self.history = editing_session.history

    def _apply(self, change, action: str) -> ActionResult:
        state = self.history.apply(change)
        self.editing_session.update_activity()
        logger.info(
            f"Session {self.editing_session.uuid}: {action} committed at position {self.history.position}"
        )
        return ActionResult(state)

    def current_state(self) -> ActionResult:
        return ActionResult(self.history.get_current_state(), changed=False)

    def insert_employee(self) -> ActionResult:
        """Добавление сотрудника-заготовки"""
        return self._apply(insert_placeholder, "insert")

    def update_employee(self, employee: Employee) -> ActionResult:
        """Замена записи сотрудника; EmployeeNotFoundError, если записи нет"""
        return self._apply(partial(update_employee, updated=employee), f"update employee {employee.id}")

    def delete_employee(self, employee_id: int) -> ActionResult:
        """Удаление сотрудника; EmployeeNotFoundError, если записи нет"""
        return self._apply(partial(delete_employee, employee_id=employee_id), f"delete employee {employee_id}")

    def change_style(self, key: str, value: Union[str, bool]) -> ActionResult:
        """Изменение поля стиля; InvalidStyleFieldError при неверном ключе или типе"""
        return self._apply(partial(change_style, key=key, value=value), f"style {key}")

    def undo(self) -> ActionResult:
        """Отмена последнего действия"""
        state = self.history.undo()
        self.editing_session.update_activity()
        if state is None:
            logger.info(f"Session {self.editing_session.uuid}: nothing to undo")
            return ActionResult(self.history.get_current_state(), changed=False)
        return ActionResult(state)

    def redo(self) -> ActionResult:
        """Повтор отмененного действия"""
        state = self.history.redo()
        self.editing_session.update_activity()
        if state is None:
            logger.info(f"Session {self.editing_session.uuid}: nothing to redo")
            return ActionResult(self.history.get_current_state(), changed=False)
        return ActionResult(state)

    def reset(self) -> ActionResult:
        """Возврат к исходным данным (отменяемое действие)"""
        state = self.history.reset()
        self.editing_session.update_activity()
        logger.info(f"Session {self.editing_session.uuid}: reset to initial state")
        return ActionResult(state)

    def generate_report(
        self,
        kind: str,
        filter_field: Optional[str] = None,
        filter_value: Optional[str] = None,
        author: Optional[str] = None
    ) -> dict:
        """Формирование отчета по текущему состоянию; ReportError при неверных параметрах"""
        variant = create_report(kind, filter_field, filter_value)
        employees = self.history.get_current_state().employees

        content = generate_report(variant, employees, author)
        logger.info(
            f"Session {self.editing_session.uuid}: {variant.kind.value} report generated for {len(employees)} employees"
        )

        return {
            "kind": variant.kind.value,
            "filename": report_filename(variant.kind.value),
            "content": content,
            "generated_at": datetime.now(timezone.utc)
        }
