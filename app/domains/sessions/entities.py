import logging
import uuid
from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from typing import Dict, List, Optional

from app.domains.employees.entities import AppState
from app.domains.history.entities import HistoryManager

logger = logging.getLogger(__name__)


def _now() -> datetime:
    return datetime.now(timezone.utc)


@dataclass(frozen=True)
class ActionResult:
    """Состояние после действия; changed=False для отмены/повтора на границе истории"""
    state: AppState
    changed: bool = True


class EditingSession:
    """Сессия редактирования таблицы одним клиентом"""

    def __init__(self, history: HistoryManager):
        self.uuid = uuid.uuid4()
        self.history = history
        self.created_at = _now()
        self.last_activity = self.created_at

    def update_activity(self) -> None:
        """Обновление времени последней активности"""
        self.last_activity = _now()

    def is_expired(self, ttl: timedelta, now: Optional[datetime] = None) -> bool:
        return (now or _now()) - self.last_activity > ttl

    def __repr__(self) -> str:
        return f"EditingSession(uuid={self.uuid}, history={self.history!r})"


class SessionRegistry:
    """Хранилище активных сессий редактирования в памяти процесса"""

    def __init__(self, ttl_minutes: int = 120):
        self.ttl = timedelta(minutes=ttl_minutes)
        self._sessions: Dict[uuid.UUID, EditingSession] = {}

    def open(self, initial_state: AppState) -> EditingSession:
        """Создание сессии; исходное состояние сразу фиксируется в истории"""
        self.cleanup_inactive()

        history = HistoryManager(initial_state)
        history.commit()

        session = EditingSession(history)
        self._sessions[session.uuid] = session
        logger.info(
            f"Editing session {session.uuid} opened with {len(initial_state.employees)} employees"
        )
        return session

    def get(self, session_id: uuid.UUID) -> Optional[EditingSession]:
        return self._sessions.get(session_id)

    def close(self, session_id: uuid.UUID) -> bool:
        session = self._sessions.pop(session_id, None)
        if session is None:
            return False

        logger.info(f"Editing session {session_id} closed")
        return True

    def cleanup_inactive(self) -> int:
        """Удаление сессий, неактивных дольше ttl"""
        now = _now()
        expired: List[uuid.UUID] = [
            sid for sid, session in self._sessions.items()
            if session.is_expired(self.ttl, now)
        ]

        for session_id in expired:
            del self._sessions[session_id]

        if expired:
            logger.info(f"Removed {len(expired)} inactive editing sessions")
        return len(expired)

    def clear(self) -> None:
        self._sessions.clear()

    def __len__(self) -> int:
        return len(self._sessions)
