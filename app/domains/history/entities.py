from typing import List, Optional, Tuple

from app.domains.employees.entities import AppState, StateChange


class HistoryManager:
    """История снимков состояния с линейной отменой и повтором.

    Хранит исходное состояние, текущее (живое) состояние, список
    зафиксированных снимков и курсор. До первой фиксации курсор равен -1,
    после нее всегда указывает на существующий снимок.
    """

    def __init__(self, initial_state: AppState):
        self.initial_state = initial_state
        self._current_state = initial_state
        self._snapshots: List[AppState] = []
        self._cursor = -1

    def set_current_state(self, state: AppState) -> None:
        """Замена живого состояния без записи в историю"""
        self._current_state = state

    def get_current_state(self) -> AppState:
        """Получение живого состояния"""
        return self._current_state

    def commit(self) -> AppState:
        """Фиксация живого состояния как нового снимка.

        Снимки после курсора отбрасываются безвозвратно.
        """
        del self._snapshots[self._cursor + 1:]
        self._snapshots.append(self._current_state)
        self._cursor = len(self._snapshots) - 1
        return self._current_state

    def apply(self, change: StateChange) -> AppState:
        """Применение изменения к живому состоянию с последующей фиксацией"""
        self.set_current_state(change(self._current_state))
        return self.commit()

    def undo(self) -> Optional[AppState]:
        """Шаг назад по истории; None, если отменять нечего"""
        if self._cursor <= 0:
            return None

        self._cursor -= 1
        self._current_state = self._snapshots[self._cursor]
        return self._current_state

    def redo(self) -> Optional[AppState]:
        """Шаг вперед по истории; None, если повторять нечего"""
        if self._cursor >= len(self._snapshots) - 1:
            return None

        self._cursor += 1
        self._current_state = self._snapshots[self._cursor]
        return self._current_state

    def reset(self) -> AppState:
        """Возврат к исходному состоянию как новое действие в истории"""
        self.set_current_state(self.initial_state)
        return self.commit()

    @property
    def position(self) -> int:
        return self._cursor

    @property
    def can_undo(self) -> bool:
        return self._cursor > 0

    @property
    def can_redo(self) -> bool:
        return self._cursor < len(self._snapshots) - 1

    @property
    def snapshots(self) -> Tuple[AppState, ...]:
        return tuple(self._snapshots)

    def __len__(self) -> int:
        return len(self._snapshots)

    def __repr__(self) -> str:
        return f"HistoryManager(position={self._cursor}, snapshots={len(self._snapshots)})"
