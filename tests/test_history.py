import dataclasses

import pytest

from app.domains.employees.entities import (
    AppState, Employee, insert_placeholder, change_style, delete_employee
)
from app.domains.history.entities import HistoryManager


@pytest.fixture
def history(initial_state: AppState) -> HistoryManager:
    manager = HistoryManager(initial_state)
    manager.commit()
    return manager


def test_cursor_before_first_commit(initial_state):
    manager = HistoryManager(initial_state)

    assert manager.position == -1
    assert len(manager) == 0
    assert manager.get_current_state() == initial_state
    assert manager.undo() is None
    assert manager.redo() is None


def test_commit_appends_and_advances_cursor(history):
    history.apply(insert_placeholder)
    history.apply(lambda s: change_style(s, "is_bold", True))

    assert len(history) == 3
    assert history.position == 2
    assert history.get_current_state().style.is_bold is True
    assert len(history.get_current_state().employees) == 6


def test_set_current_state_does_not_touch_history(history, initial_state):
    changed = insert_placeholder(initial_state)
    history.set_current_state(changed)

    assert history.get_current_state() == changed
    assert len(history) == 1
    assert history.snapshots == (initial_state,)


@pytest.mark.parametrize("commits,undos", [(2, 1), (4, 3), (5, 2), (6, 5)])
def test_undo_then_redo_restores_pre_undo_state(initial_state, commits, undos):
    manager = HistoryManager(initial_state)
    manager.commit()
    for _ in range(commits - 1):
        manager.apply(insert_placeholder)

    before = manager.get_current_state()

    for _ in range(undos):
        assert manager.undo() is not None
    assert manager.get_current_state() != before

    for _ in range(undos):
        assert manager.redo() is not None

    assert manager.get_current_state() == before
    assert manager.position == commits - 1


def test_commit_after_undo_discards_redo(history):
    history.apply(insert_placeholder)
    history.apply(insert_placeholder)

    history.undo()
    history.apply(lambda s: delete_employee(s, 1))

    assert history.redo() is None
    assert history.can_redo is False
    assert len(history) == 3
    assert [e.id for e in history.get_current_state().employees] == [2, 3, 4, 5, 6]


def test_undo_at_start_is_noop(history, initial_state):
    assert history.undo() is None
    assert history.position == 0
    assert history.get_current_state() == initial_state


def test_redo_at_end_is_noop(history):
    state = history.apply(insert_placeholder)

    assert history.redo() is None
    assert history.position == 1
    assert history.get_current_state() == state


def test_reset_is_undoable(history, initial_state):
    edited = history.apply(insert_placeholder)

    assert history.reset() == initial_state
    assert len(history) == 3
    assert history.position == 2

    assert history.undo() == edited


def test_snapshots_cannot_be_altered_through_current_state(history, initial_state):
    current = history.get_current_state()

    with pytest.raises(dataclasses.FrozenInstanceError):
        current.style.is_bold = True
    with pytest.raises(dataclasses.FrozenInstanceError):
        current.employees[0].name = "Changed"
    with pytest.raises(AttributeError):
        current.employees.append(Employee(99))

    assert history.snapshots[0] == initial_state
    assert history.snapshots[0].employees[0].name == "Ivan Petrenko"


def test_can_undo_and_can_redo_flags(history):
    assert history.can_undo is False
    history.apply(insert_placeholder)
    assert history.can_undo is True
    history.undo()
    assert history.can_redo is True
