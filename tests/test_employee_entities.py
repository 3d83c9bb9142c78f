import pytest

from app.domains.employees.entities import (
    AppState, Employee, EmployeeNotFoundError, InvalidStyleFieldError, StyleConfig,
    change_style, delete_employee, insert_placeholder, update_employee
)


def test_default_style():
    style = StyleConfig()

    assert style.cell_font_size == "18"
    assert style.cell_font_name == "Times New Roman"
    assert style.cell_color == "#71717a"
    assert style.header_color == "#18181b"
    assert style.is_italic is False
    assert style.is_bold is False


def test_insert_placeholder(initial_state):
    state = insert_placeholder(initial_state)
    added = state.employees[-1]

    assert added == Employee(6, "Employee 6", "01-01-2000", "Male", "$50000", "Java", "base")
    assert state.employees[:-1] == initial_state.employees
    assert len(initial_state.employees) == 5


def test_insert_placeholder_ids_stay_unique_after_delete(initial_state):
    state = delete_employee(initial_state, 2)
    state = insert_placeholder(state)

    ids = [e.id for e in state.employees]
    assert len(ids) == len(set(ids))
    assert ids[-1] == 6


def test_insert_placeholder_into_empty_list():
    state = insert_placeholder(AppState())

    assert state.employees == (Employee.placeholder(1),)


def test_update_employee_replaces_in_place(initial_state):
    updated = Employee(3, "Taras B.", "21-11-1988", "Male", "$35,000", "Go", "TOP")
    state = update_employee(initial_state, updated)

    assert state.employees[2] == updated
    assert [e.id for e in state.employees] == [1, 2, 3, 4, 5]
    assert initial_state.employees[2].name == "Taras Bondar"


def test_update_missing_employee(initial_state):
    with pytest.raises(EmployeeNotFoundError):
        update_employee(initial_state, Employee(42, "Nobody"))


def test_delete_employee(initial_state):
    state = delete_employee(initial_state, 1)

    assert [e.id for e in state.employees] == [2, 3, 4, 5]


def test_delete_missing_employee(initial_state):
    with pytest.raises(EmployeeNotFoundError):
        delete_employee(initial_state, 42)


@pytest.mark.parametrize("key,value", [
    ("cell_font_size", "24"),
    ("cell_font_name", "Arial"),
    ("cell_color", "#ff0000"),
    ("header_color", "#00ff00"),
    ("is_italic", True),
    ("is_bold", True),
])
def test_change_style(initial_state, key, value):
    state = change_style(initial_state, key, value)

    assert getattr(state.style, key) == value
    assert state.employees == initial_state.employees
    assert initial_state.style == StyleConfig()


@pytest.mark.parametrize("key,value", [
    ("font_weight", "bold"),
    ("is_bold", "yes"),
    ("cell_font_size", 24),
    ("cell_color", False),
])
def test_change_style_rejects_bad_input(initial_state, key, value):
    with pytest.raises(InvalidStyleFieldError):
        change_style(initial_state, key, value)


def test_app_state_value_equality(employees):
    assert AppState.create(employees) == AppState.create(list(employees))
    assert AppState.create(employees) != AppState.create(employees[:-1])
