from dataclasses import dataclass, field, fields, replace
from typing import Callable, Iterable, Optional, Tuple, Union


GENDER_OPTIONS = ("Male", "Female")
IMPORTANCE_OPTIONS = ("base", "middle", "TOP")
PROG_LANG_OPTIONS = ("Java", "Python", "PHP", ".NET", "JS", "C++")
FONT_OPTIONS = ("Arial", "Times New Roman", "Courier New")


class EmployeeNotFoundError(LookupError):
    """Сотрудник с указанным идентификатором отсутствует в снимке"""

    def __init__(self, employee_id: int):
        super().__init__(f"Employee {employee_id} not found")
        self.employee_id = employee_id


class InvalidStyleFieldError(ValueError):
    """Неизвестное поле стиля или значение неверного типа"""


@dataclass(frozen=True)
class Employee:
    """Запись о сотруднике (неизменяемая)"""
    id: int
    name: Optional[str] = None
    birthday: Optional[str] = None
    gender: Optional[str] = None
    salary: Optional[str] = None
    prog_lang: Optional[str] = None
    importance: Optional[str] = None

    @classmethod
    def placeholder(cls, employee_id: int) -> "Employee":
        """Заготовка новой записи, которую вставляет кнопка Insert"""
        return cls(
            id=employee_id,
            name=f"Employee {employee_id}",
            birthday="01-01-2000",
            gender="Male",
            salary="$50000",
            prog_lang="Java",
            importance="base"
        )


@dataclass(frozen=True)
class StyleConfig:
    """Оформление таблицы"""
    cell_font_size: str = "18"
    cell_font_name: str = "Times New Roman"
    cell_color: str = "#71717a"
    header_color: str = "#18181b"
    is_italic: bool = False
    is_bold: bool = False

    @classmethod
    def field_names(cls) -> Tuple[str, ...]:
        return tuple(f.name for f in fields(cls))

    def with_value(self, key: str, value: Union[str, bool]) -> "StyleConfig":
        """Копия стиля с одним измененным полем"""
        if key not in self.field_names():
            raise InvalidStyleFieldError(f"Unknown style field: {key}")

        expected = bool if key.startswith("is_") else str
        if type(value) is not expected:
            raise InvalidStyleFieldError(
                f"Style field {key} expects {expected.__name__}, got {type(value).__name__}"
            )

        return replace(self, **{key: value})


@dataclass(frozen=True)
class AppState:
    """Снимок состояния приложения: список сотрудников и стиль таблицы"""
    employees: Tuple[Employee, ...] = ()
    style: StyleConfig = field(default_factory=StyleConfig)

    @classmethod
    def create(cls, employees: Iterable[Employee], style: Optional[StyleConfig] = None) -> "AppState":
        return cls(employees=tuple(employees), style=style or StyleConfig())

    def find(self, employee_id: int) -> Optional[Employee]:
        for employee in self.employees:
            if employee.id == employee_id:
                return employee
        return None

    def next_employee_id(self) -> int:
        return max((e.id for e in self.employees), default=0) + 1


StateChange = Callable[[AppState], AppState]


def insert_placeholder(state: AppState) -> AppState:
    """Добавление сотрудника-заготовки в конец списка"""
    new_employee = Employee.placeholder(state.next_employee_id())
    return replace(state, employees=state.employees + (new_employee,))


def update_employee(state: AppState, updated: Employee) -> AppState:
    """Полная замена записи с тем же идентификатором"""
    if state.find(updated.id) is None:
        raise EmployeeNotFoundError(updated.id)

    employees = tuple(updated if e.id == updated.id else e for e in state.employees)
    return replace(state, employees=employees)


def delete_employee(state: AppState, employee_id: int) -> AppState:
    """Удаление записи по идентификатору"""
    if state.find(employee_id) is None:
        raise EmployeeNotFoundError(employee_id)

    employees = tuple(e for e in state.employees if e.id != employee_id)
    return replace(state, employees=employees)


def change_style(state: AppState, key: str, value: Union[str, bool]) -> AppState:
    """Изменение одного поля стиля"""
    return replace(state, style=state.style.with_value(key, value))
