import re
from dataclasses import dataclass
from datetime import date
from enum import Enum
from typing import Callable, Dict, Optional, Sequence, Tuple

from app.domains.employees.entities import (
    Employee, GENDER_OPTIONS, IMPORTANCE_OPTIONS, PROG_LANG_OPTIONS
)


class ReportKind(Enum):
    """Виды отчетов"""
    FULL = "full"
    SHORT = "short"
    FILTERED = "filtered"
    SALARY = "salary"


# Поля, по которым строится отфильтрованный отчет, и предлагаемые значения
FILTER_OPTIONS: Dict[str, Tuple[str, ...]] = {
    "gender": GENDER_OPTIONS,
    "progLang": PROG_LANG_OPTIONS,
    "importance": IMPORTANCE_OPTIONS,
}

# Имя поля фильтра -> атрибут Employee
FILTER_FIELDS: Dict[str, str] = {
    "gender": "gender",
    "progLang": "prog_lang",
    "prog_lang": "prog_lang",
    "importance": "importance",
}

FULL_COLUMNS = ("Name", "Birthday", "Gender", "Salary", "Prog Lang", "Importance")
SHORT_COLUMNS = ("Name", "Salary", "Importance")

_NON_NUMERIC = re.compile(r"[^0-9.\-]+")
_LEADING_NUMBER = re.compile(r"-?(\d+\.?\d*|\.\d+)")


class ReportError(ValueError):
    """Ошибка выбора отчета"""


class InvalidReportTypeError(ReportError):
    def __init__(self, kind: str):
        super().__init__("Invalid report type")
        self.kind = kind


class MissingFilterParametersError(ReportError):
    def __init__(self):
        super().__init__("Filter criteria and value required for filtered report")


class InvalidFilterFieldError(ReportError):
    def __init__(self, field_name: str):
        super().__init__(f"Invalid filter field: {field_name}")
        self.field_name = field_name


def parse_salary(salary: Optional[str]) -> float:
    """Числовое значение зарплаты.

    Из текста удаляется все, кроме цифр, точки и минуса, затем читается
    начальное число. Пустая или нечитаемая строка дает 0.
    """
    if not salary:
        return 0.0

    match = _LEADING_NUMBER.match(_NON_NUMERIC.sub("", salary))
    return float(match.group(0)) if match else 0.0


def format_report_date(value: date) -> str:
    """Дата в виде 'October 19, 2026'"""
    return f"{value:%B} {value.day}, {value.year}"


def _cell(value: Optional[str]) -> str:
    return "" if value is None else str(value)


def _full_row(employee: Employee) -> str:
    return "\t".join(_cell(v) for v in (
        employee.name, employee.birthday, employee.gender,
        employee.salary, employee.prog_lang, employee.importance
    ))


def _table(columns: Sequence[str], rule_width: int, rows: Sequence[str]) -> str:
    result = "\n" + "\t".join(columns) + "\n"
    result += "-" * rule_width + "\n"
    for row in rows:
        result += row + "\n"
    return result


@dataclass(frozen=True)
class ReportFilter:
    """Условие отфильтрованного отчета: поле == значение"""
    field: str
    value: str

    @property
    def attribute(self) -> str:
        return FILTER_FIELDS[self.field]

    def matches(self, employee: Employee) -> bool:
        return getattr(employee, self.attribute) == self.value


def render_full_body(employees: Sequence[Employee]) -> str:
    return _table(FULL_COLUMNS, 80, [_full_row(e) for e in employees])


def render_short_body(employees: Sequence[Employee]) -> str:
    rows = [f"{_cell(e.name)}\t{_cell(e.salary)}\t{_cell(e.importance)}" for e in employees]
    return _table(SHORT_COLUMNS, 40, rows)


def render_filtered_body(report_filter: ReportFilter, employees: Sequence[Employee]) -> str:
    return render_full_body([e for e in employees if report_filter.matches(e)])


def render_salary_body(employees: Sequence[Employee]) -> str:
    total = sum(parse_salary(e.salary) for e in employees)
    average = total / len(employees) if employees else 0.0

    result = "\nSALARY STATISTICS\n"
    result += "-" * 40 + "\n"
    result += f"Total Employees: {len(employees)}\n"
    result += f"Total Salary: ${total:.2f}\n"
    result += f"Average Salary: ${average:.2f}\n\n"

    result += "SALARY DISTRIBUTION\n"
    result += "-" * 40 + "\n"
    result += "Name\tSalary\n"

    # sorted() устойчива: при равных суммах сохраняется исходный порядок
    for employee in sorted(employees, key=lambda e: parse_salary(e.salary), reverse=True):
        result += f"{_cell(employee.name)}\t{_cell(employee.salary)}\n"

    return result


@dataclass(frozen=True)
class ReportVariant:
    """Вариант отчета: заголовок и функция формирования тела.

    Общий каркас (заголовок, тело, подвал) собирает generate_report.
    """
    kind: ReportKind
    title: str
    render_body: Callable[[Sequence[Employee]], str]
    report_filter: Optional[ReportFilter] = None

    def render_header(self, generated_on: date) -> str:
        header = f"{self.title}\nGenerated on: {format_report_date(generated_on)}\n"
        if self.report_filter:
            header += f"Filter: {self.report_filter.field} = {self.report_filter.value}\n"
        header += "Entity: EMPLOYEE\n"
        return header


@dataclass(frozen=True)
class ReportSelection:
    """Результат выбора отчета: вариант либо ошибка"""
    variant: Optional[ReportVariant] = None
    error: Optional[ReportError] = None

    @property
    def ok(self) -> bool:
        return self.error is None

    def unwrap(self) -> ReportVariant:
        if self.error is not None:
            raise self.error
        return self.variant
