import logging
from datetime import date
from functools import partial
from typing import Optional, Sequence

from app.core.config import settings
from app.domains.employees.entities import Employee
from app.domains.reports.entities import (
    FILTER_FIELDS, InvalidFilterFieldError, InvalidReportTypeError,
    MissingFilterParametersError, ReportFilter, ReportKind, ReportSelection,
    ReportVariant, render_filtered_body, render_full_body, render_salary_body,
    render_short_body
)

logger = logging.getLogger(__name__)

_TITLES = {
    ReportKind.FULL: "FULL EMPLOYEE REPORT",
    ReportKind.SHORT: "SHORT EMPLOYEE REPORT",
    ReportKind.FILTERED: "FILTERED EMPLOYEE REPORT",
    ReportKind.SALARY: "SALARY ANALYSIS REPORT",
}

_BODIES = {
    ReportKind.FULL: render_full_body,
    ReportKind.SHORT: render_short_body,
    ReportKind.SALARY: render_salary_body,
}


def select_report(
    kind: str,
    filter_field: Optional[str] = None,
    filter_value: Optional[str] = None
) -> ReportSelection:
    """Выбор варианта отчета по имени вида (без учета регистра)"""
    try:
        report_kind = ReportKind((kind or "").strip().lower())
    except ValueError:
        logger.warning(f"Unknown report kind requested: {kind!r}")
        return ReportSelection(error=InvalidReportTypeError(kind))

    if report_kind is not ReportKind.FILTERED:
        return ReportSelection(variant=ReportVariant(
            kind=report_kind,
            title=_TITLES[report_kind],
            render_body=_BODIES[report_kind]
        ))

    if not filter_field or not filter_value or not filter_value.strip():
        logger.warning(f"Filtered report requested without filter (field={filter_field!r}, value={filter_value!r})")
        return ReportSelection(error=MissingFilterParametersError())

    if filter_field not in FILTER_FIELDS:
        logger.warning(f"Unsupported filter field: {filter_field!r}")
        return ReportSelection(error=InvalidFilterFieldError(filter_field))

    # prog_lang и progLang - одно поле, в заголовке показываем progLang
    field_name = "progLang" if FILTER_FIELDS[filter_field] == "prog_lang" else filter_field
    report_filter = ReportFilter(field=field_name, value=filter_value)

    return ReportSelection(variant=ReportVariant(
        kind=report_kind,
        title=_TITLES[report_kind],
        render_body=partial(render_filtered_body, report_filter),
        report_filter=report_filter
    ))


def create_report(
    kind: str,
    filter_field: Optional[str] = None,
    filter_value: Optional[str] = None
) -> ReportVariant:
    """То же, что select_report, но с исключением ReportError при ошибке"""
    return select_report(kind, filter_field, filter_value).unwrap()


def render_footer(author: Optional[str] = None) -> str:
    author = author.strip() if author and author.strip() else "Anonymous"
    return f"\nPrepared by {author}\n{settings.report_institution}"


def generate_report(
    variant: ReportVariant,
    employees: Sequence[Employee],
    author: Optional[str] = None,
    generated_on: Optional[date] = None
) -> str:
    """Каркас отчета: заголовок, данные, подвал"""
    generated_on = generated_on or date.today()
    return "\n".join([
        variant.render_header(generated_on),
        variant.render_body(tuple(employees)),
        render_footer(author),
    ])


def report_filename(kind: str) -> str:
    """Имя файла для скачивания отчета"""
    return f"employee_report_{kind.strip().lower()}.txt"
