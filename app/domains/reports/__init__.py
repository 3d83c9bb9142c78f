from app.domains.reports.entities import (
    ReportKind, ReportFilter, ReportVariant, ReportSelection,
    ReportError, InvalidReportTypeError, MissingFilterParametersError,
    InvalidFilterFieldError, FILTER_OPTIONS, parse_salary
)
from app.domains.reports.schemas import ReportRequest, ReportResponse, ReportOptionsResponse
from app.domains.reports.services import (
    select_report, create_report, generate_report, report_filename
)

__all__ = [
    "ReportKind", "ReportFilter", "ReportVariant", "ReportSelection",
    "ReportError", "InvalidReportTypeError", "MissingFilterParametersError",
    "InvalidFilterFieldError", "FILTER_OPTIONS", "parse_salary",
    "ReportRequest", "ReportResponse", "ReportOptionsResponse",
    "select_report", "create_report", "generate_report", "report_filename"
]
