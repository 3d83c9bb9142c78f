from fastapi import APIRouter

from app.domains.reports.entities import FILTER_OPTIONS, ReportKind
from app.domains.reports.schemas import ReportOptionsResponse

router = APIRouter(prefix="/reports", tags=["reports"])


@router.get("/options", response_model=ReportOptionsResponse)
async def get_report_options():
    """Виды отчетов и значения для фильтра"""
    return ReportOptionsResponse(
        kinds=[kind.value for kind in ReportKind],
        filter_options={field: list(values) for field, values in FILTER_OPTIONS.items()}
    )
