from pydantic import BaseModel, Field
from typing import Optional, List, Dict
from datetime import datetime


class ReportRequest(BaseModel):
    """Схема для запроса на формирование отчета"""
    kind: str = Field(..., min_length=1, max_length=32)
    filter_field: Optional[str] = None
    filter_value: Optional[str] = None
    author: Optional[str] = Field(None, max_length=256)


class ReportResponse(BaseModel):
    """Схема для ответа со сформированным отчетом"""
    kind: str
    filename: str
    content: str
    generated_at: datetime


class ReportOptionsResponse(BaseModel):
    """Схема для списка видов отчетов и вариантов фильтра"""
    kinds: List[str]
    filter_options: Dict[str, List[str]]
