from sqlalchemy import Column, DateTime
from sqlalchemy.sql import func

from app.core.db import Base


class BaseModel(Base):
    """Общие поля всех таблиц"""
    __abstract__ = True

    created_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)
    updated_at = Column(DateTime(timezone=True), onupdate=func.now())
