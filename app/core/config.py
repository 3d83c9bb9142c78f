from typing import List

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    app_title: str = "Employee Management"
    app_version: str = "1.0.0"

    database_url: str = "sqlite+aiosqlite:///./employees.db"
    database_echo: bool = False

    log_level: str = "INFO"
    session_ttl_minutes: int = 120
    cors_origins: List[str] = ["*"]

    # Строка организации в подвале каждого отчета
    report_institution: str = 'National Technical University "Kharkiv Polytechnic Institute"'

    model_config = {"env_file": ".env", "extra": "ignore"}

settings = Settings()
