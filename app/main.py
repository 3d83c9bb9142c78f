from contextlib import asynccontextmanager
import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from app.core.config import settings
from app.core.db import init_models
from app.core.logging_config import setup_logging
from app.api.http.health import router as health_router
from app.api.http.employees import router as employees_router
from app.api.http.sessions import router as sessions_router
from app.api.http.reports import router as reports_router

setup_logging(settings.log_level)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    await init_models()
    logger.info(f"{settings.app_title} {settings.app_version} started")
    yield
    logger.info(f"{settings.app_title} stopped")


app = FastAPI(
    title=settings.app_title,
    description="Таблица сотрудников с отменой/повтором изменений и текстовыми отчетами",
    version=settings.app_version,
    lifespan=lifespan
)

# Настройка CORS для работы с frontend
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Подключаем роутеры
app.include_router(health_router)
app.include_router(employees_router)
app.include_router(sessions_router)
app.include_router(reports_router)


@app.get("/")
async def root():
    """Корневой эндпоинт"""
    return {
        "message": f"{settings.app_title} API",
        "version": settings.app_version,
        "docs": "/docs",
        "health": "/health"
    }
