"""
Test configuration and fixtures
"""
import os
import tempfile
from typing import AsyncGenerator, List

import pytest
from httpx import AsyncClient, ASGITransport
from sqlalchemy.ext.asyncio import create_async_engine, AsyncSession
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import NullPool

# Set testing environment
_TEST_DB_DIR = tempfile.mkdtemp(prefix="employee-management-tests-")
os.environ['DATABASE_URL'] = f"sqlite+aiosqlite:///{_TEST_DB_DIR}/test.db"
os.environ['LOG_LEVEL'] = 'WARNING'

from app.main import app
from app.core.db import Base, get_db
from app.db import models  # noqa: F401
from app.api.http.sessions import registry
from app.domains.employees.entities import AppState, Employee

test_engine = create_async_engine(os.environ['DATABASE_URL'], poolclass=NullPool)
TestSessionLocal = sessionmaker(
    bind=test_engine,
    class_=AsyncSession,
    expire_on_commit=False
)


@pytest.fixture
async def db_session() -> AsyncGenerator[AsyncSession, None]:
    """Create a fresh database for each test"""
    async with test_engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    async with TestSessionLocal() as session:
        yield session

    async with test_engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)


@pytest.fixture
async def client(db_session: AsyncSession) -> AsyncGenerator[AsyncClient, None]:
    """Create test client with database override"""
    async def override_get_db():
        yield db_session

    app.dependency_overrides[get_db] = override_get_db
    registry.clear()

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url='http://test') as ac:
        yield ac

    app.dependency_overrides.clear()
    registry.clear()


@pytest.fixture
def employees() -> List[Employee]:
    """Three male and two female employees"""
    return [
        Employee(1, "Ivan Petrenko", "12-03-1990", "Male", "$50,000", "Java", "base"),
        Employee(2, "Olena Shevchenko", "04-07-1992", "Female", "$62,500", "Python", "TOP"),
        Employee(3, "Taras Bondar", "21-11-1988", "Male", "$30,000.50", "PHP", "middle"),
        Employee(4, "Iryna Kovalenko", "30-01-1995", "Female", "$45,000", "JS", "base"),
        Employee(5, "Andrii Melnyk", "15-09-1985", "Male", "$71,000", "C++", "TOP"),
    ]


@pytest.fixture
def initial_state(employees: List[Employee]) -> AppState:
    return AppState.create(employees)
