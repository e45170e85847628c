"""
Fixtures for integration tests.

Provides:
- In-memory database for testing
- Test client for the FastAPI app, one committed session per request
- Request payload builders
"""

from datetime import date, timedelta
from typing import AsyncGenerator

import pytest
import pytest_asyncio
from httpx import AsyncClient, ASGITransport
from sqlalchemy import event
from sqlalchemy.ext.asyncio import (
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.pool import StaticPool

from credit_app.main import app
from credit_app.infrastructure.database import Base, get_db_session


# =============================================================================
# Database Fixtures
# =============================================================================

@pytest_asyncio.fixture
async def test_engine():
    """Create an in-memory SQLite async engine for testing."""
    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:",
        echo=False,
        poolclass=StaticPool,
        connect_args={"check_same_thread": False},
    )

    # SQLite leaves foreign keys unenforced unless asked
    @event.listens_for(engine.sync_engine, "connect")
    def enable_foreign_keys(dbapi_connection, connection_record):
        cursor = dbapi_connection.cursor()
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.close()

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    yield engine

    await engine.dispose()


@pytest.fixture
def session_factory(test_engine) -> async_sessionmaker:
    """Session factory bound to the test engine."""
    return async_sessionmaker(
        bind=test_engine,
        class_=AsyncSession,
        expire_on_commit=False,
        autocommit=False,
        autoflush=False,
    )


def _override_db_session(session_factory: async_sessionmaker):
    async def override_get_db_session() -> AsyncGenerator[AsyncSession, None]:
        async with session_factory() as session:
            try:
                yield session
                await session.commit()
            except Exception:
                await session.rollback()
                raise

    return override_get_db_session


# =============================================================================
# App Client Fixtures
# =============================================================================

@pytest_asyncio.fixture
async def client(session_factory) -> AsyncGenerator[AsyncClient, None]:
    """
    Create a test client backed by the in-memory database.

    Every request gets its own session which is committed when the
    handler returns, as in production.
    """
    app.dependency_overrides[get_db_session] = _override_db_session(session_factory)

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac

    app.dependency_overrides.clear()


@pytest_asyncio.fixture
async def lenient_client(session_factory) -> AsyncGenerator[AsyncClient, None]:
    """Client that returns 500 responses instead of re-raising server errors."""
    app.dependency_overrides[get_db_session] = _override_db_session(session_factory)

    transport = ASGITransport(app=app, raise_app_exceptions=False)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac

    app.dependency_overrides.clear()


# =============================================================================
# Helper Fixtures
# =============================================================================

@pytest.fixture
def customer_payload() -> dict:
    """Registration body for a valid customer."""
    return {
        "firstName": "Diogo",
        "lastName": "Barbosa",
        "cpf": "01742760520",
        "email": "diogo_barbosa@gmail.com",
        "password": "12345",
        "zipCode": "12345",
        "street": "Avenida Espírito Santo",
        "income": 1000.0,
    }


@pytest.fixture
def other_customer_payload() -> dict:
    """Registration body for a second, distinct customer."""
    return {
        "firstName": "Vitor",
        "lastName": "Silveira",
        "cpf": "52998224725",
        "email": "vitor.silveira@gmail.com",
        "password": "12345",
        "zipCode": "58802118",
        "street": "Rua Pedro Celestino de Paula",
        "income": 2500.0,
    }


@pytest.fixture
def customer_update_payload() -> dict:
    return {
        "firstName": "DiogoUpdate",
        "lastName": "BarbosaUpdate",
        "income": 5000.0,
        "zipCode": "12345",
        "street": "Avenida Espírito Santo",
    }


def _build_credit_payload(
    customer_id: int = 1,
    credit_value: float = 1500.0,
    day_first_of_installment: date | None = None,
    number_of_installments: int = 1,
) -> dict:
    day = day_first_of_installment or date.today() + timedelta(days=10)
    return {
        "creditValue": credit_value,
        "dayFirstOfInstallment": day.isoformat(),
        "numberOfInstallments": number_of_installments,
        "customerId": customer_id,
    }


@pytest.fixture
def make_credit_payload():
    """Builder for credit request bodies; defaults to customer 1, first installment in ten days."""
    return _build_credit_payload


@pytest.fixture
def credit_payload() -> dict:
    return _build_credit_payload()


@pytest_asyncio.fixture
async def customer(client: AsyncClient, customer_payload: dict) -> dict:
    """A registered customer, as returned by the API."""
    response = await client.post("/api/customers", json=customer_payload)
    assert response.status_code == 201
    return response.json()
