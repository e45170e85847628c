"""Dependency injection for FastAPI."""

from typing import Annotated

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from credit_app.infrastructure.database import get_db_session
from credit_app.infrastructure.repositories import (
    SqlCreditRepository,
    SqlCustomerRepository,
)
from credit_app.application.services import CreditService, CustomerService


# Repository dependencies
async def get_customer_repository(
    session: Annotated[AsyncSession, Depends(get_db_session)],
) -> SqlCustomerRepository:
    """Get a CustomerRepository instance."""
    return SqlCustomerRepository(session)


async def get_credit_repository(
    session: Annotated[AsyncSession, Depends(get_db_session)],
) -> SqlCreditRepository:
    """Get a CreditRepository instance."""
    return SqlCreditRepository(session)


# Service dependencies
async def get_customer_service(
    customer_repo: Annotated[SqlCustomerRepository, Depends(get_customer_repository)],
) -> CustomerService:
    """Get a CustomerService instance."""
    return CustomerService(customer_repository=customer_repo)


async def get_credit_service(
    credit_repo: Annotated[SqlCreditRepository, Depends(get_credit_repository)],
    customer_service: Annotated[CustomerService, Depends(get_customer_service)],
) -> CreditService:
    """Get a CreditService instance with all dependencies."""
    return CreditService(
        credit_repository=credit_repo,
        customer_service=customer_service,
    )
