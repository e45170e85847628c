"""SQLAlchemy implementation of CustomerRepository."""

from typing import Optional

import structlog
from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from credit_app.domain.entities import Address, Customer
from credit_app.domain.exceptions import DataIntegrityException
from credit_app.domain.interfaces import CustomerRepository
from credit_app.infrastructure.database.models import CustomerModel

logger = structlog.get_logger(__name__)


class SqlCustomerRepository(CustomerRepository):
    """
    Relational implementation of the Customer repository.

    Uses SQLAlchemy async session for database operations. Uniqueness of
    cpf and email is enforced by the table constraints.
    """

    def __init__(self, session: AsyncSession):
        self._session = session

    async def save(self, customer: Customer) -> Customer:
        """Persist a new customer and populate its generated id."""
        model = CustomerModel(
            first_name=customer.first_name,
            last_name=customer.last_name,
            cpf=customer.cpf,
            email=customer.email,
            password=customer.password,
            zip_code=customer.address.zip_code,
            street=customer.address.street,
            income=customer.income,
            created_at=customer.created_at,
        )

        self._session.add(model)
        try:
            await self._session.flush()
        except IntegrityError as e:
            await self._session.rollback()
            logger.warning("customer_integrity_violation", error=str(e.orig))
            raise DataIntegrityException(
                message="Customer with this cpf or email already exists",
                detail=str(e.orig),
            ) from e

        customer.id = model.id
        return customer

    async def get_by_id(self, customer_id: int) -> Optional[Customer]:
        """Retrieve a customer by ID."""
        model = await self._get_model(customer_id)

        if model is None:
            return None

        return self._to_entity(model)

    async def update(self, customer: Customer) -> Customer:
        """Overwrite the mutable fields of an existing customer."""
        model = await self._get_model(customer.id)

        if model is None:
            raise ValueError(f"Customer {customer.id} is not persisted")

        model.first_name = customer.first_name
        model.last_name = customer.last_name
        model.income = customer.income
        model.zip_code = customer.address.zip_code
        model.street = customer.address.street

        await self._session.flush()

        return self._to_entity(model)

    async def delete(self, customer_id: int) -> None:
        """Delete a customer; its credits go with it through the ORM cascade."""
        stmt = (
            select(CustomerModel)
            .options(selectinload(CustomerModel.credits))
            .where(CustomerModel.id == customer_id)
        )
        result = await self._session.execute(stmt)
        model = result.scalar_one_or_none()

        if model is None:
            return

        await self._session.delete(model)
        await self._session.flush()

    async def _get_model(self, customer_id: int) -> Optional[CustomerModel]:
        stmt = select(CustomerModel).where(CustomerModel.id == customer_id)
        result = await self._session.execute(stmt)
        return result.scalar_one_or_none()

    @staticmethod
    def _to_entity(model: CustomerModel) -> Customer:
        """Convert database model to domain entity."""
        return Customer(
            id=model.id,
            first_name=model.first_name,
            last_name=model.last_name,
            cpf=model.cpf,
            email=model.email,
            password=model.password,
            address=Address(zip_code=model.zip_code, street=model.street),
            income=model.income,
            created_at=model.created_at,
        )
