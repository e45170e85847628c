"""SQLAlchemy implementation of CreditRepository."""

from typing import List, Optional
from uuid import UUID

import structlog
from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from credit_app.domain.entities import Credit, CreditStatus
from credit_app.domain.exceptions import DataIntegrityException
from credit_app.domain.interfaces import CreditRepository
from credit_app.infrastructure.database.models import CreditModel
from .customer_repository import SqlCustomerRepository

logger = structlog.get_logger(__name__)


class SqlCreditRepository(CreditRepository):
    """Relational credit repository."""

    def __init__(self, session: AsyncSession):
        self._session = session

    async def save(self, credit: Credit) -> Credit:
        model = CreditModel(
            credit_code=str(credit.credit_code),
            credit_value=credit.credit_value,
            day_first_installment=credit.day_first_installment,
            number_of_installments=credit.number_of_installments,
            status=credit.status.value,
            customer_id=credit.customer_id,
            created_at=credit.created_at,
        )

        self._session.add(model)
        try:
            await self._session.flush()
        except IntegrityError as e:
            await self._session.rollback()
            logger.warning("credit_integrity_violation", error=str(e.orig))
            raise DataIntegrityException(
                message="Credit could not be stored",
                detail=str(e.orig),
            ) from e

        credit.id = model.id
        return credit

    async def get_by_credit_code(self, credit_code: UUID) -> Optional[Credit]:
        stmt = (
            select(CreditModel)
            .options(selectinload(CreditModel.customer))
            .where(CreditModel.credit_code == str(credit_code))
        )
        result = await self._session.execute(stmt)
        model = result.scalar_one_or_none()

        if model is None:
            return None

        return self._to_entity(model, with_customer=True)

    async def get_by_customer_id(self, customer_id: int) -> List[Credit]:
        stmt = (
            select(CreditModel)
            .where(CreditModel.customer_id == customer_id)
            .order_by(CreditModel.id)
        )
        result = await self._session.execute(stmt)
        models = result.scalars().all()

        return [self._to_entity(model) for model in models]

    def _to_entity(self, model: CreditModel, with_customer: bool = False) -> Credit:
        customer = None
        if with_customer and model.customer is not None:
            customer = SqlCustomerRepository._to_entity(model.customer)

        return Credit(
            id=model.id,
            credit_code=UUID(model.credit_code),
            credit_value=model.credit_value,
            day_first_installment=model.day_first_installment,
            number_of_installments=model.number_of_installments,
            status=CreditStatus(model.status),
            customer_id=model.customer_id,
            customer=customer,
            created_at=model.created_at,
        )
