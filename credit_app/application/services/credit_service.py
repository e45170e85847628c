"""Credit service - creation and lookup of customer credits."""

from datetime import date
from typing import List
from uuid import UUID

import structlog

from credit_app.core.metrics import record_credit_created, record_credit_rejection
from credit_app.domain.entities import Credit
from credit_app.domain.exceptions import (
    CreditNotFoundException,
    CreditOwnershipException,
    CustomerNotFoundException,
    InvalidInstallmentDateException,
)
from credit_app.domain.interfaces import CreditRepository
from credit_app.service.rules import (
    CreditRuleSettings,
    credit_rule_settings,
    is_valid_first_installment,
)
from .customer_service import CustomerService

logger = structlog.get_logger(__name__)


class CreditService:
    """
    Application service for credit use cases.
    """

    def __init__(
        self,
        credit_repository: CreditRepository,
        customer_service: CustomerService,
        rule_settings: CreditRuleSettings = credit_rule_settings,
    ):
        self._credit_repo = credit_repository
        self._customer_service = customer_service
        self._rule_settings = rule_settings

    async def save(self, credit: Credit, today: date | None = None) -> Credit:
        """
        Create a credit for an existing customer.

        Args:
            credit: The credit to create; `customer_id` names its owner
            today: Reference date for the installment rule (defaults to today)

        Returns:
            The persisted credit with its owning customer attached

        Raises:
            InvalidInstallmentDateException: If the first installment is too far ahead
            CustomerNotFoundException: If the owning customer does not exist
        """
        log = logger.bind(
            customer_id=credit.customer_id,
            credit_code=str(credit.credit_code),
        )

        if not is_valid_first_installment(
            credit.day_first_installment,
            today=today,
            settings=self._rule_settings,
        ):
            log.info(
                "credit_rejected",
                reason="invalid_date",
                day_first_installment=credit.day_first_installment.isoformat(),
            )
            record_credit_rejection("invalid_date")
            raise InvalidInstallmentDateException()

        try:
            credit.customer = await self._customer_service.find_by_id(credit.customer_id)
        except CustomerNotFoundException:
            record_credit_rejection("customer_not_found")
            raise

        saved = await self._credit_repo.save(credit)

        log.info(
            "credit_created",
            credit_id=saved.id,
            number_of_installments=saved.number_of_installments,
        )
        record_credit_created(float(saved.credit_value))

        return saved

    async def find_all_by_customer(self, customer_id: int) -> List[Credit]:
        """Return every credit owned by the customer, empty if none."""
        credits = await self._credit_repo.get_by_customer_id(customer_id)

        logger.info(
            "customer_credits_retrieved",
            customer_id=customer_id,
            count=len(credits),
        )

        return credits

    async def find_by_credit_code(self, customer_id: int, credit_code: UUID) -> Credit:
        """
        Retrieve a credit by code on behalf of a customer.

        Raises:
            CreditNotFoundException: If the credit code is unknown
            CreditOwnershipException: If the credit belongs to another customer
        """
        credit = await self._credit_repo.get_by_credit_code(credit_code)

        if credit is None:
            logger.warning("credit_not_found", credit_code=str(credit_code))
            raise CreditNotFoundException(credit_code)

        if credit.customer_id != customer_id:
            logger.error(
                "credit_owner_mismatch",
                credit_code=str(credit_code),
                requested_customer_id=customer_id,
                owner_customer_id=credit.customer_id,
            )
            raise CreditOwnershipException(credit_code, customer_id)

        return credit
