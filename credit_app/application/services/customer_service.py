"""Customer service - registration and maintenance of customer records."""

import structlog

from credit_app.core.metrics import record_customer_deleted, record_customer_registered
from credit_app.domain.entities import Customer
from credit_app.domain.exceptions import CustomerNotFoundException
from credit_app.domain.interfaces import CustomerRepository
from credit_app.application.dto import CustomerUpdateRequest

logger = structlog.get_logger(__name__)


class CustomerService:
    """
    Application service for customer use cases.

    Update and delete always go through find_by_id first, so a missing
    customer surfaces as CustomerNotFoundException rather than a silent no-op.
    """

    def __init__(self, customer_repository: CustomerRepository):
        self._customer_repo = customer_repository

    async def save(self, customer: Customer) -> Customer:
        """
        Register a new customer.

        Raises:
            DataIntegrityException: If cpf or email is already registered
        """
        saved = await self._customer_repo.save(customer)

        logger.info("customer_created", customer_id=saved.id)
        record_customer_registered()

        return saved

    async def find_by_id(self, customer_id: int) -> Customer:
        """
        Retrieve a customer by ID.

        Raises:
            CustomerNotFoundException: If the id is unknown
        """
        customer = await self._customer_repo.get_by_id(customer_id)

        if customer is None:
            logger.warning("customer_not_found", customer_id=customer_id)
            raise CustomerNotFoundException(customer_id)

        return customer

    async def update(self, customer_id: int, patch: CustomerUpdateRequest) -> Customer:
        """
        Overwrite name, income and address of an existing customer.

        Raises:
            CustomerNotFoundException: If the id is unknown
        """
        customer = await self.find_by_id(customer_id)

        updated = await self._customer_repo.update(patch.apply_to(customer))

        logger.info("customer_updated", customer_id=customer_id)

        return updated

    async def delete(self, customer_id: int) -> None:
        """
        Delete a customer and all of its credits.

        Raises:
            CustomerNotFoundException: If the id is unknown
        """
        customer = await self.find_by_id(customer_id)

        await self._customer_repo.delete(customer.id)

        logger.info("customer_deleted", customer_id=customer_id)
        record_customer_deleted()
