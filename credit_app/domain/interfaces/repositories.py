"""Repository interfaces for data persistence."""

from abc import ABC, abstractmethod
from typing import List, Optional
from uuid import UUID

from credit_app.domain.entities import Credit, Customer


class CustomerRepository(ABC):
    """
    Abstract repository for Customer persistence.

    Implementations enforce uniqueness of cpf and email and raise
    DataIntegrityException when a write violates it.
    """

    @abstractmethod
    async def save(self, customer: Customer) -> Customer:
        """
        Persist a new customer.

        Args:
            customer: The customer to save

        Returns:
            The saved customer with its generated id populated

        Raises:
            DataIntegrityException: If cpf or email is already registered
        """
        ...

    @abstractmethod
    async def get_by_id(self, customer_id: int) -> Optional[Customer]:
        """
        Retrieve a customer by ID.

        Args:
            customer_id: The customer's identifier

        Returns:
            The customer if found, None otherwise
        """
        ...

    @abstractmethod
    async def update(self, customer: Customer) -> Customer:
        """
        Overwrite the stored record of an existing customer.

        Args:
            customer: The customer carrying the new field values

        Returns:
            The updated customer
        """
        ...

    @abstractmethod
    async def delete(self, customer_id: int) -> None:
        """
        Delete a customer together with all of its credits.

        Args:
            customer_id: The customer's identifier
        """
        ...


class CreditRepository(ABC):
    """Abstract repository for Credit persistence."""

    @abstractmethod
    async def save(self, credit: Credit) -> Credit:
        """
        Persist a new credit.

        Args:
            credit: The credit to save; its customer must already exist

        Returns:
            The saved credit with its generated id populated
        """
        ...

    @abstractmethod
    async def get_by_credit_code(self, credit_code: UUID) -> Optional[Credit]:
        """
        Retrieve a credit by its credit code.

        The returned credit carries a snapshot of its owning customer.

        Args:
            credit_code: The credit's public identifier

        Returns:
            The credit if found, None otherwise
        """
        ...

    @abstractmethod
    async def get_by_customer_id(self, customer_id: int) -> List[Credit]:
        """
        Retrieve all credits owned by a customer.

        Args:
            customer_id: The owning customer's identifier

        Returns:
            List of credits ordered by id, empty if none
        """
        ...
