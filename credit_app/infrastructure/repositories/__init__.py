"""Repository implementations."""

from .customer_repository import SqlCustomerRepository
from .credit_repository import SqlCreditRepository

__all__ = [
    "SqlCustomerRepository",
    "SqlCreditRepository",
]
