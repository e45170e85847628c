"""Domain Exceptions - Business rule violations and domain errors."""

from .base import BusinessException, DomainException
from .customer import CustomerNotFoundException
from .credit import (
    CreditNotFoundException,
    CreditOwnershipException,
    InvalidInstallmentDateException,
)
from .persistence import DataIntegrityException

__all__ = [
    "DomainException",
    "BusinessException",
    "CustomerNotFoundException",
    "CreditNotFoundException",
    "CreditOwnershipException",
    "InvalidInstallmentDateException",
    "DataIntegrityException",
]
