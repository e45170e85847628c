"""Data Transfer Objects for application layer."""

from .customer import CustomerCreateRequest, CustomerUpdateRequest, CustomerView
from .credit import CreditCreateRequest, CreditSummary, CreditView

__all__ = [
    "CustomerCreateRequest",
    "CustomerUpdateRequest",
    "CustomerView",
    "CreditCreateRequest",
    "CreditSummary",
    "CreditView",
]
