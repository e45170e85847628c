"""Pydantic schemas for API request/response validation."""

from .customer import (
    CustomerCreateSchema,
    CustomerUpdateSchema,
    CustomerViewSchema,
)
from .credit import (
    CreditCreateSchema,
    CreditSummarySchema,
    CreditViewSchema,
)
from .base import ID_MAX, ID_MIN, CamelModel
from .error import ErrorDetailSchema, ErrorResponseSchema

__all__ = [
    "CustomerCreateSchema",
    "CustomerUpdateSchema",
    "CustomerViewSchema",
    "CreditCreateSchema",
    "CreditSummarySchema",
    "CreditViewSchema",
    "ErrorDetailSchema",
    "ErrorResponseSchema",
    "CamelModel",
    "ID_MIN",
    "ID_MAX",
]
