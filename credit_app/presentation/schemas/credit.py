"""Credit-related Pydantic schemas."""

from datetime import date
from decimal import Decimal

from pydantic import ConfigDict, Field, field_validator

from credit_app.service.rules import credit_rule_settings
from .base import ID_MAX, ID_MIN, CamelModel


class CreditCreateSchema(CamelModel):
    """Schema for POST /api/credits request body."""

    model_config = ConfigDict(
        json_schema_extra={
            "examples": [
                {
                    "creditValue": 1500.0,
                    "dayFirstOfInstallment": "2025-10-28",
                    "numberOfInstallments": 1,
                    "customerId": 1,
                }
            ]
        }
    )

    credit_value: Decimal = Field(
        ...,
        gt=0,
        max_digits=15,
        decimal_places=2,
        description="Amount of the credit",
        examples=[1500.0],
    )
    day_first_of_installment: date = Field(
        ...,
        description="Due date of the first installment (YYYY-MM-DD)",
    )
    number_of_installments: int = Field(
        ...,
        ge=1,
        le=credit_rule_settings.max_installments,
        description="Number of installments",
        examples=[1],
    )
    customer_id: int = Field(
        ...,
        ge=ID_MIN,
        le=ID_MAX,
        description="Id of the customer requesting the credit",
        examples=[1],
    )

    @field_validator("day_first_of_installment")
    @classmethod
    def validate_future(cls, v: date) -> date:
        """The first installment must fall after today."""
        if v <= date.today():
            raise ValueError("must be a future date")
        return v


class CreditSummarySchema(CamelModel):
    """Schema for an entry of GET /api/credits."""

    credit_code: str
    credit_value: float
    number_of_installments: int


class CreditViewSchema(CamelModel):
    """Schema for a single credit with its customer's contact details."""

    credit_code: str
    credit_value: float
    number_of_installment: int
    status: str
    email_customer: str | None = None
    income_customer: float | None = None
