"""Data transfer objects for credit operations."""

from dataclasses import dataclass
from datetime import date
from decimal import Decimal
from typing import Optional

from credit_app.domain.entities import Credit


@dataclass(frozen=True)
class CreditCreateRequest:
    """Input data for requesting a credit."""

    credit_value: Decimal
    day_first_of_installment: date
    number_of_installments: int
    customer_id: int

    def to_entity(self) -> Credit:
        return Credit(
            credit_value=self.credit_value,
            day_first_installment=self.day_first_of_installment,
            number_of_installments=self.number_of_installments,
            customer_id=self.customer_id,
        )


@dataclass(frozen=True)
class CreditSummary:
    """Brief view of a credit for customer listings."""

    credit_code: str
    credit_value: float
    number_of_installments: int

    @classmethod
    def from_entity(cls, credit: Credit) -> "CreditSummary":
        return cls(
            credit_code=str(credit.credit_code),
            credit_value=float(credit.credit_value),
            number_of_installments=credit.number_of_installments,
        )


@dataclass(frozen=True)
class CreditView:
    """Detailed view of a credit including the owning customer's contact data."""

    credit_code: str
    credit_value: float
    number_of_installment: int
    status: str
    email_customer: Optional[str]
    income_customer: Optional[float]

    @classmethod
    def from_entity(cls, credit: Credit) -> "CreditView":
        customer = credit.customer

        return cls(
            credit_code=str(credit.credit_code),
            credit_value=float(credit.credit_value),
            number_of_installment=credit.number_of_installments,
            status=credit.status.value,
            email_customer=customer.email if customer else None,
            income_customer=float(customer.income) if customer else None,
        )
