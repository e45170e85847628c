"""Credit (loan) domain entities."""

from dataclasses import dataclass, field
from datetime import date, datetime
from decimal import Decimal
from enum import Enum
from typing import Optional
from uuid import UUID, uuid4

from .customer import Customer


class CreditStatus(str, Enum):
    IN_PROGRESS = "IN_PROGRESS"
    APPROVED = "APPROVED"
    REJECT = "REJECT"


@dataclass
class Credit:
    """
    A loan recorded against exactly one customer.

    `customer_id` is the owning reference. `customer` is a read-only
    snapshot filled in only by lookups that need customer details.
    """

    credit_value: Decimal
    day_first_installment: date
    number_of_installments: int
    customer_id: int
    credit_code: UUID = field(default_factory=uuid4)
    status: CreditStatus = CreditStatus.IN_PROGRESS
    id: Optional[int] = None
    customer: Optional[Customer] = None
    created_at: datetime = field(default_factory=datetime.utcnow)
