"""Customer domain entities."""

from dataclasses import dataclass, field
from datetime import datetime
from decimal import Decimal
from typing import Optional


@dataclass(frozen=True)
class Address:
    """Postal address embedded in a customer record."""

    zip_code: str
    street: str


@dataclass
class Customer:
    """
    A registered individual who may own zero or more credits.

    The password field always holds a bcrypt hash, never plaintext.
    """

    first_name: str
    last_name: str
    cpf: str
    email: str
    password: str
    address: Address
    income: Decimal
    id: Optional[int] = None
    created_at: datetime = field(default_factory=datetime.utcnow)
