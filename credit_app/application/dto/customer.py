"""Data transfer objects for customer operations."""

from dataclasses import dataclass
from decimal import Decimal

from credit_app.core.security import hash_password
from credit_app.domain.entities import Address, Customer


@dataclass(frozen=True)
class CustomerCreateRequest:
    """Input data for registering a customer."""

    first_name: str
    last_name: str
    cpf: str
    email: str
    password: str
    zip_code: str
    street: str
    income: Decimal

    def to_entity(self) -> Customer:
        """Build a new customer, hashing the submitted password."""
        return Customer(
            first_name=self.first_name,
            last_name=self.last_name,
            cpf=self.cpf,
            email=self.email,
            password=hash_password(self.password),
            address=Address(zip_code=self.zip_code, street=self.street),
            income=self.income,
        )


@dataclass(frozen=True)
class CustomerUpdateRequest:
    """Fields a customer may change after registration."""

    first_name: str
    last_name: str
    income: Decimal
    zip_code: str
    street: str

    def apply_to(self, customer: Customer) -> Customer:
        customer.first_name = self.first_name
        customer.last_name = self.last_name
        customer.income = self.income
        customer.address = Address(zip_code=self.zip_code, street=self.street)
        return customer


@dataclass(frozen=True)
class CustomerView:
    """Public view of a customer. Never carries the password."""

    id: int
    first_name: str
    last_name: str
    cpf: str
    email: str
    income: float
    zip_code: str
    street: str

    @classmethod
    def from_entity(cls, customer: Customer) -> "CustomerView":
        return cls(
            id=customer.id,
            first_name=customer.first_name,
            last_name=customer.last_name,
            cpf=customer.cpf,
            email=customer.email,
            income=float(customer.income),
            zip_code=customer.address.zip_code,
            street=customer.address.street,
        )
