"""Customer-related Pydantic schemas."""

from decimal import Decimal

from pydantic import ConfigDict, EmailStr, Field, field_validator

from credit_app.service.rules import is_valid_cpf, normalize_cpf
from .base import CamelModel

PASSWORD_MAX_BYTES = 72


class CustomerUpdateSchema(CamelModel):
    """Schema for PATCH /api/customers request body."""

    first_name: str = Field(
        ...,
        min_length=1,
        max_length=100,
        description="Customer's first name",
        examples=["Diogo"],
    )
    last_name: str = Field(
        ...,
        min_length=1,
        max_length=100,
        description="Customer's last name",
        examples=["Barbosa"],
    )
    income: Decimal = Field(
        ...,
        ge=0,
        max_digits=15,
        decimal_places=2,
        description="Monthly income",
        examples=[1000.0],
    )
    zip_code: str = Field(
        ...,
        min_length=1,
        max_length=20,
        description="Postal code",
        examples=["12345"],
    )
    street: str = Field(
        ...,
        min_length=1,
        max_length=255,
        description="Street address",
        examples=["Avenida Espírito Santo"],
    )

    @field_validator("first_name", "last_name", "zip_code", "street")
    @classmethod
    def validate_not_blank(cls, v: str) -> str:
        """Reject values made only of whitespace."""
        if not v.strip():
            raise ValueError("must not be blank")
        return v


class CustomerCreateSchema(CustomerUpdateSchema):
    """Schema for POST /api/customers request body."""

    model_config = ConfigDict(
        json_schema_extra={
            "examples": [
                {
                    "firstName": "Diogo",
                    "lastName": "Barbosa",
                    "cpf": "01742760520",
                    "email": "diogo_barbosa@gmail.com",
                    "password": "12345",
                    "zipCode": "12345",
                    "street": "Avenida Espírito Santo",
                    "income": 1000.0,
                }
            ]
        }
    )

    cpf: str = Field(
        ...,
        description="Brazilian taxpayer number (CPF)",
        examples=["01742760520"],
    )
    email: EmailStr = Field(
        ...,
        description="Customer's email address",
        examples=["diogo_barbosa@gmail.com"],
    )
    password: str = Field(
        ...,
        min_length=1,
        max_length=PASSWORD_MAX_BYTES,
        description="Account password",
    )

    @field_validator("cpf")
    @classmethod
    def validate_cpf(cls, v: str) -> str:
        if not is_valid_cpf(v):
            raise ValueError("invalid CPF")
        return normalize_cpf(v)

    @field_validator("password")
    @classmethod
    def validate_password_bytes(cls, v: str) -> str:
        """bcrypt only hashes the first 72 bytes of its input."""
        if len(v.encode("utf-8")) > PASSWORD_MAX_BYTES:
            raise ValueError(f"must be at most {PASSWORD_MAX_BYTES} bytes when UTF-8 encoded")
        return v


class CustomerViewSchema(CamelModel):
    """Schema for customer responses."""

    id: int
    first_name: str
    last_name: str
    cpf: str
    email: str
    income: float
    zip_code: str
    street: str
