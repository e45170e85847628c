"""SQLAlchemy ORM models for customers and credits."""

from datetime import date, datetime
from decimal import Decimal

from sqlalchemy import (
    BigInteger,
    Date,
    DateTime,
    ForeignKey,
    Integer,
    Numeric,
    String,
    Uuid,
)
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column, relationship

# SQLite only autoincrements INTEGER PRIMARY KEY columns
BigIntId = BigInteger().with_variant(Integer, "sqlite")


class Base(DeclarativeBase):
    pass


class CustomerModel(Base):
    """Persisted customer record."""

    __tablename__ = "customers"

    id: Mapped[int] = mapped_column(BigIntId, primary_key=True, autoincrement=True)
    first_name: Mapped[str] = mapped_column(String(100), nullable=False)
    last_name: Mapped[str] = mapped_column(String(100), nullable=False)
    cpf: Mapped[str] = mapped_column(String(11), nullable=False, unique=True)
    email: Mapped[str] = mapped_column(String(255), nullable=False, unique=True)
    password: Mapped[str] = mapped_column(String(255), nullable=False)
    zip_code: Mapped[str] = mapped_column(String(20), nullable=False)
    street: Mapped[str] = mapped_column(String(255), nullable=False)
    income: Mapped[Decimal] = mapped_column(Numeric(15, 2), nullable=False)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=datetime.utcnow,
    )

    credits: Mapped[list["CreditModel"]] = relationship(
        "CreditModel",
        back_populates="customer",
        cascade="all, delete-orphan",
        order_by="CreditModel.id",
    )


class CreditModel(Base):
    """Persisted credit record."""

    __tablename__ = "credits"

    id: Mapped[int] = mapped_column(BigIntId, primary_key=True, autoincrement=True)
    credit_code: Mapped[str] = mapped_column(
        Uuid(as_uuid=False),
        nullable=False,
        unique=True,
        index=True,
    )
    credit_value: Mapped[Decimal] = mapped_column(Numeric(15, 2), nullable=False)
    day_first_installment: Mapped[date] = mapped_column(Date, nullable=False)
    number_of_installments: Mapped[int] = mapped_column(Integer, nullable=False)
    status: Mapped[str] = mapped_column(
        String(20),
        nullable=False,
        default="IN_PROGRESS",
    )
    customer_id: Mapped[int] = mapped_column(
        BigIntId,
        ForeignKey("customers.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=datetime.utcnow,
    )

    customer: Mapped["CustomerModel"] = relationship(
        "CustomerModel",
        back_populates="credits",
    )
