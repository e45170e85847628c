"""Credit-related domain exceptions."""

from uuid import UUID

from .base import BusinessException, DomainException


class InvalidInstallmentDateException(BusinessException):
    """Raised when the first installment falls too far in the future."""

    def __init__(self):
        super().__init__(
            message="Invalid Date",
            code="INVALID_INSTALLMENT_DATE",
        )


class CreditNotFoundException(BusinessException):
    """Raised when a credit code does not exist."""

    def __init__(self, credit_code: UUID):
        super().__init__(
            message=f"Creditcode {credit_code} not found",
            code="CREDIT_NOT_FOUND",
        )
        self.credit_code = credit_code


class CreditOwnershipException(DomainException):
    """
    Raised when a credit code is requested under a customer that does not own it.

    Treated as a consistency violation rather than a plain lookup miss,
    so the message stays generic.
    """

    def __init__(self, credit_code: UUID, customer_id: int):
        super().__init__(
            message="Contact admin",
            code="CREDIT_OWNERSHIP_MISMATCH",
        )
        self.credit_code = credit_code
        self.customer_id = customer_id
