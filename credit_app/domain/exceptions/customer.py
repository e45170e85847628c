"""Customer-related domain exceptions."""

from .base import BusinessException


class CustomerNotFoundException(BusinessException):
    """Raised when a customer id does not exist."""

    def __init__(self, customer_id: int):
        super().__init__(
            message=f"Id {customer_id} not found",
            code="CUSTOMER_NOT_FOUND",
        )
        self.customer_id = customer_id
