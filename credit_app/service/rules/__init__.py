"""
Credit Rules Module

Stateless checks applied to credit and customer requests:
- Installment dates: how far ahead the first installment may fall
- CPF: Brazilian taxpayer number check digits
"""

from .settings import CreditRuleSettings, credit_rule_settings
from .installment import (
    latest_first_installment,
    is_valid_first_installment,
)
from .cpf import is_valid_cpf, normalize_cpf

__all__ = [
    "CreditRuleSettings",
    "credit_rule_settings",
    "latest_first_installment",
    "is_valid_first_installment",
    "is_valid_cpf",
    "normalize_cpf",
]
