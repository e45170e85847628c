"""
Credit rule settings.

Environment variables use the CREDIT_ prefix:
    CREDIT_FIRST_INSTALLMENT_MAX_MONTHS=1
    CREDIT_MAX_INSTALLMENTS=48

Usage:
    from credit_app.service.rules.settings import credit_rule_settings

    months = credit_rule_settings.first_installment_max_months

    # Or create custom settings for testing
    custom = CreditRuleSettings(first_installment_max_months=3)
"""

from functools import lru_cache

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class CreditRuleSettings(BaseSettings):
    """Configurable limits applied when a credit is requested."""

    model_config = SettingsConfigDict(
        env_prefix="CREDIT_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    first_installment_max_months: int = Field(
        default=1,
        description="How many calendar months ahead the first installment may fall",
    )
    max_installments: int = Field(
        default=48,
        description="Largest number of installments a credit may be split into",
    )

    @field_validator("first_installment_max_months", "max_installments")
    @classmethod
    def validate_positive(cls, v: int) -> int:
        if v < 1:
            raise ValueError("must be at least 1")
        return v


@lru_cache
def get_credit_rule_settings() -> CreditRuleSettings:
    """Get cached credit rule settings."""
    return CreditRuleSettings()


credit_rule_settings = get_credit_rule_settings()
