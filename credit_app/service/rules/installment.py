"""
Installment date rules.

A credit's first installment may not be scheduled more than a configured
number of calendar months after the day the credit is requested. Month
arithmetic clamps to the end of shorter months (Jan 31 + 1 month is the
last day of February).
"""

from datetime import date

from dateutil.relativedelta import relativedelta

from .settings import CreditRuleSettings, credit_rule_settings


def latest_first_installment(
    today: date | None = None,
    settings: CreditRuleSettings = credit_rule_settings,
) -> date:
    """
    Latest date allowed for a first installment.

    Args:
        today: Reference date (defaults to the current date)
        settings: Rule settings (uses defaults if not provided)

    Returns:
        today plus `first_installment_max_months` calendar months
    """
    today = today or date.today()
    return today + relativedelta(months=settings.first_installment_max_months)


def is_valid_first_installment(
    day_first_installment: date,
    today: date | None = None,
    settings: CreditRuleSettings = credit_rule_settings,
) -> bool:
    """Return True if the first installment date is within the allowed window."""
    return day_first_installment <= latest_first_installment(today, settings)
