"""Accrual engine - penalty, mora interest and monetary correction on overdue bills"""

from datetime import date
from decimal import Decimal, ROUND_HALF_UP
from typing import Optional

from finance_core.domain.models import (
    InterestCalculationResult,
    InterestConfig,
    InterestRates,
    InterestType,
    MonetaryCorrectionIndex,
    PenaltyType,
)
from finance_core.utils.date_utils import DateLike, days_between

DAYS_PER_MONTH = 30
DAYS_PER_YEAR = 365

CENT = Decimal("0.01")


def round_currency(value: float) -> float:
    """
    Round to cents, half away from zero, on the shortest decimal repr of the float.

    Example:
        12.345 → 12.35 (binary rounding would give 12.34)
    """
    return float(Decimal(repr(value)).quantize(CENT, rounding=ROUND_HALF_UP))


def calculate_days_overdue(due_date: DateLike, reference_date: Optional[DateLike] = None) -> int:
    """Whole days past the due date, ignoring time of day. Never negative."""
    if reference_date is None:
        reference_date = date.today()
    return max(0, days_between(due_date, reference_date))


def calculate_penalty(
    original_amount: float,
    penalty_type: PenaltyType,
    penalty_value: Optional[float],
) -> float:
    """
    Late-payment penalty (multa).

    - percentage: share of the original amount
    - fixed: flat fee, independent of the amount
    """
    if penalty_type == PenaltyType.NONE or penalty_value is None:
        return 0.0
    if penalty_type == PenaltyType.FIXED:
        return penalty_value
    if penalty_type == PenaltyType.PERCENTAGE:
        return original_amount * (penalty_value / 100)
    return 0.0


def calculate_mora_interest(
    original_amount: float,
    effective_days_overdue: int,
    interest_type: InterestType,
    interest_value: Optional[float],
) -> float:
    """
    Simple (non-compounding) mora interest over the days past the grace period.

    Monthly rates are pro-rated on 30-day months.
    """
    if interest_type == InterestType.NONE or interest_value is None or effective_days_overdue <= 0:
        return 0.0
    if interest_type == InterestType.DAILY:
        return original_amount * (interest_value / 100) * effective_days_overdue
    if interest_type == InterestType.MONTHLY:
        months = effective_days_overdue / DAYS_PER_MONTH
        return original_amount * (interest_value / 100) * months
    return 0.0


def calculate_monetary_correction(
    original_amount: float,
    days_overdue: int,
    index: MonetaryCorrectionIndex,
    rates: InterestRates,
) -> float:
    """
    Monetary correction by an annual index rate, accrued daily since the due date.

    Grace period does not apply here: correction counts raw days overdue.
    """
    if index == MonetaryCorrectionIndex.NONE or days_overdue <= 0:
        return 0.0

    annual_rate = rates.rate_for(index)
    if not annual_rate:
        return 0.0

    daily_rate = annual_rate / DAYS_PER_YEAR
    return original_amount * (daily_rate / 100) * days_overdue


def calculate_interest(
    original_amount: float,
    due_date: DateLike,
    config: InterestConfig,
    rates: InterestRates,
    reference_date: Optional[DateLike] = None,
) -> InterestCalculationResult:
    """
    Main entry point: compute everything owed on a bill as of reference_date.

    Flow:
    1. Not overdue yet → nothing accrues, amount unchanged
    2. Grace period shifts penalty and interest, not correction
    3. Sum the three components and round each field to cents
    """
    days_overdue = calculate_days_overdue(due_date, reference_date)

    if days_overdue <= 0:
        return InterestCalculationResult(
            days_overdue=0,
            effective_days_overdue=0,
            penalty_amount=0.0,
            interest_amount=0.0,
            correction_amount=0.0,
            total_interest=0.0,
            updated_amount=original_amount,
        )

    effective_days_overdue = max(0, days_overdue - config.grace_period_days)

    # Within the grace period the penalty is waived entirely
    penalty_amount = (
        calculate_penalty(original_amount, config.penalty_type, config.penalty_value)
        if effective_days_overdue > 0
        else 0.0
    )

    interest_amount = calculate_mora_interest(
        original_amount,
        effective_days_overdue,
        config.interest_type,
        config.interest_value,
    )

    correction_amount = calculate_monetary_correction(
        original_amount,
        days_overdue,
        config.monetary_correction_index,
        rates,
    )

    total_interest = penalty_amount + interest_amount + correction_amount
    updated_amount = original_amount + total_interest

    return InterestCalculationResult(
        days_overdue=days_overdue,
        effective_days_overdue=effective_days_overdue,
        penalty_amount=round_currency(penalty_amount),
        interest_amount=round_currency(interest_amount),
        correction_amount=round_currency(correction_amount),
        total_interest=round_currency(total_interest),
        updated_amount=round_currency(updated_amount),
    )


def is_overdue(due_date: DateLike, reference_date: Optional[DateLike] = None) -> bool:
    return calculate_days_overdue(due_date, reference_date) > 0


def is_within_grace_period(
    due_date: DateLike,
    grace_period_days: int,
    reference_date: Optional[DateLike] = None,
) -> bool:
    """Overdue, but not by more than the grace period"""
    days_overdue = calculate_days_overdue(due_date, reference_date)
    return 0 < days_overdue <= grace_period_days
