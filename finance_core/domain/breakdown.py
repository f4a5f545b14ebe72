"""Structured interest breakdown - decides which lines appear, leaves wording to presentation"""

from typing import List

from finance_core.domain.accrual import DAYS_PER_MONTH
from finance_core.domain.models import (
    BreakdownItem,
    BreakdownKind,
    InterestCalculationResult,
    InterestConfig,
    InterestType,
    PenaltyType,
)


def build_breakdown_items(
    result: InterestCalculationResult,
    config: InterestConfig,
    original_amount: float,
) -> List[BreakdownItem]:
    """
    Ordered breakdown of an accrual result.

    Rules:
    - Original amount always comes first
    - Penalty, interest and correction lines only when their amount is positive
    - Each item carries the parameters its label needs (rate, days, months, index)
    """
    items = [BreakdownItem(kind=BreakdownKind.ORIGINAL, amount=original_amount)]

    if result.penalty_amount > 0:
        if config.penalty_type == PenaltyType.PERCENTAGE:
            items.append(
                BreakdownItem(
                    kind=BreakdownKind.PENALTY_PERCENTAGE,
                    amount=result.penalty_amount,
                    rate=config.penalty_value,
                )
            )
        else:
            items.append(BreakdownItem(kind=BreakdownKind.PENALTY_FIXED, amount=result.penalty_amount))

    if result.interest_amount > 0:
        if config.interest_type == InterestType.DAILY:
            items.append(
                BreakdownItem(
                    kind=BreakdownKind.INTEREST_DAILY,
                    amount=result.interest_amount,
                    rate=config.interest_value,
                    days=result.effective_days_overdue,
                )
            )
        else:
            items.append(
                BreakdownItem(
                    kind=BreakdownKind.INTEREST_MONTHLY,
                    amount=result.interest_amount,
                    rate=config.interest_value,
                    months=result.effective_days_overdue / DAYS_PER_MONTH,
                )
            )

    if result.correction_amount > 0:
        items.append(
            BreakdownItem(
                kind=BreakdownKind.CORRECTION,
                amount=result.correction_amount,
                days=result.days_overdue,
                index=config.monetary_correction_index,
            )
        )

    return items
