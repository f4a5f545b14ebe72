"""Locale label rendering for interest breakdowns"""

from typing import Dict, List, Optional

from finance_core.domain.breakdown import build_breakdown_items
from finance_core.domain.exceptions import UnsupportedLocaleError
from finance_core.domain.models import (
    BreakdownItem,
    BreakdownKind,
    BreakdownLine,
    InterestBreakdown,
    InterestCalculationResult,
    InterestConfig,
    MonetaryCorrectionIndex,
)

DEFAULT_LOCALE = "pt_BR"

LABELS: Dict[str, Dict[BreakdownKind, str]] = {
    "pt_BR": {
        BreakdownKind.ORIGINAL: "Valor Original",
        BreakdownKind.PENALTY_PERCENTAGE: "Multa ({rate}%)",
        BreakdownKind.PENALTY_FIXED: "Multa (fixo)",
        BreakdownKind.INTEREST_DAILY: "Juros ({rate}%/dia × {days})",
        BreakdownKind.INTEREST_MONTHLY: "Juros ({rate}%/mês × {months})",
        BreakdownKind.CORRECTION: "{index} ({days} dias)",
    },
    "en": {
        BreakdownKind.ORIGINAL: "Original Amount",
        BreakdownKind.PENALTY_PERCENTAGE: "Penalty ({rate}%)",
        BreakdownKind.PENALTY_FIXED: "Penalty (fixed)",
        BreakdownKind.INTEREST_DAILY: "Interest ({rate}%/day × {days})",
        BreakdownKind.INTEREST_MONTHLY: "Interest ({rate}%/month × {months})",
        BreakdownKind.CORRECTION: "{index} ({days} days)",
    },
}


def format_number(value: Optional[float]) -> str:
    """Render rates the way they were entered: 2.0 → "2", 2.5 → "2.5" """
    if value is None:
        return "null"
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def render_label(item: BreakdownItem, locale: str = DEFAULT_LOCALE) -> str:
    if locale not in LABELS:
        raise UnsupportedLocaleError(f"No breakdown labels for locale {locale!r}")

    template = LABELS[locale][item.kind]
    index_name = item.index.value if isinstance(item.index, MonetaryCorrectionIndex) else item.index
    return template.format(
        rate=format_number(item.rate),
        days=item.days,
        months=f"{item.months:.1f}" if item.months is not None else "",
        index=str(index_name or "").upper(),
    )


def render_breakdown(
    items: List[BreakdownItem],
    total: float,
    locale: str = DEFAULT_LOCALE,
) -> InterestBreakdown:
    lines = [BreakdownLine(label=render_label(item, locale), value=item.amount) for item in items]
    return InterestBreakdown(lines=lines, total=total)


def format_interest_breakdown(
    result: InterestCalculationResult,
    config: InterestConfig,
    original_amount: float,
    locale: str = DEFAULT_LOCALE,
) -> InterestBreakdown:
    """
    Display-ready breakdown of an accrual result.

    Example (pt_BR):
        Valor Original           1000.00
        Multa (2%)                 20.00
        Juros (1%/mês × 1.0)       10.00
        SELIC (30 dias)            10.89
        total                    1040.89
    """
    items = build_breakdown_items(result, config, original_amount)
    return render_breakdown(items, result.updated_amount, locale)
