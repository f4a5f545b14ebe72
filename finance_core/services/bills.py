"""Bill interest assessment - entry point for the API and report layers"""

import logging
from typing import Iterable, Optional

from finance_core.config import settings
from finance_core.domain.accrual import calculate_interest, is_overdue
from finance_core.domain.models import Bill, BillInterestAssessment, InterestRates, InterestTemplate
from finance_core.domain.templates import interest_config_from_template, resolve_interest_template
from finance_core.infrastructure.observability.logging import log_interest_assessment
from finance_core.infrastructure.observability.metrics import record_interest_assessment
from finance_core.infrastructure.rates import resolve_interest_rates
from finance_core.presentation.labels import format_interest_breakdown
from finance_core.utils.date_utils import DateLike

logger = logging.getLogger(__name__)

INCOME = "income"


def assess_bill_interest(
    bill: Bill,
    organization_templates: Iterable[InterestTemplate] = (),
    rates: Optional[InterestRates] = None,
    reference_date: Optional[DateLike] = None,
    locale: Optional[str] = None,
) -> Optional[BillInterestAssessment]:
    """
    Compute interest owed on an overdue receivable.

    Flow:
    1. Only open, overdue income bills qualify
    2. Resolve the template (bill's own, else organization default)
    3. Calculate accrual with the given rates (configured fallback, logged and counted, when omitted)
    4. Render the breakdown, record metrics and log the outcome

    Returns None when the bill does not qualify.
    """
    if bill.type != INCOME or bill.completion_date is not None or not is_overdue(bill.due_date, reference_date):
        record_interest_assessment(False)
        return None

    template = resolve_interest_template(bill.interest_template, organization_templates)
    if template is None:
        logger.debug("No interest template for overdue bill")
        record_interest_assessment(False)
        return None

    config = interest_config_from_template(template)
    if rates is None:
        rates = resolve_interest_rates(None)

    result = calculate_interest(bill.amount, bill.due_date, config, rates, reference_date)
    breakdown = format_interest_breakdown(result, config, bill.amount, locale or settings.default_locale)

    record_interest_assessment(True, result.total_interest)
    log_interest_assessment(result.days_overdue, bill.amount, result.total_interest, template.id)

    return BillInterestAssessment(
        template=template,
        config=config,
        result=result,
        breakdown=breakdown,
        rates=rates,
    )
