"""Interest template resolution - which policy applies to a bill"""

import math
from typing import Iterable, Optional

from finance_core.domain.exceptions import InvalidTemplateError
from finance_core.domain.models import InterestConfig, InterestTemplate


def parse_template_value(raw: Optional[str], field_name: str) -> Optional[float]:
    """Stored decimal string → float; blank means "not configured" """
    if raw is None or str(raw).strip() == "":
        return None
    try:
        value = float(raw)
    except (TypeError, ValueError) as e:
        raise InvalidTemplateError(f"Invalid {field_name}: {raw!r}") from e
    if not math.isfinite(value):
        raise InvalidTemplateError(f"Invalid {field_name}: {raw!r}")
    return value


def interest_config_from_template(template: InterestTemplate) -> InterestConfig:
    if template.grace_period_days < 0:
        raise InvalidTemplateError(
            f"Template {template.id} has negative grace period: {template.grace_period_days}"
        )

    return InterestConfig(
        penalty_type=template.penalty_type,
        penalty_value=parse_template_value(template.penalty_value, "penalty_value"),
        interest_type=template.interest_type,
        interest_value=parse_template_value(template.interest_value, "interest_value"),
        monetary_correction_index=template.monetary_correction_index,
        grace_period_days=template.grace_period_days,
    )


def find_default_template(templates: Iterable[InterestTemplate]) -> Optional[InterestTemplate]:
    """The organization's active default template, if any"""
    for template in templates:
        if template.is_default and template.is_active:
            return template
    return None


def resolve_interest_template(
    bill_template: Optional[InterestTemplate],
    organization_templates: Iterable[InterestTemplate] = (),
) -> Optional[InterestTemplate]:
    """
    Pick the template governing a bill.

    Order:
    1. Template attached to the bill, when active
    2. Organization default template
    """
    if bill_template is not None and bill_template.is_active:
        return bill_template
    return find_default_template(organization_templates)
