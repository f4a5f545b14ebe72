"""Rate index quotes - validation and fallback to the default snapshot"""

import logging
from typing import Any, Mapping, Optional

from pydantic import BaseModel, ValidationError, field_validator

from finance_core.config import settings
from finance_core.domain.models import InterestRates
from finance_core.infrastructure.observability.metrics import rate_fallback_counter

logger = logging.getLogger(__name__)


class RateQuotes(BaseModel):
    """Annual percentage rates as returned by the rate index collaborator"""

    ipca: float
    selic: float
    cdi: float

    @field_validator("ipca", "selic", "cdi")
    @classmethod
    def must_be_positive(cls, value: float) -> float:
        # NaN fails both comparisons
        if not value > 0 or value == float("inf"):
            raise ValueError("rate must be a finite number greater than zero")
        return value

    def to_rates(self) -> InterestRates:
        return InterestRates(ipca=self.ipca, selic=self.selic, cdi=self.cdi)


def resolve_interest_rates(
    raw: Optional[Mapping[str, Any]],
    fallback: Optional[InterestRates] = None,
) -> InterestRates:
    """
    Turn a raw quote payload into an InterestRates snapshot.

    Falls back (whole snapshot, never per index) when:
    - the collaborator returned nothing
    - any rate is missing, non-numeric, NaN, infinite or not positive

    The fallback defaults to the configured snapshot (settings.fallback_rates()).
    """
    if fallback is None:
        fallback = settings.fallback_rates()

    if raw is None:
        logger.warning("Rate quotes unavailable, using fallback rates", extra={"fallback": vars(fallback)})
        rate_fallback_counter.inc()
        return fallback

    try:
        return RateQuotes.model_validate(dict(raw)).to_rates()
    except (ValidationError, TypeError, ValueError) as e:
        logger.warning(
            f"Invalid rate quotes, using fallback rates: {e}",
            extra={"fallback": vars(fallback)},
        )
        rate_fallback_counter.inc()
        return fallback
