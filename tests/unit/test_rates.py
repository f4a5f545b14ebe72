"""Unit tests for rate quote validation and fallback"""

import logging

import pytest
from prometheus_client import REGISTRY
from finance_core.config import Settings
from finance_core.domain.models import DEFAULT_INTEREST_RATES, InterestRates, MonetaryCorrectionIndex
from finance_core.infrastructure.rates import resolve_interest_rates


def _fallback_count() -> float:
    return REGISTRY.get_sample_value("finance_core_rate_fallbacks_total") or 0.0


def test_resolve_interest_rates_valid_quotes():
    """Test valid quotes pass through untouched"""
    rates = resolve_interest_rates({"ipca": 3.9, "selic": 10.5, "cdi": 10.4})

    assert rates == InterestRates(ipca=3.9, selic=10.5, cdi=10.4)


def test_resolve_interest_rates_unavailable():
    """Test a missing payload uses the default snapshot"""
    before = _fallback_count()

    assert resolve_interest_rates(None) == DEFAULT_INTEREST_RATES
    assert _fallback_count() == before + 1


@pytest.mark.parametrize(
    "raw",
    [
        {"ipca": 0, "selic": 10.5, "cdi": 10.4},
        {"ipca": 3.9, "selic": -1, "cdi": 10.4},
        {"ipca": float("nan"), "selic": 10.5, "cdi": 10.4},
        {"ipca": 3.9, "selic": float("inf"), "cdi": 10.4},
        {"ipca": 3.9, "selic": 10.5},
        {"ipca": "n/a", "selic": 10.5, "cdi": 10.4},
        [("ipca", 3.9)],
    ],
)
def test_resolve_interest_rates_invalid_quotes(raw, caplog):
    """Test any invalid rate replaces the whole snapshot and logs a warning"""
    with caplog.at_level(logging.WARNING):
        rates = resolve_interest_rates(raw)

    assert rates == DEFAULT_INTEREST_RATES
    assert "fallback" in caplog.text


def test_resolve_interest_rates_custom_fallback():
    """Test callers can supply their own fallback snapshot"""
    fallback = InterestRates(ipca=1.0, selic=2.0, cdi=3.0)

    assert resolve_interest_rates(None, fallback=fallback) is fallback


def test_default_rates_match_settings():
    """Test the settings fallback defaults to the documented snapshot"""
    assert Settings().fallback_rates() == DEFAULT_INTEREST_RATES


def test_rate_for_index():
    """Test index lookup on a snapshot"""
    assert DEFAULT_INTEREST_RATES.rate_for(MonetaryCorrectionIndex.SELIC) == 13.25
    assert DEFAULT_INTEREST_RATES.rate_for(MonetaryCorrectionIndex.IPCA) == 4.5
    assert DEFAULT_INTEREST_RATES.rate_for(MonetaryCorrectionIndex.CDI) == 13.15
    assert DEFAULT_INTEREST_RATES.rate_for(MonetaryCorrectionIndex.NONE) == 0.0
