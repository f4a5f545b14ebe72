"""Pytest fixtures for testing"""

import logging
from datetime import date
from typing import Generator

import pytest

from finance_core.domain.models import (
    DEFAULT_INTEREST_RATES,
    DuplicateCandidate,
    ExistingTransaction,
    InterestConfig,
    InterestRates,
    InterestTemplate,
)


@pytest.fixture
def reference_date() -> date:
    """Fixed "today" so results never depend on the wall clock"""
    return date(2024, 6, 30)


@pytest.fixture
def rates() -> InterestRates:
    return DEFAULT_INTEREST_RATES


@pytest.fixture
def full_config() -> InterestConfig:
    """2% penalty, 1% a month interest, SELIC correction, no grace period"""
    return InterestConfig(
        penalty_type="percentage",
        penalty_value=2.0,
        interest_type="monthly",
        interest_value=1.0,
        monetary_correction_index="selic",
        grace_period_days=0,
    )


@pytest.fixture
def template() -> InterestTemplate:
    return InterestTemplate(
        id="tpl_standard",
        name="Standard receivables",
        penalty_type="percentage",
        penalty_value="2",
        interest_type="monthly",
        interest_value="1",
        monetary_correction_index="selic",
        grace_period_days=0,
    )


@pytest.fixture
def import_batch() -> list[DuplicateCandidate]:
    """Statement rows: the first two are the same purchase exported twice"""
    return [
        DuplicateCandidate(
            date=date(2024, 3, 10),
            amount=-150.0,
            description="Supermercado Extra",
            row_index=0,
            file_index=0,
            filename="march.ofx",
        ),
        DuplicateCandidate(
            date=date(2024, 3, 11),
            amount=-150.0,
            description="Supermercado Extra",
            row_index=1,
            file_index=0,
            filename="march.ofx",
        ),
        DuplicateCandidate(
            date=date(2024, 3, 15),
            amount=3000.0,
            description="Salário empresa",
            row_index=2,
            file_index=0,
            filename="march.ofx",
        ),
    ]


@pytest.fixture
def stored_transactions() -> list[ExistingTransaction]:
    return [
        ExistingTransaction(
            date=date(2024, 3, 10),
            amount=-150.0,
            description="Supermercado Extra Loja",
            id="txn_1",
        ),
        ExistingTransaction(
            date=date(2024, 3, 10),
            amount=-150.0,
            description="Supermercado Extra",
            id="txn_2",
        ),
    ]


@pytest.fixture
def restore_root_logger() -> Generator[None, None, None]:
    """setup_logging replaces root handlers; put the originals back afterwards"""
    root = logging.getLogger()
    handlers = list(root.handlers)
    level = root.level
    try:
        yield
    finally:
        root.handlers[:] = handlers
        root.setLevel(level)
