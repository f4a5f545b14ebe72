"""Unit tests for duplicate transaction scoring"""

import pytest
from datetime import date, datetime
from finance_core.domain.duplicates import (
    MAX_SCORE,
    calculate_duplicate_score,
    calculate_token_similarity,
    dates_within_tolerance,
    detect_all_duplicates,
    detect_existing_duplicates,
    detect_within_batch_duplicates,
    extract_description_tokens,
)
from finance_core.domain.models import DuplicateDetectionTransaction, MatchType


def _txn(day: date, amount: float, description: str) -> DuplicateDetectionTransaction:
    return DuplicateDetectionTransaction(date=day, amount=amount, description=description)


def test_dates_within_tolerance():
    """Test one day of calendar-time distance, fractional for datetimes"""
    assert dates_within_tolerance(date(2024, 1, 1), date(2024, 1, 2)) is True
    assert dates_within_tolerance(date(2024, 1, 3), date(2024, 1, 1)) is False
    assert dates_within_tolerance(datetime(2024, 1, 1, 0, 0), datetime(2024, 1, 2, 0, 0)) is True
    assert dates_within_tolerance(datetime(2024, 1, 1, 0, 0), datetime(2024, 1, 2, 0, 1)) is False
    assert dates_within_tolerance(date(2024, 1, 1), date(2024, 1, 4), tolerance_days=3) is True


def test_extract_description_tokens():
    """Test lowercasing, punctuation stripping, short tokens and stop words"""
    assert extract_description_tokens("PIX para João da Silva - Aluguel") == ["pix", "joão", "silva", "aluguel"]
    assert extract_description_tokens("The rent of the flat at NY") == ["rent", "flat"]
    assert extract_description_tokens("Pagamento*Boleto#123") == ["pagamento", "boleto", "123"]
    assert extract_description_tokens("uber_trip") == ["uber_trip"]
    assert extract_description_tokens("") == []


def test_calculate_token_similarity():
    """Test Jaccard similarity over token sets"""
    assert calculate_token_similarity(["aluguel", "janeiro"], ["aluguel"]) == 0.5
    assert calculate_token_similarity(["netflix", "netflix"], ["netflix"]) == 1.0
    assert calculate_token_similarity(["aluguel"], ["mercado"]) == 0.0
    assert calculate_token_similarity([], ["mercado"]) == 0.0
    assert calculate_token_similarity(["mercado"], []) == 0.0


def test_duplicate_score_amount_and_date_pass_without_description():
    """Test same amount one day apart passes even with unrelated descriptions"""
    candidate = _txn(date(2024, 5, 1), 89.9, "Netflix subscription")
    target = _txn(date(2024, 5, 2), 89.9, "Grocery store")

    result = calculate_duplicate_score(candidate, target)

    assert result.score == 5
    assert result.score_percentage == pytest.approx(0.8333, abs=1e-4)
    assert result.passed is True


def test_duplicate_score_amount_only_fails():
    """Test a matching amount alone is not enough"""
    candidate = _txn(date(2024, 5, 1), 89.9, "Netflix subscription")
    target = _txn(date(2024, 5, 4), 89.9, "Grocery store")

    result = calculate_duplicate_score(candidate, target)

    assert result.score == 3
    assert result.score_percentage == 0.5
    assert result.passed is False


def test_duplicate_score_identical_transactions():
    """Test a perfect match scores the maximum"""
    candidate = _txn(date(2024, 5, 1), -45.0, "Padaria Pão Quente")

    result = calculate_duplicate_score(candidate, candidate)

    assert result.score == MAX_SCORE
    assert result.score_percentage == 1.0
    assert result.passed is True


def test_duplicate_score_description_floor_at_half():
    """Test similarity of exactly 0.5 counts, anything below does not"""
    candidate = _txn(date(2024, 5, 1), 1500.0, "Aluguel janeiro")

    at_floor = calculate_duplicate_score(candidate, _txn(date(2024, 5, 1), 1500.0, "Aluguel"))
    below_floor = calculate_duplicate_score(candidate, _txn(date(2024, 5, 1), 1500.0, "Aluguel fevereiro"))

    assert at_floor.score == 5.5
    assert below_floor.score == 5.0


def test_duplicate_score_similarity_049_contributes_nothing():
    """Test the jump at 0.5: 0.49 similarity adds zero"""
    tokens = [f"tok{i:02d}" for i in range(100)]
    candidate = _txn(date(2024, 1, 1), 10.0, " ".join(tokens))
    target = _txn(date(2024, 6, 1), 20.0, " ".join(tokens[:49]))

    assert calculate_token_similarity(tokens, tokens[:49]) == 0.49
    assert calculate_duplicate_score(candidate, target).score == 0

    target_at_half = _txn(date(2024, 6, 1), 20.0, " ".join(tokens[:50]))
    assert calculate_duplicate_score(candidate, target_at_half).score == 0.5


def test_duplicate_score_is_idempotent():
    """Test repeated scoring is bit-identical"""
    candidate = _txn(date(2024, 5, 1), 12.34, "Uber trip centro")
    target = _txn(date(2024, 5, 2), 12.34, "Uber trip")

    assert calculate_duplicate_score(candidate, target) == calculate_duplicate_score(candidate, target)


def test_detect_within_batch_duplicates(import_batch):
    """Test pairs inside the same import batch"""
    matches = detect_within_batch_duplicates(import_batch)

    assert len(matches) == 1
    assert matches[0].candidate.row_index == 0
    assert matches[0].matched_with.row_index == 1
    assert matches[0].match_type is MatchType.WITHIN_BATCH
    assert matches[0].score == 6.0


def test_detect_existing_duplicates_keeps_first_match(import_batch, stored_transactions):
    """Test each row is matched against at most one stored transaction"""
    matches = detect_existing_duplicates(import_batch, stored_transactions)

    assert [(m.candidate.row_index, m.matched_with.id) for m in matches] == [(0, "txn_1"), (1, "txn_1")]
    assert all(m.match_type is MatchType.EXISTING_DATABASE for m in matches)


def test_detect_all_duplicates_order(import_batch, stored_transactions):
    """Test within-batch matches come before stored-transaction matches"""
    matches = detect_all_duplicates(import_batch, stored_transactions)

    assert [m.match_type for m in matches] == [
        MatchType.WITHIN_BATCH,
        MatchType.EXISTING_DATABASE,
        MatchType.EXISTING_DATABASE,
    ]


def test_detect_duplicates_empty_inputs():
    """Test empty batches produce no matches"""
    assert detect_within_batch_duplicates([]) == []
    assert detect_existing_duplicates([], []) == []
    assert detect_all_duplicates([], []) == []
