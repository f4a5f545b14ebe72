"""Duplicate scoring engine - flags imported statement rows that likely already exist"""

import re
from typing import List, Sequence

from finance_core.domain.models import (
    DuplicateCandidate,
    DuplicateDetectionTransaction,
    DuplicateMatch,
    DuplicateScoreResult,
    ExistingTransaction,
    MatchType,
)
from finance_core.utils.date_utils import DateLike, elapsed_days

# Weights (total: 6)
WEIGHTS = {
    "amount": 3,  # exact match, strongest signal
    "date": 2,  # within tolerance
    "description": 1,  # token similarity
}

MAX_SCORE = sum(WEIGHTS.values())
THRESHOLD_PERCENTAGE = 0.8
DATE_TOLERANCE_DAYS = 1
MIN_DESCRIPTION_SIMILARITY = 0.5
MIN_TOKEN_LENGTH = 3

STOP_WORDS = frozenset(
    {
        # Portuguese
        "de", "da", "do", "para", "com", "em", "no", "na", "os", "as", "um", "uma",
        # English
        "the", "a", "an", "of", "to", "in", "for", "on", "at",
    }
)

# ASCII word characters, whitespace and Portuguese accented letters survive
_NON_TOKEN_CHARS = re.compile(r"[^\w\sáàâãéèêíìîóòôõúùûç]", re.ASCII)


def dates_within_tolerance(
    date1: DateLike,
    date2: DateLike,
    tolerance_days: float = DATE_TOLERANCE_DAYS,
) -> bool:
    """Calendar-time distance, not business-day aware"""
    return elapsed_days(date1, date2) <= tolerance_days


def extract_description_tokens(description: str) -> List[str]:
    """
    Key tokens of a description for similarity matching.

    Example:
        "PIX para João da Silva - Aluguel" → ["pix", "joão", "silva", "aluguel"]
    """
    normalized = _NON_TOKEN_CHARS.sub(" ", description.lower())
    return [
        token
        for token in normalized.split()
        if len(token) >= MIN_TOKEN_LENGTH and token not in STOP_WORDS
    ]


def calculate_token_similarity(tokens1: Sequence[str], tokens2: Sequence[str]) -> float:
    """Jaccard similarity of the two token sets, from 0.0 to 1.0"""
    if not tokens1 or not tokens2:
        return 0.0

    set1 = set(tokens1)
    set2 = set(tokens2)
    union_size = len(set1 | set2)
    if union_size == 0:
        return 0.0

    return len(set1 & set2) / union_size


def calculate_duplicate_score(
    candidate: DuplicateDetectionTransaction,
    target: DuplicateDetectionTransaction,
) -> DuplicateScoreResult:
    """
    Weighted similarity between two transactions.

    Scoring:
    - +3: identical amount (callers compare in a single currency unit)
    - +2: dates at most one day apart
    - +similarity: description similarity, only from 0.5 upwards
    Passes at 80% of the maximum score (e.g. amount + date alone = 5/6).
    """
    score = 0.0

    if candidate.amount == target.amount:
        score += WEIGHTS["amount"]

    if dates_within_tolerance(candidate.date, target.date):
        score += WEIGHTS["date"]

    similarity = calculate_token_similarity(
        extract_description_tokens(candidate.description),
        extract_description_tokens(target.description),
    )
    # Below the floor descriptions contribute nothing
    if similarity >= MIN_DESCRIPTION_SIMILARITY:
        score += WEIGHTS["description"] * similarity

    score_percentage = score / MAX_SCORE

    return DuplicateScoreResult(
        score=score,
        score_percentage=score_percentage,
        passed=score_percentage >= THRESHOLD_PERCENTAGE,
    )


def detect_within_batch_duplicates(candidates: Sequence[DuplicateCandidate]) -> List[DuplicateMatch]:
    """Compare each imported row with every later row of the same batch"""
    duplicates = []

    for i, candidate in enumerate(candidates):
        for target in candidates[i + 1:]:
            result = calculate_duplicate_score(candidate, target)
            if result.passed:
                duplicates.append(
                    DuplicateMatch(
                        candidate=candidate,
                        matched_with=target,
                        match_type=MatchType.WITHIN_BATCH,
                        score=result.score,
                        score_percentage=result.score_percentage,
                    )
                )

    return duplicates


def detect_existing_duplicates(
    candidates: Sequence[DuplicateCandidate],
    existing: Sequence[ExistingTransaction],
) -> List[DuplicateMatch]:
    """Match imported rows against stored transactions; first hit wins per row"""
    duplicates = []

    for candidate in candidates:
        for transaction in existing:
            result = calculate_duplicate_score(candidate, transaction)
            if result.passed:
                duplicates.append(
                    DuplicateMatch(
                        candidate=candidate,
                        matched_with=transaction,
                        match_type=MatchType.EXISTING_DATABASE,
                        score=result.score,
                        score_percentage=result.score_percentage,
                    )
                )
                break

    return duplicates


def detect_all_duplicates(
    candidates: Sequence[DuplicateCandidate],
    existing: Sequence[ExistingTransaction],
) -> List[DuplicateMatch]:
    """Within-batch matches first, then matches against stored transactions"""
    return detect_within_batch_duplicates(candidates) + detect_existing_duplicates(candidates, existing)
