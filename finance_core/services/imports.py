"""Duplicate flagging for the statement import wizard"""

from typing import List, Sequence

from finance_core.domain.duplicates import detect_all_duplicates
from finance_core.domain.models import (
    DuplicateCandidate,
    DuplicateInfo,
    DuplicateMatch,
    ExistingTransaction,
    MatchType,
)
from finance_core.infrastructure.observability.logging import log_duplicate_scan
from finance_core.infrastructure.observability.metrics import record_duplicates
from finance_core.utils.date_utils import to_iso_utc


def flag_import_duplicates(
    candidates: Sequence[DuplicateCandidate],
    existing: Sequence[ExistingTransaction],
) -> List[DuplicateMatch]:
    """Scan an import batch for duplicates, within itself and against stored transactions"""
    matches = detect_all_duplicates(candidates, existing)

    within_batch = sum(1 for m in matches if m.match_type == MatchType.WITHIN_BATCH)
    existing_database = len(matches) - within_batch

    record_duplicates(within_batch, existing_database)
    log_duplicate_scan(len(candidates), len(existing), within_batch, existing_database)

    return matches


def to_duplicate_infos(matches: Sequence[DuplicateMatch]) -> List[DuplicateInfo]:
    """Flatten matches for the import preview table"""
    infos = []
    for match in matches:
        if match.match_type == MatchType.EXISTING_DATABASE:
            existing = match.matched_with
            infos.append(
                DuplicateInfo(
                    row_index=match.candidate.row_index,
                    file_index=match.candidate.file_index,
                    duplicate_type=match.match_type,
                    match_score=match.score_percentage,
                    existing_transaction_id=existing.id,
                    existing_transaction_date=to_iso_utc(existing.date),
                    existing_transaction_description=existing.description,
                )
            )
        else:
            infos.append(
                DuplicateInfo(
                    row_index=match.candidate.row_index,
                    file_index=match.candidate.file_index,
                    duplicate_type=match.match_type,
                    match_score=match.score_percentage,
                    matched_file_index=match.matched_with.file_index,
                    matched_row_index=match.matched_with.row_index,
                )
            )
    return infos
