"""Structured JSON logging for production observability"""

import logging
import sys
from datetime import datetime, timezone
from typing import Any, Dict, Optional

from pythonjsonlogger import jsonlogger

from finance_core.config import settings


class CustomJsonFormatter(jsonlogger.JsonFormatter):
    """Custom JSON formatter with timestamp and service metadata"""

    def add_fields(self, log_record: Dict[str, Any], record: logging.LogRecord, message_dict: Dict[str, Any]) -> None:
        super().add_fields(log_record, record, message_dict)
        log_record["timestamp"] = datetime.now(timezone.utc).isoformat()
        log_record["level"] = record.levelname
        log_record["service"] = settings.service_name


def setup_logging(level: Optional[str] = None) -> None:
    """Configure structured JSON logging (level defaults to settings.log_level)"""
    logger = logging.getLogger()
    logger.setLevel(level or settings.log_level)

    # Remove existing handlers
    logger.handlers.clear()

    handler = logging.StreamHandler(sys.stdout)
    formatter = CustomJsonFormatter("%(timestamp)s %(level)s %(name)s %(message)s")
    handler.setFormatter(formatter)
    logger.addHandler(handler)


def log_interest_assessment(
    days_overdue: int,
    original_amount: float,
    total_interest: float,
    template_id: str,
) -> None:
    """Log structured accrual outcome for analysis"""
    logging.getLogger("finance_core.bills").info(
        "Interest assessed",
        extra={
            "step": "interest_assessment",
            "template_id": template_id,
            "days_overdue": days_overdue,
            "original_amount": original_amount,
            "total_interest": total_interest,
        },
    )


def log_duplicate_scan(
    candidate_count: int,
    existing_count: int,
    within_batch: int,
    existing_database: int,
) -> None:
    """Log structured duplicate scan outcome for the import flow"""
    logging.getLogger("finance_core.imports").info(
        "Duplicate scan completed",
        extra={
            "step": "duplicate_scan",
            "candidate_count": candidate_count,
            "existing_count": existing_count,
            "within_batch_matches": within_batch,
            "existing_database_matches": existing_database,
        },
    )
