"""Domain models - pure Python dataclasses representing business entities"""

from dataclasses import dataclass, field
from datetime import date, datetime
from enum import Enum
from typing import List, Optional, Type, Union


class PenaltyType(str, Enum):
    """How the late-payment penalty (multa) is charged"""

    NONE = "none"
    PERCENTAGE = "percentage"
    FIXED = "fixed"


class InterestType(str, Enum):
    """Period the mora interest rate refers to"""

    NONE = "none"
    DAILY = "daily"
    MONTHLY = "monthly"


class MonetaryCorrectionIndex(str, Enum):
    """Macroeconomic index used for monetary correction"""

    NONE = "none"
    IPCA = "ipca"
    SELIC = "selic"
    CDI = "cdi"


def _coerce(enum_cls: Type[Enum], value: Union[Enum, str]) -> Union[Enum, str]:
    """Accept enum members or their raw string values; unknown strings pass through"""
    if isinstance(value, enum_cls):
        return value
    try:
        return enum_cls(value)
    except ValueError:
        return value


@dataclass(frozen=True)
class InterestConfig:
    """Penalty/interest/correction policy applied to an overdue bill"""

    penalty_type: PenaltyType = PenaltyType.NONE
    penalty_value: Optional[float] = None
    interest_type: InterestType = InterestType.NONE
    interest_value: Optional[float] = None
    monetary_correction_index: MonetaryCorrectionIndex = MonetaryCorrectionIndex.NONE
    grace_period_days: int = 0

    def __post_init__(self) -> None:
        object.__setattr__(self, "penalty_type", _coerce(PenaltyType, self.penalty_type))
        object.__setattr__(self, "interest_type", _coerce(InterestType, self.interest_type))
        object.__setattr__(
            self,
            "monetary_correction_index",
            _coerce(MonetaryCorrectionIndex, self.monetary_correction_index),
        )


@dataclass(frozen=True)
class InterestRates:
    """Snapshot of annualized percentage rates for each correction index"""

    ipca: float
    selic: float
    cdi: float

    def rate_for(self, index: MonetaryCorrectionIndex) -> float:
        if index == MonetaryCorrectionIndex.IPCA:
            return self.ipca
        if index == MonetaryCorrectionIndex.SELIC:
            return self.selic
        if index == MonetaryCorrectionIndex.CDI:
            return self.cdi
        return 0.0


# Used whenever the rate index collaborator is unavailable or returns junk
DEFAULT_INTEREST_RATES = InterestRates(ipca=4.5, selic=13.25, cdi=13.15)


@dataclass(frozen=True)
class InterestCalculationResult:
    """Output of an accrual calculation; monetary fields are rounded to cents"""

    days_overdue: int
    effective_days_overdue: int
    penalty_amount: float
    interest_amount: float
    correction_amount: float
    total_interest: float
    updated_amount: float


class BreakdownKind(str, Enum):
    ORIGINAL = "original"
    PENALTY_PERCENTAGE = "penalty-percentage"
    PENALTY_FIXED = "penalty-fixed"
    INTEREST_DAILY = "interest-daily"
    INTEREST_MONTHLY = "interest-monthly"
    CORRECTION = "correction"


@dataclass(frozen=True)
class BreakdownItem:
    """Locale-free line of an interest breakdown"""

    kind: BreakdownKind
    amount: float
    rate: Optional[float] = None
    days: Optional[int] = None
    months: Optional[float] = None
    index: Optional[MonetaryCorrectionIndex] = None


@dataclass(frozen=True)
class BreakdownLine:
    label: str
    value: float


@dataclass(frozen=True)
class InterestBreakdown:
    lines: List[BreakdownLine]
    total: float


@dataclass(frozen=True)
class InterestTemplate:
    """Interest template as stored per organization (numeric values kept as decimal strings)"""

    id: str
    name: str
    penalty_type: str = "none"
    penalty_value: Optional[str] = None
    interest_type: str = "none"
    interest_value: Optional[str] = None
    monetary_correction_index: str = "none"
    grace_period_days: int = 0
    is_default: bool = False
    is_active: bool = True


@dataclass(frozen=True)
class Bill:
    """Projection of a bill record needed for interest assessment"""

    amount: float
    due_date: Union[date, datetime]
    type: str  # "income" or "expense"
    completion_date: Optional[Union[date, datetime]] = None
    interest_template: Optional[InterestTemplate] = None


@dataclass(frozen=True)
class DuplicateDetectionTransaction:
    """Minimal transaction projection used for duplicate comparison"""

    date: Union[date, datetime]
    amount: float
    description: str


@dataclass(frozen=True)
class DuplicateCandidate(DuplicateDetectionTransaction):
    """Row parsed from an imported statement file"""

    row_index: int = 0
    file_index: int = 0
    filename: str = ""


@dataclass(frozen=True)
class ExistingTransaction(DuplicateDetectionTransaction):
    """Transaction already stored for the organization"""

    id: str = ""


@dataclass(frozen=True)
class DuplicateScoreResult:
    score: float
    score_percentage: float
    passed: bool


class MatchType(str, Enum):
    WITHIN_BATCH = "within_batch"
    EXISTING_DATABASE = "existing_database"


@dataclass(frozen=True)
class DuplicateMatch:
    """Candidate row flagged as a likely duplicate of another transaction"""

    candidate: DuplicateCandidate
    matched_with: Union[DuplicateCandidate, ExistingTransaction]
    match_type: MatchType
    score: float
    score_percentage: float


@dataclass(frozen=True)
class DuplicateInfo:
    """Flattened duplicate flag consumed by the import preview"""

    row_index: int
    file_index: int
    duplicate_type: MatchType
    match_score: float
    existing_transaction_id: str = ""
    existing_transaction_date: str = ""
    existing_transaction_description: str = ""
    matched_file_index: Optional[int] = None
    matched_row_index: Optional[int] = None


@dataclass(frozen=True)
class BillInterestAssessment:
    """Interest assessment of an overdue bill, ready for display"""

    template: InterestTemplate
    config: InterestConfig
    result: InterestCalculationResult
    breakdown: InterestBreakdown
    rates: InterestRates = field(default=DEFAULT_INTEREST_RATES)
