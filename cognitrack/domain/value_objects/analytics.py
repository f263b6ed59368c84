"""
Analytics value objects.

Plain immutable records produced by the trend analyzer, correlation engine and
the overview/progression aggregator, handed to outer layers for rendering.
"""

from dataclasses import dataclass, field
from datetime import date, datetime

from cognitrack.domain.enums import (
    AlertType,
    CorrelationStrength,
    MilestoneSignificance,
    OverallTrend,
    TrendDirection,
    TrendSignificance,
)


@dataclass(frozen=True)
class TimeSeriesPoint:
    timestamp: datetime
    score: float


@dataclass(frozen=True)
class TrendResult:
    direction: TrendDirection
    change_rate: float
    significance: TrendSignificance

    @classmethod
    def stable(cls) -> "TrendResult":
        """Result used when there is not enough history to speak of a trend."""
        return cls(TrendDirection.STABLE, 0.0, TrendSignificance.NONE)


@dataclass(frozen=True)
class CorrelationResult:
    """
    Pearson correlation between two aligned score series.

    ``p_value`` is ``None`` when it cannot be computed (fewer than three pairs,
    or a degenerate series).
    """

    correlation: float
    strength: CorrelationStrength
    sample_size: int
    p_value: float | None = None

    @classmethod
    def none(cls, sample_size: int = 0) -> "CorrelationResult":
        return cls(0.0, CorrelationStrength.NONE, sample_size, None)


@dataclass(frozen=True)
class Alert:
    type: AlertType
    category: str
    message: str
    priority: int  # 1 = most urgent


@dataclass(frozen=True)
class LatestAssessmentSummary:
    id: str
    date: datetime
    score: float
    severity: str
    sum_of_boxes: float | None = None  # CDR only


@dataclass(frozen=True)
class TrendSummary:
    overall_trend: OverallTrend
    gds: TrendResult
    npi: TrendResult
    faq: TrendResult
    cdr: TrendResult
    notes: tuple[str, ...] = ()


@dataclass(frozen=True)
class PatientSummary:
    id: str
    first_name: str
    last_name: str
    medical_record_no: str
    date_of_birth: date
    age: int


@dataclass(frozen=True)
class PatientOverview:
    patient: PatientSummary | None
    assessment_counts: dict[str, int]
    latest_assessments: dict[str, LatestAssessmentSummary | None]
    alerts: tuple[Alert, ...]
    trends: TrendSummary


@dataclass(frozen=True)
class ProgressionPoint:
    date: datetime
    score: float
    change: float
    percent_change: float


@dataclass(frozen=True)
class Milestone:
    date: datetime
    event: str
    significance: MilestoneSignificance
    description: str


@dataclass(frozen=True)
class TimeRange:
    start: datetime
    end: datetime
    duration_days: int


@dataclass(frozen=True)
class ProgressionReport:
    patient_id: str
    time_range: TimeRange
    gds_progression: tuple[ProgressionPoint, ...]
    npi_progression: tuple[ProgressionPoint, ...]
    faq_progression: tuple[ProgressionPoint, ...]
    cdr_progression: tuple[ProgressionPoint, ...]
    milestones: tuple[Milestone, ...]
    recommendations: tuple[str, ...]


@dataclass(frozen=True)
class CorrelationReport:
    patient_id: str
    correlations: dict[str, CorrelationResult] = field(default_factory=dict)
    insights: tuple[str, ...] = ()
