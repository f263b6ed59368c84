"""Value objects for raw answers, score results and analytics output."""

from cognitrack.domain.value_objects.analytics import (
    Alert,
    CorrelationReport,
    CorrelationResult,
    LatestAssessmentSummary,
    Milestone,
    PatientOverview,
    PatientSummary,
    ProgressionPoint,
    ProgressionReport,
    TimeRange,
    TimeSeriesPoint,
    TrendResult,
    TrendSummary,
)
from cognitrack.domain.value_objects.answers import (
    CDR_DOMAIN_FIELDS,
    CDRBoxScores,
    FAQItemRating,
    GDSAnswer,
    NPIDomainRating,
)
from cognitrack.domain.value_objects.patient import PatientSnapshot
from cognitrack.domain.value_objects.score_result import (
    CDRResult,
    FAQResult,
    GDSResult,
    NPIResult,
    ScoreResult,
)

__all__ = [
    "CDR_DOMAIN_FIELDS",
    "Alert",
    "CDRBoxScores",
    "CDRResult",
    "CorrelationReport",
    "CorrelationResult",
    "FAQItemRating",
    "FAQResult",
    "GDSAnswer",
    "GDSResult",
    "LatestAssessmentSummary",
    "Milestone",
    "NPIDomainRating",
    "NPIResult",
    "PatientOverview",
    "PatientSnapshot",
    "PatientSummary",
    "ProgressionPoint",
    "ProgressionReport",
    "ScoreResult",
    "TimeRange",
    "TimeSeriesPoint",
    "TrendResult",
    "TrendSummary",
]
