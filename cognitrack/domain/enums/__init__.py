"""Enumerations shared across the scoring and analytics domain."""

from cognitrack.domain.enums.analytics import (
    AlertType,
    CorrelationStrength,
    MilestoneSignificance,
    OverallTrend,
    TrendDirection,
    TrendSignificance,
)
from cognitrack.domain.enums.assessment_type import AssessmentType

__all__ = [
    "AlertType",
    "AssessmentType",
    "CorrelationStrength",
    "MilestoneSignificance",
    "OverallTrend",
    "TrendDirection",
    "TrendSignificance",
]
