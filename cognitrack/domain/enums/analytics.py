"""Labels produced by the trend, correlation and aggregation services."""

from enum import Enum


class TrendDirection(str, Enum):
    IMPROVING = "improving"
    STABLE = "stable"
    WORSENING = "worsening"


class TrendSignificance(str, Enum):
    NONE = "none"
    MILD = "mild"
    MODERATE = "moderate"
    SEVERE = "severe"


class OverallTrend(str, Enum):
    """Patient-level trend combined from the four instrument trends."""

    IMPROVING = "improving"
    STABLE = "stable"
    DECLINING = "declining"
    RAPIDLY_DECLINING = "rapidly_declining"


class CorrelationStrength(str, Enum):
    NONE = "none"
    WEAK = "weak"
    MODERATE = "moderate"
    STRONG = "strong"


class AlertType(str, Enum):
    INFO = "info"
    WARNING = "warning"
    DANGER = "danger"


class MilestoneSignificance(str, Enum):
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"
