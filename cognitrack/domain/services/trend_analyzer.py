"""
Trend analysis over one instrument's score history.

Every supported instrument scores higher for worse, so a positive change rate
means the patient is getting worse.
"""

import logging
from collections.abc import Iterable, Sequence

from cognitrack.domain.enums import OverallTrend, TrendDirection, TrendSignificance
from cognitrack.domain.exceptions import InvalidInputError
from cognitrack.domain.value_objects.analytics import TimeSeriesPoint, TrendResult

logger = logging.getLogger(__name__)

DEFAULT_WINDOW_SIZE = 3
DEFAULT_DIRECTION_THRESHOLD = 0.5

# (minimum |change rate|, significance), checked in order
SIGNIFICANCE_THRESHOLDS: tuple[tuple[float, TrendSignificance], ...] = (
    (3.0, TrendSignificance.SEVERE),
    (2.0, TrendSignificance.MODERATE),
    (1.0, TrendSignificance.MILD),
)


def classify_significance(change_rate: float) -> TrendSignificance:
    magnitude = abs(change_rate)
    for minimum, significance in SIGNIFICANCE_THRESHOLDS:
        if magnitude >= minimum:
            return significance
    return TrendSignificance.NONE


def classify_direction(change_rate: float, threshold: float = DEFAULT_DIRECTION_THRESHOLD) -> TrendDirection:
    if change_rate > threshold:
        return TrendDirection.WORSENING
    if change_rate < -threshold:
        return TrendDirection.IMPROVING
    return TrendDirection.STABLE


def analyze_trend(
    scores: Sequence[float],
    window_size: int = DEFAULT_WINDOW_SIZE,
    threshold: float = DEFAULT_DIRECTION_THRESHOLD,
) -> TrendResult:
    """
    Compute the trend of a score series.

    Args:
        scores: Scores ordered most recent first
        window_size: Number of most recent scores to consider
        threshold: Change rate beyond which the series is not stable

    Returns:
        TrendResult; stable with a zero rate when fewer than two scores exist

    Raises:
        InvalidInputError: If the window holds fewer than two scores
    """
    if window_size < 2:
        raise InvalidInputError(
            message="Invalid trend window",
            detail=[f"window_size must be at least 2, got {window_size}"],
        )

    if len(scores) < 2:
        return TrendResult.stable()

    window = list(scores[:window_size])
    change_rate = (window[0] - window[-1]) / len(window)

    return TrendResult(
        direction=classify_direction(change_rate, threshold),
        change_rate=change_rate,
        significance=classify_significance(change_rate),
    )


def trend_from_series(
    points: Iterable[TimeSeriesPoint],
    window_size: int = DEFAULT_WINDOW_SIZE,
    threshold: float = DEFAULT_DIRECTION_THRESHOLD,
) -> TrendResult:
    """Trend of dated points given in any order."""
    ordered = sorted(points, key=lambda point: point.timestamp, reverse=True)
    return analyze_trend([point.score for point in ordered], window_size, threshold)


def overall_trend(trends: Iterable[TrendResult]) -> OverallTrend:
    """
    Combine per-instrument trends into one patient-level label.

    This is an ordinal rule, not a statistical test:
    two or more instruments worsening with severe significance is a rapid
    decline, three or more worsening is a decline, any worsening is stable,
    and no worsening at all counts as improving.
    """
    trends = list(trends)
    worsening = [t for t in trends if t.direction == TrendDirection.WORSENING]
    severe = [t for t in worsening if t.significance == TrendSignificance.SEVERE]

    if len(severe) >= 2:
        result = OverallTrend.RAPIDLY_DECLINING
    elif len(worsening) >= 3:
        result = OverallTrend.DECLINING
    elif worsening:
        result = OverallTrend.STABLE
    else:
        result = OverallTrend.IMPROVING

    logger.debug(f"Overall trend {result.value} from {len(worsening)} worsening instrument(s)")
    return result
