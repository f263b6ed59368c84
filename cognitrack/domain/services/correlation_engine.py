"""
Correlation engine.

Aligns two dated score series by nearest date and computes Pearson's r with a
two-sided p-value. "No signal" situations (no aligned pairs, a constant
series) produce a neutral result rather than an error.
"""

import logging
import math
from collections.abc import Mapping, Sequence

import numpy as np
from scipy import stats

from cognitrack.domain.enums import AssessmentType, CorrelationStrength
from cognitrack.domain.exceptions import ComputationDegenerateError
from cognitrack.domain.utils.datetime_utils import SECONDS_PER_DAY, seconds_between
from cognitrack.domain.value_objects.analytics import CorrelationReport, CorrelationResult, TimeSeriesPoint

logger = logging.getLogger(__name__)

DEFAULT_WINDOW_DAYS = 14

STRENGTH_THRESHOLDS: tuple[tuple[float, CorrelationStrength], ...] = (
    (0.7, CorrelationStrength.STRONG),
    (0.4, CorrelationStrength.MODERATE),
    (0.2, CorrelationStrength.WEAK),
)

# Report key -> (first instrument, second instrument)
CORRELATION_PAIRS: dict[str, tuple[AssessmentType, AssessmentType]] = {
    "gds_npi": (AssessmentType.GDS, AssessmentType.NPI),
    "gds_faq": (AssessmentType.GDS, AssessmentType.FAQ),
    "gds_cdr": (AssessmentType.GDS, AssessmentType.CDR),
    "npi_faq": (AssessmentType.NPI, AssessmentType.FAQ),
    "npi_cdr": (AssessmentType.NPI, AssessmentType.CDR),
    "faq_cdr": (AssessmentType.FAQ, AssessmentType.CDR),
}

INSIGHT_MOOD_BEHAVIOR = (
    "Strong correlation between depression and behavioral symptoms suggests mood-driven behaviors."
)
INSIGHT_FUNCTION_DEMENTIA = "Strong correlation between functional impairment and dementia severity, as expected."
INSIGHT_DEPRESSION_FUNCTION = "Depression may be contributing to functional decline. Consider treating depression."


def pair_nearest(
    series_a: Sequence[TimeSeriesPoint],
    series_b: Sequence[TimeSeriesPoint],
    window_days: float = DEFAULT_WINDOW_DAYS,
) -> tuple[list[float], list[float]]:
    """
    Greedily align two series by date.

    Each point of ``series_a``, in the given order, takes the closest unused
    point of ``series_b`` that lies within ``window_days``; the earliest such
    point wins a tie. Consumed points are not offered again, so the result is
    first-come-first-served rather than a globally optimal matching.

    Returns:
        Two equal-length lists of paired scores
    """
    window_seconds = window_days * SECONDS_PER_DAY
    used: set[int] = set()
    paired_a: list[float] = []
    paired_b: list[float] = []

    for point in series_a:
        best_index = -1
        best_diff = math.inf
        for index, candidate in enumerate(series_b):
            if index in used:
                continue
            diff = seconds_between(point.timestamp, candidate.timestamp)
            if diff <= window_seconds and diff < best_diff:
                best_diff = diff
                best_index = index
        if best_index != -1:
            used.add(best_index)
            paired_a.append(point.score)
            paired_b.append(series_b[best_index].score)

    return paired_a, paired_b


def pearson(values_a: Sequence[float], values_b: Sequence[float]) -> float:
    """
    Pearson correlation coefficient, clipped to [-1, 1].

    Raises:
        ComputationDegenerateError: If there are no pairs, the lengths differ,
            or either series has zero variance
    """
    if not values_a or len(values_a) != len(values_b):
        raise ComputationDegenerateError(
            "Correlation requires two non-empty series of equal length",
            detail=f"{len(values_a)} vs {len(values_b)} values",
        )
    if len(set(values_a)) == 1 or len(set(values_b)) == 1:
        raise ComputationDegenerateError("Correlation undefined for a constant series")

    a = np.asarray(values_a, dtype=float)
    b = np.asarray(values_b, dtype=float)
    da = a - a.mean()
    db = b - b.mean()
    denominator = math.sqrt(float(np.sum(da * da)) * float(np.sum(db * db)))
    if denominator == 0:
        raise ComputationDegenerateError("Correlation undefined for a constant series")

    r = float(np.sum(da * db)) / denominator
    return max(-1.0, min(1.0, r))


def pearson_p_value(r: float, sample_size: int) -> float | None:
    """
    Two-sided p-value for Pearson's r under the t-distribution (n - 2 df).

    Returns ``None`` when fewer than three pairs are available.
    """
    if sample_size < 3:
        return None
    if 1.0 - r * r <= 0.0:
        return 0.0
    df = sample_size - 2
    t_statistic = abs(r) * math.sqrt(df / (1.0 - r * r))
    return float(2.0 * stats.t.sf(t_statistic, df))


def classify_strength(r: float) -> CorrelationStrength:
    magnitude = abs(r)
    for minimum, strength in STRENGTH_THRESHOLDS:
        if magnitude >= minimum:
            return strength
    return CorrelationStrength.NONE


def correlation_of(values_a: Sequence[float], values_b: Sequence[float]) -> CorrelationResult:
    """Correlation of two already aligned value lists."""
    if not values_a or len(values_a) != len(values_b):
        return CorrelationResult.none()

    try:
        r = pearson(values_a, values_b)
    except ComputationDegenerateError as e:
        logger.debug(f"Neutral correlation for {len(values_a)} pair(s): {e}")
        return CorrelationResult.none(sample_size=len(values_a))

    return CorrelationResult(
        correlation=r,
        strength=classify_strength(r),
        sample_size=len(values_a),
        p_value=pearson_p_value(r, len(values_a)),
    )


def correlate(
    series_a: Sequence[TimeSeriesPoint],
    series_b: Sequence[TimeSeriesPoint],
    window_days: float = DEFAULT_WINDOW_DAYS,
) -> CorrelationResult:
    """
    Correlate two dated score series.

    Args:
        series_a: First series; its order drives the greedy pairing
        series_b: Second series
        window_days: Maximum date distance for two points to be paired

    Returns:
        CorrelationResult; neutral (r = 0, strength none) when nothing pairs
        or either aligned series is constant
    """
    paired_a, paired_b = pair_nearest(series_a, series_b, window_days)
    return correlation_of(paired_a, paired_b)


def generate_insights(correlations: Mapping[str, CorrelationResult]) -> list[str]:
    insights = []

    gds_npi = correlations.get("gds_npi")
    if gds_npi and gds_npi.strength in (CorrelationStrength.MODERATE, CorrelationStrength.STRONG):
        insights.append(INSIGHT_MOOD_BEHAVIOR)

    faq_cdr = correlations.get("faq_cdr")
    if faq_cdr and faq_cdr.strength == CorrelationStrength.STRONG:
        insights.append(INSIGHT_FUNCTION_DEMENTIA)

    gds_faq = correlations.get("gds_faq")
    if gds_faq and gds_faq.correlation > 0.5:
        insights.append(INSIGHT_DEPRESSION_FUNCTION)

    return insights


def correlation_report(
    patient_id: str,
    series_by_type: Mapping[AssessmentType, Sequence[TimeSeriesPoint]],
    window_days: float = DEFAULT_WINDOW_DAYS,
) -> CorrelationReport:
    """
    Correlate every instrument pair for one patient.

    Each series is put in chronological order before pairing. CDR series are
    expected to carry the sum of boxes.
    """
    ordered = {
        assessment_type: sorted(series_by_type.get(assessment_type, ()), key=lambda p: p.timestamp)
        for assessment_type in AssessmentType
    }
    correlations = {
        key: correlate(ordered[first], ordered[second], window_days)
        for key, (first, second) in CORRELATION_PAIRS.items()
    }
    insights = generate_insights(correlations)

    logger.info(f"Correlation report for patient {patient_id}: {len(insights)} insight(s)")
    return CorrelationReport(patient_id=patient_id, correlations=correlations, insights=tuple(insights))
