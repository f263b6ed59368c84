"""
Patient overview and progression aggregation.

Composes the scorers' labels, the trend analyzer and fixed clinical alert
rules over one patient's already-fetched assessment history. Nothing here
performs I/O; the application layer supplies the records.
"""

import logging
from collections.abc import Iterable, Mapping, Sequence
from dataclasses import dataclass
from datetime import date, datetime, timedelta

from cognitrack.core.utils.logging import log_execution_time
from cognitrack.domain.entities.assessment import AssessmentRecord
from cognitrack.domain.enums import (
    AlertType,
    AssessmentType,
    MilestoneSignificance,
    OverallTrend,
    TrendDirection,
    TrendSignificance,
)
from cognitrack.domain.exceptions import InvalidInputError
from cognitrack.domain.services.scoring.cdr import cdr_stage_label
from cognitrack.domain.services.trend_analyzer import (
    DEFAULT_DIRECTION_THRESHOLD,
    DEFAULT_WINDOW_SIZE,
    analyze_trend,
    overall_trend,
)
from cognitrack.domain.utils.datetime_utils import age_on, days_between, now, to_utc
from cognitrack.domain.value_objects.analytics import (
    Alert,
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
from cognitrack.domain.value_objects.patient import PatientSnapshot
from cognitrack.domain.value_objects.score_result import CDRResult

logger = logging.getLogger(__name__)

DEFAULT_PROGRESSION_DAYS = 365

NOTE_RAPID_DECLINE = "Rapid decline detected across multiple domains. Immediate clinical review recommended."
NOTE_DEPRESSION_WORSENING = "Significant worsening in depression symptoms."
NOTE_COGNITIVE_DECLINE = "Cognitive decline progressing."

RECOMMENDATION_DEFAULT = "Continue current monitoring schedule. Patient showing stable progression."


@dataclass(frozen=True)
class AlertRule:
    """Fires when the latest score of an instrument reaches ``threshold``."""

    assessment_type: AssessmentType
    threshold: float
    type: AlertType
    category: str
    message: str
    priority: int


# Per instrument, only the first matching rule fires
ALERT_RULES: tuple[AlertRule, ...] = (
    AlertRule(
        AssessmentType.GDS, 10, AlertType.DANGER, "Depression",
        "Severe depression detected. Immediate psychiatric evaluation recommended.", 1,
    ),
    AlertRule(
        AssessmentType.GDS, 5, AlertType.WARNING, "Depression",
        "Mild to moderate depression detected. Consider treatment options.", 2,
    ),
    AlertRule(
        AssessmentType.NPI, 37, AlertType.DANGER, "Behavioral",
        "Severe behavioral symptoms. Caregiver support and intervention needed.", 1,
    ),
    AlertRule(
        AssessmentType.FAQ, 9, AlertType.WARNING, "Functional",
        "Significant functional impairment. Safety assessment recommended.", 2,
    ),
    AlertRule(
        AssessmentType.CDR, 2, AlertType.DANGER, "Cognition",
        "Moderate to severe dementia. Full-time care planning needed.", 1,
    ),
    AlertRule(
        AssessmentType.CDR, 1, AlertType.WARNING, "Cognition",
        "Mild dementia detected. Care planning and support services recommended.", 2,
    ),
)

# (instrument, minimum last change, inclusive, text)
RECOMMENDATION_RULES: tuple[tuple[AssessmentType, float, bool, str], ...] = (
    (AssessmentType.GDS, 3, False, "Depression symptoms worsening. Consider psychiatric consultation."),
    (
        AssessmentType.NPI, 10, False,
        "Behavioral symptoms increasing. Caregiver support and possible medication review needed.",
    ),
    (
        AssessmentType.FAQ, 5, False,
        "Functional abilities declining. Safety assessment and care planning recommended.",
    ),
    (
        AssessmentType.CDR, 1, True,
        "Cognitive decline progressing. Review treatment plan and consider clinical trial enrollment.",
    ),
)


def _format_score(value: float) -> str:
    return f"{value:g}"


def _chronological(records: Iterable[AssessmentRecord]) -> list[AssessmentRecord]:
    return sorted(records, key=lambda record: record.created_at)


def group_by_type(records: Iterable[AssessmentRecord]) -> dict[AssessmentType, list[AssessmentRecord]]:
    """Records per instrument, oldest first."""
    grouped: dict[AssessmentType, list[AssessmentRecord]] = {t: [] for t in AssessmentType}
    for record in _chronological(records):
        grouped[record.assessment_type].append(record)
    return grouped


def latest_by_type(records: Iterable[AssessmentRecord]) -> dict[AssessmentType, AssessmentRecord | None]:
    return {t: (group[-1] if group else None) for t, group in group_by_type(records).items()}


def assessment_counts(records: Sequence[AssessmentRecord]) -> dict[str, int]:
    counts = {t.key: 0 for t in AssessmentType}
    for record in records:
        counts[record.assessment_type.key] += 1
    counts["total"] = len(records)
    return counts


def summarize_latest(record: AssessmentRecord | None) -> LatestAssessmentSummary | None:
    if record is None:
        return None
    result = record.result
    return LatestAssessmentSummary(
        id=record.id,
        date=record.created_at,
        score=result.score,
        severity=result.label,
        sum_of_boxes=result.sum_of_boxes if isinstance(result, CDRResult) else None,
    )


def generate_alerts(latest: Mapping[AssessmentType, AssessmentRecord | None]) -> list[Alert]:
    """
    Apply the alert rules to the latest assessment of each instrument.

    CDR rules look at the global score. Alerts are ordered by priority, most
    urgent first; rules with the same priority keep their rule order.
    """
    alerts: list[Alert] = []
    for assessment_type in AssessmentType:
        record = latest.get(assessment_type)
        if record is None:
            continue
        for rule in ALERT_RULES:
            if rule.assessment_type == assessment_type and record.score >= rule.threshold:
                alerts.append(Alert(rule.type, rule.category, rule.message, rule.priority))
                break
    return sorted(alerts, key=lambda alert: alert.priority)


def calculate_trends(
    records: Iterable[AssessmentRecord],
    window_size: int = DEFAULT_WINDOW_SIZE,
    threshold: float = DEFAULT_DIRECTION_THRESHOLD,
) -> TrendSummary:
    """Per-instrument trends (CDR on the sum of boxes), the overall trend and notes."""
    grouped = group_by_type(records)
    trends: dict[AssessmentType, TrendResult] = {
        t: analyze_trend([r.series_score for r in reversed(group)], window_size, threshold)
        for t, group in grouped.items()
    }
    overall = overall_trend(trends.values())

    notes = []
    if overall == OverallTrend.RAPIDLY_DECLINING:
        notes.append(NOTE_RAPID_DECLINE)
    if trends[AssessmentType.GDS].significance == TrendSignificance.SEVERE:
        notes.append(NOTE_DEPRESSION_WORSENING)
    if trends[AssessmentType.CDR].direction == TrendDirection.WORSENING:
        notes.append(NOTE_COGNITIVE_DECLINE)

    return TrendSummary(
        overall_trend=overall,
        gds=trends[AssessmentType.GDS],
        npi=trends[AssessmentType.NPI],
        faq=trends[AssessmentType.FAQ],
        cdr=trends[AssessmentType.CDR],
        notes=tuple(notes),
    )


def summarize_patient(patient: PatientSnapshot, reference_date: date) -> PatientSummary:
    return PatientSummary(
        id=patient.id,
        first_name=patient.first_name,
        last_name=patient.last_name,
        medical_record_no=patient.medical_record_no or "",
        date_of_birth=patient.date_of_birth,
        age=age_on(patient.date_of_birth, reference_date),
    )


@log_execution_time
def build_overview(
    records: Sequence[AssessmentRecord],
    patient: PatientSnapshot | None = None,
    reference_date: date | None = None,
    window_size: int = DEFAULT_WINDOW_SIZE,
    threshold: float = DEFAULT_DIRECTION_THRESHOLD,
) -> PatientOverview:
    """
    Build the clinical overview of one patient.

    Args:
        records: Every assessment of the patient, in any order
        patient: Demographics; omitted from the overview when not supplied
        reference_date: Date the age is computed on (defaults to today, UTC)
        window_size: Number of recent assessments the trends look at
        threshold: Change rate separating stable from improving/worsening

    Returns:
        PatientOverview with counts, latest summaries, alerts and trends
    """
    records = list(records)
    latest = latest_by_type(records)
    alerts = generate_alerts(latest)

    overview = PatientOverview(
        patient=summarize_patient(patient, reference_date or now().date()) if patient else None,
        assessment_counts=assessment_counts(records),
        latest_assessments={t.key: summarize_latest(latest[t]) for t in AssessmentType},
        alerts=tuple(alerts),
        trends=calculate_trends(records, window_size, threshold),
    )
    logger.info(f"Overview built from {len(records)} assessment(s) with {len(alerts)} alert(s)")
    return overview


def build_progression(points: Iterable[TimeSeriesPoint]) -> list[ProgressionPoint]:
    """
    Chronological series with change and percent change from the previous point.

    Percent change is 0 for the first point and whenever the previous score
    was 0.
    """
    progression = []
    previous: float | None = None
    for point in sorted(points, key=lambda p: p.timestamp):
        change = point.score - previous if previous is not None else 0
        percent_change = change / previous * 100 if previous else 0
        progression.append(
            ProgressionPoint(
                date=point.timestamp,
                score=point.score,
                change=change,
                percent_change=percent_change,
            )
        )
        previous = point.score
    return progression


def identify_milestones(cdr_records: Iterable[AssessmentRecord]) -> list[Milestone]:
    """A milestone for every increase of the CDR global score between consecutive assessments."""
    milestones = []
    ordered = _chronological(r for r in cdr_records if r.assessment_type == AssessmentType.CDR)
    for previous, current in zip(ordered, ordered[1:]):
        if current.score > previous.score:
            milestones.append(
                Milestone(
                    date=current.created_at,
                    event=f"CDR progression from {_format_score(previous.score)} to {_format_score(current.score)}",
                    significance=MilestoneSignificance.HIGH if current.score >= 2 else MilestoneSignificance.MEDIUM,
                    description=(
                        f"Dementia stage progressed from {cdr_stage_label(previous.score)} "
                        f"to {cdr_stage_label(current.score)}"
                    ),
                )
            )
    return milestones


def generate_recommendations(progressions: Mapping[AssessmentType, Sequence[ProgressionPoint]]) -> list[str]:
    """Rules on the most recent change of each instrument, with a default when none fires."""
    recommendations = []
    for assessment_type, minimum, inclusive, text in RECOMMENDATION_RULES:
        series = progressions.get(assessment_type, ())
        if len(series) < 2:
            continue
        last_change = series[-1].change
        if (last_change >= minimum) if inclusive else (last_change > minimum):
            recommendations.append(text)

    if not recommendations:
        recommendations.append(RECOMMENDATION_DEFAULT)
    return recommendations


@log_execution_time
def build_progression_report(
    patient_id: str,
    records: Iterable[AssessmentRecord],
    start: datetime | None = None,
    end: datetime | None = None,
    default_days: int = DEFAULT_PROGRESSION_DAYS,
) -> ProgressionReport:
    """
    Build the progression report for a date range.

    Args:
        patient_id: Patient the records belong to
        records: Assessments of the patient; those outside the range are ignored
        start: Range start, inclusive (defaults to ``default_days`` before end)
        end: Range end, inclusive (defaults to now)
        default_days: Length of the default range

    Raises:
        InvalidInputError: If start is after end
    """
    end = to_utc(end) if end else now()
    start = to_utc(start) if start else end - timedelta(days=default_days)
    if start > end:
        raise InvalidInputError(
            message="Invalid progression range",
            detail=[f"Start {start.isoformat()} is after end {end.isoformat()}"],
        )

    in_range = [r for r in records if start <= r.created_at <= end]
    grouped = group_by_type(in_range)
    progressions = {
        t: build_progression(TimeSeriesPoint(r.created_at, r.series_score) for r in group)
        for t, group in grouped.items()
    }

    report = ProgressionReport(
        patient_id=patient_id,
        time_range=TimeRange(start=start, end=end, duration_days=days_between(start, end)),
        gds_progression=tuple(progressions[AssessmentType.GDS]),
        npi_progression=tuple(progressions[AssessmentType.NPI]),
        faq_progression=tuple(progressions[AssessmentType.FAQ]),
        cdr_progression=tuple(progressions[AssessmentType.CDR]),
        milestones=tuple(identify_milestones(grouped[AssessmentType.CDR])),
        recommendations=tuple(generate_recommendations(progressions)),
    )
    logger.info(f"Progression report for patient {patient_id}: {len(in_range)} assessment(s) in range")
    return report
