"""
Per-instrument statistics and assessment comparison.
"""

import logging
from collections.abc import Iterable
from dataclasses import dataclass, field
from datetime import datetime

import numpy as np

from cognitrack.domain.entities.assessment import AssessmentRecord
from cognitrack.domain.enums import AssessmentType
from cognitrack.domain.exceptions import InvalidInputError
from cognitrack.domain.services.scoring.cdr import CDR_DOMAIN_NAMES
from cognitrack.domain.services.scoring.faq import FAQ_ITEMS
from cognitrack.domain.services.scoring.gds import GDS_QUESTIONS, contributes_point
from cognitrack.domain.services.scoring.npi import NPI_DOMAINS
from cognitrack.domain.services.scoring.validators import CDR_ALLOWED_SCORES
from cognitrack.domain.value_objects.answers import CDR_DOMAIN_FIELDS
from cognitrack.domain.value_objects.score_result import CDRResult, FAQResult, GDSResult, NPIResult

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ScoreHistoryEntry:
    assessment_id: str
    date: datetime
    score: float
    label: str
    sum_of_boxes: float | None = None  # CDR
    total_distress: int | None = None  # NPI


@dataclass(frozen=True)
class ComponentStatistics:
    """
    Statistics for one question, item or domain across a history.

    ``rate`` is the impairment rate (FAQ, CDR: share of ratings above 0) or
    the presence rate (NPI), as a percentage.
    """

    component_id: int | str
    name: str
    average_score: float
    rate: float
    average_distress: float | None = None  # NPI


@dataclass(frozen=True)
class InstrumentStatistics:
    assessment_type: AssessmentType
    total: int
    average_score: float
    latest_score: float | None
    latest_label: str | None
    score_history: tuple[ScoreHistoryEntry, ...]
    components: tuple[ComponentStatistics, ...] = ()
    average_sum_of_boxes: float | None = None
    latest_sum_of_boxes: float | None = None
    distribution: dict[str, int] = field(default_factory=dict)
    average_total_distress: float | None = None
    latest_total_distress: int | None = None


@dataclass(frozen=True)
class ComponentChange:
    component_id: int | str
    name: str
    first: float
    second: float
    change: float


@dataclass(frozen=True)
class AssessmentComparison:
    assessment_type: AssessmentType
    first_id: str
    second_id: str
    first_date: datetime
    second_date: datetime
    first_score: float
    second_score: float
    difference: float
    improvement: bool
    percent_change: float
    changes: tuple[ComponentChange, ...]
    sum_of_boxes_difference: float | None = None  # CDR


def _mean(values: Iterable[float]) -> float:
    values = list(values)
    if not values:
        return 0.0
    return round(float(np.mean(values)), 1)


def _percentage(count: int, total: int) -> float:
    return round(count / total * 100, 1) if total else 0.0


def _score_key(score: float) -> str:
    return f"{score:g}"


def _component_values(record: AssessmentRecord) -> list[tuple[int | str, str, float]]:
    """
    Per-component values of one assessment, in catalogue order.

    GDS: 1 when the question contributed a point. NPI: domain score, 0 when
    absent. FAQ: rating, 0 when unanswered. CDR: box score.
    """
    result = record.result
    if isinstance(result, GDSResult):
        answers = {a.question_id: a for a in result.answers}
        return [
            (q.id, q.text, 1.0 if q.id in answers and contributes_point(answers[q.id]) else 0.0)
            for q in GDS_QUESTIONS
        ]
    if isinstance(result, NPIResult):
        scores = {d.domain_id: d.score for d in result.domain_scores}
        return [(d.id, d.name, float(scores.get(d.id, 0))) for d in NPI_DOMAINS]
    if isinstance(result, FAQResult):
        ratings = {i.item_id: i.rating for i in result.item_scores}
        return [(item_id, text, float(ratings.get(item_id, 0))) for item_id, text in FAQ_ITEMS.items()]
    if isinstance(result, CDRResult):
        return [
            (name, CDR_DOMAIN_NAMES[name], score)
            for name, score in zip(CDR_DOMAIN_FIELDS, result.box_scores.as_tuple(), strict=True)
        ]
    raise InvalidInputError(message="Unsupported assessment result", detail=[type(result).__name__])


def _history_entry(record: AssessmentRecord) -> ScoreHistoryEntry:
    result = record.result
    return ScoreHistoryEntry(
        assessment_id=record.id,
        date=record.created_at,
        score=result.score,
        label=result.label,
        sum_of_boxes=result.sum_of_boxes if isinstance(result, CDRResult) else None,
        total_distress=result.total_distress if isinstance(result, NPIResult) else None,
    )


def _npi_components(results: list[NPIResult]) -> tuple[ComponentStatistics, ...]:
    rows = []
    for domain in NPI_DOMAINS:
        present = [d for r in results for d in r.domain_scores if d.domain_id == domain.id]
        rows.append(
            ComponentStatistics(
                component_id=domain.id,
                name=domain.name,
                average_score=_mean(d.score for d in present),
                rate=_percentage(len(present), len(results)),
                average_distress=_mean(d.distress for d in present),
            )
        )
    return tuple(rows)


def _faq_components(results: list[FAQResult]) -> tuple[ComponentStatistics, ...]:
    rows = []
    for item_id, text in FAQ_ITEMS.items():
        ratings = [i.rating for r in results for i in r.item_scores if i.item_id == item_id]
        rows.append(
            ComponentStatistics(
                component_id=item_id,
                name=text,
                average_score=_mean(ratings),
                rate=_percentage(sum(1 for rating in ratings if rating > 0), len(ratings)),
            )
        )
    return tuple(rows)


def _cdr_components(results: list[CDRResult]) -> tuple[ComponentStatistics, ...]:
    rows = []
    for name in CDR_DOMAIN_FIELDS:
        scores = [getattr(r.box_scores, name) for r in results]
        rows.append(
            ComponentStatistics(
                component_id=name,
                name=CDR_DOMAIN_NAMES[name],
                average_score=_mean(scores),
                rate=_percentage(sum(1 for score in scores if score > 0), len(scores)),
            )
        )
    return tuple(rows)


def instrument_statistics(
    assessment_type: AssessmentType,
    records: Iterable[AssessmentRecord],
) -> InstrumentStatistics:
    """
    Summarize one instrument's history for a patient.

    Records of other instruments are ignored. Averages and rates are rounded
    to one decimal; the score history is in chronological order.

    Args:
        assessment_type: Instrument to summarize
        records: Assessments of one patient

    Returns:
        InstrumentStatistics; zero totals and no latest score for an empty history
    """
    history = sorted(
        (r for r in records if r.assessment_type == assessment_type),
        key=lambda r: r.created_at,
    )
    results = [r.result for r in history]
    latest = history[-1].result if history else None

    statistics: dict = {
        "assessment_type": assessment_type,
        "total": len(history),
        "average_score": _mean(r.score for r in results),
        "latest_score": latest.score if latest else None,
        "latest_label": latest.label if latest else None,
        "score_history": tuple(_history_entry(r) for r in history),
    }

    if assessment_type == AssessmentType.NPI:
        statistics["components"] = _npi_components(results)
        statistics["average_total_distress"] = _mean(r.total_distress for r in results)
        statistics["latest_total_distress"] = latest.total_distress if latest else None
    elif assessment_type == AssessmentType.FAQ:
        statistics["components"] = _faq_components(results)
    elif assessment_type == AssessmentType.CDR:
        distribution = {_score_key(score): 0 for score in CDR_ALLOWED_SCORES}
        for result in results:
            distribution[_score_key(result.global_score)] += 1
        statistics["components"] = _cdr_components(results)
        statistics["average_sum_of_boxes"] = _mean(r.sum_of_boxes for r in results)
        statistics["latest_sum_of_boxes"] = latest.sum_of_boxes if latest else None
        statistics["distribution"] = distribution

    logger.debug(f"{assessment_type.value} statistics over {len(history)} assessment(s)")
    return InstrumentStatistics(**statistics)


def compare_assessments(first: AssessmentRecord, second: AssessmentRecord) -> AssessmentComparison:
    """
    Compare two assessments of the same instrument and patient.

    Lower scores are better on every instrument, so a negative difference is
    an improvement.

    Raises:
        InvalidInputError: If the assessments belong to different patients or
            instruments
    """
    errors = []
    if first.patient_id != second.patient_id:
        errors.append("Assessments belong to different patients")
    if first.assessment_type != second.assessment_type:
        errors.append(
            f"Cannot compare {first.assessment_type.value} with {second.assessment_type.value}"
        )
    if errors:
        raise InvalidInputError(message="Assessments cannot be compared", detail=errors)

    difference = second.score - first.score
    changes = tuple(
        ComponentChange(component_id=cid, name=name, first=a, second=b, change=b - a)
        for (cid, name, a), (_, _, b) in zip(_component_values(first), _component_values(second), strict=True)
    )
    sum_of_boxes_difference = None
    if isinstance(first.result, CDRResult) and isinstance(second.result, CDRResult):
        sum_of_boxes_difference = second.result.sum_of_boxes - first.result.sum_of_boxes

    return AssessmentComparison(
        assessment_type=first.assessment_type,
        first_id=first.id,
        second_id=second.id,
        first_date=first.created_at,
        second_date=second.created_at,
        first_score=first.score,
        second_score=second.score,
        difference=difference,
        improvement=difference < 0,
        percent_change=difference / first.score * 100 if first.score else 0.0,
        changes=changes,
        sum_of_boxes_difference=sum_of_boxes_difference,
    )
