"""
Instrument scorers.

One module per instrument; ``score_assessment`` dispatches on the assessment
type so callers holding a typed payload do not need to know which scorer
applies.
"""

import logging
from collections.abc import Callable
from datetime import datetime
from typing import Any

from cognitrack.domain.entities.assessment import AssessmentRecord
from cognitrack.domain.enums import AssessmentType
from cognitrack.domain.exceptions import InvalidInputError
from cognitrack.domain.services.scoring.cdr import score_cdr
from cognitrack.domain.services.scoring.faq import score_faq
from cognitrack.domain.services.scoring.gds import score_gds
from cognitrack.domain.services.scoring.npi import score_npi
from cognitrack.domain.utils.datetime_utils import now
from cognitrack.domain.value_objects.score_result import ScoreResult

logger = logging.getLogger(__name__)

SCORERS: dict[AssessmentType, Callable[[Any], ScoreResult]] = {
    AssessmentType.GDS: score_gds,
    AssessmentType.NPI: score_npi,
    AssessmentType.FAQ: score_faq,
    AssessmentType.CDR: score_cdr,
}


def score_assessment(assessment_type: AssessmentType | str, answers: Any) -> ScoreResult:
    """
    Score raw answers with the scorer for ``assessment_type``.

    Args:
        assessment_type: Instrument, as enum or its string value
        answers: Instrument-specific answer records (see ``value_objects.answers``)

    Raises:
        InvalidInputError: For an unknown instrument or invalid answers
    """
    try:
        instrument = AssessmentType(assessment_type)
    except ValueError:
        raise InvalidInputError(
            message="Unknown assessment type", detail=[f"Unsupported assessment type: {assessment_type!r}"]
        ) from None
    return SCORERS[instrument](answers)


def record_assessment(
    patient_id: str,
    assessment_type: AssessmentType | str,
    answers: Any,
    created_at: datetime | None = None,
    notes: str | None = None,
) -> AssessmentRecord:
    """Score answers and wrap the result in a new ``AssessmentRecord``."""
    result = score_assessment(assessment_type, answers)
    record = AssessmentRecord(
        patient_id=patient_id,
        assessment_type=result.assessment_type,
        result=result,
        created_at=created_at or now(),
        notes=notes,
    )
    logger.info(f"Recorded {record.assessment_type.value} assessment {record.id}")
    return record


__all__ = [
    "SCORERS",
    "record_assessment",
    "score_assessment",
    "score_cdr",
    "score_faq",
    "score_gds",
    "score_npi",
]
