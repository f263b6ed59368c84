"""
GDS (Geriatric Depression Scale) - 15 item version.

Questions 1, 5, 7, 11 and 13 are reverse scored: they contribute a point for a
"no". Every other question contributes a point for a "yes".
"""

import logging
from collections.abc import Sequence
from dataclasses import dataclass

from cognitrack.domain.enums import AssessmentType
from cognitrack.domain.services.scoring.validators import GDS_QUESTION_COUNT, validate_gds_answers
from cognitrack.domain.value_objects.answers import GDSAnswer
from cognitrack.domain.value_objects.score_result import GDSResult

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class GDSQuestion:
    id: int
    text: str
    reverse_scored: bool


GDS_QUESTIONS: tuple[GDSQuestion, ...] = (
    GDSQuestion(1, "Are you basically satisfied with your life?", True),
    GDSQuestion(2, "Have you dropped many of your activities and interests?", False),
    GDSQuestion(3, "Do you feel that your life is empty?", False),
    GDSQuestion(4, "Do you often get bored?", False),
    GDSQuestion(5, "Are you in good spirits most of the time?", True),
    GDSQuestion(6, "Are you afraid that something bad is going to happen to you?", False),
    GDSQuestion(7, "Do you feel happy most of the time?", True),
    GDSQuestion(8, "Do you often feel helpless?", False),
    GDSQuestion(9, "Do you prefer to stay at home, rather than going out and doing new things?", False),
    GDSQuestion(10, "Do you feel you have more problems with memory than most?", False),
    GDSQuestion(11, "Do you think it is wonderful to be alive now?", True),
    GDSQuestion(12, "Do you feel pretty worthless the way you are now?", False),
    GDSQuestion(13, "Do you feel full of energy?", True),
    GDSQuestion(14, "Do you feel that your situation is hopeless?", False),
    GDSQuestion(15, "Do you think that most people are better off than you are?", False),
)

REVERSE_SCORED_QUESTIONS = frozenset(q.id for q in GDS_QUESTIONS if q.reverse_scored)

_QUESTIONS_BY_ID = {q.id: q for q in GDS_QUESTIONS}

# (upper bound inclusive, severity, interpretation)
GDS_SEVERITY_BANDS: tuple[tuple[int, str, str], ...] = (
    (4, "Normal", "Normal - No significant depressive symptoms"),
    (8, "Mild", "Mild depression - Consider clinical evaluation"),
    (11, "Moderate", "Moderate depression - Clinical evaluation recommended"),
    (15, "Severe", "Severe depression - Immediate clinical evaluation required"),
)


@dataclass(frozen=True)
class GDSQuestionBreakdown:
    question_id: int
    text: str
    answer: bool
    reverse_scored: bool
    contributes_to_score: bool


def contributes_point(answer: GDSAnswer) -> bool:
    """Whether an answer adds a point to the depression score."""
    if answer.question_id in REVERSE_SCORED_QUESTIONS:
        return not answer.answer
    return answer.answer


def gds_severity(score: int) -> tuple[str, str]:
    """Return ``(severity, interpretation)`` for a GDS score in 0..15."""
    for upper, severity, interpretation in GDS_SEVERITY_BANDS:
        if score <= upper:
            return severity, interpretation
    raise ValueError(f"GDS score out of range: {score}")


def score_gds(answers: Sequence[GDSAnswer]) -> GDSResult:
    """
    Score a GDS-15 submission.

    Raises:
        InvalidInputError: If the answers are not 15 unique, in-range questions
    """
    validated = validate_gds_answers(answers)
    score = sum(1 for answer in validated if contributes_point(answer))
    severity, interpretation = gds_severity(score)

    logger.debug(f"GDS scored {score} ({severity})")
    return GDSResult(
        assessment_type=AssessmentType.GDS,
        score=score,
        label=severity,
        interpretation=interpretation,
        is_complete=len(validated) == GDS_QUESTION_COUNT,
        answers=tuple(sorted(validated, key=lambda a: a.question_id)),
        answered_questions=len(validated),
    )


def question_breakdown(answers: Sequence[GDSAnswer]) -> list[GDSQuestionBreakdown]:
    """Per-question view of a submission, in question order."""
    validated = validate_gds_answers(answers)
    return [
        GDSQuestionBreakdown(
            question_id=answer.question_id,
            text=_QUESTIONS_BY_ID[answer.question_id].text,
            answer=answer.answer,
            reverse_scored=answer.question_id in REVERSE_SCORED_QUESTIONS,
            contributes_to_score=contributes_point(answer),
        )
        for answer in sorted(validated, key=lambda a: a.question_id)
    ]
