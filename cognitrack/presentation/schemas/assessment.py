"""
Assessment submission schemas.

These models only check the JSON shape and types; range, count and duplicate
rules are enforced by the domain validators so that every problem in a
submission is reported together.
"""

import logging
from abc import abstractmethod
from collections.abc import Mapping
from typing import Any

from pydantic import Field, StrictBool, StrictFloat, StrictInt, ValidationError

from cognitrack.domain.enums import AssessmentType
from cognitrack.domain.exceptions import InvalidInputError
from cognitrack.domain.value_objects.answers import CDRBoxScores, FAQItemRating, GDSAnswer, NPIDomainRating
from cognitrack.presentation.schemas.base import BaseModelConfig

logger = logging.getLogger(__name__)


class GDSAnswerSchema(BaseModelConfig):
    question_id: StrictInt
    answer: StrictBool


class NPIDomainSchema(BaseModelConfig):
    domain_id: StrictInt
    frequency: StrictInt
    severity: StrictInt
    distress: StrictInt
    score: StrictInt | None = None  # recomputed from frequency x severity


class FAQItemSchema(BaseModelConfig):
    item_id: StrictInt
    rating: StrictInt


class CDRBoxScoresSchema(BaseModelConfig):
    memory: StrictInt | StrictFloat
    orientation: StrictInt | StrictFloat
    judgment_problem: StrictInt | StrictFloat
    community_affairs: StrictInt | StrictFloat
    home_hobbies: StrictInt | StrictFloat
    personal_care: StrictInt | StrictFloat


class AssessmentSubmission(BaseModelConfig):
    """Fields common to every instrument submission."""

    patient_id: str = Field(..., min_length=1)
    notes: str | None = Field(None, max_length=2000)

    @abstractmethod
    def to_answers(self) -> Any:
        """Convert the submission into the domain answer records."""


class GDSSubmission(AssessmentSubmission):
    """
    GDS answers, either as ``{questionId, answer}`` objects or as 15 booleans
    in question order.
    """

    answers: list[GDSAnswerSchema] | list[StrictBool]

    def to_answers(self) -> list[GDSAnswer]:
        return [
            GDSAnswer(a.question_id, a.answer) if isinstance(a, GDSAnswerSchema) else GDSAnswer(index, a)
            for index, a in enumerate(self.answers, start=1)
        ]


class NPISubmission(AssessmentSubmission):
    """NPI ratings for the domains that are present."""

    domain_scores: list[NPIDomainSchema]

    def to_answers(self) -> list[NPIDomainRating]:
        return [NPIDomainRating(d.domain_id, d.frequency, d.severity, d.distress) for d in self.domain_scores]


class FAQSubmission(AssessmentSubmission):
    """
    FAQ ratings, either as ``{itemId, rating}`` objects or as ratings in item
    order.
    """

    answers: list[FAQItemSchema] | list[StrictInt]

    def to_answers(self) -> list[FAQItemRating]:
        return [
            FAQItemRating(i.item_id, i.rating) if isinstance(i, FAQItemSchema) else FAQItemRating(index, i)
            for index, i in enumerate(self.answers, start=1)
        ]


class CDRSubmission(AssessmentSubmission):
    box_scores: CDRBoxScoresSchema

    def to_answers(self) -> CDRBoxScores:
        return CDRBoxScores(**{name: float(value) for name, value in self.box_scores.model_dump().items()})


SUBMISSION_SCHEMAS: dict[AssessmentType, type[AssessmentSubmission]] = {
    AssessmentType.GDS: GDSSubmission,
    AssessmentType.NPI: NPISubmission,
    AssessmentType.FAQ: FAQSubmission,
    AssessmentType.CDR: CDRSubmission,
}


def _format_errors(exc: ValidationError) -> list[str]:
    return [
        f"{'.'.join(str(part) for part in error['loc']) or 'body'}: {error['msg']}"
        for error in exc.errors()
    ]


def parse_assessment_payload(
    assessment_type: AssessmentType | str,
    payload: Mapping[str, Any],
) -> AssessmentSubmission:
    """
    Parse an external camelCase payload for one instrument.

    Raises:
        InvalidInputError: For an unknown instrument or a payload of the wrong shape
    """
    try:
        instrument = AssessmentType(assessment_type)
    except ValueError:
        raise InvalidInputError(
            message="Unknown assessment type", detail=[f"Unsupported assessment type: {assessment_type!r}"]
        ) from None

    try:
        return SUBMISSION_SCHEMAS[instrument].model_validate(payload)
    except ValidationError as e:
        errors = _format_errors(e)
        logger.warning(f"{instrument.value} payload rejected with {len(errors)} problem(s)")
        raise InvalidInputError(message=f"Invalid {instrument.value} payload", detail=errors) from e
