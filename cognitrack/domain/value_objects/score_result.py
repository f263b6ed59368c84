"""
Score result value objects.

A result is computed once per completed assessment and never mutated; a later
measurement is represented by a new assessment with its own result.
"""

from dataclasses import dataclass

from cognitrack.domain.enums import AssessmentType
from cognitrack.domain.value_objects.answers import (
    CDRBoxScores,
    FAQItemRating,
    GDSAnswer,
    NPIDomainRating,
)


@dataclass(frozen=True, kw_only=True)
class ScoreResult:
    """Numeric score plus its severity/stage label."""

    assessment_type: AssessmentType
    score: float
    label: str
    interpretation: str
    is_complete: bool = True


@dataclass(frozen=True, kw_only=True)
class GDSResult(ScoreResult):
    answers: tuple[GDSAnswer, ...]
    answered_questions: int
    total_questions: int = 15

    @property
    def severity(self) -> str:
        return self.label


@dataclass(frozen=True, kw_only=True)
class NPIResult(ScoreResult):
    total_distress: int
    domain_scores: tuple[NPIDomainRating, ...]
    assessed_domains: int
    total_domains: int = 12

    @property
    def total_score(self) -> int:
        return int(self.score)

    @property
    def severity(self) -> str:
        return self.label


@dataclass(frozen=True, kw_only=True)
class FAQResult(ScoreResult):
    item_scores: tuple[FAQItemRating, ...]
    answered_items: int
    total_items: int = 10

    @property
    def total_score(self) -> int:
        return int(self.score)

    @property
    def impairment(self) -> str:
        return self.label


@dataclass(frozen=True, kw_only=True)
class CDRResult(ScoreResult):
    box_scores: CDRBoxScores
    sum_of_boxes: float
    scoring_method: str
    domains_matching_memory: int

    @property
    def global_score(self) -> float:
        return self.score

    @property
    def stage(self) -> str:
        return self.label
