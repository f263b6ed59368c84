"""
CDR (Clinical Dementia Rating) scoring.

The global score is derived from the six box scores with the memory rule
(Morris 1993):

1. All six domains 0 -> global 0.
2. At least three of the five secondary domains equal memory -> global is the
   memory score.
3. Otherwise -> the median of the five secondary domains (sorted descending,
   third value).

The sum of boxes (0..18) is reported alongside and never replaces the global
score.
"""

import logging
from collections.abc import Mapping, Sequence
from dataclasses import dataclass

from cognitrack.domain.enums import AssessmentType
from cognitrack.domain.services.scoring.validators import validate_cdr_box_scores
from cognitrack.domain.value_objects.answers import CDR_DOMAIN_FIELDS, CDRBoxScores
from cognitrack.domain.value_objects.score_result import CDRResult

logger = logging.getLogger(__name__)

CDR_DOMAIN_NAMES: dict[str, str] = {
    "memory": "Memory",
    "orientation": "Orientation",
    "judgment_problem": "Judgment & Problem Solving",
    "community_affairs": "Community Affairs",
    "home_hobbies": "Home & Hobbies",
    "personal_care": "Personal Care",
}

CDR_STAGES: dict[float, tuple[str, str]] = {
    0.0: ("None", "Normal - No dementia"),
    0.5: ("Questionable", "Questionable dementia - Very mild impairment"),
    1.0: ("Mild", "Mild dementia"),
    2.0: ("Moderate", "Moderate dementia"),
    3.0: ("Severe", "Severe dementia"),
}

METHOD_ALL_ZERO = "all domains zero"
METHOD_MEMORY = "memory with secondary agreement"
METHOD_MEDIAN = "median of secondary domains"

# Secondary domains that must agree with memory for memory to set the score
MEMORY_AGREEMENT_THRESHOLD = 3


@dataclass(frozen=True)
class CDRDomainBreakdown:
    domain: str
    name: str
    score: float
    stage: str


def cdr_stage(global_score: float) -> tuple[str, str]:
    """Return ``(stage, interpretation)`` for a global score."""
    try:
        return CDR_STAGES[float(global_score)]
    except KeyError:
        raise ValueError(f"Invalid CDR global score: {global_score}") from None


def cdr_stage_label(global_score: float) -> str:
    return cdr_stage(global_score)[0]


def compute_global_score(box_scores: CDRBoxScores) -> tuple[float, str, int]:
    """
    Apply the memory rule to validated box scores.

    Returns:
        Tuple of (global score, scoring method, secondary domains matching memory)
    """
    memory = box_scores.memory
    secondary = box_scores.secondary
    matching = sum(1 for score in secondary if score == memory)

    if all(score == 0 for score in box_scores.as_tuple()):
        return 0.0, METHOD_ALL_ZERO, matching

    if matching >= MEMORY_AGREEMENT_THRESHOLD:
        return float(memory), METHOD_MEMORY, matching

    median = sorted(secondary, reverse=True)[len(secondary) // 2]
    return float(median), METHOD_MEDIAN, matching


def score_cdr(box_scores: CDRBoxScores | Sequence[float] | Mapping[str, float]) -> CDRResult:
    """
    Score a CDR submission.

    Args:
        box_scores: Six box scores as ``CDRBoxScores``, an ordered sequence or a
            mapping keyed by domain name

    Returns:
        CDRResult with global score, stage, sum of boxes and scoring method

    Raises:
        InvalidInputError: If not exactly six scores or a value is outside
            {0, 0.5, 1, 2, 3}
    """
    validated = validate_cdr_box_scores(box_scores)
    global_score, method, matching = compute_global_score(validated)
    stage, interpretation = cdr_stage(global_score)

    logger.debug(f"CDR global {global_score} ({stage}) via {method}, sum of boxes {validated.sum_of_boxes}")
    return CDRResult(
        assessment_type=AssessmentType.CDR,
        score=global_score,
        label=stage,
        interpretation=interpretation,
        box_scores=validated,
        sum_of_boxes=validated.sum_of_boxes,
        scoring_method=method,
        domains_matching_memory=matching,
    )


def domain_breakdown(box_scores: CDRBoxScores | Sequence[float] | Mapping[str, float]) -> list[CDRDomainBreakdown]:
    validated = validate_cdr_box_scores(box_scores)
    return [
        CDRDomainBreakdown(
            domain=name,
            name=CDR_DOMAIN_NAMES[name],
            score=score,
            stage=cdr_stage_label(score),
        )
        for name, score in zip(CDR_DOMAIN_FIELDS, validated.as_tuple(), strict=True)
    ]
