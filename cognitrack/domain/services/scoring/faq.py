"""
FAQ (Functional Activities Questionnaire) scoring.

Ten activities rated 0 (normal) to 3 (dependent); the total ranges 0..30 and
higher is worse.
"""

import logging
from collections.abc import Sequence
from dataclasses import dataclass

from cognitrack.domain.enums import AssessmentType
from cognitrack.domain.services.scoring.validators import FAQ_ITEM_COUNT, validate_faq_items
from cognitrack.domain.value_objects.answers import FAQItemRating
from cognitrack.domain.value_objects.score_result import FAQResult

logger = logging.getLogger(__name__)

FAQ_ITEMS: dict[int, str] = {
    1: "Writing checks, paying bills, balancing checkbook",
    2: "Assembling tax records, business affairs, or papers",
    3: "Shopping alone for clothes, household necessities, or groceries",
    4: "Playing a game of skill such as bridge or chess, working on a hobby",
    5: "Heating water, making a cup of coffee, turning off the stove",
    6: "Preparing a balanced meal",
    7: "Keeping track of current events",
    8: "Paying attention to and understanding a TV program, book, or magazine",
    9: "Remembering appointments, family occasions, holidays, medications",
    10: "Traveling out of the neighborhood, driving, or arranging to take public transportation",
}

FAQ_RATING_LABELS: dict[int, str] = {
    0: "Normal",
    1: "Has difficulty but does by self",
    2: "Requires assistance",
    3: "Dependent",
}

FAQ_IMPAIRMENT_BANDS: tuple[tuple[int, str, str], ...] = (
    (0, "None", "No functional impairment"),
    (5, "Mild", "Mild functional impairment - Some difficulty with complex activities"),
    (15, "Moderate", "Moderate functional impairment - Requires assistance with multiple activities"),
    (25, "Severe", "Severe functional impairment - Dependent on others for many activities"),
    (30, "Very Severe", "Very severe functional impairment - Dependent on others for most activities"),
)


@dataclass(frozen=True)
class FAQItemBreakdown:
    item_id: int
    text: str
    answered: bool
    rating: int
    rating_label: str


def faq_impairment(total_score: int) -> tuple[str, str]:
    """Return ``(impairment, interpretation)`` for an FAQ total in 0..30."""
    for upper, impairment, interpretation in FAQ_IMPAIRMENT_BANDS:
        if total_score <= upper:
            return impairment, interpretation
    raise ValueError(f"FAQ score out of range: {total_score}")


def score_faq(items: Sequence[FAQItemRating]) -> FAQResult:
    """
    Score an FAQ submission.

    The result is marked complete only when all ten activities were rated.

    Raises:
        InvalidInputError: On duplicate or out-of-range items or ratings
    """
    validated = validate_faq_items(items)
    total_score = sum(item.rating for item in validated)
    impairment, interpretation = faq_impairment(total_score)

    logger.debug(f"FAQ scored {total_score} ({impairment}) from {len(validated)} item(s)")
    return FAQResult(
        assessment_type=AssessmentType.FAQ,
        score=total_score,
        label=impairment,
        interpretation=interpretation,
        is_complete=len(validated) == FAQ_ITEM_COUNT,
        item_scores=tuple(sorted(validated, key=lambda i: i.item_id)),
        answered_items=len(validated),
    )


def item_breakdown(items: Sequence[FAQItemRating]) -> list[FAQItemBreakdown]:
    """One row per catalogue activity; unanswered activities show rating 0."""
    by_id = {i.item_id: i for i in validate_faq_items(items)}
    rows = []
    for item_id, text in FAQ_ITEMS.items():
        rating = by_id[item_id].rating if item_id in by_id else 0
        rows.append(
            FAQItemBreakdown(
                item_id=item_id,
                text=text,
                answered=item_id in by_id,
                rating=rating,
                rating_label=FAQ_RATING_LABELS[rating],
            )
        )
    return rows
