"""
Input validators for the four instruments.

Each validator inspects the whole submission, collects every problem it finds,
and raises a single ``InvalidInputError`` listing them. Nothing is coerced: a
value of the wrong type is reported, not converted. On success the validator
returns the normalized immutable record(s) the scorer works on.
"""

import logging
from collections import Counter
from collections.abc import Iterable, Mapping, Sequence
from typing import Any

from cognitrack.domain.exceptions import InvalidInputError
from cognitrack.domain.value_objects.answers import (
    CDR_DOMAIN_ALIASES,
    CDR_DOMAIN_FIELDS,
    CDRBoxScores,
    FAQItemRating,
    GDSAnswer,
    NPIDomainRating,
)

logger = logging.getLogger(__name__)

GDS_QUESTION_COUNT = 15
NPI_DOMAIN_COUNT = 12
FAQ_ITEM_COUNT = 10

NPI_FREQUENCY_RANGE = (1, 4)
NPI_SEVERITY_RANGE = (1, 3)
NPI_DISTRESS_RANGE = (0, 5)
FAQ_RATING_RANGE = (0, 3)

CDR_ALLOWED_SCORES: tuple[float, ...] = (0, 0.5, 1, 2, 3)


def _is_int(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def _check_range(errors: list[str], label: str, value: Any, bounds: tuple[int, int]) -> None:
    low, high = bounds
    if not _is_int(value):
        errors.append(f"{label} must be an integer, got {value!r}")
    elif not low <= value <= high:
        errors.append(f"{label} must be between {low} and {high}, got {value}")


def _check_duplicates(errors: list[str], label: str, ids: Iterable[Any]) -> None:
    duplicates = sorted(
        key for key, count in Counter(i for i in ids if _is_int(i)).items() if count > 1
    )
    if duplicates:
        errors.append(f"Duplicate {label}: {', '.join(str(d) for d in duplicates)}")


def _raise_if_errors(instrument: str, errors: list[str]) -> None:
    if errors:
        logger.warning(f"{instrument} input rejected with {len(errors)} problem(s)")
        raise InvalidInputError(message=f"Invalid {instrument} input", detail=errors)


def validate_gds_answers(answers: Sequence[GDSAnswer]) -> tuple[GDSAnswer, ...]:
    """
    Validate a GDS-15 submission.

    Requires exactly 15 answers with unique question ids in 1..15 and boolean
    answers.
    """
    errors: list[str] = []
    answers = tuple(answers)

    if len(answers) != GDS_QUESTION_COUNT:
        errors.append(f"Expected {GDS_QUESTION_COUNT} answers, got {len(answers)}")

    valid = [a for a in answers if isinstance(a, GDSAnswer)]
    if len(valid) != len(answers):
        errors.append("Every answer must be a GDSAnswer")

    for answer in valid:
        _check_range(errors, f"Question id {answer.question_id!r}", answer.question_id, (1, GDS_QUESTION_COUNT))
        if not isinstance(answer.answer, bool):
            errors.append(f"Answer to question {answer.question_id} must be a boolean, got {answer.answer!r}")

    _check_duplicates(errors, "question ids", (a.question_id for a in valid))
    _raise_if_errors("GDS", errors)
    return answers


def validate_npi_domains(domains: Sequence[NPIDomainRating]) -> tuple[NPIDomainRating, ...]:
    """
    Validate NPI domain ratings.

    An empty submission is valid and means no symptoms are present.
    """
    errors: list[str] = []
    domains = tuple(domains)

    if len(domains) > NPI_DOMAIN_COUNT:
        errors.append(f"At most {NPI_DOMAIN_COUNT} domains may be rated, got {len(domains)}")

    valid = [d for d in domains if isinstance(d, NPIDomainRating)]
    if len(valid) != len(domains):
        errors.append("Every domain must be an NPIDomainRating")

    for domain in valid:
        _check_range(errors, f"Domain id {domain.domain_id!r}", domain.domain_id, (1, NPI_DOMAIN_COUNT))
        _check_range(errors, f"Frequency for domain {domain.domain_id}", domain.frequency, NPI_FREQUENCY_RANGE)
        _check_range(errors, f"Severity for domain {domain.domain_id}", domain.severity, NPI_SEVERITY_RANGE)
        _check_range(errors, f"Distress for domain {domain.domain_id}", domain.distress, NPI_DISTRESS_RANGE)

    _check_duplicates(errors, "domain ids", (d.domain_id for d in valid))
    _raise_if_errors("NPI", errors)
    return domains


def validate_faq_items(items: Sequence[FAQItemRating]) -> tuple[FAQItemRating, ...]:
    """
    Validate FAQ item ratings.

    Between 1 and 10 items with unique ids in 1..10 and ratings in 0..3.
    """
    errors: list[str] = []
    items = tuple(items)

    if not items:
        errors.append("No item ratings provided")
    if len(items) > FAQ_ITEM_COUNT:
        errors.append(f"Too many items provided (max {FAQ_ITEM_COUNT}), got {len(items)}")

    valid = [i for i in items if isinstance(i, FAQItemRating)]
    if len(valid) != len(items):
        errors.append("Every item must be an FAQItemRating")

    for item in valid:
        _check_range(errors, f"Item id {item.item_id!r}", item.item_id, (1, FAQ_ITEM_COUNT))
        _check_range(errors, f"Rating for item {item.item_id}", item.rating, FAQ_RATING_RANGE)

    _check_duplicates(errors, "item ids", (i.item_id for i in valid))
    _raise_if_errors("FAQ", errors)
    return items


def validate_cdr_box_scores(
    box_scores: CDRBoxScores | Sequence[float] | Mapping[str, float],
) -> CDRBoxScores:
    """
    Validate the six CDR box scores.

    Accepts a ``CDRBoxScores``, a sequence of six values in domain order, or a
    mapping keyed by domain name (snake_case or camelCase). Every value must be
    one of 0, 0.5, 1, 2 or 3.
    """
    errors: list[str] = []
    values: dict[str, Any] = {}

    if isinstance(box_scores, CDRBoxScores):
        values = dict(zip(CDR_DOMAIN_FIELDS, box_scores.as_tuple(), strict=True))
    elif isinstance(box_scores, Mapping):
        for key, value in box_scores.items():
            name = CDR_DOMAIN_ALIASES.get(key, key)
            if name not in CDR_DOMAIN_FIELDS:
                errors.append(f"Unknown CDR domain: {key}")
            elif name in values:
                errors.append(f"Duplicate score for domain: {name}")
            else:
                values[name] = value
        for name in CDR_DOMAIN_FIELDS:
            if name not in values:
                errors.append(f"Missing score for domain: {name}")
    elif isinstance(box_scores, Sequence) and not isinstance(box_scores, (str, bytes)):
        if len(box_scores) != len(CDR_DOMAIN_FIELDS):
            errors.append(f"CDR requires exactly {len(CDR_DOMAIN_FIELDS)} box scores, got {len(box_scores)}")
        else:
            values = dict(zip(CDR_DOMAIN_FIELDS, box_scores, strict=True))
    else:
        errors.append(f"Unsupported CDR box score container: {type(box_scores).__name__}")

    for name, value in values.items():
        if not _is_number(value) or float(value) not in CDR_ALLOWED_SCORES:
            errors.append(f"Invalid score for {name}: {value!r}. Must be 0, 0.5, 1, 2, or 3")

    _raise_if_errors("CDR", errors)
    return CDRBoxScores(**{name: float(values[name]) for name in CDR_DOMAIN_FIELDS})
