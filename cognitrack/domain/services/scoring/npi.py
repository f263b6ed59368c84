"""
NPI (Neuropsychiatric Inventory) scoring.

A domain is present iff it appears in the submission. Each present domain
scores frequency x severity (1..12); absent domains score 0.
"""

import logging
from collections.abc import Sequence
from dataclasses import dataclass

from cognitrack.domain.enums import AssessmentType
from cognitrack.domain.services.scoring.validators import validate_npi_domains
from cognitrack.domain.value_objects.answers import NPIDomainRating
from cognitrack.domain.value_objects.score_result import NPIResult

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class NPIDomain:
    id: int
    name: str
    code: str


NPI_DOMAINS: tuple[NPIDomain, ...] = (
    NPIDomain(1, "Delusions", "DELUSIONS"),
    NPIDomain(2, "Hallucinations", "HALLUCINATIONS"),
    NPIDomain(3, "Agitation/Aggression", "AGITATION"),
    NPIDomain(4, "Depression/Dysphoria", "DEPRESSION"),
    NPIDomain(5, "Anxiety", "ANXIETY"),
    NPIDomain(6, "Elation/Euphoria", "ELATION"),
    NPIDomain(7, "Apathy/Indifference", "APATHY"),
    NPIDomain(8, "Disinhibition", "DISINHIBITION"),
    NPIDomain(9, "Irritability/Lability", "IRRITABILITY"),
    NPIDomain(10, "Aberrant Motor Behavior", "ABERRANT_MOTOR"),
    NPIDomain(11, "Sleep and Night-time Behaviors", "SLEEP"),
    NPIDomain(12, "Appetite and Eating", "APPETITE"),
)

# Canonical bands: 0 none, 1-20 mild, 21-40 moderate, >40 severe
NPI_SEVERITY_BANDS: tuple[tuple[int, str, str], ...] = (
    (0, "None", "No significant neuropsychiatric symptoms detected"),
    (20, "Mild", "Mild neuropsychiatric symptoms present"),
    (40, "Moderate", "Moderate neuropsychiatric symptoms - Clinical attention recommended"),
)
NPI_SEVERE = ("Severe", "Severe neuropsychiatric symptoms - Immediate clinical intervention recommended")


@dataclass(frozen=True)
class NPIDomainBreakdown:
    domain_id: int
    name: str
    code: str
    present: bool
    frequency: int
    severity: int
    distress: int
    score: int


def npi_severity(total_score: int) -> tuple[str, str]:
    """Return ``(severity, interpretation)`` for an NPI total score."""
    for upper, severity, interpretation in NPI_SEVERITY_BANDS:
        if total_score <= upper:
            return severity, interpretation
    return NPI_SEVERE


def score_npi(domains: Sequence[NPIDomainRating]) -> NPIResult:
    """
    Score an NPI submission.

    Raises:
        InvalidInputError: On out-of-range ratings or duplicate domains
    """
    validated = validate_npi_domains(domains)
    total_score = sum(domain.score for domain in validated)
    total_distress = sum(domain.distress for domain in validated)
    severity, interpretation = npi_severity(total_score)

    logger.debug(f"NPI scored {total_score} (distress {total_distress}, {severity})")
    return NPIResult(
        assessment_type=AssessmentType.NPI,
        score=total_score,
        label=severity,
        interpretation=interpretation,
        total_distress=total_distress,
        domain_scores=tuple(sorted(validated, key=lambda d: d.domain_id)),
        assessed_domains=len(validated),
    )


def domain_breakdown(domains: Sequence[NPIDomainRating]) -> list[NPIDomainBreakdown]:
    """One row per catalogue domain; absent domains are reported with zeros."""
    by_id = {d.domain_id: d for d in validate_npi_domains(domains)}
    rows = []
    for domain in NPI_DOMAINS:
        rating = by_id.get(domain.id)
        rows.append(
            NPIDomainBreakdown(
                domain_id=domain.id,
                name=domain.name,
                code=domain.code,
                present=rating is not None,
                frequency=rating.frequency if rating else 0,
                severity=rating.severity if rating else 0,
                distress=rating.distress if rating else 0,
                score=rating.score if rating else 0,
            )
        )
    return rows
