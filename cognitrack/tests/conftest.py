"""
Shared test configuration.

Registers the custom markers and provides factories that build assessment
records through the real scorers, so fixtures never disagree with the
scoring rules they are used to test.
"""

import logging
from collections.abc import Sequence
from datetime import date, datetime, timedelta

import pytest

from cognitrack.domain.entities.assessment import AssessmentRecord
from cognitrack.domain.enums import AssessmentType
from cognitrack.domain.services.scoring import record_assessment
from cognitrack.domain.services.scoring.gds import REVERSE_SCORED_QUESTIONS
from cognitrack.domain.utils.datetime_utils import UTC
from cognitrack.domain.value_objects.answers import CDRBoxScores, FAQItemRating, GDSAnswer, NPIDomainRating
from cognitrack.domain.value_objects.patient import PatientSnapshot

logging.basicConfig(level=logging.INFO)

BASE_DATE = datetime(2025, 1, 1, 9, 0, tzinfo=UTC)
PATIENT_ID = "patient-001"

# frequency x severity products, largest first
_NPI_PRODUCTS: tuple[tuple[int, int, int], ...] = (
    (12, 4, 3),
    (9, 3, 3),
    (8, 4, 2),
    (6, 3, 2),
    (4, 4, 1),
    (3, 3, 1),
    (2, 2, 1),
    (1, 1, 1),
)


def pytest_configure(config) -> None:
    """Register custom markers for pytest."""
    config.addinivalue_line("markers", "unit: Unit tests")
    config.addinivalue_line("markers", "standalone: Tests that have no external dependencies")


def day(offset: float) -> datetime:
    """``BASE_DATE`` shifted by a number of days."""
    return BASE_DATE + timedelta(days=offset)


def gds_answers_for_score(score: int) -> list[GDSAnswer]:
    """Fifteen answers whose first ``score`` questions contribute a point."""
    answers = []
    for question_id in range(1, 16):
        contributes = question_id <= score
        reverse = question_id in REVERSE_SCORED_QUESTIONS
        answers.append(GDSAnswer(question_id, (not contributes) if reverse else contributes))
    return answers


def npi_domains_for_score(total: int, distress: int = 1) -> list[NPIDomainRating]:
    """Domain ratings adding up to ``total`` (greedy over the available products)."""
    domains = []
    remaining = total
    domain_id = 1
    while remaining > 0:
        product, frequency, severity = next(p for p in _NPI_PRODUCTS if p[0] <= remaining)
        domains.append(NPIDomainRating(domain_id, frequency, severity, distress))
        remaining -= product
        domain_id += 1
    return domains


def faq_items(ratings: Sequence[int]) -> list[FAQItemRating]:
    return [FAQItemRating(item_id, rating) for item_id, rating in enumerate(ratings, start=1)]


def faq_items_for_score(total: int) -> list[FAQItemRating]:
    """Ten ratings adding up to ``total`` (at most 30)."""
    ratings = []
    remaining = total
    for _ in range(10):
        rating = min(3, remaining)
        ratings.append(rating)
        remaining -= rating
    return faq_items(ratings)


def make_gds(score: int, when: datetime, patient_id: str = PATIENT_ID) -> AssessmentRecord:
    return record_assessment(patient_id, AssessmentType.GDS, gds_answers_for_score(score), created_at=when)


def make_npi(total: int, when: datetime, patient_id: str = PATIENT_ID) -> AssessmentRecord:
    return record_assessment(patient_id, AssessmentType.NPI, npi_domains_for_score(total), created_at=when)


def make_faq(total: int, when: datetime, patient_id: str = PATIENT_ID) -> AssessmentRecord:
    return record_assessment(patient_id, AssessmentType.FAQ, faq_items_for_score(total), created_at=when)


def make_cdr(boxes: Sequence[float], when: datetime, patient_id: str = PATIENT_ID) -> AssessmentRecord:
    return record_assessment(patient_id, AssessmentType.CDR, CDRBoxScores.from_sequence(boxes), created_at=when)


@pytest.fixture
def patient() -> PatientSnapshot:
    """Patient snapshot with PHI fields populated."""
    return PatientSnapshot(
        id=PATIENT_ID,
        first_name="Ada",
        last_name="Example",
        date_of_birth=date(1945, 6, 15),
        medical_record_no="MRN-12345",
    )


@pytest.fixture
def declining_history() -> list[AssessmentRecord]:
    """Three visits a month apart with every instrument getting worse."""
    return [
        make_gds(2, day(0)),
        make_npi(6, day(1)),
        make_faq(3, day(2)),
        make_cdr((0.5, 0.5, 0.5, 0, 0, 0), day(3)),
        make_gds(6, day(30)),
        make_npi(20, day(31)),
        make_faq(10, day(32)),
        make_cdr((1, 1, 1, 1, 0.5, 0), day(33)),
        make_gds(12, day(60)),
        make_npi(40, day(61)),
        make_faq(20, day(62)),
        make_cdr((2, 2, 2, 2, 1, 1), day(63)),
    ]
