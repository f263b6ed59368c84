"""
Tests for the scorer registry.
"""

from datetime import datetime

import pytest

from cognitrack.domain.enums import AssessmentType
from cognitrack.domain.exceptions import InvalidInputError
from cognitrack.domain.services.scoring import SCORERS, record_assessment, score_assessment
from cognitrack.domain.utils.datetime_utils import UTC
from cognitrack.domain.value_objects.score_result import CDRResult, FAQResult, GDSResult, NPIResult
from cognitrack.tests.conftest import faq_items, gds_answers_for_score, npi_domains_for_score


@pytest.mark.unit
class TestScoreAssessment:
    """Tests for score_assessment dispatch."""

    def test_every_instrument_registered(self):
        assert set(SCORERS) == set(AssessmentType)

    @pytest.mark.parametrize(
        ("assessment_type", "answers", "result_type"),
        [
            (AssessmentType.GDS, gds_answers_for_score(5), GDSResult),
            (AssessmentType.NPI, npi_domains_for_score(14), NPIResult),
            (AssessmentType.FAQ, faq_items([1] * 10), FAQResult),
            (AssessmentType.CDR, (0.5, 0.5, 0.5, 0.5, 0.5, 0.5), CDRResult),
        ],
    )
    def test_dispatches_by_type(self, assessment_type, answers, result_type):
        result = score_assessment(assessment_type, answers)

        assert isinstance(result, result_type)
        assert result.assessment_type == assessment_type

    def test_accepts_string_type(self):
        assert score_assessment("GDS", gds_answers_for_score(2)).score == 2

    def test_unknown_type(self):
        with pytest.raises(InvalidInputError) as exc_info:
            score_assessment("MMSE", [])

        assert exc_info.value.errors == ["Unsupported assessment type: 'MMSE'"]


@pytest.mark.unit
class TestRecordAssessment:
    """Tests for record_assessment."""

    def test_builds_record(self):
        when = datetime(2025, 3, 1, 12, 0, tzinfo=UTC)

        record = record_assessment("p-1", AssessmentType.FAQ, faq_items([2] * 10), created_at=when, notes="visit")

        assert record.patient_id == "p-1"
        assert record.assessment_type == AssessmentType.FAQ
        assert record.score == 20
        assert record.created_at == when
        assert record.notes == "visit"
        assert record.id

    def test_invalid_answers_create_no_record(self):
        with pytest.raises(InvalidInputError):
            record_assessment("p-1", AssessmentType.GDS, gds_answers_for_score(2)[:10])
