"""
Tests for the assessment payload schemas and result serialization.
"""

import pytest

from cognitrack.domain.enums import AssessmentType
from cognitrack.domain.exceptions import InvalidInputError
from cognitrack.domain.services.clinical_overview import build_overview
from cognitrack.domain.services.correlation_engine import correlation_report
from cognitrack.domain.services.scoring import score_assessment
from cognitrack.domain.value_objects.answers import CDRBoxScores, FAQItemRating, GDSAnswer, NPIDomainRating
from cognitrack.presentation.schemas import (
    AssessmentSubmission,
    CDRSubmission,
    GDSSubmission,
    parse_assessment_payload,
    serialize,
)
from cognitrack.tests.conftest import PATIENT_ID, day, make_gds


@pytest.mark.unit
class TestParseAssessmentPayload:
    """Tests for parse_assessment_payload."""

    def test_gds_objects(self):
        payload = {
            "patientId": PATIENT_ID,
            "answers": [{"questionId": i, "answer": i % 2 == 0} for i in range(1, 16)],
        }

        submission = parse_assessment_payload("GDS", payload)

        assert isinstance(submission, GDSSubmission)
        assert submission.to_answers()[1] == GDSAnswer(2, True)

    def test_gds_positional_booleans(self):
        payload = {"patientId": PATIENT_ID, "answers": [False] * 15, "notes": "baseline"}

        submission = parse_assessment_payload(AssessmentType.GDS, payload)
        answers = submission.to_answers()

        assert answers[0] == GDSAnswer(1, False)
        assert answers[-1] == GDSAnswer(15, False)
        assert submission.notes == "baseline"
        assert score_assessment(AssessmentType.GDS, answers).score == 5

    def test_npi(self):
        payload = {
            "patientId": PATIENT_ID,
            "domainScores": [{"domainId": 3, "frequency": 2, "severity": 3, "distress": 1, "score": 6}],
        }

        answers = parse_assessment_payload("NPI", payload).to_answers()

        assert answers == [NPIDomainRating(3, 2, 3, 1)]

    def test_faq_positional(self):
        answers = parse_assessment_payload("FAQ", {"patientId": PATIENT_ID, "answers": [0, 1, 2]}).to_answers()

        assert answers == [FAQItemRating(1, 0), FAQItemRating(2, 1), FAQItemRating(3, 2)]

    def test_cdr(self):
        payload = {
            "patientId": PATIENT_ID,
            "boxScores": {
                "memory": 1,
                "orientation": 0.5,
                "judgmentProblem": 1,
                "communityAffairs": 1,
                "homeHobbies": 1,
                "personalCare": 0,
            },
        }

        submission = parse_assessment_payload("CDR", payload)

        assert isinstance(submission, CDRSubmission)
        assert submission.to_answers() == CDRBoxScores(1.0, 0.5, 1.0, 1.0, 1.0, 0.0)

    def test_wrong_types_become_invalid_input(self):
        payload = {"patientId": PATIENT_ID, "answers": [{"questionId": "1", "answer": "yes"}]}

        with pytest.raises(InvalidInputError) as exc_info:
            parse_assessment_payload("GDS", payload)

        assert exc_info.value.message == "Invalid GDS payload"
        assert exc_info.value.errors

    def test_unknown_field_rejected(self):
        with pytest.raises(InvalidInputError):
            parse_assessment_payload("FAQ", {"patientId": PATIENT_ID, "answers": [0], "extra": 1})

    def test_missing_patient(self):
        with pytest.raises(InvalidInputError) as exc_info:
            parse_assessment_payload("FAQ", {"answers": [0]})

        assert any(error.startswith("patientId") for error in exc_info.value.errors)

    def test_unknown_instrument(self):
        with pytest.raises(InvalidInputError):
            parse_assessment_payload("MMSE", {})

    def test_range_checks_left_to_domain(self):
        submission = parse_assessment_payload("FAQ", {"patientId": PATIENT_ID, "answers": [7]})

        with pytest.raises(InvalidInputError):
            score_assessment(AssessmentType.FAQ, submission.to_answers())

    def test_base_submission_is_abstract(self):
        with pytest.raises(TypeError):
            AssessmentSubmission(patient_id=PATIENT_ID)


@pytest.mark.unit
class TestSerialize:
    """Tests for serialize."""

    def test_score_result(self):
        data = serialize(score_assessment("CDR", (2, 1, 1, 1, 1, 0)))

        assert data["assessmentType"] == "CDR"
        assert data["score"] == 1
        assert data["sumOfBoxes"] == 6
        assert data["boxScores"]["judgmentProblem"] == 1
        assert data["domainsMatchingMemory"] == 0

    def test_overview(self):
        data = serialize(build_overview([make_gds(11, day(0))]))

        assert data["assessmentCounts"]["gds"] == 1
        assert data["latestAssessments"]["gds"]["date"].startswith("2025-01-01T09:00:00")
        assert data["alerts"][0]["type"] == "danger"
        assert data["trends"]["overallTrend"] == "improving"
        assert data["patient"] is None

    def test_correlation_keys(self):
        data = serialize(correlation_report(PATIENT_ID, {}))

        assert set(data["correlations"]) == {"gdsNpi", "gdsFaq", "gdsCdr", "npiFaq", "npiCdr", "faqCdr"}
        assert data["correlations"]["gdsNpi"] == {
            "correlation": 0.0,
            "strength": "none",
            "sampleSize": 0,
            "pValue": None,
        }
