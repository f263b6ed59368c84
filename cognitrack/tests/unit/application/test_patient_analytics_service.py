"""
Tests for the PatientAnalyticsService.
"""

from datetime import date
from unittest.mock import AsyncMock, MagicMock

import pytest

from cognitrack.application.services.patient_analytics_service import PatientAnalyticsService
from cognitrack.core.config import Settings
from cognitrack.domain.enums import AssessmentType, OverallTrend
from cognitrack.domain.exceptions import InvalidInputError, NotFoundError
from cognitrack.tests.conftest import PATIENT_ID, day, gds_answers_for_score, make_gds


@pytest.fixture
def repository(patient, declining_history):
    """Fixture for the assessment repository."""
    repository = MagicMock()
    # Use AsyncMock for async methods
    repository.get_patient = AsyncMock(return_value=patient)
    repository.list_assessments = AsyncMock(return_value=declining_history)
    repository.get_assessment = AsyncMock(return_value=None)
    return repository


@pytest.fixture
def analytics_settings() -> Settings:
    return Settings(CORRELATION_WINDOW_DAYS=3, PROGRESSION_DEFAULT_DAYS=30, ENVIRONMENT="test", TESTING=True)


@pytest.fixture
def service(repository, analytics_settings):
    return PatientAnalyticsService(repository, settings=analytics_settings)


@pytest.mark.unit
class TestPatientAnalyticsService:
    """Tests for the PatientAnalyticsService class."""

    async def test_overview(self, service, repository):
        overview = await service.get_overview(PATIENT_ID, reference_date=date(2025, 7, 1))

        repository.get_patient.assert_awaited_once_with(PATIENT_ID)
        repository.list_assessments.assert_awaited_once_with(PATIENT_ID)
        assert overview.patient.age == 80
        assert overview.trends.overall_trend == OverallTrend.RAPIDLY_DECLINING

    async def test_unknown_patient(self, service, repository):
        repository.get_patient.return_value = None

        with pytest.raises(NotFoundError) as exc_info:
            await service.get_overview("missing")

        assert exc_info.value.code == "NOT_FOUND"
        repository.list_assessments.assert_not_awaited()

    async def test_correlations_use_settings_window(self, service):
        # instruments are recorded a day apart, within the 3 day window
        report = await service.get_correlations(PATIENT_ID)

        assert report.correlations["gds_npi"].sample_size == 3
        # GDS and CDR are three days apart
        assert report.correlations["gds_cdr"].sample_size == 3

    async def test_correlation_window_override(self, service):
        report = await service.get_correlations(PATIENT_ID, window_days=0.5)

        assert all(result.sample_size == 0 for result in report.correlations.values())

    async def test_progression_defaults(self, service, repository):
        report = await service.get_progression(PATIENT_ID, end=day(70))

        kwargs = repository.list_assessments.await_args.kwargs
        assert kwargs["end"] == day(70)
        assert report.time_range.duration_days == 30
        assert [p.score for p in report.gds_progression] == [12]

    async def test_statistics(self, service, repository):
        stats = await service.get_statistics(PATIENT_ID, "FAQ")

        repository.list_assessments.assert_awaited_once_with(PATIENT_ID, assessment_type=AssessmentType.FAQ)
        assert stats.total == 3

    async def test_statistics_unknown_instrument(self, service):
        with pytest.raises(InvalidInputError):
            await service.get_statistics(PATIENT_ID, "MMSE")

    async def test_score(self, service):
        record = await service.score(PATIENT_ID, AssessmentType.GDS, gds_answers_for_score(11), notes="follow-up")

        assert record.score == 11
        assert record.patient_id == PATIENT_ID
        assert record.notes == "follow-up"

    async def test_score_unknown_patient(self, service, repository):
        repository.get_patient.return_value = None

        with pytest.raises(NotFoundError):
            await service.score("missing", AssessmentType.GDS, gds_answers_for_score(1))

    async def test_compare(self, service, repository):
        first, second = make_gds(10, day(0)), make_gds(5, day(30))
        repository.get_assessment.side_effect = [first, second]

        comparison = await service.compare(first.id, second.id)

        assert comparison.difference == -5
        assert comparison.improvement

    async def test_compare_missing_assessment(self, service):
        with pytest.raises(NotFoundError):
            await service.compare("a", "b")

    def test_default_settings(self, repository):
        service = PatientAnalyticsService(repository)

        assert service.settings.CORRELATION_WINDOW_DAYS == 14
