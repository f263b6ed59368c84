"""
Patient analytics application service.

Fetches snapshots through the injected repository and hands them to the pure
domain services. This is the only place where the analytics touch I/O.
"""

from datetime import date, datetime

from cognitrack.core.config import Settings, get_settings
from cognitrack.core.utils.logging import get_logger
from cognitrack.domain.entities.assessment import AssessmentRecord
from cognitrack.domain.enums import AssessmentType
from cognitrack.domain.exceptions import InvalidInputError, NotFoundError
from cognitrack.domain.repositories.assessment_repository import AssessmentRepository
from cognitrack.domain.services.assessment_statistics import (
    AssessmentComparison,
    InstrumentStatistics,
    compare_assessments,
    instrument_statistics,
)
from cognitrack.domain.services.clinical_overview import build_overview, build_progression_report
from cognitrack.domain.services.correlation_engine import correlation_report
from cognitrack.domain.services.scoring import record_assessment
from cognitrack.domain.utils.datetime_utils import now
from cognitrack.domain.value_objects.analytics import (
    CorrelationReport,
    PatientOverview,
    ProgressionReport,
    TimeSeriesPoint,
)
from cognitrack.domain.value_objects.patient import PatientSnapshot

logger = get_logger(__name__)


class PatientAnalyticsService:
    """
    Service for patient-level scoring and longitudinal analytics.

    Defaults for the trend window, correlation window and progression range
    come from the application settings.
    """

    def __init__(self, repository: AssessmentRepository, settings: Settings | None = None) -> None:
        """
        Initialize the service.

        Args:
            repository: Read-only source of patients and assessments
            settings: Application settings (defaults to ``get_settings()``)
        """
        self.repository = repository
        self.settings = settings or get_settings()

    async def _require_patient(self, patient_id: str) -> PatientSnapshot:
        patient = await self.repository.get_patient(patient_id)
        if patient is None:
            logger.warning(f"Patient {patient_id} not found")
            raise NotFoundError(f"Patient {patient_id} not found")
        return patient

    async def _require_assessment(self, assessment_id: str) -> AssessmentRecord:
        assessment = await self.repository.get_assessment(assessment_id)
        if assessment is None:
            logger.warning(f"Assessment {assessment_id} not found")
            raise NotFoundError(f"Assessment {assessment_id} not found")
        return assessment

    async def score(
        self,
        patient_id: str,
        assessment_type: AssessmentType | str,
        answers,
        notes: str | None = None,
    ) -> AssessmentRecord:
        """
        Score a new assessment for an existing patient.

        The record is returned for the caller to persist.

        Raises:
            NotFoundError: If the patient does not exist
            InvalidInputError: If the answers are invalid
        """
        await self._require_patient(patient_id)
        return record_assessment(patient_id, assessment_type, answers, notes=notes)

    async def get_overview(self, patient_id: str, reference_date: date | None = None) -> PatientOverview:
        """
        Build the clinical overview of a patient.

        Raises:
            NotFoundError: If the patient does not exist
        """
        patient = await self._require_patient(patient_id)
        records = await self.repository.list_assessments(patient_id)
        return build_overview(
            records,
            patient=patient,
            reference_date=reference_date,
            window_size=self.settings.TREND_WINDOW_SIZE,
            threshold=self.settings.TREND_DIRECTION_THRESHOLD,
        )

    async def get_correlations(self, patient_id: str, window_days: float | None = None) -> CorrelationReport:
        """
        Correlate every instrument pair for a patient.

        Raises:
            NotFoundError: If the patient does not exist
        """
        await self._require_patient(patient_id)
        records = await self.repository.list_assessments(patient_id)

        series: dict[AssessmentType, list[TimeSeriesPoint]] = {t: [] for t in AssessmentType}
        for record in records:
            series[record.assessment_type].append(TimeSeriesPoint(record.created_at, record.series_score))

        if window_days is None:
            window_days = self.settings.CORRELATION_WINDOW_DAYS
        return correlation_report(patient_id, series, window_days)

    async def get_progression(
        self,
        patient_id: str,
        start: datetime | None = None,
        end: datetime | None = None,
    ) -> ProgressionReport:
        """
        Build the progression report over a date range.

        Raises:
            NotFoundError: If the patient does not exist
            InvalidInputError: If start is after end
        """
        await self._require_patient(patient_id)
        end = end or now()
        records = await self.repository.list_assessments(patient_id, start=start, end=end)
        return build_progression_report(
            patient_id,
            records,
            start=start,
            end=end,
            default_days=self.settings.PROGRESSION_DEFAULT_DAYS,
        )

    async def get_statistics(self, patient_id: str, assessment_type: AssessmentType | str) -> InstrumentStatistics:
        """
        Statistics over one instrument's history for a patient.

        Raises:
            NotFoundError: If the patient does not exist
            InvalidInputError: If the instrument is unknown
        """
        try:
            instrument = AssessmentType(assessment_type)
        except ValueError:
            raise InvalidInputError(
                message="Unknown assessment type", detail=[f"Unsupported assessment type: {assessment_type!r}"]
            ) from None
        await self._require_patient(patient_id)
        records = await self.repository.list_assessments(patient_id, assessment_type=instrument)
        return instrument_statistics(instrument, records)

    async def compare(self, first_id: str, second_id: str) -> AssessmentComparison:
        """
        Compare two stored assessments.

        Raises:
            NotFoundError: If either assessment does not exist
            InvalidInputError: If they belong to different patients or instruments
        """
        first = await self._require_assessment(first_id)
        second = await self._require_assessment(second_id)
        return compare_assessments(first, second)
