"""
Interface for the Assessment Repository.

The analytics core never persists anything; it reads already-committed
snapshots through this interface, which the hosting application implements.
"""

from abc import ABC, abstractmethod
from datetime import datetime

from cognitrack.domain.entities.assessment import AssessmentRecord
from cognitrack.domain.enums import AssessmentType
from cognitrack.domain.value_objects.patient import PatientSnapshot


class AssessmentRepository(ABC):
    """Abstract read-only source of patients and their assessments."""

    @abstractmethod
    async def get_patient(self, patient_id: str) -> PatientSnapshot | None:
        """Retrieve a patient by ID.

        Args:
            patient_id: Unique identifier for the patient

        Returns:
            Patient snapshot if found, None otherwise
        """
        pass

    @abstractmethod
    async def list_assessments(
        self,
        patient_id: str,
        assessment_type: AssessmentType | None = None,
        start: datetime | None = None,
        end: datetime | None = None,
    ) -> list[AssessmentRecord]:
        """List a patient's assessments.

        Args:
            patient_id: Patient whose assessments to list
            assessment_type: Optional filter by instrument
            start: Optional inclusive lower bound on creation time
            end: Optional inclusive upper bound on creation time

        Returns:
            Assessments in any order
        """
        pass

    @abstractmethod
    async def get_assessment(self, assessment_id: str) -> AssessmentRecord | None:
        """Retrieve one assessment by ID, or None when it does not exist."""
        pass
