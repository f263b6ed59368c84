"""Screening instruments supported by the scoring engine."""

from enum import Enum


class AssessmentType(str, Enum):
    """Types of standardized assessments."""

    GDS = "GDS"  # Geriatric Depression Scale, 15-item
    NPI = "NPI"  # Neuropsychiatric Inventory
    FAQ = "FAQ"  # Functional Activities Questionnaire
    CDR = "CDR"  # Clinical Dementia Rating

    @property
    def key(self) -> str:
        """Lower-case key used in report payloads (``gds``, ``npi``...)."""
        return self.value.lower()
