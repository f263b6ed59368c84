"""Domain entities."""

from cognitrack.domain.entities.assessment import AssessmentRecord

__all__ = ["AssessmentRecord"]
