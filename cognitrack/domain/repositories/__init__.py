"""Repository interfaces consumed by the application layer."""

from cognitrack.domain.repositories.assessment_repository import AssessmentRepository

__all__ = ["AssessmentRepository"]
