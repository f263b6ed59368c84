"""Pydantic schemas for assessment payloads and result serialization."""

from cognitrack.presentation.schemas.assessment import (
    SUBMISSION_SCHEMAS,
    AssessmentSubmission,
    CDRSubmission,
    FAQSubmission,
    GDSSubmission,
    NPISubmission,
    parse_assessment_payload,
)
from cognitrack.presentation.schemas.serializers import serialize

__all__ = [
    "SUBMISSION_SCHEMAS",
    "AssessmentSubmission",
    "CDRSubmission",
    "FAQSubmission",
    "GDSSubmission",
    "NPISubmission",
    "parse_assessment_payload",
    "serialize",
]
