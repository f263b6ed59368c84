"""
Domain entity representing one completed assessment.
"""

from dataclasses import dataclass, field
from datetime import datetime
from uuid import uuid4

from cognitrack.domain.enums import AssessmentType
from cognitrack.domain.utils.datetime_utils import now, to_utc
from cognitrack.domain.value_objects.score_result import CDRResult, ScoreResult


@dataclass(frozen=True, kw_only=True)
class AssessmentRecord:
    """
    A scored assessment for one patient.

    The result is fixed at creation; records are never updated in place.
    """

    patient_id: str
    assessment_type: AssessmentType
    result: ScoreResult
    created_at: datetime = field(default_factory=now)
    id: str = field(default_factory=lambda: str(uuid4()))
    notes: str | None = None

    def __post_init__(self) -> None:
        if self.result.assessment_type != self.assessment_type:
            raise ValueError(
                f"Result type {self.result.assessment_type.value} does not match "
                f"assessment type {self.assessment_type.value}"
            )
        object.__setattr__(self, "created_at", to_utc(self.created_at))

    @property
    def score(self) -> float:
        """Headline score (CDR: global score)."""
        return self.result.score

    @property
    def series_score(self) -> float:
        """
        Score used for longitudinal work.

        CDR uses the sum of boxes, which is more sensitive to change than the
        global stage; the other instruments use their total.
        """
        if isinstance(self.result, CDRResult):
            return self.result.sum_of_boxes
        return self.result.score
