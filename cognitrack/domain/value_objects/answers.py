"""
Raw answer value objects, one explicit record type per instrument.

These are plain immutable carriers. Range and shape checks live in
``cognitrack.domain.services.scoring.validators`` so that every problem in a
submission can be reported together.
"""

from collections.abc import Sequence
from dataclasses import dataclass

CDR_DOMAIN_FIELDS: tuple[str, ...] = (
    "memory",
    "orientation",
    "judgment_problem",
    "community_affairs",
    "home_hobbies",
    "personal_care",
)

# External (camelCase) keys accepted for CDR box scores
CDR_DOMAIN_ALIASES: dict[str, str] = {
    "memory": "memory",
    "orientation": "orientation",
    "judgmentProblem": "judgment_problem",
    "communityAffairs": "community_affairs",
    "homeHobbies": "home_hobbies",
    "personalCare": "personal_care",
}


@dataclass(frozen=True)
class GDSAnswer:
    """A yes/no answer to one GDS question (True = yes)."""

    question_id: int
    answer: bool


@dataclass(frozen=True)
class NPIDomainRating:
    """Ratings for one NPI domain that is present."""

    domain_id: int
    frequency: int  # 1=occasionally .. 4=very frequently
    severity: int  # 1=mild .. 3=severe
    distress: int  # 0=not at all .. 5=extreme

    @property
    def score(self) -> int:
        """Domain score: frequency x severity."""
        return self.frequency * self.severity


@dataclass(frozen=True)
class FAQItemRating:
    """Rating for one FAQ activity (0=normal .. 3=dependent)."""

    item_id: int
    rating: int


@dataclass(frozen=True)
class CDRBoxScores:
    """The six CDR box scores, memory first."""

    memory: float
    orientation: float
    judgment_problem: float
    community_affairs: float
    home_hobbies: float
    personal_care: float

    @classmethod
    def from_sequence(cls, values: Sequence[float]) -> "CDRBoxScores":
        """Build from six values ordered memory, orientation, judgment, community, home, care."""
        if len(values) != len(CDR_DOMAIN_FIELDS):
            raise ValueError(f"CDR requires exactly {len(CDR_DOMAIN_FIELDS)} box scores, got {len(values)}")
        return cls(*values)

    def as_tuple(self) -> tuple[float, ...]:
        return tuple(getattr(self, name) for name in CDR_DOMAIN_FIELDS)

    @property
    def secondary(self) -> tuple[float, ...]:
        """The five non-memory domains, in catalogue order."""
        return self.as_tuple()[1:]

    @property
    def sum_of_boxes(self) -> float:
        return float(sum(self.as_tuple()))
