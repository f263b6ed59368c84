"""Patient demographics snapshot as supplied by the persistence layer."""

from dataclasses import dataclass
from datetime import date


@dataclass(frozen=True)
class PatientSnapshot:
    """
    Immutable view of the patient fields the overview needs.

    Contains PHI; keep it out of log messages.
    """

    id: str
    first_name: str
    last_name: str
    date_of_birth: date
    medical_record_no: str | None = None

    def __repr__(self) -> str:
        return f"PatientSnapshot(id='{self.id}')"
