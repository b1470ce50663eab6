"""Persisted match records."""

from datetime import datetime
from typing import Literal

from pydantic import BaseModel, Field

MatchStatus = Literal["pending", "interview_scheduled", "rejected", "accepted"]


class MatchRecord(BaseModel):
    """A scored (applicant, job) pair as stored by the persistence layer."""

    applicant_id: str
    job_id: str

    overall_score: int = Field(ge=0, le=100)
    skills_score: int = Field(ge=0, le=100)
    behaviour_score: int = Field(ge=0, le=100)
    prefs_score: int = Field(ge=0, le=100)
    ai_summary: str | None = None

    status: MatchStatus = "pending"
    interview_scheduled_at: datetime | None = None

    @property
    def key(self) -> tuple[str, str]:
        """Upsert key."""
        return (self.applicant_id, self.job_id)
