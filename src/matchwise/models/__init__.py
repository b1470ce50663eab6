"""Data models for Matchwise."""

from matchwise.models.applicant import (
    ApplicantBehaviour,
    ApplicantData,
    ApplicantPreferences,
    ModeOfWork,
    RoleLevel,
)
from matchwise.models.job import JobBehaviour, JobData, JobPreferences
from matchwise.models.match import MatchRecord, MatchStatus

__all__ = [
    "ApplicantBehaviour",
    "ApplicantData",
    "ApplicantPreferences",
    "JobBehaviour",
    "JobData",
    "JobPreferences",
    "MatchRecord",
    "MatchStatus",
    "ModeOfWork",
    "RoleLevel",
]
