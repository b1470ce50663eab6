"""Applicant data models."""

from typing import Any, Literal

from pydantic import BaseModel, Field, field_validator

from matchwise.utils.validators import coerce_str_list, none_if_blank

RoleLevel = Literal["Intern", "Junior", "Senior", "Lead"]
ModeOfWork = Literal["Work from Home", "On site", "Hybrid"]


class ApplicantPreferences(BaseModel):
    """Job preferences collected during applicant onboarding."""

    target_job_title: str | None = None
    role_level: RoleLevel | None = None
    salary_min: int | None = None
    salary_max: int | None = None
    mode_of_work: ModeOfWork | None = None

    @field_validator(
        "target_job_title", "role_level", "salary_min", "salary_max", "mode_of_work", mode="before"
    )
    @classmethod
    def blank_to_none(cls, v: Any) -> Any:
        return none_if_blank(v)


class ApplicantBehaviour(BaseModel):
    """Behavioural quiz answers, one per bipolar axis.

    Each axis is answered on a 1-5 scale: 1-2 leans to the first pole,
    4-5 to the second, 3 is neutral.
    """

    independent_vs_team: int | None = Field(default=None, ge=1, le=5)
    structured_vs_open: int | None = Field(default=None, ge=1, le=5)
    fast_vs_steady: int | None = Field(default=None, ge=1, le=5)
    quick_vs_thorough: int | None = Field(default=None, ge=1, le=5)
    hands_on_vs_strategic: int | None = Field(default=None, ge=1, le=5)
    feedback_vs_autonomy: int | None = Field(default=None, ge=1, le=5)
    innovation_vs_process: int | None = Field(default=None, ge=1, le=5)
    flexible_vs_schedule: int | None = Field(default=None, ge=1, le=5)


class ApplicantData(BaseModel):
    """Everything the scorer needs to know about one applicant."""

    skills: list[str] = Field(default_factory=list)
    preferences: ApplicantPreferences = Field(default_factory=ApplicantPreferences)
    behaviour: ApplicantBehaviour | None = None

    @field_validator("skills", mode="before")
    @classmethod
    def coerce_to_list(cls, v: Any) -> list[str]:
        return coerce_str_list(v)
