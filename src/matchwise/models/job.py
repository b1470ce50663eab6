"""Job data models."""

from typing import Any

from pydantic import BaseModel, Field, field_validator

from matchwise.models.applicant import ModeOfWork, RoleLevel
from matchwise.utils.validators import none_if_blank


class JobPreferences(BaseModel):
    """Role level, salary band and work mode offered by a job."""

    role_level: RoleLevel | None = None
    salary_min: int | None = None
    salary_max: int | None = None
    mode_of_work: ModeOfWork | None = None

    @field_validator("role_level", "salary_min", "salary_max", "mode_of_work", mode="before")
    @classmethod
    def blank_to_none(cls, v: Any) -> Any:
        return none_if_blank(v)


class JobBehaviour(BaseModel):
    """Desired behaviour per axis, as descriptive labels (e.g. "Team", "Fast-paced")."""

    work_style: str | None = None
    task_structure: str | None = None
    environment_pace: str | None = None
    decision_making: str | None = None
    role_focus: str | None = None
    feedback_style: str | None = None
    innovation_style: str | None = None
    schedule_type: str | None = None


class JobData(BaseModel):
    """Everything the scorer needs to know about one job."""

    title: str
    jd_text: str | None = None
    preferences: JobPreferences = Field(default_factory=JobPreferences)
    behaviour: JobBehaviour | None = None
