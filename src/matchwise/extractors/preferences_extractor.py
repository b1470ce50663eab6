"""Preference extraction from cover letters using LLM with structured output."""

from __future__ import annotations

import logging
import re
from typing import TYPE_CHECKING, Any, get_args

from langchain_core.prompts import ChatPromptTemplate
from pydantic import BaseModel, Field, field_validator

from matchwise.models.applicant import ApplicantPreferences, ModeOfWork, RoleLevel
from matchwise.prompts.extraction import COVER_LETTER_PREFERENCES_PROMPT

if TYPE_CHECKING:
    from matchwise.llm.base import LLMProvider

logger = logging.getLogger(__name__)

MAX_INPUT_CHARS = 5000

# Checked in this order when the level has to be read from the title
_TITLE_LEVELS = ("Senior", "Junior", "Lead", "Intern")


class _PreferencesOutput(BaseModel):
    """Raw structured output; values are validated after extraction."""

    job_title: str | None = Field(default=None, description="Job title without role level")
    role_level: str | None = Field(default=None, description="Intern, Junior, Senior or Lead")
    salary_min: float | None = Field(default=None, description="Minimum monthly salary")
    salary_max: float | None = Field(default=None, description="Maximum monthly salary")
    mode_of_work: str | None = Field(default=None, description="Work from Home, On site or Hybrid")

    @field_validator("salary_min", "salary_max", mode="before")
    @classmethod
    def coerce_salary(cls, v: Any) -> float | None:
        """Convert values like '5,000' or 'not mentioned' to a number or None."""
        if v is None or isinstance(v, int | float):
            return v
        if isinstance(v, str):
            try:
                return float(v.replace(",", "").strip())
            except ValueError:
                return None
        return None


def split_role_level(job_title: str | None, role_level: str | None) -> tuple[str | None, str | None]:
    """Separate a role level embedded in a job title.

    Examples:
        >>> split_role_level("Senior Full-Stack Engineer", None)
        ('Full-Stack Engineer', 'Senior')
        >>> split_role_level("Backend Developer Lead", "Lead")
        ('Backend Developer', 'Lead')
        >>> split_role_level("Data Analyst", None)
        ('Data Analyst', None)
    """
    title = (job_title or "").strip()

    if title and not role_level:
        title_lower = title.lower()
        for level in _TITLE_LEVELS:
            if level.lower() in title_lower:
                role_level = level
                title = re.sub(rf"{level}\s+", "", title, count=1, flags=re.IGNORECASE).strip()
                break

    if title and role_level:
        level = re.escape(role_level)
        title = re.sub(rf"^{level}\s+", "", title, flags=re.IGNORECASE)
        title = re.sub(rf"\s+{level}$", "", title, flags=re.IGNORECASE).strip()

    return title or None, role_level or None


def _known(value: str | None, allowed: tuple[str, ...]) -> str | None:
    return value if value in allowed else None


class PreferencesExtractor:
    """Suggest applicant preferences from a cover letter."""

    def __init__(self, llm_provider: LLMProvider):
        self.llm_provider = llm_provider
        self.prompt = ChatPromptTemplate.from_template(COVER_LETTER_PREFERENCES_PROMPT)

    def extract(self, cover_letter_text: str) -> ApplicantPreferences:
        """Extract preferences from cover letter text.

        Args:
            cover_letter_text: Plain text of the cover letter.

        Returns:
            ApplicantPreferences; fields the letter does not support are None.
        """
        if not cover_letter_text.strip():
            return ApplicantPreferences()

        try:
            model = self.llm_provider.get_extraction_model()
            structured_model = model.with_structured_output(
                _PreferencesOutput, method="function_calling"
            )
            chain = self.prompt | structured_model
            raw = chain.invoke({"cover_letter_text": cover_letter_text[:MAX_INPUT_CHARS]})
        except Exception as e:
            logger.warning(f"Preference extraction failed: {e}")
            return ApplicantPreferences()

        logger.debug(f"Extracted raw preferences: {raw}")
        return self._to_preferences(raw)

    @staticmethod
    def _to_preferences(raw: _PreferencesOutput) -> ApplicantPreferences:
        """Post-process raw output into validated preferences."""
        title, level = split_role_level(raw.job_title, raw.role_level)
        return ApplicantPreferences(
            target_job_title=title,
            role_level=_known(level, get_args(RoleLevel)),
            salary_min=int(raw.salary_min) if raw.salary_min else None,
            salary_max=int(raw.salary_max) if raw.salary_max else None,
            mode_of_work=_known(raw.mode_of_work, get_args(ModeOfWork)),
        )
