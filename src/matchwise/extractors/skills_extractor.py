"""Skill extraction from resume text using LLM with structured output."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from langchain_core.prompts import ChatPromptTemplate
from pydantic import BaseModel, Field, field_validator

from matchwise.utils.validators import coerce_str_list
from matchwise.prompts.extraction import SKILLS_EXTRACTION_PROMPT

if TYPE_CHECKING:
    from matchwise.llm.base import LLMProvider

logger = logging.getLogger(__name__)

# Resumes beyond this are truncated before prompting
MAX_INPUT_CHARS = 5000


class ExtractedSkills(BaseModel):
    """Structured output for resume skill extraction."""

    skills: list[str] = Field(
        default_factory=list,
        description="Technical skills, languages, frameworks, tools and technologies",
    )

    @field_validator("skills", mode="before")
    @classmethod
    def coerce_to_list(cls, v: Any) -> list[str]:
        return coerce_str_list(v)


class SkillsExtractor:
    """Extract an applicant's skill list from raw resume text."""

    def __init__(self, llm_provider: LLMProvider):
        self.llm_provider = llm_provider
        self.prompt = ChatPromptTemplate.from_template(SKILLS_EXTRACTION_PROMPT)

    def extract(self, resume_text: str) -> list[str]:
        """Extract skills from resume text.

        Args:
            resume_text: Plain text of the resume.

        Returns:
            Deduplicated skill names in the order found; empty on failure.
        """
        if not resume_text.strip():
            return []

        try:
            model = self.llm_provider.get_extraction_model()
            structured_model = model.with_structured_output(ExtractedSkills)
            chain = self.prompt | structured_model
            result = chain.invoke({"resume_text": resume_text[:MAX_INPUT_CHARS]})
        except Exception as e:
            logger.warning(f"Skill extraction failed: {e}")
            return []

        seen: set[str] = set()
        skills: list[str] = []
        for skill in result.skills:
            name = skill.strip()
            if name and name.lower() not in seen:
                seen.add(name.lower())
                skills.append(name)
        return skills
