"""Natural-language match summaries.

The summary is an explanation layered on top of the numeric scores. It is
best-effort: every failure path returns a deterministic fallback string so
that batch matching never aborts because of the LLM.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from langchain_core.output_parsers import StrOutputParser
from langchain_core.prompts import ChatPromptTemplate

from matchwise.prompts.matching import MATCH_SUMMARY_PROMPT

if TYPE_CHECKING:
    from matchwise.llm.base import LLMProvider
    from matchwise.models.applicant import ApplicantData
    from matchwise.models.job import JobData
    from matchwise.scoring.models import MatchScores

logger = logging.getLogger(__name__)

NOT_AVAILABLE = "N/A"


def offline_summary(job: JobData, scores: MatchScores) -> str:
    """Summary used when no LLM provider is configured."""
    return (
        f"Strong match! {scores.overall_score}% compatibility. "
        f"Skills align well with {job.title} requirements."
    )


def empty_reply_summary(scores: MatchScores) -> str:
    """Summary used when the LLM answers with no text."""
    return f"Strong match with {scores.overall_score}% compatibility."


def failure_summary(scores: MatchScores) -> str:
    """Summary used when the LLM call fails or times out."""
    return (
        f"Match score: {scores.overall_score}%. "
        "Skills and preferences align well with this role."
    )


class MatchSummarizer:
    """Generate a 2-3 sentence explanation of a match."""

    def __init__(self, llm_provider: LLMProvider | None):
        self.llm_provider = llm_provider
        self._prompt = ChatPromptTemplate.from_template(MATCH_SUMMARY_PROMPT)
        self._parser = StrOutputParser()

    def generate_summary(
        self,
        applicant: ApplicantData,
        job: JobData,
        scores: MatchScores,
    ) -> str:
        """Explain why the applicant matches the job.

        Args:
            applicant: Applicant data used for scoring.
            job: Job data used for scoring.
            scores: The computed match scores.

        Returns:
            Summary text. Never raises; falls back to a fixed template.
        """
        if self.llm_provider is None:
            return offline_summary(job, scores)

        try:
            prompt_value = self._prompt.invoke(self._prompt_vars(applicant, job, scores))
            model = self.llm_provider.get_summary_model()
            summary = self._parser.invoke(model.invoke(prompt_value)).strip()
        except Exception as e:
            logger.warning(f"Summary generation failed for '{job.title}', using fallback: {e}")
            return failure_summary(scores)

        return summary or empty_reply_summary(scores)

    @staticmethod
    def _prompt_vars(
        applicant: ApplicantData,
        job: JobData,
        scores: MatchScores,
    ) -> dict[str, object]:
        prefs = applicant.preferences
        return {
            "applicant_skills": ", ".join(applicant.skills) or NOT_AVAILABLE,
            "target_job_title": prefs.target_job_title or NOT_AVAILABLE,
            "applicant_role_level": prefs.role_level or NOT_AVAILABLE,
            "applicant_mode_of_work": prefs.mode_of_work or NOT_AVAILABLE,
            "job_title": job.title,
            "job_role_level": job.preferences.role_level or NOT_AVAILABLE,
            "job_mode_of_work": job.preferences.mode_of_work or NOT_AVAILABLE,
            "skills_score": scores.skills_score,
            "behaviour_score": scores.behaviour_score,
            "prefs_score": scores.prefs_score,
            "overall_score": scores.overall_score,
        }
