"""Hybrid matcher combining algorithmic scores with an LLM explanation."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from matchwise.scoring.algorithmic import AlgorithmicScorer
from matchwise.scoring.models import MatchResult, MatchScores

if TYPE_CHECKING:
    from matchwise.models.applicant import ApplicantData
    from matchwise.models.job import JobData
    from matchwise.processors.summary import MatchSummarizer

logger = logging.getLogger(__name__)


class HybridMatcher:
    """Score a match and attach a natural-language summary.

    Flow:
    1. Compute deterministic algorithmic scores (fast, free, no API calls)
    2. Ask the summarizer for an explanation of those scores
    3. Return both; a failed summary leaves ``ai_summary`` empty
    """

    def __init__(
        self,
        summarizer: MatchSummarizer | None = None,
        include_summary: bool = True,
    ) -> None:
        """Initialize the hybrid matcher.

        Args:
            summarizer: Summary collaborator. Without one, results carry scores only.
            include_summary: Set False to skip summaries even when a summarizer exists.
        """
        self.summarizer = summarizer
        self.include_summary = include_summary
        self.algorithmic = AlgorithmicScorer()

    def score(self, applicant: ApplicantData, job: JobData) -> MatchScores:
        """Compute the numeric scores only."""
        return self.algorithmic.compute(applicant, job)

    def summarize(
        self,
        applicant: ApplicantData,
        job: JobData,
        scores: MatchScores,
    ) -> str | None:
        """Get a summary for already computed scores, or None."""
        if self.summarizer is None or not self.include_summary:
            return None
        try:
            return self.summarizer.generate_summary(applicant, job, scores)
        except Exception as e:
            logger.warning(f"Summary unavailable for '{job.title}': {e}")
            return None

    def compute_match(self, applicant: ApplicantData, job: JobData) -> MatchResult:
        """Compute match scores and summary.

        Args:
            applicant: Applicant data.
            job: Job data.

        Returns:
            MatchResult; the four scores are always present.
        """
        scores = self.score(applicant, job)
        return MatchResult(
            **scores.model_dump(),
            ai_summary=self.summarize(applicant, job, scores),
        )
