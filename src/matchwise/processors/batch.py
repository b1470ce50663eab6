"""Batch matching: one job against many applicants, or one applicant against many jobs.

Every pair is scored up front. Summary generation and persistence then run
in a thread pool; a failure on one pair never aborts the others.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass
from typing import TYPE_CHECKING

from pydantic import BaseModel, Field

from matchwise.config import get_settings
from matchwise.models.match import MatchRecord

if TYPE_CHECKING:
    from matchwise.models.applicant import ApplicantData
    from matchwise.models.job import JobData
    from matchwise.scoring.hybrid import HybridMatcher
    from matchwise.scoring.models import MatchScores
    from matchwise.storage import MatchRepository

logger = logging.getLogger(__name__)


class BatchReport(BaseModel):
    """Outcome of one batch run."""

    total: int = 0
    matches_created: int = 0
    skipped: int = 0
    failed: int = 0
    results: list[MatchRecord] = Field(default_factory=list)

    @property
    def message(self) -> str:
        """Human-readable outcome."""
        return f"Matching completed. {self.matches_created} match(es) created/updated."


@dataclass(frozen=True)
class _Pair:
    """One scored (applicant, job) pair awaiting summary and persistence."""

    applicant_id: str
    job_id: str
    applicant: ApplicantData
    job: JobData
    scores: MatchScores


class BatchMatcher:
    """Run matching for many pairs and persist the results."""

    def __init__(
        self,
        matcher: HybridMatcher,
        repository: MatchRepository,
        max_workers: int | None = None,
    ):
        self.matcher = matcher
        self.repository = repository
        self.max_workers = max_workers or get_settings().batch_max_workers

    def match_job(
        self,
        job_id: str,
        job: JobData,
        applicants: Mapping[str, ApplicantData | None],
    ) -> BatchReport:
        """Match one job against every applicant.

        Args:
            job_id: Job identifier used as part of the match key.
            job: Job data.
            applicants: Applicant id -> data; None marks incomplete onboarding.

        Returns:
            BatchReport with counts and the stored records.
        """
        report = BatchReport(total=len(applicants))
        pairs: list[_Pair] = []
        for applicant_id, applicant in applicants.items():
            if applicant is None:
                logger.warning(f"Skipping applicant {applicant_id} - incomplete profile data")
                report.skipped += 1
                continue
            pairs.append(
                _Pair(applicant_id, job_id, applicant, job, self.matcher.score(applicant, job))
            )
        return self._persist(pairs, report)

    def match_applicant(
        self,
        applicant_id: str,
        applicant: ApplicantData,
        jobs: Mapping[str, JobData | None],
    ) -> BatchReport:
        """Match one applicant against every job.

        Args:
            applicant_id: Applicant identifier used as part of the match key.
            applicant: Applicant data.
            jobs: Job id -> data; None marks a job without preferences/behaviour.

        Returns:
            BatchReport with counts and the stored records.
        """
        report = BatchReport(total=len(jobs))
        pairs: list[_Pair] = []
        for job_id, job in jobs.items():
            if job is None:
                logger.warning(f"Skipping job {job_id} - incomplete job data")
                report.skipped += 1
                continue
            pairs.append(
                _Pair(applicant_id, job_id, applicant, job, self.matcher.score(applicant, job))
            )
        return self._persist(pairs, report)

    def _persist(self, pairs: list[_Pair], report: BatchReport) -> BatchReport:
        if not pairs:
            logger.info("No complete records to match")
            return report

        with ThreadPoolExecutor(max_workers=self.max_workers) as executor:
            stored = list(executor.map(self._finish_pair, pairs))

        for record in stored:
            if record is None:
                report.failed += 1
            else:
                report.matches_created += 1
                report.results.append(record)

        logger.info(report.message)
        return report

    def _finish_pair(self, pair: _Pair) -> MatchRecord | None:
        """Attach a summary and upsert; None when persistence fails."""
        summary = self.matcher.summarize(pair.applicant, pair.job, pair.scores)
        record = MatchRecord(
            applicant_id=pair.applicant_id,
            job_id=pair.job_id,
            ai_summary=summary,
            **pair.scores.model_dump(),
        )
        try:
            return self.repository.upsert(record)
        except Exception as e:
            logger.error(
                f"Error creating/updating match for applicant {pair.applicant_id} "
                f"and job {pair.job_id}: {e}"
            )
            return None
