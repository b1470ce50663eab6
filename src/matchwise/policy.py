"""Product policy on top of match scores: interview gate and visible matches."""

from __future__ import annotations

import logging
from collections.abc import Iterable
from datetime import datetime

from matchwise.config import get_settings
from matchwise.models.match import MatchRecord
from matchwise.storage import MatchRepository

logger = logging.getLogger(__name__)


def can_schedule_interview(overall_score: int, min_score: int | None = None) -> bool:
    """Whether an HR user may schedule an interview for this score."""
    if min_score is None:
        min_score = get_settings().interview_min_score
    return overall_score >= min_score


def schedule_interview(
    repository: MatchRepository,
    applicant_id: str,
    job_id: str,
    scheduled_at: datetime | None = None,
    min_score: int | None = None,
) -> MatchRecord:
    """Move a match to ``interview_scheduled``.

    Raises:
        LookupError: No match exists for the pair.
        ValueError: The overall score is below the interview threshold.
    """
    record = repository.get(applicant_id, job_id)
    if record is None:
        raise LookupError(f"Match not found: applicant={applicant_id} job={job_id}")
    if not can_schedule_interview(record.overall_score, min_score):
        raise ValueError(
            f"Overall score {record.overall_score}% is below the interview threshold"
        )

    logger.info(f"Interview scheduled for applicant={applicant_id} job={job_id}")
    return repository.update_status(
        applicant_id, job_id, "interview_scheduled", interview_scheduled_at=scheduled_at
    )


def rank_matches(
    records: Iterable[MatchRecord],
    min_score: int | None = None,
    limit: int | None = None,
) -> list[MatchRecord]:
    """Order matches best first.

    Ties on overall score fall back to the skills score, then to the ids so
    the order is stable across runs.
    """
    ranked = sorted(
        (r for r in records if min_score is None or r.overall_score >= min_score),
        key=lambda r: (-r.overall_score, -r.skills_score, r.applicant_id, r.job_id),
    )
    return ranked if limit is None else ranked[:limit]


def visible_matches(
    records: Iterable[MatchRecord],
    threshold: int | None = None,
) -> list[MatchRecord]:
    """Matches shown in the applicant's list: at or above the confidence threshold."""
    if threshold is None:
        threshold = get_settings().confidence_threshold
    return rank_matches(records, min_score=threshold)
