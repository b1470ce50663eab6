"""Skills sub-score: applicant skills vs keywords extracted from the job."""

from __future__ import annotations

import logging
from collections.abc import Sequence
from typing import TYPE_CHECKING

from matchwise.scoring.keywords import extract_keywords
from matchwise.scoring.vocabulary import BACKEND_SKILLS, FRONTEND_SKILLS
from matchwise.utils.score_utils import clamp_score, round_half_up

if TYPE_CHECKING:
    from matchwise.models.job import JobData

logger = logging.getLogger(__name__)

# Title heuristic scores used when the job text yields no keywords
DOMAIN_MATCH_SCORE = 70
FULL_STACK_MATCH_SCORE = 75
NO_SIGNAL_SCORE = 50

# Minimum-score floors, applied in order
TWO_MATCH_FLOOR = 40
THREE_MATCH_FLOOR = 60
COVERAGE_FLOOR_RATIO = 0.5
ANY_MATCH_FLOOR = 25


def _strip_punctuation(value: str) -> str:
    return value.replace(".", "").replace("-", "")


def skill_matches_keyword(skill: str, keyword: str) -> bool:
    """Whether a normalized skill matches a normalized keyword.

    Exact match, containment either way, or equality once dots and hyphens
    are removed ("next.js" vs "nextjs").
    """
    if skill == keyword:
        return True
    if keyword in skill or skill in keyword:
        return True
    return _strip_punctuation(skill) == _strip_punctuation(keyword)


def _title_heuristic(applicant_skills: Sequence[str], title: str) -> int:
    """Score from the job title alone when no keywords were extracted."""
    lowered = [s.lower() for s in applicant_skills]
    has_frontend = any(s in FRONTEND_SKILLS for s in lowered)
    has_backend = any(s in BACKEND_SKILLS for s in lowered)
    title_lower = title.lower()

    if "frontend" in title_lower and has_frontend:
        return DOMAIN_MATCH_SCORE
    if "backend" in title_lower and has_backend:
        return DOMAIN_MATCH_SCORE
    if "full" in title_lower or "stack" in title_lower:
        return FULL_STACK_MATCH_SCORE if has_frontend and has_backend else NO_SIGNAL_SCORE
    return NO_SIGNAL_SCORE


def score_skills(applicant_skills: Sequence[str], job: JobData) -> int:
    """Compute the skills sub-score (0-100).

    Half the base score is the share of the applicant's skills that match a
    job keyword, half is the share of job keywords covered. Floors then lift
    clear partial matches out of the near-zero range.

    Args:
        applicant_skills: Free-text skill names, any case.
        job: Job whose title and description supply the keywords.

    Returns:
        Integer score in [0, 100]; 0 when the applicant lists no skills.
    """
    if not applicant_skills:
        return 0

    keywords = extract_keywords(f"{job.title} {job.jd_text or ''}")

    if not keywords:
        logger.debug(f"No keywords extracted for '{job.title}', using title heuristic")
        return _title_heuristic(applicant_skills, job.title)

    skills = [s.lower().strip() for s in applicant_skills]
    normalized_keywords = [k.lower().strip() for k in keywords]

    matches = sum(
        1
        for skill in skills
        if any(skill_matches_keyword(skill, keyword) for keyword in normalized_keywords)
    )

    applicant_match_ratio = matches / len(skills)
    job_coverage_ratio = matches / max(len(normalized_keywords), 1)

    score = min(100, round_half_up(applicant_match_ratio * 50 + job_coverage_ratio * 50))

    if matches >= 2:
        score = max(score, TWO_MATCH_FLOOR)
    if matches >= 3:
        score = max(score, THREE_MATCH_FLOOR)
    if job_coverage_ratio >= COVERAGE_FLOOR_RATIO:
        score = max(score, round_half_up(job_coverage_ratio * 100))
    if matches > 0 and score < ANY_MATCH_FLOOR:
        score = max(
            ANY_MATCH_FLOOR,
            round_half_up(matches / max(len(normalized_keywords), len(skills)) * 100),
        )

    return clamp_score(score)
