"""Preferences sub-score: role level, salary overlap and work mode."""

from __future__ import annotations

from typing import TYPE_CHECKING

from matchwise.scoring.vocabulary import ROLE_HIERARCHY
from matchwise.utils.score_utils import clamp_score, is_present, round_half_up

if TYPE_CHECKING:
    from matchwise.models.applicant import ApplicantPreferences
    from matchwise.models.job import JobPreferences

NEUTRAL_SCORE = 50

ROLE_WEIGHT = 40
ROLE_ADJACENT_POINTS = 20
ROLE_TWO_APART_POINTS = 10
SALARY_WEIGHT = 0.30
MODE_WEIGHT = 30
MODE_HYBRID_POINTS = 15


def salary_overlap(applicant_min: int, applicant_max: int, job_min: int, job_max: int) -> int:
    """Percentage (0-100) of the applicant's salary range covered by the job's.

    Examples:
        >>> salary_overlap(5000, 8000, 6000, 9000)
        67
        >>> salary_overlap(5000, 8000, 9000, 12000)
        0
    """
    overlap_min = max(applicant_min, job_min)
    overlap_max = min(applicant_max, job_max)
    if overlap_min > overlap_max:
        return 0

    applicant_range = applicant_max - applicant_min
    if applicant_range == 0:
        return 0

    return min(100, round_half_up((overlap_max - overlap_min) / applicant_range * 100))


def role_level_points(applicant_level: str, job_level: str) -> int:
    """Points for role level: exact 40, adjacent 20, two apart 10."""
    if applicant_level == job_level:
        return ROLE_WEIGHT
    if applicant_level not in ROLE_HIERARCHY or job_level not in ROLE_HIERARCHY:
        return 0
    distance = abs(ROLE_HIERARCHY.index(applicant_level) - ROLE_HIERARCHY.index(job_level))
    if distance == 1:
        return ROLE_ADJACENT_POINTS
    if distance == 2:
        return ROLE_TWO_APART_POINTS
    return 0


def mode_of_work_points(applicant_mode: str, job_mode: str) -> int:
    """Points for work mode: exact 30, either side Hybrid 15."""
    if applicant_mode == job_mode:
        return MODE_WEIGHT
    if applicant_mode == "Hybrid" or job_mode == "Hybrid":
        return MODE_HYBRID_POINTS
    return 0


def score_preferences(
    applicant: ApplicantPreferences | None,
    job: JobPreferences | None,
) -> int:
    """Compute the preferences sub-score (0-100).

    Each factor counts only when both sides answered it. Points are not
    renormalised, so a single matching factor caps the score at its weight.

    Returns:
        Sum of factor points; 50 when no factor is answered on both sides.
    """
    if applicant is None or job is None:
        return NEUTRAL_SCORE

    score = 0.0
    factors = 0

    if is_present(applicant.role_level) and is_present(job.role_level):
        factors += 1
        score += role_level_points(applicant.role_level, job.role_level)

    salary_bounds = (applicant.salary_min, applicant.salary_max, job.salary_min, job.salary_max)
    if all(is_present(bound) for bound in salary_bounds):
        factors += 1
        score += salary_overlap(*salary_bounds) * SALARY_WEIGHT

    if is_present(applicant.mode_of_work) and is_present(job.mode_of_work):
        factors += 1
        score += mode_of_work_points(applicant.mode_of_work, job.mode_of_work)

    if factors == 0:
        return NEUTRAL_SCORE

    return clamp_score(score)
