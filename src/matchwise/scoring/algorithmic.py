"""Algorithmic scoring for applicant-job matching.

Computes deterministic, reproducible sub-scores and combines them into an
overall compatibility score. No network access, no clock, no state.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from matchwise.scoring.behaviour import score_behaviour
from matchwise.scoring.models import MatchResult, MatchScores
from matchwise.scoring.preferences import score_preferences
from matchwise.scoring.skills import score_skills
from matchwise.utils.score_utils import clamp_score, round_half_up

if TYPE_CHECKING:
    from matchwise.models.applicant import ApplicantData
    from matchwise.models.job import JobData

logger = logging.getLogger(__name__)

# Score weights for combining sub-scores
WEIGHTS = {
    "skills": 0.4,
    "behaviour": 0.3,
    "prefs": 0.3,
}

# Alignment boost: every sub-score at or above this earns a bonus
ALIGNMENT_THRESHOLD = 70
# Standout floor: any sub-score at or above this lifts overall to the floor
STANDOUT_THRESHOLD = 90
STANDOUT_FLOOR = 85


def combine_scores(skills: int, behaviour: int, prefs: int) -> int:
    """Combine sub-scores into the overall score (0-100).

    The weighted average regresses strong matches towards the middle, so two
    boosts are applied in order:

    1. All three sub-scores >= 70: add round((skills + behaviour + prefs) / 30),
       capped at 100.
    2. Any sub-score >= 90: overall is at least 85.

    Examples:
        >>> combine_scores(80, 80, 80)
        88
        >>> combine_scores(95, 10, 10)
        85
    """
    overall = round_half_up(
        skills * WEIGHTS["skills"] + behaviour * WEIGHTS["behaviour"] + prefs * WEIGHTS["prefs"]
    )

    if min(skills, behaviour, prefs) >= ALIGNMENT_THRESHOLD:
        overall = min(100, overall + round_half_up((skills + behaviour + prefs) / 30))

    if max(skills, behaviour, prefs) >= STANDOUT_THRESHOLD:
        overall = max(overall, STANDOUT_FLOOR)

    return clamp_score(overall)


class AlgorithmicScorer:
    """Compute deterministic, reproducible match scores.

    Composes the skills, behaviour and preferences sub-scorers with
    :func:`combine_scores`. Instances hold no state and are safe to share
    across threads.
    """

    WEIGHTS = WEIGHTS

    def compute(self, applicant: ApplicantData, job: JobData) -> MatchScores:
        """Compute all sub-scores and the overall score.

        Args:
            applicant: Applicant skills, preferences and behaviour answers.
            job: Job title/description, preferences and desired behaviour.

        Returns:
            MatchScores with four integers in [0, 100].
        """
        skills = score_skills(applicant.skills, job)
        behaviour = score_behaviour(applicant.behaviour, job.behaviour)
        prefs = score_preferences(applicant.preferences, job.preferences)
        overall = combine_scores(skills, behaviour, prefs)

        logger.debug(
            f"Scored '{job.title}': skills={skills} behaviour={behaviour} "
            f"prefs={prefs} overall={overall}"
        )

        return MatchScores(
            skills_score=skills,
            behaviour_score=behaviour,
            prefs_score=prefs,
            overall_score=overall,
        )


def compute_match(applicant: ApplicantData, job: JobData) -> MatchResult:
    """Score one applicant against one job, without a summary."""
    scores = AlgorithmicScorer().compute(applicant, job)
    return MatchResult(**scores.model_dump())
