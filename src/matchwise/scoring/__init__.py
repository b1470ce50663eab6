"""Deterministic match scoring.

Four scores per (applicant, job) pair, each an integer in [0, 100]:
- skills: applicant skills vs keywords extracted from the job text
- behaviour: eight bipolar work-style axes
- preferences: role level, salary overlap, work mode
- overall: weighted combination with alignment boosts

Pure functions throughout - no network, no database, no clock.
"""

from matchwise.scoring.algorithmic import AlgorithmicScorer, combine_scores, compute_match
from matchwise.scoring.behaviour import score_behaviour
from matchwise.scoring.hybrid import HybridMatcher
from matchwise.scoring.keywords import extract_keywords
from matchwise.scoring.models import MatchResult, MatchScores
from matchwise.scoring.preferences import salary_overlap, score_preferences
from matchwise.scoring.skills import score_skills

__all__ = [
    "AlgorithmicScorer",
    "HybridMatcher",
    "MatchResult",
    "MatchScores",
    "combine_scores",
    "compute_match",
    "extract_keywords",
    "salary_overlap",
    "score_behaviour",
    "score_preferences",
    "score_skills",
]
