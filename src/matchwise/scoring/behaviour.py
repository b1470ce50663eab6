"""Behaviour sub-score: applicant quiz answers vs the job's desired behaviour."""

from __future__ import annotations

from typing import TYPE_CHECKING, Literal

from matchwise.scoring.vocabulary import (
    BEHAVIOUR_AXES,
    FIRST_POLE_KEYWORDS,
    SECOND_POLE_KEYWORDS,
)
from matchwise.utils.score_utils import clamp_score, is_present

if TYPE_CHECKING:
    from matchwise.models.applicant import ApplicantBehaviour
    from matchwise.models.job import JobBehaviour

Pole = Literal["first", "second", "neutral"]

NEUTRAL_SCORE = 50
FULL_CREDIT = 1.0
PARTIAL_CREDIT = 0.5


def applicant_pole(value: int) -> Pole:
    """Map a 1-5 answer to the pole it leans towards."""
    if value <= 2:
        return "first"
    if value >= 4:
        return "second"
    return "neutral"


def job_pole(label: str) -> Pole:
    """Map a descriptive job label ("Team", "Fast-paced", ...) to a pole."""
    lower = label.lower()
    if any(keyword in lower for keyword in FIRST_POLE_KEYWORDS):
        return "first"
    if any(keyword in lower for keyword in SECOND_POLE_KEYWORDS):
        return "second"
    return "neutral"


def axis_credit(applicant_value: int, job_label: str) -> float:
    """Credit for one axis answered on both sides.

    Full credit when the poles agree or either side is neutral. Otherwise
    answers within one step of neutral (2 or 4) earn partial credit.
    """
    a_pole = applicant_pole(applicant_value)
    j_pole = job_pole(job_label)
    if a_pole == j_pole or a_pole == "neutral" or j_pole == "neutral":
        return FULL_CREDIT
    if abs(applicant_value - 3) <= 1:
        return PARTIAL_CREDIT
    return 0.0


def score_behaviour(
    applicant: ApplicantBehaviour | None,
    job: JobBehaviour | None,
) -> int:
    """Compute the behaviour sub-score (0-100).

    Args:
        applicant: Numeric quiz answers, any subset of the eight axes.
        job: Descriptive labels, any subset of the eight axes.

    Returns:
        Average credit over axes answered on both sides, as a percentage;
        50 when either side is missing or no axis overlaps.
    """
    if applicant is None or job is None:
        return NEUTRAL_SCORE

    credit = 0.0
    compared = 0
    for applicant_axis, job_axis in BEHAVIOUR_AXES.items():
        applicant_value = getattr(applicant, applicant_axis)
        job_label = getattr(job, job_axis)
        if applicant_value is None or not is_present(job_label):
            continue
        compared += 1
        credit += axis_credit(applicant_value, job_label)

    if compared == 0:
        return NEUTRAL_SCORE

    return clamp_score(credit / compared * 100)
