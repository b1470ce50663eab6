"""Pytest configuration and fixtures."""

import pytest

from matchwise.models.applicant import ApplicantBehaviour, ApplicantData, ApplicantPreferences
from matchwise.models.job import JobBehaviour, JobData, JobPreferences
from matchwise.models.match import MatchRecord
from matchwise.scoring.models import MatchScores


@pytest.fixture
def sample_applicant_preferences() -> ApplicantPreferences:
    """Create sample ApplicantPreferences."""
    return ApplicantPreferences(
        target_job_title="Frontend Engineer",
        role_level="Senior",
        salary_min=5000,
        salary_max=8000,
        mode_of_work="Hybrid",
    )


@pytest.fixture
def sample_applicant_behaviour() -> ApplicantBehaviour:
    """Create sample ApplicantBehaviour leaning team/fast/hands-on."""
    return ApplicantBehaviour(
        independent_vs_team=5,
        structured_vs_open=2,
        fast_vs_steady=1,
        quick_vs_thorough=3,
        hands_on_vs_strategic=1,
        feedback_vs_autonomy=2,
        innovation_vs_process=1,
        flexible_vs_schedule=2,
    )


@pytest.fixture
def sample_applicant(
    sample_applicant_preferences: ApplicantPreferences,
    sample_applicant_behaviour: ApplicantBehaviour,
) -> ApplicantData:
    """Create a sample ApplicantData."""
    return ApplicantData(
        skills=["React", "TypeScript", "Next.js"],
        preferences=sample_applicant_preferences,
        behaviour=sample_applicant_behaviour,
    )


@pytest.fixture
def sample_job_behaviour() -> JobBehaviour:
    """Create a sample JobBehaviour aligned with the sample applicant."""
    return JobBehaviour(
        work_style="Team",
        task_structure="Structured",
        environment_pace="Fast-paced",
        decision_making="Thorough",
        role_focus="Hands-on",
        feedback_style="Regular feedback",
        innovation_style="Innovation",
        schedule_type="Flexible",
    )


@pytest.fixture
def sample_job(sample_job_behaviour: JobBehaviour) -> JobData:
    """Create a sample JobData."""
    return JobData(
        title="Frontend Engineer",
        jd_text="React and TypeScript required",
        preferences=JobPreferences(
            role_level="Senior",
            salary_min=6000,
            salary_max=9000,
            mode_of_work="Hybrid",
        ),
        behaviour=sample_job_behaviour,
    )


@pytest.fixture
def sample_scores() -> MatchScores:
    """Create sample MatchScores."""
    return MatchScores(
        skills_score=58,
        behaviour_score=88,
        prefs_score=90,
        overall_score=76,
    )


@pytest.fixture
def sample_record() -> MatchRecord:
    """Create a sample MatchRecord."""
    return MatchRecord(
        applicant_id="app-1",
        job_id="job-1",
        overall_score=76,
        skills_score=58,
        behaviour_score=88,
        prefs_score=90,
        ai_summary="Good fit.",
    )
