"""Tests for data and score models."""

import pytest
from pydantic import ValidationError

from matchwise.models.applicant import ApplicantBehaviour, ApplicantData, ApplicantPreferences
from matchwise.models.job import JobData, JobPreferences
from matchwise.models.match import MatchRecord
from matchwise.scoring.models import MatchResult, MatchScores


class TestApplicantData:
    """Tests for applicant models."""

    def test_defaults(self) -> None:
        applicant = ApplicantData()
        assert applicant.skills == []
        assert applicant.preferences == ApplicantPreferences()
        assert applicant.behaviour is None

    def test_skills_from_comma_string(self) -> None:
        applicant = ApplicantData(skills="React, TypeScript,  Node.js")
        assert applicant.skills == ["React", "TypeScript", "Node.js"]

    def test_skills_from_json_string(self) -> None:
        applicant = ApplicantData(skills='["React", "Vue"]')
        assert applicant.skills == ["React", "Vue"]

    def test_skills_none(self) -> None:
        assert ApplicantData(skills=None).skills == []

    def test_behaviour_out_of_range(self) -> None:
        with pytest.raises(ValidationError):
            ApplicantBehaviour(independent_vs_team=6)

    def test_unknown_role_level_rejected(self) -> None:
        with pytest.raises(ValidationError):
            ApplicantPreferences(role_level="Principal")

    def test_blank_strings_become_none(self) -> None:
        prefs = ApplicantPreferences(target_job_title="", role_level="", mode_of_work="")
        assert prefs.target_job_title is None
        assert prefs.role_level is None
        assert prefs.mode_of_work is None


class TestJobData:
    """Tests for job models."""

    def test_title_required(self) -> None:
        with pytest.raises(ValidationError):
            JobData()  # type: ignore[call-arg]

    def test_from_dict(self) -> None:
        job = JobData.model_validate(
            {
                "title": "Backend Engineer",
                "preferences": {"role_level": "Senior", "salary_min": "", "mode_of_work": "Hybrid"},
                "behaviour": {"work_style": "Team"},
            }
        )
        assert job.preferences == JobPreferences(role_level="Senior", mode_of_work="Hybrid")
        assert job.behaviour is not None
        assert job.behaviour.work_style == "Team"


class TestMatchScores:
    """Tests for MatchScores and MatchResult."""

    def test_range_enforced(self) -> None:
        with pytest.raises(ValidationError):
            MatchScores(skills_score=101, behaviour_score=0, prefs_score=0, overall_score=0)

    def test_result_extends_scores(self, sample_scores: MatchScores) -> None:
        result = MatchResult(**sample_scores.model_dump(), ai_summary="Fits well.")
        assert isinstance(result, MatchScores)
        assert result.model_dump(exclude={"ai_summary"}) == sample_scores.model_dump()
        assert result.ai_summary == "Fits well."


class TestMatchRecord:
    """Tests for MatchRecord."""

    def test_defaults(self, sample_record: MatchRecord) -> None:
        assert sample_record.status == "pending"
        assert sample_record.interview_scheduled_at is None

    def test_key(self, sample_record: MatchRecord) -> None:
        assert sample_record.key == ("app-1", "job-1")

    def test_invalid_status(self) -> None:
        with pytest.raises(ValidationError):
            MatchRecord(
                applicant_id="a",
                job_id="j",
                overall_score=50,
                skills_score=50,
                behaviour_score=50,
                prefs_score=50,
                status="archived",
            )
