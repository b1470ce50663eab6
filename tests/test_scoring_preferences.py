"""Tests for the preferences sub-score."""

import pytest

from matchwise.models.applicant import ApplicantPreferences
from matchwise.models.job import JobPreferences
from matchwise.scoring.preferences import (
    mode_of_work_points,
    role_level_points,
    salary_overlap,
    score_preferences,
)


class TestSalaryOverlap:
    """Tests for salary_overlap."""

    def test_partial_overlap(self) -> None:
        assert salary_overlap(5000, 8000, 6000, 9000) == 67

    def test_job_range_covers_applicant(self) -> None:
        assert salary_overlap(5000, 8000, 4000, 9000) == 100

    def test_disjoint(self) -> None:
        assert salary_overlap(5000, 8000, 9000, 12000) == 0

    def test_touching_ranges(self) -> None:
        """Test that ranges sharing only an endpoint overlap by 0."""
        assert salary_overlap(5000, 8000, 8000, 9000) == 0

    def test_zero_width_applicant_range(self) -> None:
        assert salary_overlap(6000, 6000, 5000, 9000) == 0


class TestFactorPoints:
    """Tests for role level and work mode points."""

    @pytest.mark.parametrize(
        ("applicant", "job", "points"),
        [
            ("Senior", "Senior", 40),
            ("Senior", "Lead", 20),
            ("Junior", "Lead", 10),
            ("Intern", "Lead", 0),
        ],
    )
    def test_role_level_points(self, applicant: str, job: str, points: int) -> None:
        assert role_level_points(applicant, job) == points

    def test_role_level_unknown(self) -> None:
        assert role_level_points("Principal", "Senior") == 0

    @pytest.mark.parametrize(
        ("applicant", "job", "points"),
        [
            ("Hybrid", "Hybrid", 30),
            ("On site", "Hybrid", 15),
            ("Hybrid", "Work from Home", 15),
            ("On site", "Work from Home", 0),
        ],
    )
    def test_mode_of_work_points(self, applicant: str, job: str, points: int) -> None:
        assert mode_of_work_points(applicant, job) == points


class TestScorePreferences:
    """Tests for score_preferences."""

    def test_senior_hybrid_scenario(self) -> None:
        """Test exact role 40 + salary 67% * 0.30 + exact mode 30 = 90."""
        applicant = ApplicantPreferences(
            role_level="Senior", salary_min=5000, salary_max=8000, mode_of_work="Hybrid"
        )
        job = JobPreferences(
            role_level="Senior", salary_min=6000, salary_max=9000, mode_of_work="Hybrid"
        )
        assert score_preferences(applicant, job) == 90

    def test_perfect_match(self) -> None:
        applicant = ApplicantPreferences(
            role_level="Lead", salary_min=5000, salary_max=8000, mode_of_work="On site"
        )
        job = JobPreferences(
            role_level="Lead", salary_min=5000, salary_max=8000, mode_of_work="On site"
        )
        assert score_preferences(applicant, job) == 100

    def test_nothing_answered(self) -> None:
        """Test that no overlapping factor scores 50."""
        assert score_preferences(ApplicantPreferences(), JobPreferences()) == 50

    def test_missing_side(self) -> None:
        assert score_preferences(None, JobPreferences(role_level="Senior")) == 50

    def test_single_factor_not_renormalised(self) -> None:
        """Test that one matching factor caps the score at its weight."""
        applicant = ApplicantPreferences(role_level="Senior")
        job = JobPreferences(role_level="Senior")
        assert score_preferences(applicant, job) == 40

    def test_zero_salary_counts_as_unanswered(self) -> None:
        """Test that a zero salary bound skips the salary factor."""
        applicant = ApplicantPreferences(salary_min=0, salary_max=8000, mode_of_work="Hybrid")
        job = JobPreferences(salary_min=6000, salary_max=9000, mode_of_work="Hybrid")
        assert score_preferences(applicant, job) == 30

    def test_salary_only(self) -> None:
        applicant = ApplicantPreferences(salary_min=5000, salary_max=8000)
        job = JobPreferences(salary_min=6000, salary_max=9000)
        # 67 * 0.30 = 20.1
        assert score_preferences(applicant, job) == 20

    def test_blank_strings_are_unanswered(self) -> None:
        """Test that blank upstream strings are treated as missing."""
        applicant = ApplicantPreferences(role_level="", mode_of_work=" ")
        job = JobPreferences(role_level="Senior", mode_of_work="Hybrid")
        assert score_preferences(applicant, job) == 50
