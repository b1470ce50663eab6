"""Tests for numeric score helpers."""

import pytest

from matchwise.utils.score_utils import clamp_score, is_present, round_half_up


class TestRoundHalfUp:
    """Tests for round_half_up."""

    @pytest.mark.parametrize(
        ("value", "expected"),
        [
            (2.5, 3),
            (3.5, 4),
            (0.5, 1),
            (58.333, 58),
            (66.667, 67),
            (-0.5, 0),
            (-1.5, -1),
            (7.0, 7),
        ],
    )
    def test_rounds_halves_towards_positive_infinity(self, value: float, expected: int) -> None:
        """Test that halves round up rather than to even."""
        assert round_half_up(value) == expected

    def test_differs_from_builtin_round(self) -> None:
        """Test the case where built-in round would give a different answer."""
        assert round(2.5) == 2
        assert round_half_up(2.5) == 3

    def test_returns_int(self) -> None:
        """Test that the result is an int."""
        assert isinstance(round_half_up(12.4), int)


class TestClampScore:
    """Tests for clamp_score."""

    def test_within_range(self) -> None:
        assert clamp_score(42.5) == 43

    def test_clamps_high(self) -> None:
        assert clamp_score(130) == 100

    def test_clamps_low(self) -> None:
        assert clamp_score(-12) == 0


class TestIsPresent:
    """Tests for the truthiness presence rule."""

    @pytest.mark.parametrize("value", [None, 0, "", []])
    def test_falsy_values_are_absent(self, value: object) -> None:
        assert is_present(value) is False

    @pytest.mark.parametrize("value", [1, "Senior", 5000])
    def test_truthy_values_are_present(self, value: object) -> None:
        assert is_present(value) is True
