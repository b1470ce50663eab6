"""Utility functions for Matchwise."""

from matchwise.utils.score_utils import clamp_score, is_present, round_half_up
from matchwise.utils.validators import coerce_str_list, none_if_blank

__all__ = ["clamp_score", "coerce_str_list", "is_present", "none_if_blank", "round_half_up"]
