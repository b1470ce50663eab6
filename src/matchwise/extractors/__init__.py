"""Extractors for applicant skills and preferences."""

from matchwise.extractors.preferences_extractor import PreferencesExtractor, split_role_level
from matchwise.extractors.skills_extractor import SkillsExtractor

__all__ = ["PreferencesExtractor", "SkillsExtractor", "split_role_level"]
