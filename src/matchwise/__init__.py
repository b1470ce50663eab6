"""Matchwise - applicant/job compatibility scoring."""

__version__ = "0.1.0"
