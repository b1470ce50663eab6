"""Match processing: summaries and batch runs."""

from matchwise.processors.batch import BatchMatcher, BatchReport
from matchwise.processors.summary import MatchSummarizer

__all__ = ["BatchMatcher", "BatchReport", "MatchSummarizer"]
