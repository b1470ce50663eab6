"""Pydantic models for match scores."""

from pydantic import BaseModel, Field


class MatchScores(BaseModel):
    """The four integer scores produced by the scoring core (0-100)."""

    skills_score: int = Field(ge=0, le=100)
    behaviour_score: int = Field(ge=0, le=100)
    prefs_score: int = Field(ge=0, le=100)
    overall_score: int = Field(ge=0, le=100)


class MatchResult(MatchScores):
    """Scores plus the optional natural-language explanation."""

    ai_summary: str | None = None
