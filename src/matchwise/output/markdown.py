"""Markdown output formatting."""

from collections.abc import Sequence
from pathlib import Path

from matchwise.models.match import MatchRecord
from matchwise.scoring.models import MatchResult


def save_markdown(content: str, output_path: str | Path) -> Path:
    """Save content to a markdown file.

    Args:
        content: Markdown content to save.
        output_path: Path to save the file.

    Returns:
        Path to the saved file.
    """
    path = Path(output_path)
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(content, encoding="utf-8")
    return path


def format_match_result(result: MatchResult, job_title: str | None = None) -> str:
    """Format a single match result for display.

    Args:
        result: Scores and optional summary.
        job_title: Heading context, if known.

    Returns:
        Markdown text.
    """
    heading = f"## Match Analysis (Score: {result.overall_score}%)"
    if job_title:
        heading = f"## {job_title} (Score: {result.overall_score}%)"

    output = [heading, ""]
    output.append("### Score Breakdown")
    output.append(f"- **Skills:** {result.skills_score}%")
    output.append(f"- **Behaviour/Culture:** {result.behaviour_score}%")
    output.append(f"- **Preferences:** {result.prefs_score}%")
    output.append("")

    if result.ai_summary:
        output.append("### Summary")
        output.append(result.ai_summary)
        output.append("")

    return "\n".join(output).rstrip() + "\n"


def format_ranking(records: Sequence[MatchRecord], titles: dict[str, str] | None = None) -> str:
    """Format ranked matches as a markdown table.

    Args:
        records: Matches, already ranked.
        titles: Optional job id -> title lookup.

    Returns:
        Markdown table, or a one-line note when there are no matches.
    """
    if not records:
        return "_No matches above the threshold._\n"

    titles = titles or {}
    output = [
        "| # | Job | Overall | Skills | Behaviour | Preferences |",
        "|---|-----|---------|--------|-----------|-------------|",
    ]
    for rank, record in enumerate(records, start=1):
        job = titles.get(record.job_id, record.job_id)
        output.append(
            f"| {rank} | {job} | {record.overall_score}% | {record.skills_score}% "
            f"| {record.behaviour_score}% | {record.prefs_score}% |"
        )
    return "\n".join(output) + "\n"
