"""CLI entry point for Matchwise."""

import json
import logging
from pathlib import Path
from typing import Annotated, Any, Literal

from dotenv import load_dotenv

# Load environment variables from .env.local
# Path: main.py -> matchwise/ -> src/ -> project root
load_dotenv(Path(__file__).parent.parent.parent / ".env.local")

import typer  # noqa: E402
from pydantic import ValidationError  # noqa: E402
from rich.console import Console  # noqa: E402
from rich.markdown import Markdown  # noqa: E402
from rich.panel import Panel  # noqa: E402

from matchwise.config import get_settings  # noqa: E402
from matchwise.llm.base import get_llm_provider, provider_from_settings  # noqa: E402
from matchwise.models.applicant import ApplicantData  # noqa: E402
from matchwise.models.job import JobData  # noqa: E402
from matchwise.output.markdown import (  # noqa: E402
    format_match_result,
    format_ranking,
    save_markdown,
)
from matchwise.policy import rank_matches  # noqa: E402
from matchwise.processors.batch import BatchMatcher  # noqa: E402
from matchwise.processors.summary import MatchSummarizer  # noqa: E402
from matchwise.scoring.hybrid import HybridMatcher  # noqa: E402
from matchwise.storage import InMemoryMatchRepository  # noqa: E402

app = typer.Typer(
    name="matchwise",
    help="Matchwise - applicant/job compatibility scoring",
    add_completion=False,
)
console = Console()

# Identifier used for the applicant when scoring from a single file
CLI_APPLICANT_ID = "applicant"


def read_json(path: Path) -> Any:
    """Read a JSON file."""
    if not path.exists():
        console.print(f"[red]Error:[/red] File not found: {path}")
        raise typer.Exit(1)
    try:
        return json.loads(path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as e:
        console.print(f"[red]Error:[/red] Invalid JSON in {path}: {e}")
        raise typer.Exit(1) from e


def load_applicant(path: Path) -> ApplicantData:
    """Load and validate applicant data."""
    try:
        return ApplicantData.model_validate(read_json(path))
    except ValidationError as e:
        console.print(f"[red]Error:[/red] Invalid applicant data in {path}:\n{e}")
        raise typer.Exit(1) from e


def load_jobs(path: Path) -> dict[str, JobData]:
    """Load and validate a ``{job_id: job}`` mapping."""
    raw = read_json(path)
    if not isinstance(raw, dict):
        console.print(f"[red]Error:[/red] Jobs file must be an object keyed by job id: {path}")
        raise typer.Exit(1)
    try:
        return {job_id: JobData.model_validate(job) for job_id, job in raw.items()}
    except ValidationError as e:
        console.print(f"[red]Error:[/red] Invalid job data in {path}:\n{e}")
        raise typer.Exit(1) from e


def build_matcher(
    summary: bool,
    provider: Literal["openai", "anthropic", "google"] | None,
) -> HybridMatcher:
    """Create a matcher, with an LLM summarizer when requested."""
    settings = get_settings()
    if not (summary and settings.summary_enabled):
        return HybridMatcher(include_summary=False)

    if provider is None or provider == settings.provider:
        return HybridMatcher(summarizer=MatchSummarizer(provider_from_settings()))

    llm_provider = None
    api_key = getattr(settings, f"{provider}_api_key")
    if api_key:
        llm_provider = get_llm_provider(
            provider,
            api_key=api_key,
            timeout=settings.summary_timeout_seconds,
            max_retries=settings.summary_max_retries,
        )
    return HybridMatcher(summarizer=MatchSummarizer(llm_provider))


@app.callback()
def main(
    verbose: Annotated[
        bool, typer.Option("--verbose", "-v", help="Show debug logging")
    ] = False,
) -> None:
    """Configure logging for all commands."""
    level = "DEBUG" if verbose else get_settings().log_level
    logging.basicConfig(level=level, format="%(levelname)s %(name)s: %(message)s")


@app.command()
def score(
    applicant: Annotated[Path, typer.Argument(help="Applicant JSON file")],
    job: Annotated[Path, typer.Argument(help="Job JSON file")],
    summary: Annotated[
        bool, typer.Option("--summary/--no-summary", help="Generate an AI summary")
    ] = False,
    provider: Annotated[
        Literal["openai", "anthropic", "google"] | None,
        typer.Option("--provider", "-p", help="LLM provider for the summary"),
    ] = None,
    output: Annotated[
        Path | None, typer.Option("--output", "-o", help="Save the result as markdown")
    ] = None,
) -> None:
    """Score one applicant against one job."""
    applicant_data = load_applicant(applicant)
    try:
        job_data = JobData.model_validate(read_json(job))
    except ValidationError as e:
        console.print(f"[red]Error:[/red] Invalid job data in {job}:\n{e}")
        raise typer.Exit(1) from e

    result = build_matcher(summary, provider).compute_match(applicant_data, job_data)
    text = format_match_result(result, job_title=job_data.title)

    score_color = (
        "green" if result.overall_score >= 70 else "yellow" if result.overall_score >= 50 else "red"
    )
    console.print(Panel(Markdown(text), title="Match", border_style=score_color))

    if output:
        save_markdown(text, output)
        console.print(f"[green]Saved to:[/green] {output}")


@app.command()
def rank(
    applicant: Annotated[Path, typer.Argument(help="Applicant JSON file")],
    jobs: Annotated[Path, typer.Argument(help="JSON object of job id -> job")],
    min_score: Annotated[
        int | None,
        typer.Option("--min-score", "-m", min=0, max=100, help="Hide matches below this score"),
    ] = None,
    top: Annotated[
        int | None, typer.Option("--top", "-t", min=1, help="Show at most N jobs")
    ] = None,
    summary: Annotated[
        bool, typer.Option("--summary/--no-summary", help="Generate AI summaries")
    ] = False,
) -> None:
    """Rank jobs for one applicant, best match first."""
    applicant_data = load_applicant(applicant)
    job_map = load_jobs(jobs)

    repository = InMemoryMatchRepository()
    batch = BatchMatcher(build_matcher(summary, None), repository)
    report = batch.match_applicant(CLI_APPLICANT_ID, applicant_data, job_map)

    ranked = rank_matches(report.results, min_score=min_score, limit=top)
    titles = {job_id: job.title for job_id, job in job_map.items()}
    console.print(Markdown(format_ranking(ranked, titles)))
    console.print(f"[dim]{report.message}[/dim]")


@app.command()
def version() -> None:
    """Show version information."""
    from matchwise import __version__

    console.print(f"Matchwise v{__version__}")


if __name__ == "__main__":
    app()
