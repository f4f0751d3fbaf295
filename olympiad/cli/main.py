"""
Typer CLI for the olympiad question engine.

Commands:
    olympiad session SMP Matematika       - Build a session and print it
    olympiad session SMA Fisika --json    - Same, as JSON for client integration
    olympiad play SMP IPA                 - Answer a session in the terminal
    olympiad templates                    - List template coverage per level/subject
    olympiad validate-bank rows.json      - Check curated rows before import
    olympiad init-db                      - Create SQL tables
    olympiad info                         - Show configuration

Usage:
    olympiad --help
    olympiad session SMA Biologi --count 10 --user demo --seed 42
"""

from __future__ import annotations

import json
from pathlib import Path

import typer
from loguru import logger
from rich import print as rprint
from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.prompt import Prompt
from rich.table import Table

from config import Settings, get_settings
from olympiad import __version__
from olympiad.core.errors import StoreError
from olympiad.core.logging import configure_logging
from olympiad.core.models import SUBJECTS_BY_LEVEL, Level, Question, QuizSession, Subject, is_valid_pair
from olympiad.curated.validator import CurationReport
from olympiad.engine.hybrid import HybridSessionBuilder
from olympiad.engine.scoring import AnswerOutcome, AnswerRecorder, summarize
from olympiad.generation.templates import registered_pairs, templates_for

app = typer.Typer(
    help="Olympiad question engine: curated + procedurally generated quiz sessions",
    no_args_is_help=True,
)

console = Console()

OPTION_LABELS = "ABCD"


@app.callback()
def main_callback(
    log_level: str = typer.Option(None, "--log-level", help="Override LOG_LEVEL (DEBUG, INFO, WARNING, ERROR)"),
):
    """Olympiad question engine."""
    settings = get_settings()
    configure_logging(level=(log_level or settings.log_level).upper(), log_file=settings.log_file)


# ========================================
# Helpers
# ========================================


def _parse_pair(level: str, subject: str) -> tuple[Level, Subject]:
    try:
        parsed_level = Level.parse(level)
        parsed_subject = Subject.parse(subject)
    except ValueError as exc:
        rprint(f"[red]✗[/red] {exc}")
        rprint(f"  Levels: {', '.join(lv.value for lv in Level)}")
        raise typer.Exit(code=1)

    if not is_valid_pair(parsed_level, parsed_subject):
        offered = ", ".join(s.value for s in SUBJECTS_BY_LEVEL[parsed_level])
        logger.warning(
            f"{parsed_subject.value} is not offered at {parsed_level.value} "
            f"(offered: {offered}); default templates will be used"
        )
    return parsed_level, parsed_subject


def _settings_with_seed(seed: int | None) -> Settings:
    settings = get_settings()
    if seed is None:
        return settings
    return settings.model_copy(update={"random_seed": seed})


def _build_session(
    level: str, subject: str, count: int | None, user: str, seed: int | None
) -> tuple[HybridSessionBuilder, QuizSession, Settings]:
    parsed_level, parsed_subject = _parse_pair(level, subject)
    settings = _settings_with_seed(seed)
    size = count if count is not None else settings.default_session_size
    if size < 1:
        rprint("[red]✗[/red] --count must be at least 1")
        raise typer.Exit(code=1)

    try:
        builder = HybridSessionBuilder.from_settings(settings)
    except StoreError as exc:
        rprint(f"[red]✗[/red] Cannot open stores: {exc}")
        raise typer.Exit(code=1)

    session = builder.fetch_session(parsed_level, parsed_subject, size, user)
    return builder, session, settings


def _session_table(session: QuizSession) -> Table:
    table = Table(title=f"Quiz Session ({len(session)} questions)", show_header=True)
    table.add_column("#", justify="right", style="dim")
    table.add_column("Origin", style="cyan")
    table.add_column("Question", style="white", max_width=60)
    table.add_column("Answer", style="green")
    table.add_column("Signature", style="dim", max_width=28)

    for i, question in enumerate(session.questions, start=1):
        origin = question.origin.value + (" (filler)" if question.is_filler else "")
        table.add_row(
            str(i), origin, escape(question.question_text), escape(question.correct_answer), question.signature
        )
    return table


def _print_session_status(session: QuizSession) -> None:
    rprint(f"  Curated: {session.curated_count}  Generated: {session.generated_count}")
    if session.mastery_reached:
        rprint("[bold magenta]★ Mastery reached[/bold magenta] - unique content for this subject is exhausted")
    if session.degraded:
        rprint("[yellow]⚠[/yellow] Question bank unavailable, served generated questions")


# ========================================
# Session Commands
# ========================================


@app.command("session")
def session_command(
    level: str = typer.Argument(..., help="Education level (SMP or SMA)"),
    subject: str = typer.Argument(..., help="Subject, e.g. Matematika, Fisika"),
    count: int = typer.Option(None, "--count", "-n", help="Number of questions (default: DEFAULT_SESSION_SIZE)"),
    user: str = typer.Option("guest", "--user", "-u", help="User id whose history is excluded"),
    seed: int = typer.Option(None, "--seed", help="Random seed for a reproducible session"),
    as_json: bool = typer.Option(False, "--json", help="Print the session as JSON"),
) -> None:
    """
    Build one quiz session.

    Examples:
        olympiad session SMP Matematika
        olympiad session SMA Kimia --count 10 --seed 7 --json
    """
    _, session, _ = _build_session(level, subject, count, user, seed)

    if as_json:
        payload = {
            "mastery_reached": session.mastery_reached,
            "curated_count": session.curated_count,
            "generated_count": session.generated_count,
            "degraded": session.degraded,
            "questions": [q.to_dict() for q in session.questions],
        }
        typer.echo(json.dumps(payload, ensure_ascii=False, indent=2))
        return

    console.print(_session_table(session))
    _print_session_status(session)


def _ask_question(number: int, total: int, question: Question) -> int | None:
    lines = [escape(question.question_text), ""]
    lines += [f"  [bold]{OPTION_LABELS[i]}[/bold]. {escape(option)}" for i, option in enumerate(question.options)]
    if question.diagram:
        params = ", ".join(f"{k}={v:g}" for k, v in question.diagram.params.items())
        lines += ["", f"[dim]Diagram: {question.diagram.kind.value} ({params})[/dim]"]
    if question.image_url:
        lines += ["", f"[dim]Image: {question.image_url}[/dim]"]

    console.print(Panel("\n".join(lines), title=f"Question {number}/{total}", border_style="cyan"))
    choices = list(OPTION_LABELS) + list(OPTION_LABELS.lower()) + ["q", "Q"]
    answer = Prompt.ask("Answer (A-D, q to quit)", choices=choices, console=console, show_choices=False)
    if answer.lower() == "q":
        return None
    return OPTION_LABELS.index(answer.upper())


@app.command("play")
def play_command(
    level: str = typer.Argument(..., help="Education level (SMP or SMA)"),
    subject: str = typer.Argument(..., help="Subject, e.g. Matematika, Fisika"),
    count: int = typer.Option(None, "--count", "-n", help="Number of questions"),
    user: str = typer.Option("guest", "--user", "-u", help="User id for history and streaks"),
    seed: int = typer.Option(None, "--seed", help="Random seed for a reproducible session"),
) -> None:
    """
    Answer a session interactively, recording history and streaks.

    Examples:
        olympiad play SMP IPA
        olympiad play SMA Astronomi --count 3 --user rani
    """
    builder, session, settings = _build_session(level, subject, count, user, seed)
    recorder = AnswerRecorder(builder.history_store, milestone_every=settings.streak_milestone)

    _print_session_status(session)
    outcomes: list[AnswerOutcome] = []
    streak = 0

    for number, question in enumerate(session.questions, start=1):
        selected = _ask_question(number, len(session), question)
        if selected is None:
            break

        outcome = recorder.record(user, question, selected, streak)
        outcomes.append(outcome)
        streak = outcome.streak

        if outcome.is_correct:
            rprint(f"[green]✓ Benar![/green] Streak: {streak}")
        else:
            rprint(f"[red]✗ Salah.[/red] Jawaban: {OPTION_LABELS[question.correct_index]}. {escape(question.correct_answer)}")
        if question.explanation:
            rprint(f"[dim]{escape(question.explanation)}[/dim]")
        if outcome.milestone:
            rprint(f"[bold magenta]🎉 {streak} jawaban benar berturut-turut![/bold magenta]")
        if not outcome.recorded:
            rprint("[yellow]⚠[/yellow] Answer not saved to history")
        rprint("")

    summary = summarize(outcomes)
    table = Table(title="Session Summary", show_header=True)
    table.add_column("Metric", style="cyan")
    table.add_column("Value", justify="right", style="green")
    table.add_row("Answered", str(summary.answered))
    table.add_row("Correct", str(summary.correct))
    table.add_row("Accuracy", f"{summary.accuracy:.0%}")
    table.add_row("Best streak", str(summary.best_streak))
    console.print(table)


# ========================================
# Content Commands
# ========================================


@app.command("templates")
def templates_command() -> None:
    """List registered templates per level and subject."""
    table = Table(title="Template Coverage", show_header=True)
    table.add_column("Level", style="cyan")
    table.add_column("Subject", style="white")
    table.add_column("Templates", justify="right", style="green")

    registered = set(registered_pairs())
    for level, subjects in SUBJECTS_BY_LEVEL.items():
        for subject in subjects:
            if (level, subject) in registered:
                table.add_row(level.value, subject.value, str(len(templates_for(level, subject))))
            else:
                table.add_row(level.value, subject.value, "[dim]default[/dim]")

    console.print(table)


@app.command("validate-bank")
def validate_bank_command(
    file: Path = typer.Argument(..., help="JSON array of question bank rows"),
) -> None:
    """
    Check curated rows for data-quality issues.

    Exits with code 1 when any row is flagged.

    Examples:
        olympiad validate-bank data/question_bank.json
    """
    from olympiad.stores.memory import InMemoryCuratedStore

    try:
        store = InMemoryCuratedStore.load_json(file)
    except StoreError as exc:
        rprint(f"[red]✗[/red] {exc}")
        raise typer.Exit(code=1)

    report = CurationReport()
    for row in store.rows:
        report.check(row)

    if report.is_clean:
        rprint(f"[green]✓[/green] {report.rows_checked} rows checked, no issues")
        return

    table = Table(title=f"Curation Issues ({len(report.issues)})", show_header=True)
    table.add_column("Row", style="cyan")
    table.add_column("Code", style="yellow")
    table.add_column("Message", style="white")
    for issue in report.issues:
        table.add_row(escape(issue.row_id), issue.code.value, escape(issue.message))
    console.print(table)

    rprint(
        f"[red]✗[/red] {len(report.flagged_row_ids)} of {report.rows_checked} rows flagged"
    )
    raise typer.Exit(code=1)


# ========================================
# Admin Commands
# ========================================


@app.command("init-db")
def init_db_command() -> None:
    """Create the question_bank and quiz_history tables."""
    from sqlalchemy.exc import SQLAlchemyError

    from olympiad.db.database import get_engine, init_db

    settings = get_settings()
    try:
        init_db(get_engine())
    except SQLAlchemyError as exc:
        logger.error(f"Database initialization failed: {exc}")
        rprint(f"[red]✗[/red] Could not initialize {settings.database_url}")
        raise typer.Exit(code=1)

    rprint(f"[green]✓[/green] Tables ready at {settings.database_url}")


@app.command("info")
def show_info() -> None:
    """Show configuration."""
    settings = get_settings()

    table = Table(title="Olympiad Engine Configuration")
    table.add_column("Setting", style="cyan")
    table.add_column("Value", style="green")

    backend = "rest" if settings.use_rest else settings.store_backend
    table.add_row("Store backend", backend)
    table.add_row("Database URL", settings.database_url)
    table.add_row("REST URL", settings.rest_url or "Not set")
    table.add_row("REST API Key", "***" if settings.rest_api_key else "Not set")
    table.add_row("Curated seed file", settings.curated_seed_file or "Not set")
    table.add_row("Session size", str(settings.default_session_size))
    table.add_row("Exclusion scope", settings.exclusion_scope)
    table.add_row("Streak milestone", str(settings.streak_milestone))
    table.add_row("Log Level", settings.log_level)

    console.print(table)


@app.command("version")
def show_version() -> None:
    """Show version information."""
    rprint(f"[bold]olympiad-engine[/bold] v{__version__}")


def main() -> None:
    """Entry point for the CLI."""
    app()


if __name__ == "__main__":
    main()
