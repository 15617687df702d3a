"""
HirePanel Command Line Interface

Provides CLI commands for database setup, health checks, and read-only views
of the dashboard, candidate roster and interview list.
"""

import asyncio
from typing import Optional

import typer
from rich.console import Console
from rich.table import Table

from hirepanel.utils.constants import InterviewFilter

app = typer.Typer(
    name="hirepanel",
    help="Hiring dashboards and interview scheduling CLI",
    add_completion=False,
)
console = Console()

STAGE_STYLES = {
    "applied": "cyan",
    "screening": "yellow",
    "interview": "magenta",
    "offer": "green",
    "hired": "bold green",
    "rejected": "red",
}

STATUS_STYLES = {
    "pending": "dim",
    "scheduled": "blue",
    "completed": "green",
    "cancelled": "red",
    "rescheduled": "yellow",
}


def _require_connection() -> None:
    from hirepanel.data.database import get_database_manager

    if not get_database_manager().check_sync_connection():
        console.print("[red]Error: Could not connect to MongoDB. Run 'init-db' first.[/red]")
        raise typer.Exit(1)


def _viewer(viewer_id: Optional[str] = None, role: Optional[str] = None):
    from hirepanel.data.models import Viewer
    from hirepanel.utils.config import get_settings

    session = get_settings().session
    return Viewer(id=viewer_id or session.viewer_id, role=role or session.viewer_role)


def _styled(value: str, styles: dict[str, str]) -> str:
    style = styles.get(value, "white")
    return f"[{style}]{value}[/{style}]"


@app.command()
def version():
    """Show application version."""
    from hirepanel import __version__, __app_name__

    console.print(f"[bold blue]{__app_name__}[/bold blue] version [green]{__version__}[/green]")


@app.command()
def info():
    """Show configuration."""
    from hirepanel.utils.config import get_settings

    settings = get_settings()

    table = Table(title="HirePanel Configuration")
    table.add_column("Setting", style="cyan")
    table.add_column("Value", style="green")

    table.add_row("Environment", settings.environment)
    table.add_row("Debug Mode", str(settings.debug))
    table.add_row("Database Host", f"{settings.database.host}:{settings.database.port}")
    table.add_row("Database Name", settings.database.name)
    table.add_row("Viewer ID", settings.session.viewer_id or "-")
    table.add_row("Viewer Role", settings.session.viewer_role)
    table.add_row("Log Level", settings.logging.level)

    console.print(table)


@app.command()
def init_db():
    """Initialize the database with required indexes."""
    from hirepanel.data.database import get_database_manager

    console.print("[yellow]Initializing database...[/yellow]")

    try:
        db_manager = get_database_manager()

        console.print("  Checking database connection...")
        if not db_manager.check_sync_connection():
            console.print("[red]Error: Could not connect to MongoDB.[/red]")
            console.print("[dim]Make sure MongoDB is running and connection settings are correct.[/dim]")
            raise typer.Exit(1)

        console.print("  [green]✓[/green] Connected to MongoDB")

        console.print("  Creating indexes...")
        db_manager.ensure_indexes()
        console.print("  [green]✓[/green] Indexes created")

        console.print("\n[green]Database initialized successfully![/green]")

    except typer.Exit:
        raise
    except Exception as e:
        console.print(f"[red]Error initializing database: {e}[/red]")
        raise typer.Exit(1)


@app.command()
def health_check():
    """Check database connectivity and table sizes."""
    from hirepanel.data.database import get_database_manager
    from hirepanel.utils.config import get_settings

    console.print("[bold cyan]System Health Check[/bold cyan]")
    console.print(f"[dim]{'─' * 50}[/dim]")

    settings = get_settings()
    db_manager = get_database_manager()

    console.print("\n[bold]Database:[/bold]")
    if not db_manager.check_sync_connection():
        console.print("  [red]✗[/red] MongoDB not connected")
        console.print(f"\n[dim]{'─' * 50}[/dim]")
        console.print("[red]Some systems require attention.[/red]")
        raise typer.Exit(1)

    console.print("  [green]✓[/green] MongoDB connected")
    console.print(f"    Host: {settings.database.host}:{settings.database.port}")
    console.print(f"    Database: {settings.database.name}")

    console.print("\n[bold]Tables:[/bold]")
    for table_name, count in db_manager.collection_counts().items():
        console.print(f"  {table_name}: {count}")

    console.print(f"\n[dim]{'─' * 50}[/dim]")
    console.print("[green]All critical systems operational.[/green]")


@app.command()
def stats():
    """Show the dashboard metrics."""
    from hirepanel.core.dashboard import DashboardModel
    from hirepanel.data.mongo import get_row_client

    _require_connection()

    model = DashboardModel(get_row_client())
    asyncio.run(model.load())

    table = Table(title="Overview")
    table.add_column("Metric", style="cyan")
    table.add_column("Value", justify="right", style="green")
    table.add_column("", style="dim")

    for card in model.cards:
        table.add_row(card.name, card.value, card.caption or "")

    console.print(table)
    console.print("[dim]Hired This Month counts every hired candidate.[/dim]")


@app.command()
def candidates(
    job_id: str = typer.Argument(..., help="Job whose candidates to list"),
):
    """List the candidates who applied to a job, with their interview rounds."""
    from hirepanel.core.scheduling import HiringManagerRoster, schedule_button_label
    from hirepanel.data.mongo import get_row_client

    _require_connection()

    roster = HiringManagerRoster(get_row_client(), _viewer(), alert=console.print)
    asyncio.run(roster.load(job_id))

    if not roster.job_found:
        console.print("[yellow]Job not found.[/yellow]")
        raise typer.Exit(1)

    console.print(f"[bold]Candidates for {roster.job.title}[/bold]")
    console.print(f"[dim]{roster.count_label}[/dim]")

    if not roster.candidates:
        console.print("[yellow]No candidates yet.[/yellow]")
        raise typer.Exit(0)

    table = Table()
    table.add_column("Name", style="cyan")
    table.add_column("Email")
    table.add_column("Stage", justify="center")
    table.add_column("Interview Rounds")
    table.add_column("Next Step", style="dim")

    for candidate in roster.candidates:
        rounds = ", ".join(
            f"{round_.round_name} ({_styled(round_.status, STATUS_STYLES)})"
            for round_ in candidate.interview_rounds
        )
        table.add_row(
            candidate.full_name,
            candidate.email,
            _styled(candidate.application.stage, STAGE_STYLES),
            rounds or "-",
            schedule_button_label(candidate),
        )

    console.print(table)


@app.command()
def interviews(
    filter_mode: InterviewFilter = typer.Option(
        InterviewFilter.UPCOMING, "--filter", "-f", help="Which interviews to show"
    ),
):
    """List interviews, upcoming by default."""
    from hirepanel.core.interviews import (
        InterviewBoard,
        empty_state_message,
        format_date_time,
        location_display,
    )
    from hirepanel.data.mongo import get_row_client

    _require_connection()

    board = InterviewBoard(get_row_client(), _viewer())
    asyncio.run(board.load())
    board.set_filter(filter_mode)
    visible = board.visible()

    if not visible:
        console.print(f"[yellow]No interviews found.[/yellow] [dim]{empty_state_message(filter_mode)}[/dim]")
        raise typer.Exit(0)

    table = Table(title=f"Interviews ({len(visible)})")
    table.add_column("Title", style="cyan")
    table.add_column("Candidate")
    table.add_column("Job")
    table.add_column("Date")
    table.add_column("Time")
    table.add_column("Status", justify="center")
    table.add_column("Where", style="dim")

    for interview in visible:
        date, time = format_date_time(interview.scheduled_at)
        where = location_display(interview)
        table.add_row(
            interview.title,
            interview.candidate_name,
            interview.job_title,
            date,
            f"{time} ({interview.duration_minutes} min)",
            _styled(interview.status, STATUS_STYLES),
            where[1] if where else "",
        )

    console.print(table)


@app.command()
def activity(
    application_id: str = typer.Argument(..., help="Application whose history to show"),
):
    """Show the activity log of an application's interviews, newest first."""
    from hirepanel.data.mongo import get_row_client
    from hirepanel.core.interviews import format_date_time
    from hirepanel.data.repositories import ActivityLogRepository
    from hirepanel.utils.constants import EntityType

    _require_connection()

    entries = asyncio.run(
        ActivityLogRepository(get_row_client()).list_for_entity(
            EntityType.INTERVIEW.value, application_id
        )
    )
    if not entries:
        console.print("[yellow]No activity recorded.[/yellow]")
        raise typer.Exit(0)

    table = Table(title=f"Activity ({len(entries)})")
    table.add_column("When", style="dim")
    table.add_column("Action", style="cyan")
    table.add_column("Description")
    table.add_column("By", style="dim")

    for entry in entries:
        when = " ".join(format_date_time(entry.created_at)) if entry.created_at else "-"
        table.add_row(when, entry.action, entry.description, entry.performed_by or "-")

    console.print(table)


@app.command()
def gui(
    job_id: Optional[str] = typer.Option(None, "--job-id", "-j", help="Open this job's candidates"),
    viewer_id: Optional[str] = typer.Option(None, "--viewer-id", help="Viewer id"),
    role: Optional[str] = typer.Option(None, "--role", "-r", help="Viewer role"),
):
    """Launch the graphical user interface."""
    console.print("[yellow]Launching GUI...[/yellow]")
    from hirepanel.main import main

    raise typer.Exit(main(viewer=_viewer(viewer_id, role), job_id=job_id))


if __name__ == "__main__":
    app()
