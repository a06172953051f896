"""Career details CLI - browse the career content from a terminal and serve it over HTTP."""

from pathlib import Path

import click
import structlog
import uvicorn
from dotenv import load_dotenv
from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

from career_details import __version__
from career_details.data import (
    get_career_details,
    get_career_progression,
    has_detailed_content,
    list_career_ids,
)
from career_details.models import CareerDetail, CareerProgression, ContentStoreError
from career_details.settings import settings
from career_details.utils.setup_logging import get_logging_config, setup_logging

console = Console()
logger = structlog.getLogger(__name__)


def _bullets(items: tuple[str, ...]) -> str:
    return "\n".join(f"• {escape(item)}" for item in items)


def _render_details(career_id: str, details: CareerDetail) -> None:
    day = details.typical_day

    schedule = Table(show_header=True, header_style="bold cyan", expand=True)
    schedule.add_column("Morning")
    schedule.add_column("Midday")
    schedule.add_column("Afternoon")
    schedule.add_row(_bullets(day.morning), _bullets(day.midday), _bullets(day.afternoon))

    console.print()
    console.print(Panel(schedule, title=f"A typical day: {escape(career_id)}", border_style="cyan"))
    if day.tools:
        console.print(f"[bold]Tools:[/bold] {escape(', '.join(day.tools))}")
    if day.environment:
        console.print(f"[bold]Environment:[/bold] {escape(day.environment)}")

    sections = [
        ("What you actually do", details.what_you_actually_do),
        ("Who this is good for", details.who_this_is_good_for),
        ("Top skills", details.top_skills),
        ("Entry paths", details.entry_paths),
    ]
    for title, items in sections:
        console.print(Panel(_bullets(items), title=title, title_align="left"))

    if details.reality_check:
        console.print(
            Panel(escape(details.reality_check), title="Reality check", title_align="left", border_style="yellow")
        )


def _render_progression(progression: CareerProgression) -> None:
    table = Table(title="Career progression", show_header=True, header_style="bold cyan")
    table.add_column("Level", style="bold")
    table.add_column("Title")
    table.add_column("Experience")
    table.add_column("Salary", style="green")
    for level in progression.levels:
        table.add_row(
            level.level,
            escape(level.title),
            escape(level.years_experience),
            escape(level.salary_range),
        )
    console.print(table)


@click.group()
@click.version_option(version=__version__, prog_name="career-details")
@click.option(
    "--env-file",
    "-e",
    "env_file",
    default=None,
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    help="Path to a .env file to load before reading settings.",
)
def cli(env_file: Path | None) -> None:
    """Career details - typical day, responsibilities, skills and entry paths per career."""
    if env_file is not None:
        load_dotenv(env_file, override=False)
        settings.reload()


@cli.command()
def version():
    """Show version information."""
    table = Table(title="Career Details Version Information", show_header=True, header_style="bold cyan")
    table.add_column("Component", style="bold")
    table.add_column("Version", style="green")
    table.add_row("career-details", __version__)

    console.print()
    console.print(table)
    console.print()


@cli.command("list")
def list_command():
    """List career ids that have specific content."""
    try:
        career_ids = list_career_ids()
    except ContentStoreError as e:
        raise click.ClickException(str(e)) from e

    table = Table(title=f"Careers with detailed content ({len(career_ids)})", header_style="bold cyan")
    table.add_column("Career id", style="bold")
    for career_id in career_ids:
        table.add_row(escape(career_id))
    console.print(table)


@cli.command()
@click.argument("career_id")
@click.option("--json", "as_json", is_flag=True, help="Print the raw JSON payload instead.")
def show(career_id: str, as_json: bool):
    """Show the details for CAREER_ID.

    Names such as "Software Developer" are matched against stored ids.
    Careers without specific content show the generic default content.
    """
    try:
        details = get_career_details(career_id)
        has_details = has_detailed_content(career_id)
        progression = get_career_progression(career_id)
    except ContentStoreError as e:
        raise click.ClickException(str(e)) from e

    if as_json:
        click.echo(details.model_dump_json(by_alias=True, exclude_none=True, indent=2))
        return

    if not has_details:
        console.print(
            f"[yellow]No detailed content for '{escape(career_id)}', showing general career information.[/yellow]"
        )
    _render_details(career_id, details)
    if progression is not None:
        _render_progression(progression)


@cli.command()
@click.argument("career_id")
@click.pass_context
def check(ctx: click.Context, career_id: str):
    """Check whether CAREER_ID has detailed content (exit code 1 if not)."""
    try:
        has_details = has_detailed_content(career_id)
    except ContentStoreError as e:
        raise click.ClickException(str(e)) from e

    if has_details:
        console.print(f"[green]✓[/green] '{escape(career_id)}' has detailed content")
        return
    console.print(f"[red]✗[/red] '{escape(career_id)}' has no detailed content")
    ctx.exit(1)


@cli.command()
@click.option("--host", default=None, help="Host to bind the server to (defaults to HOST setting).")
@click.option("--port", default=None, type=int, help="Port to bind the server to (defaults to PORT setting).")
@click.option("--reload", is_flag=True, default=False, help="Enable auto-reload for development.")
def serve(host: str | None, port: int | None, reload: bool):
    """Serve the career details API with uvicorn."""
    host = host or settings.app.HOST
    port = port or settings.app.PORT

    setup_logging()
    logger.info("Starting career details server", host=host, port=port, reload=reload)
    console.print(
        Panel(
            f"[bold]Server:[/bold] http://{host}:{port}\n[bold]API docs:[/bold] http://{host}:{port}/docs",
            title="Career Details",
            border_style="green",
        )
    )
    uvicorn.run(
        "career_details.main:app",
        host=host,
        port=port,
        reload=reload,
        log_config=get_logging_config(),
    )


def main():
    """Entry point for the CLI."""
    cli()


if __name__ == "__main__":
    main()
