"""Typer-based CLI for the token top-up report."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional, Tuple

import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape
from rich.table import Table

from . import __version__, config
from .companies import CompanyCollection
from .errors import ReportError
from .report import write_report
from .users import UserCollection

logger = logging.getLogger(__name__)

console = Console()
err_console = Console(stderr=True)

app = typer.Typer(
    help="💰 Top-up report: join users to companies and report token top-ups.",
    no_args_is_help=True,
    rich_markup_mode="rich",
)


class _EchoSink:
    """Report sink that writes to stdout through ``typer.echo``."""

    def write(self, text: str) -> None:
        typer.echo(text, nl=False)


def version_callback(value: bool):
    """Print version and exit."""
    if value:
        typer.echo(f"Top-up Report v{__version__}")
        raise typer.Exit()


@app.callback()
def main(
    version: Optional[bool] = typer.Option(
        None,
        "--version",
        "-v",
        help="Show version and exit.",
        callback=version_callback,
        is_eager=True,
    ),
    verbose: bool = typer.Option(False, "--verbose", help="Log loading details to stderr."),
):
    """Top-up Report: active users per company, with their new token balances."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(console=err_console, show_path=False)],
        force=True,
    )


def _load(users_file: Optional[Path], companies_file: Optional[Path]) -> Tuple[UserCollection, CompanyCollection]:
    """Load users, then companies joined against them; exit 1 on any load error."""
    try:
        users = UserCollection.load(users_file)
        companies = CompanyCollection.load(companies_file, users)
    except ReportError as exc:
        err_console.print(f"[bold red]❌ {type(exc).__name__}:[/bold red] {escape(str(exc))}", soft_wrap=True)
        raise typer.Exit(code=1)
    return users, companies


@app.command("report")
def report(
    users_file: Optional[Path] = typer.Option(
        None, "--users", "-u", help=f"Users JSON file (default: {config.USERS_FILE})."
    ),
    companies_file: Optional[Path] = typer.Option(
        None, "--companies", "-c", help=f"Companies JSON file (default: {config.COMPANIES_FILE})."
    ),
    output: Optional[Path] = typer.Option(
        None, "--output", "-o", help=f"Report output file (default: {config.OUTPUT_FILE})."
    ),
    write_file: bool = typer.Option(True, "--file/--no-file", help="Also write the report to the output file."),
):
    """Print the top-up report and save a copy to the output file."""
    _, companies = _load(users_file, companies_file)

    text = write_report(companies.all(), _EchoSink())

    if not write_file:
        return

    output = output or config.OUTPUT_FILE
    try:
        with output.open("w", encoding="utf-8") as f:
            f.write(text)
    except OSError as exc:
        # The console copy is already out; a failed file write is not fatal.
        err_console.print(f"[yellow]⚠️  Could not write {escape(str(output))}: {escape(str(exc))}[/yellow]", soft_wrap=True)
        return
    logger.info("Wrote report to %s", output)


@app.command("check")
def check(
    users_file: Optional[Path] = typer.Option(None, "--users", "-u", help="Users JSON file."),
    companies_file: Optional[Path] = typer.Option(None, "--companies", "-c", help="Companies JSON file."),
):
    """Validate both datasets and summarize the join without writing anything."""
    users, companies = _load(users_file, companies_file)

    table = Table(title="Top-up summary")
    table.add_column("Id", justify="right")
    table.add_column("Company")
    table.add_column("Users", justify="right")
    table.add_column("Emailed", justify="right")
    table.add_column("Not emailed", justify="right")
    table.add_column("Total top-up", justify="right")

    for company in companies:
        table.add_row(
            str(company.id),
            escape(str(company.name)),
            str(company.users.count()),
            str(len(company.users_emailed())),
            str(len(company.users_not_emailed())),
            str(company.total_top_up()),
        )

    console.print(table)
    console.print(f"✅ {users.count()} active user(s), {companies.count()} compan{'y' if companies.count() == 1 else 'ies'} to top up.")


if __name__ == "__main__":
    app()
