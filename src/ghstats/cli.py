from __future__ import annotations

import os
import sys
from datetime import datetime
from pathlib import Path

import click
from dotenv import load_dotenv
from rich.console import Console
from rich.markup import escape
from rich.progress import BarColumn, MofNCompleteColumn, Progress, TaskID, TextColumn

from .client import GitHubClient
from .config import build_config
from .errors import ConfigError, GhStatsError
from .formatters import get_formatter
from .orchestrator import build_report, collect_pull_requests
from .persist import write_results

_stderr = Console(stderr=True)

_DATE_FORMATS = ["%Y-%m-%d", "%Y-%m-%dT%H:%M:%S"]


class _ProgressBar:
    """Feeds orchestrator progress into a rich progress bar, one task per phase."""

    def __init__(self, progress: Progress) -> None:
        self._progress = progress
        self._task: TaskID | None = None

    def __call__(self, completed: int, total: int, label: str) -> None:
        if self._task is None or completed == 1:
            self._task = self._progress.add_task(label, total=total)
        self._progress.update(self._task, completed=completed, description=label)


@click.group()
def cli() -> None:
    """ghstats — pull request and review statistics for GitHub repositories."""
    load_dotenv()


@cli.command()
@click.argument("repos", nargs=-1, metavar="[OWNER/REPO]...")
@click.option(
    "--repos-file",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    default=None,
    help="File listing one OWNER/REPO per line.",
)
@click.option(
    "--from",
    "date_from",
    type=click.DateTime(_DATE_FORMATS),
    required=True,
    help="Start of the reporting window (exclusive, UTC).",
)
@click.option(
    "--to",
    "date_to",
    type=click.DateTime(_DATE_FORMATS),
    required=True,
    help="End of the reporting window (exclusive, UTC).",
)
@click.option(
    "--format",
    "output_format",
    type=click.Choice(["table", "json"]),
    default="table",
    show_default=True,
    help="Output format.",
)
@click.option(
    "--output",
    "output_path",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help="Also write the detailed statistics to this JSON file.",
)
def report(
    repos: tuple[str, ...],
    repos_file: Path | None,
    date_from: datetime,
    date_to: datetime,
    output_format: str,
    output_path: Path | None,
) -> None:
    """Count pull requests created and reviewed per author across repositories."""
    try:
        config = build_config(repos, repos_file, date_from, date_to, output_path)
    except ConfigError as exc:
        raise click.UsageError(str(exc)) from exc

    token = os.environ.get("GITHUB_TOKEN")
    if not token:
        _stderr.print("[red]Error:[/red] GITHUB_TOKEN environment variable is not set.")
        sys.exit(1)

    try:
        with GitHubClient(token) as client:
            login = client.get_authenticated_login()
            _stderr.print(f"Requesting on behalf of {login}")
            with Progress(
                TextColumn("[progress.description]{task.description}"),
                BarColumn(),
                MofNCompleteColumn(),
                console=_stderr,
                transient=True,
            ) as progress:
                prs = collect_pull_requests(client, config.repos, config.window, _ProgressBar(progress))
    except GhStatsError as exc:
        _stderr.print(f"[red]Error:[/red] {escape(str(exc))}")
        sys.exit(1)

    _stderr.print(f"Fetched {len(prs)} pull requests from {len(config.repos)} repositories.")
    result = build_report(prs, config.window)
    click.echo(get_formatter(output_format)(result))

    if config.output_path is not None:
        write_results(config.output_path, result.detailed)
