"""jsDelivr purge commands."""
from __future__ import annotations

from pathlib import Path
from typing import Annotated, Optional

import rich
import typer
from rich.console import Console
from typer import Option

from theme_purge_tools.errors import ConfigError, PurgeToolsError
from theme_purge_tools.models.purge import PurgeJob
from theme_purge_tools.models.settings import Settings, load_settings
from theme_purge_tools.purger import PURGE_API_URL, Purger, classify_results
from theme_purge_tools.utils import uris
from theme_purge_tools.utils.http_client import JsonClient
from theme_purge_tools.utils.themes import discover_themes

app = typer.Typer(no_args_is_help=True)
err = Console(stderr=True)


def fail(msg: str) -> typer.Exit:
    err.print(f"❌  {msg}", markup=False)
    return typer.Exit(1)


def settings_or_exit(**overrides) -> Settings:
    try:
        return load_settings(**overrides)
    except ConfigError as e:
        for problem in e.problems:
            err.print(f"❌  Error: {problem}", markup=False)
        raise typer.Exit(1)


def make_purger(settings: Settings) -> Purger:
    return Purger(
        client=JsonClient(timeout=settings.http_timeout),
        api_url=settings.purge_api_url,
        status_check_interval=settings.status_check_interval,
        max_status_checks=settings.max_status_checks,
    )


def print_status(attempt: int, job: PurgeJob, max_checks: int):
    typer.echo(f"Checking purge status (attempt {attempt}/{max_checks})...")
    typer.echo(f"Status: {job.status}")


def run_purge(settings: Settings, dry_run: bool = False):
    """Discover themes, purge their paths and report the outcome."""
    repository = settings.github_repository
    version = settings.github_ref_name
    typer.echo(f"Repository: {repository}")
    typer.echo(f"Version: {version}")

    themes = discover_themes(settings.themes_root)
    typer.echo(f"\nDiscovered themes: {', '.join(themes)}")
    if not themes:
        raise fail("Error: No themes found")

    paths = uris.build_purge_paths(repository, version, themes)
    typer.echo("\nPaths to purge:")
    for path in paths:
        typer.echo(f"  {path}")

    if dry_run:
        typer.echo("\nDry run, no purge request sent.")
        return

    purger = make_purger(settings)

    typer.echo("\nSending purge request...")
    job = purger.submit(paths)
    typer.echo(f"Purge initiated with ID: {job.id}")
    typer.echo(f"Initial status: {job.status}")

    typer.echo("\nWaiting for purge to complete...")
    final = purger.wait(
        job.id,
        on_status=lambda attempt, status: print_status(
            attempt, status, purger.max_status_checks
        ),
    )

    typer.echo("\n✅  Purge completed successfully!")
    typer.echo("\nDetailed results:")
    rich.print_json(final.model_dump_json(exclude_none=True))

    report = classify_results(final)
    if report.throttled_paths:
        err.print("\n⚠️  Some paths were throttled:", markup=False)
        for path in report.throttled_paths:
            err.print(f"  {path}", markup=False)

    if not report.ok:
        err.print("\n❌  Some paths failed to purge:", markup=False)
        for path in report.failed_paths:
            err.print(f"  {path}", markup=False)
    report.raise_for_failures()


@app.command()
def run(
    root: Annotated[Optional[Path], Option("--root", help="Themes root directory")] = None,
    repository: Annotated[Optional[str], Option("--repository", help="owner/name")] = None,
    version: Annotated[Optional[str], Option("--version", "-v", help="Released ref")] = None,
    dry_run: Annotated[bool, Option("--dry-run")] = False,
):
    """Purge the jsDelivr cache for every theme and wait for completion."""
    settings = settings_or_exit(
        themes_root=root,
        github_repository=repository,
        github_ref_name=version,
    )

    try:
        run_purge(settings, dry_run=dry_run)
    except typer.Exit:
        raise
    except Exception as e:
        if settings.verbose:
            raise
        raise fail(f"Error: {e}")


@app.command()
def status(
    job_id: str,
    api_url: Annotated[str, Option("--api-url")] = PURGE_API_URL,
):
    """Show the current status of a purge job."""
    purger = Purger(client=JsonClient(), api_url=api_url)
    try:
        job = purger.fetch_status(job_id)
    except PurgeToolsError as e:
        raise fail(f"Error: {e}")

    typer.echo(f"Status: {job.status}")
    rich.print_json(job.model_dump_json(exclude_none=True))
