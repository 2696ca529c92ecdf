"""Human-readable summary lines printed around the cleanup loop."""

from __future__ import annotations

from pathlib import Path

import click

from swim_clean_all.models.cleanup_outcome import CleanupAction, CleanupOutcome
from swim_clean_all.utils import bytes_to_human, plural


def nothing_found(search_root: Path | str) -> None:
    click.echo(f"No cleanable swim projects found in {search_root}")


def found_summary(count: int, total_bytes: int) -> None:
    """Announce how many projects were found and what they could free."""
    line = (
        f"{plural(count, 'cleanable swim project')} found "
        f"(totalling {bytes_to_human(total_bytes)} potential savings)"
    )
    click.echo(click.style(line, fg="green", bold=True))
    click.echo()


def outcome(result: CleanupOutcome) -> None:
    """Print the line that replaces a project's prompt once it is answered."""
    size = bytes_to_human(result.reclaimable_bytes)
    if result.action is CleanupAction.CLEANED:
        click.echo(f"Cleaned {result.project_path} ({size}).")
    else:
        click.echo(click.style(f"Skipped {result.project_path} ({size}).", dim=True))


def final_total(freed_bytes: int) -> None:
    click.echo()
    if freed_bytes > 0:
        click.echo(f"{bytes_to_human(freed_bytes)} successfully cleaned")
    else:
        click.echo("No projects cleaned")
