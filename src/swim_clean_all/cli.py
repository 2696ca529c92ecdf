"""CLI interface for swim-clean-all."""

from __future__ import annotations

import logging
import sys
from pathlib import Path

import click

from swim_clean_all import __version__, report
from swim_clean_all.config import read_config
from swim_clean_all.core.engine import CleanAllEngine, is_affirmative
from swim_clean_all.errors import SwimCleanError
from swim_clean_all.models.search_config import DEFAULT_MAX_DEPTH, SearchConfig
from swim_clean_all.progress import ScanSpinner
from swim_clean_all.utils import canonicalize

log = logging.getLogger(__name__)

# Cursor to the start of the previous line, then erase it.
_COLLAPSE_PROMPT = "\x1b[1F\x1b[2K"


def _setup_logging(verbosity: int) -> None:
    level = logging.WARNING
    if verbosity == 1:
        level = logging.INFO
    elif verbosity >= 2:
        level = logging.DEBUG
    logging.basicConfig(level=level, format="%(levelname)s: %(message)s")


def terminal_confirm(prompt: str) -> bool:
    """Ask on the terminal, then erase the prompt so only the outcome stays."""
    answer = click.prompt(
        click.style(f"  {prompt}", fg="blue", bold=True),
        default="",
        show_default=False,
        prompt_suffix=" ",
    )
    click.echo(_COLLAPSE_PROMPT, nl=False)
    return is_affirmative(answer)


def _build_config(
    search_root: str,
    skip: tuple[str, ...],
    max_depth: int,
    config_path: str | None,
    ignore_config: bool,
) -> SearchConfig:
    """Merge CLI and config-file input into a canonical search config."""
    skip_entries = list(skip)
    if not ignore_config:
        file_config = read_config(config_path)
        if file_config is not None:
            skip_entries.extend(file_config.skip)

    root = canonicalize(search_root)
    skip_list = frozenset(canonicalize(entry) for entry in skip_entries)

    log.info("Skipping directories: %s", ", ".join(str(p) for p in sorted(skip_list)))
    return SearchConfig(search_root=root, skip_list=skip_list, max_depth=max_depth)


@click.command()
@click.argument("search_root", default=".", required=False)
@click.option(
    "--skip",
    multiple=True,
    metavar="PATH",
    help="Directory to skip when traversing (repeatable)",
)
@click.option(
    "--max-depth",
    type=click.IntRange(min=0),
    default=DEFAULT_MAX_DEPTH,
    show_default=True,
    help="Maximum depth to search below the search root",
)
@click.option("--config", "config_path", default=None, metavar="PATH", help="Config file to use, e.g. foo.toml")
@click.option("--ignore-config", is_flag=True, help="Do not load and extend the config file")
@click.option("-v", "--verbose", count=True, help="Increase verbosity (-v info, -vv debug)")
@click.version_option(__version__, prog_name="swim-clean-all")
def main(
    search_root: str,
    skip: tuple[str, ...],
    max_depth: int,
    config_path: str | None,
    ignore_config: bool,
    verbose: int,
) -> None:
    """Recursively clean the build directories of swim projects.

    SEARCH_ROOT is the directory to search; it defaults to the current one.
    """
    _setup_logging(verbose)

    try:
        config = _build_config(search_root, skip, max_depth, config_path, ignore_config)
        engine = CleanAllEngine(config)

        with ScanSpinner(config.search_root) as spinner:
            projects = engine.scan(on_entry=spinner.update)

        if not projects:
            report.nothing_found(search_root)
            return

        sizes = engine.measure(projects)
        report.found_summary(len(projects), sum(sizes))

        freed = engine.clean(projects, sizes, confirm=terminal_confirm, on_result=report.outcome)
    except SwimCleanError as e:
        log.debug("Aborting", exc_info=True)
        click.echo(click.style(f"Error: {e}", fg="red"), err=True)
        sys.exit(1)

    report.final_total(freed)
