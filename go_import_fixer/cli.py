#!/usr/bin/env python3
"""Command-line interface for go-import-fixer using Click."""

from importlib import metadata
import logging
from pathlib import Path
import sys
from typing import Optional

import click
from go_import_fixer import config
from go_import_fixer import core


try:
    VERSION = f"go-import-fixer {metadata.version('go_import_fixer')}"
except metadata.PackageNotFoundError:
    VERSION = "go-import-fixer"


def _handle_files(path: Path, prefix: Optional[str], exclude: Optional[str], apply_changes: bool) -> int:
    """Resolve configuration and process Go files under path.

    Args:
        path: File or directory to process.
        prefix: Organization prefix given on the command line, if any.
        exclude: Comma-separated exclusion patterns given on the command line, if any.
        apply_changes: If True, rewrite files in place.
    Returns:
        0 if no changes, 1 if changes required, 2 if error occurred.
    """
    org_prefix = config.resolve_prefix(prefix, str(path))
    patterns = config.resolve_exclude(exclude, str(path))
    logging.debug("Organization prefix: %r, excluded: %s", org_prefix, patterns)
    return core.process_path(str(path), org_prefix, patterns, apply=apply_changes)


@click.group()
@click.option("-v", "--verbose", is_flag=True, help="Increase verbosity.")
@click.option("-q", "--quiet", is_flag=True, help="Suppress non-error output.")
@click.version_option(version=VERSION, prog_name="go-import-fixer CLI")
def cli(verbose: bool, quiet: bool) -> None:
    """Group and sort the import blocks of Go source files."""
    # Configure logging only once
    if not logging.getLogger().handlers:
        if quiet:
            logging.basicConfig(level=logging.ERROR, format="%(message)s")
        else:
            logging.basicConfig(level=logging.DEBUG if verbose else logging.INFO, format="%(message)s")


prefix_option = click.option(
    "--prefix",
    default=None,
    help=f"Prefix to be grouped separately, e.g. github.com/mycompany (env: {config.ENV_PREFIX}).",
)
exclude_option = click.option(
    "--exclude",
    default=None,
    help=f"Comma-separated list of glob patterns to exclude (default: {config.DEFAULT_EXCLUDE}).",
)
path_argument = click.argument(
    "path", default=".", type=click.Path(exists=True, file_okay=True, dir_okay=True)
)


@cli.command(help="Report files whose imports are not formatted, without modifying them.")
@path_argument
@prefix_option
@exclude_option
def check(path: str, prefix: Optional[str], exclude: Optional[str]) -> None:
    exit_code = _handle_files(Path(path), prefix, exclude, apply_changes=False)
    sys.exit(exit_code)


@cli.command(help="Rewrite import blocks in place.")
@path_argument
@prefix_option
@exclude_option
def fix(path: str, prefix: Optional[str], exclude: Optional[str]) -> None:
    exit_code = _handle_files(Path(path), prefix, exclude, apply_changes=True)
    sys.exit(exit_code)


def main():
    """Entry point for the CLI."""
    cli()


if __name__ == "__main__":
    cli()
