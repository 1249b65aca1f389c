"""gitpeek: find git repositories below a directory and show their branches."""

from __future__ import annotations

import json
import sys
from pathlib import Path
from typing import NamedTuple, NoReturn

import click

from gitpeek.common import (
    CYAN,
    DIM,
    ConfigError,
    Settings,
    SettingsFile,
    ValidationError,
    copy_to_clipboard,
    format_cd_command,
    fuzzy_select,
    parse_ignore_list,
    style_dim,
    style_error,
    style_info,
    style_success,
    validate_start_dir,
)
from gitpeek.seek.discovery import DirectoryReadError, SearchConfig
from gitpeek.seek.results import SearchResult, fetch_git_dirs

PICK_PROMPT = (
    "Select the git directory to copy to clipboard (type to filter, Esc to quit)"
)


class SearchOptions(NamedTuple):
    """Command-line overrides; None means fall back to the settings file."""

    target: Path | None = None
    max_depth: int | None = None
    ignore: str | None = None
    verbose: bool = False


def _fail(msg: str) -> NoReturn:
    click.echo(style_error(msg), err=True)
    sys.exit(1)


def _load_settings(settings_file: SettingsFile) -> Settings:
    """Load settings or exit with an error."""
    try:
        settings, created = settings_file.load()
    except ConfigError as e:
        _fail(f"Invalid configuration: {e}")
    if created:
        click.echo(
            style_info(f"No settings file found. Wrote defaults to {settings_file.path}"),
            err=True,
        )
    return settings


def build_search_config(opts: SearchOptions, settings: Settings) -> SearchConfig:
    """Merge command-line options over persisted settings.

    Raises ValidationError if the start directory or ignore list is bad.
    """
    target = opts.target if opts.target is not None else Path.cwd()
    max_depth = opts.max_depth if opts.max_depth is not None else settings.max_depth
    if opts.ignore is not None:
        ignore_list = parse_ignore_list(opts.ignore)
    else:
        ignore_list = settings.ignore_list
    return SearchConfig(validate_start_dir(target), max_depth, ignore_list)


def run_search(opts: SearchOptions) -> list[SearchResult]:
    """Resolve the search config and run it, exiting on any fatal error."""
    settings = _load_settings(SettingsFile())
    try:
        config = build_search_config(opts, settings)
    except ValidationError as e:
        _fail(f"Invalid configuration: {e}")

    if opts.verbose:
        ignored = ", ".join(sorted(config.ignore_list)) or "(none)"
        click.echo(
            style_dim(
                f"Searching {config.start_dir} "
                f"(max depth {config.max_depth}, ignoring: {ignored})"
            ),
            err=True,
        )

    try:
        results = fetch_git_dirs(config)
    except DirectoryReadError as e:
        _fail(f"Error in gitpeeking: {e}")

    if opts.verbose:
        click.echo(style_dim(f"Found {len(results)} repositories"), err=True)
    return results


@click.group(invoke_without_command=True)
@click.version_option(package_name="gitpeek")
@click.option(
    "--target",
    "-t",
    type=click.Path(path_type=Path),
    help="Directory to start searching from (default: current directory)",
)
@click.option(
    "--max-depth",
    "-d",
    type=click.IntRange(min=0),
    help="Max depth of directories to search (default: from settings)",
)
@click.option(
    "--ignore",
    "-e",
    metavar="NAMES",
    help="Comma-separated directory names to skip (default: from settings)",
)
@click.option("--verbose", "-v", is_flag=True, help="Print search details to stderr")
@click.pass_context
def cli(
    ctx: click.Context,
    target: Path | None,
    max_depth: int | None,
    ignore: str | None,
    *,
    verbose: bool,
) -> None:
    """Find git repositories and show their current branches.

    Searches breadth-first from TARGET, down to MAX_DEPTH levels, without
    descending into repositories it finds. Option defaults come from the
    settings file (see `gitpeek config`); command-line options win.

    EXAMPLES:
        gitpeek                          # Pick a repo, copy `cd <path>`
        gitpeek -t ~/code -d 2           # Search two levels below ~/code
        gitpeek -e node_modules,target   # Skip these directory names
        gitpeek list --json              # Machine-readable listing
    """
    ctx.obj = SearchOptions(target, max_depth, ignore, verbose)
    if ctx.invoked_subcommand is None:
        ctx.invoke(pick)


@cli.command()
@click.pass_obj
def pick(opts: SearchOptions) -> None:
    """Pick a repository and copy a cd command for it to the clipboard.

    Type to fuzzy filter; Esc quits without copying anything.
    """
    results = run_search(opts)
    if not results:
        _fail("No git repositories found")

    index = fuzzy_select([r.label() for r in results], PICK_PROMPT)
    if index is None:
        click.echo(style_dim("Nothing selected, exiting..."))
        return

    copy_to_clipboard(format_cd_command(results[index].path))
    click.echo(style_success("Copied to clipboard!"))


@cli.command("list")
@click.option("--json", "-j", "as_json", is_flag=True, help="Output as JSON")
@click.option("--path-only", is_flag=True, help="Output just paths (one per line)")
@click.pass_obj
def list_cmd(opts: SearchOptions, *, as_json: bool, path_only: bool) -> None:
    """List discovered repositories with their branches.

    EXAMPLES:
        gitpeek list               # "<path> (<branch>)" per line
        gitpeek list --json        # JSON output
        gitpeek list --path-only   # Just paths for scripting
    """
    results = run_search(opts)

    if as_json:
        click.echo(json.dumps([r.to_dict() for r in results], indent=2))
        return

    if path_only:
        for r in results:
            click.echo(r.path)
        return

    if not results:
        click.echo(style_dim("No git repositories found"))
        return

    for r in results:
        click.echo(f"{r.path} {click.style(f'({r.branch})', fg=CYAN)}")


@cli.command("config")
@click.option("--init", "reset", is_flag=True, help="Rewrite the file with defaults")
def config_cmd(*, reset: bool) -> None:
    """Show the settings file and the defaults stored in it."""
    settings_file = SettingsFile()
    if reset:
        try:
            settings_file.write(Settings())
        except ConfigError as e:
            _fail(str(e))
        click.echo(style_success(f"Wrote defaults to {settings_file.path}"))

    settings = _load_settings(settings_file)
    ignored = ", ".join(sorted(settings.ignore_list)) or "(none)"
    click.echo(f"{click.style('file', fg=DIM)}         {settings_file.path}")
    click.echo(f"{click.style('max_depth', fg=DIM)}    {settings.max_depth}")
    click.echo(f"{click.style('ignore_list', fg=DIM)}  {ignored}")


if __name__ == "__main__":
    cli()
