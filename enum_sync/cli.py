"""Click CLI with generate, preview, and matchers subcommands."""

from __future__ import annotations

import logging
from pathlib import Path

import click

from enum_sync import __version__
from enum_sync.config import load_config
from enum_sync.errors import EnumSyncError
from enum_sync.exporter import read_file
from enum_sync.formatter import get_enums, get_enums_with_description
from enum_sync.matcher import MATCHERS, PATTERNS, get_matcher, pattern_matcher
from enum_sync.models import ParseJob
from enum_sync.pipeline import render_job, run_batch

_MATCHER_CHOICES = list(MATCHERS)


@click.group()
@click.version_option(version=__version__)
@click.option("--verbose", "-v", is_flag=True, help="Enable debug logging")
def cli(verbose: bool):
    """enum-sync: Generate TypeScript enums from enum declarations in other sources."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


@cli.command()
@click.argument("config_file", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.option("-o", "--dest", "dest_dir", type=click.Path(file_okay=False, path_type=Path), help="Override the output directory")
@click.option("--no-index", is_flag=True, help="Do not write the index file")
def generate(config_file: Path, dest_dir: Path | None, no_index: bool):
    """Generate enum files for every job in CONFIG_FILE."""
    try:
        config = load_config(config_file)
        if no_index:
            config.index = False
        result = run_batch(config, dest_dir=dest_dir)
    except (EnumSyncError, OSError) as e:
        raise click.ClickException(str(e))

    click.echo(f"\nDone! Created {len(result.files_created)} file(s) in {result.output_dir}")


@cli.command()
@click.argument("source_file", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.option("--matcher", "-m", "matcher_name", type=click.Choice(_MATCHER_CHOICES), help="Built-in matcher")
@click.option("--pattern", "-p", help="Custom regular expression (group 1 is the name)")
@click.option("--comment-group", type=int, help="Group of --pattern holding the comment")
@click.option("--enum-name", "-n", help="Enum name (defaults to the file name)")
@click.option("--description-enum", "-d", help="Also render a description enum with this name")
@click.option("--comment", "-c", help="Doc comment for the enum")
def preview(
    source_file: Path,
    matcher_name: str | None,
    pattern: str | None,
    comment_group: int | None,
    enum_name: str | None,
    description_enum: str | None,
    comment: str | None,
):
    """Print the file that would be generated for SOURCE_FILE."""
    if bool(matcher_name) == bool(pattern):
        raise click.UsageError("Specify exactly one of --matcher or --pattern")

    try:
        if matcher_name:
            matcher = get_matcher(matcher_name)
        else:
            matcher = pattern_matcher(pattern, comment_group=comment_group)

        job = ParseJob(
            src_file_name=source_file.name,
            src_directory=source_file.parent,
            enum_name=enum_name or source_file.stem,
            matcher=matcher,
            description_enum_name=description_enum,
            comment=comment,
        )
        content = read_file(source_file)
        if job.has_description:
            bodies = get_enums_with_description(content, matcher, allow_duplicates=True)
        else:
            bodies = get_enums(content, matcher, allow_duplicates=True)
    except (EnumSyncError, OSError) as e:
        raise click.ClickException(str(e))

    click.echo(render_job(job, bodies), nl=False)


@cli.command()
def matchers():
    """List the built-in matchers and their patterns."""
    for name, regex in PATTERNS.items():
        click.echo(f"{click.style(name, fg='cyan'):<30} {regex.pattern}")


if __name__ == "__main__":
    cli()
