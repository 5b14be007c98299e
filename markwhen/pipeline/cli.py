#!/usr/bin/env python3
"""
markwhen CLI
------------------------

Command-line interface for parsing Markwhen timelines.

Commands:
    - convert: Parse timeline files and export them as JSON or YAML
    - check: Parse a timeline and report its structure without writing

Usage:
    # Convert a directory of .mw files to JSON
    markwhen convert timelines/ -o out/

    # Convert one file to YAML, overwriting
    markwhen convert roadmap.mw --format yaml -f

    # Validate a file
    markwhen check roadmap.mw
"""
from __future__ import annotations

import click
from pathlib import Path

from markwhen.core.cli import setup_logger
from markwhen.core.cli_options import (
    dry_run_option,
    force_option,
    format_option,
    log_dir_option,
    output_option,
    verbose_option,
)
from markwhen.core.logging_manager import MarkwhenLogger, handle_cli_error
from markwhen.parser.builder import parse_file
from markwhen.pipeline.export import (
    EXPORT_FORMATS,
    convert_directory,
    convert_file,
    find_timeline_files,
)


@click.group()
@log_dir_option
@verbose_option
@click.pass_context
def cli(ctx: click.Context, log_dir: str, verbose: bool) -> None:
    """Markwhen Timeline Parser"""
    ctx.ensure_object(dict)
    ctx.obj["log_dir"] = Path(log_dir)
    ctx.obj["verbose"] = verbose
    ctx.obj["logger"] = setup_logger(Path(log_dir), "markwhen")


@cli.command()
@click.argument("input", type=click.Path(exists=True))
@output_option
@format_option
@force_option
@dry_run_option
@click.pass_context
def convert(
    ctx: click.Context,
    input: str,
    output: str,
    fmt: str,
    force: bool,
    dry_run: bool,
) -> None:
    """
    Convert timeline files to JSON or YAML documents.

    INPUT may be a single timeline file or a directory searched
    recursively for .mw files.
    """
    logger: MarkwhenLogger = ctx.obj["logger"]
    input_path = Path(input)
    output_dir = Path(output)

    if dry_run:
        click.echo("🗓️  Converting timelines (DRY RUN - no files will be modified)...")
        if input_path.is_dir():
            files = [p.relative_to(input_path) for p in find_timeline_files(input_path)]
        else:
            files = [Path(input_path.name)]
        click.echo(f"Would process {len(files)} file(s):")
        for timeline_file in files:
            click.echo(
                f"  • {timeline_file} -> "
                f"{timeline_file.with_suffix(EXPORT_FORMATS[fmt])}"
            )
        click.echo(f"\nOutput directory: {output_dir}")
        click.echo(f"Force overwrite: {force}")
        return

    click.echo("🗓️  Converting timelines...")

    try:
        if input_path.is_dir():
            stats = convert_directory(input_path, output_dir, fmt, force, logger)
        else:
            stats = convert_file(input_path, output_dir, fmt, force, logger)

        click.echo("\n✅ Conversion complete:")
        click.echo(f"  Files processed: {stats.files_processed}")
        click.echo(f"  Files written: {stats.files_written}")
        if stats.files_skipped:
            click.echo(f"  Files skipped: {stats.files_skipped}")
        if stats.errors:
            click.echo(f"  Errors: {stats.errors}")
        click.echo(f"  Duration: {stats.duration():.2f}s")

    except Exception as e:
        handle_cli_error(
            ctx,
            e,
            "convert",
            additional_context={"input": input, "output": output, "format": fmt},
        )


@cli.command()
@click.argument("input", type=click.Path(exists=True, dir_okay=False))
@click.pass_context
def check(ctx: click.Context, input: str) -> None:
    """Parse a timeline file and summarize it without writing output."""
    logger: MarkwhenLogger = ctx.obj["logger"]

    try:
        document = parse_file(Path(input))
        logger.log_operation("check", {"input": input, "pages": len(document.pages)})

        click.echo(f"✅ {Path(input).name}: {len(document.pages)} page(s)")
        for number, page in enumerate(document.pages, start=1):
            events = sum(len(c.events) for c in page.collections)
            title = page.header.title or "(untitled)"
            click.echo(
                f"  Page {number}: {title} - "
                f"{len(page.collections)} collections, {events} events"
            )
        if document.tags:
            click.echo(f"  Tags: {', '.join(sorted(document.tags))}")

    except Exception as e:
        handle_cli_error(ctx, e, "check", additional_context={"input": input})


if __name__ == "__main__":
    cli(obj={})
