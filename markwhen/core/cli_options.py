#!/usr/bin/env python3
"""
cli_options.py
-------------------
Reusable Click option decorators for consistent CLI interfaces.

Usage:
    from markwhen.core.cli_options import force_option, format_option

    @cli.command()
    @format_option
    @force_option
    def my_command(fmt, force):
        pass
"""
import click

from markwhen.core.paths import LOG_DIR, OUTPUT_DIR


# ═══════════════════════════════════════════════════════════════════════════
# LOGGING OPTIONS
# ═══════════════════════════════════════════════════════════════════════════

verbose_option = click.option(
    "-v", "--verbose",
    is_flag=True,
    help="Enable verbose logging with detailed output"
)

log_dir_option = click.option(
    "--log-dir",
    type=click.Path(),
    default=str(LOG_DIR),
    help="Directory for log files"
)


# ═══════════════════════════════════════════════════════════════════════════
# FILE OPERATION OPTIONS
# ═══════════════════════════════════════════════════════════════════════════

force_option = click.option(
    "-f", "--force",
    is_flag=True,
    help="Force overwrite existing files"
)

dry_run_option = click.option(
    "--dry-run",
    is_flag=True,
    help="Preview changes without executing (no files modified)"
)

output_option = click.option(
    "-o", "--output",
    type=click.Path(),
    default=str(OUTPUT_DIR),
    show_default=True,
    help="Output directory for exported documents"
)

format_option = click.option(
    "--format", "fmt",
    type=click.Choice(["json", "yaml"]),
    default="json",
    show_default=True,
    help="Export format"
)
