"""
Command-line interface for the texsync package.

This module provides the CLI commands for the texsync package:
- sync: Regenerate stale raster targets (default when no command is given)
- status: List the targets a sync would regenerate
- config: Show the effective configuration
"""

import os
import sys
import json
import click
from typing import Optional

from texsync import __version__
from texsync.converters import create_converter
from texsync.core.config import get_config
from texsync.core.constants import SUPPORTED_BACKENDS
from texsync.core.error_handler import ConversionError, ConfigurationError
from texsync.core.logging_config import configure_logging
from texsync.sync.asset_converter import AssetConverter

LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]

def exit_status(error: ConversionError) -> int:
    """
    Map a conversion error to the process exit status.

    The failing tool's status is passed through; a tool killed by a signal
    maps to 128 + signal number, as in a shell.
    """
    returncode = error.returncode
    if returncode is None or returncode == 0:
        return 1
    if returncode < 0:
        return 128 - returncode
    return returncode

def fail(error: Exception, status: int = 1) -> None:
    """
    Report an error on stderr and exit.
    """
    click.echo(f"Error: {error}", err=True)
    sys.exit(status)

def build_asset_converter(
    source_dir: str,
    output_dir: Optional[str],
    width: Optional[int],
    single_stage: bool,
    backend: Optional[str] = None,
    force: bool = False,
    dry_run: bool = False
) -> AssetConverter:
    """
    Build an AssetConverter from the configuration and command-line options.
    """
    config = get_config(source_dir)
    converter = create_converter(backend, config)
    return AssetConverter.from_config(
        config,
        source_dir,
        converter=converter,
        output_dir=os.path.abspath(output_dir) if output_dir else None,
        target_width=width,
        two_stage=False if single_stage else None,
        force=force,
        dry_run=dry_run
    )

@click.group(invoke_without_command=True)
@click.version_option(version=__version__)
@click.option('--log-level', type=click.Choice(LOG_LEVELS, case_sensitive=False),
              help='Logging level (default: logging.level from the configuration, INFO)')
@click.option('--log-file', type=click.Path(file_okay=True, dir_okay=False),
              help='Also write the log to this file')
@click.pass_context
def main(ctx, log_level: Optional[str] = None, log_file: Optional[str] = None):
    """
    texsync - keep raster textures in sync with their vector sources.

    Run without a command to sync the current directory: every SVG is
    rasterized, every PNG is scaled to the target width (64 by default),
    and the results are written one directory up. Targets newer than
    their sources are left alone.
    """
    try:
        configure_logging(level=log_level, log_file=log_file)
    except ConfigurationError as e:
        fail(e)

    if ctx.invoked_subcommand is None:
        ctx.invoke(sync)

@main.command()
@click.argument('source_dir', type=click.Path(exists=True, file_okay=False, dir_okay=True), default='.')
@click.option('-o', '--output-dir', type=click.Path(file_okay=False, dir_okay=True),
              help='Directory for the generated targets (default: parent of SOURCE_DIR)')
@click.option('-w', '--width', type=click.IntRange(min=1),
              help='Target width in pixels (default: sync.target_width, 64)')
@click.option('--backend', type=click.Choice(SUPPORTED_BACKENDS),
              help='Converter backend: command (Inkscape + ImageMagick) or python (CairoSVG + Pillow)')
@click.option('--single-stage', is_flag=True, default=False,
              help='Rasterize vectors straight into the output directory at the target width')
@click.option('--force', is_flag=True, default=False, help='Regenerate targets even when they are up to date')
@click.option('--dry-run', is_flag=True, default=False, help='Show what would be converted without converting')
@click.option('--report', 'report_path', type=click.Path(file_okay=True, dir_okay=False),
              help='Write a JSON report of the run to this file')
def sync(source_dir: str = '.', output_dir: Optional[str] = None, width: Optional[int] = None,
         backend: Optional[str] = None, single_stage: bool = False, force: bool = False,
         dry_run: bool = False, report_path: Optional[str] = None):
    """
    Regenerate stale raster targets from SOURCE_DIR (default: current directory).

    Examples:
      texsync
      texsync sync textures/master -w 128
      texsync sync textures/master --single-stage --dry-run
      texsync sync icons/src -o icons --backend python --report sync.json
    """
    try:
        asset_converter = build_asset_converter(
            source_dir, output_dir, width, single_stage,
            backend=backend, force=force, dry_run=dry_run
        )
    except ConfigurationError as e:
        fail(e)

    try:
        report = asset_converter.run()
    except ConversionError as e:
        if report_path:
            asset_converter.report.save(report_path)
        fail(e, exit_status(e))
    except (ConfigurationError, OSError) as e:
        fail(e)

    if report_path:
        report.save(report_path)

    if dry_run:
        for entry in report.planned:
            click.echo(f"{entry['action']} {entry['source']} -> {entry['target']}")

@main.command()
@click.argument('source_dir', type=click.Path(exists=True, file_okay=False, dir_okay=True), default='.')
@click.option('-o', '--output-dir', type=click.Path(file_okay=False, dir_okay=True),
              help='Directory for the generated targets (default: parent of SOURCE_DIR)')
@click.option('-w', '--width', type=click.IntRange(min=1), help='Target width in pixels')
@click.option('--single-stage', is_flag=True, default=False,
              help='Check the single-stage layout instead of the two-stage one')
def status(source_dir: str = '.', output_dir: Optional[str] = None, width: Optional[int] = None,
           single_stage: bool = False):
    """
    List the targets in SOURCE_DIR that a sync would regenerate.

    Exits with status 1 when anything is stale, 0 when everything is up to date.
    """
    try:
        asset_converter = build_asset_converter(source_dir, output_dir, width, single_stage)
    except ConfigurationError as e:
        fail(e)

    try:
        plan = asset_converter.status()
    except (ConfigurationError, OSError) as e:
        fail(e)

    if not plan:
        click.echo("All targets are up to date")
        return

    for entry in plan:
        click.echo(f"{entry['action']} {entry['source']} -> {entry['target']}")
    click.echo(f"{len(plan)} stale target(s)")
    sys.exit(1)

@main.command(name='config')
@click.argument('source_dir', type=click.Path(exists=True, file_okay=False, dir_okay=True), default='.')
def show_config(source_dir: str = '.'):
    """
    Show the effective configuration for SOURCE_DIR as JSON.
    """
    try:
        config = get_config(source_dir)
    except ConfigurationError as e:
        fail(e)

    click.echo(json.dumps(config, indent=2))
