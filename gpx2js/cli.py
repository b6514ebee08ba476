"""
CLI interface for gpx2js.

Usage:
    gpx2js -i ./activities -o ./web/tracks
    gpx2js -i ./activities -o ./web/tracks -s skip.txt --simplify
    python -m gpx2js -i ./activities -o ./web/tracks --style object --elevation
"""

import logging
import sys
from pathlib import Path

import click

from gpx2js.config import Settings
from gpx2js.errors import ConfigurationError, OutputWriteError
from gpx2js.features.tracks import ConversionService
from gpx2js.report import ReportGenerator

logger = logging.getLogger(__name__)

# Exit codes
EXIT_PARTIAL_FAILURE = 1
EXIT_CONFIG_ERROR = 2


def setup_logging(level: str) -> None:
    """Send log records to stderr so stdout carries only the report."""
    logging.basicConfig(
        level=getattr(logging, level.upper()),
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        handlers=[
            logging.StreamHandler(sys.stderr),
        ],
        force=True,
    )


def build_settings(base: Settings, **overrides) -> Settings:
    """Apply CLI options on top of env/.env settings. None means not given."""
    update = {k: v for k, v in overrides.items() if v is not None}
    if not update:
        return base
    # model_copy(update=...) does not validate
    return Settings.model_validate({**base.model_dump(), **update})


@click.command()
@click.option("-i", "--input", "input_dir", required=True,
              type=click.Path(file_okay=False, path_type=Path),
              help="Directory containing GPX files")
@click.option("-o", "--output", "output_dir", required=True,
              type=click.Path(file_okay=False, path_type=Path),
              help="Directory for generated files (created if absent)")
@click.option("-s", "--skip", "skip_file", default=None,
              type=click.Path(dir_okay=False, path_type=Path),
              help="File listing GPX file names to exclude, one per line")
@click.option("--precision", default=None, type=click.IntRange(0, 15),
              help="Decimal places kept for lat/lng (default 6)")
@click.option("--style", default=None, type=click.Choice(["array", "object"]),
              help="array: [lat,lng]; object: {lat:..,lng:..}")
@click.option("--declaration", default=None, type=click.Choice(["var", "let", "const"]),
              help="Keyword used for the generated variable")
@click.option("--elevation/--no-elevation", default=None, help="Include elevation")
@click.option("--time/--no-time", "include_time", default=None, help="Include timestamps")
@click.option("--pretty", is_flag=True, default=False, help="One point per line")
@click.option("--dedupe", is_flag=True, default=False,
              help="Collapse consecutive duplicate points")
@click.option("--collinear", is_flag=True, default=False,
              help="Drop points lying on a straight line between their neighbours")
@click.option("--drop-null-island", is_flag=True, default=False, help="Drop (0, 0) fixes")
@click.option("--drop-redundant", is_flag=True, default=False,
              help="Skip tracks that add no coverage over earlier tracks")
@click.option("--simplify", is_flag=True, default=False,
              help="Shorthand for --dedupe --collinear --drop-null-island --drop-redundant")
@click.option("--report", "report_path", default=None,
              type=click.Path(dir_okay=False, path_type=Path),
              help="Also write a JSON run report to this file")
@click.option("-v", "--verbose", is_flag=True, default=False, help="Debug logging")
@click.pass_context
def cli(ctx, input_dir, output_dir, skip_file, precision, style, declaration,
        elevation, include_time, pretty, dedupe, collinear, drop_null_island,
        drop_redundant, simplify, report_path, verbose):
    """
    Convert a directory of GPX tracks into JavaScript array files.

    Each INPUT/<name>.gpx becomes OUTPUT/<name>.js holding
    `var <name> = [[lat,lng],...];`.

    Exit status: 0 on success, 1 if any file failed, 2 on bad configuration.
    """
    if simplify:
        dedupe = collinear = drop_null_island = drop_redundant = True

    try:
        run_settings = build_settings(
            Settings(),
            precision=precision,
            style=style,
            declaration=declaration,
            include_elevation=elevation,
            include_time=include_time,
            pretty=pretty or None,
            dedupe=dedupe or None,
            remove_collinear=collinear or None,
            drop_null_island=drop_null_island or None,
            drop_redundant=drop_redundant or None,
        )
    except ValueError as e:
        click.echo(f"Error: invalid settings: {e}", err=True)
        ctx.exit(EXIT_CONFIG_ERROR)

    setup_logging("DEBUG" if verbose else run_settings.log_level)

    service = ConversionService(run_settings)
    try:
        report = service.run(input_dir, output_dir, skip_file)
    except (ConfigurationError, OutputWriteError) as e:
        logger.error(f"Aborting: {e}")
        click.echo(f"Error: {e}", err=True)
        ctx.exit(EXIT_CONFIG_ERROR)

    generator = ReportGenerator()
    click.echo(generator.generate_console(report))

    if report_path is not None:
        generator.save_json(report, report_path)
        click.echo(f"JSON saved: {report_path}")

    if report.has_failures:
        click.echo(generator.generate_failures(report), err=True)
        ctx.exit(EXIT_PARTIAL_FAILURE)


def main():
    cli(prog_name="gpx2js")


if __name__ == "__main__":
    main()
