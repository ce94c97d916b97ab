"""CLI command implementations for bytes-to-type."""

import logging
from pathlib import Path

import typer
from rich.console import Console
from tqdm import tqdm

from bytes_to_type.constants import VERSION
from bytes_to_type.exceptions import BytesToTypeError, ConfigError
from bytes_to_type.config import BatchLoader, ConversionJob, OutputFormat, ScalarType
from bytes_to_type.output import ConsoleOutputHandler, format_values, write_values
from bytes_to_type.sources import FileByteSource
from bytes_to_type.cli.utils import _configure_logging, _sanitize_path

# Configure logging
logging.basicConfig(
    level=logging.WARNING,  # Default to WARNING level
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
    datefmt='%Y-%m-%d %H:%M:%S'
)
logger = logging.getLogger(__name__)


def version_callback(value: bool) -> None:
    """Handle version flag callback for Typer CLI.

    Args:
        value: Whether the version flag was provided
    """
    if value:
        typer.echo(f"bytes-to-type v{VERSION}")
        raise typer.Exit()


def _run_job(job: ConversionJob) -> int:
    """Convert one job's byte window and deliver the rendered values.

    Returns:
        int: Number of values produced
    """
    source = FileByteSource(job.input, offset=job.offset, length=job.length)
    values = source.read(job.scalar_type)
    logger.debug("Converted %s into %d %s values", source.source_description, len(values), job.scalar_type.value)

    if job.output is None:
        typer.echo(format_values(values, job.format), nl=False)
    else:
        write_values(values, job.output, job.format)
    return len(values)


def convert(
        input_path: Path = typer.Argument(
            ..., exists=True, file_okay=True, dir_okay=False, readable=True, resolve_path=True,
            help="File containing raw little-endian bytes"
        ),
        scalar_type: ScalarType = typer.Option(..., "--type", "-t", help="Target scalar type"),
        offset: int = typer.Option(0, "--offset", min=0, help="Byte offset to start converting at"),
        length: int | None = typer.Option(None, "--length", min=0,
                                          help="Number of bytes to convert (default: to end of file)"),
        fmt: OutputFormat = typer.Option(OutputFormat.TEXT, "--format", "-f", help="Output format"),
        output: Path | None = typer.Option(
            None,
            "--output",
            "-o",
            file_okay=True,
            dir_okay=False,
            resolve_path=True,
            help="Write values to this file instead of stdout",
        ),
        version: bool = typer.Option(
            None, "--version", "-v",
            callback=version_callback,
            is_eager=True,  # Critical: process before other options
            is_flag=True,
            help="Show version and exit."
        ),
        verbose: bool = typer.Option(
            False, "--verbose",
            help="Enable verbose debug output"
        ),
) -> None:
    """Convert a file of raw bytes into little-endian scalars."""

    _configure_logging(verbose)
    console = Console()
    handler = ConsoleOutputHandler(console)

    try:
        job = ConversionJob(
            input=_sanitize_path(input_path),
            scalar_type=scalar_type,
            offset=offset,
            length=length,
            output=_sanitize_path(output) if output is not None else None,
            format=fmt,
        )
    except ValueError as e:
        handler.error(str(e))
        raise typer.Exit(code=1)

    try:
        count = _run_job(job)
    except BytesToTypeError as e:
        handler.error(str(e))
        raise typer.Exit(code=1)

    if job.output is not None:
        handler.success(f"Wrote {count} {job.scalar_type.value} values to {job.output}")


def types() -> None:
    """List the supported scalar types with their widths."""

    ConsoleOutputHandler(Console()).print_types_table(ScalarType)


def batch(
        config_path: Path = typer.Argument(
            ..., exists=True, file_okay=True, dir_okay=False, readable=True, resolve_path=True,
            help="YAML file describing the conversion jobs"
        ),
        verbose: bool = typer.Option(
            False, "--verbose",
            help="Enable verbose debug output"
        ),
) -> None:
    """Run every conversion job listed in a YAML configuration file."""

    _configure_logging(verbose)
    console = Console()
    handler = ConsoleOutputHandler(console)

    try:
        jobs = BatchLoader.from_yaml(_sanitize_path(config_path)).load()
    except ConfigError as e:
        handler.error(str(e))
        raise typer.Exit(code=1)

    if not jobs:
        handler.warning("No jobs defined in configuration")
        return

    failures = 0
    for index, job in enumerate(tqdm(jobs, desc="Converting files", unit="job"), start=1):
        try:
            count = _run_job(job)
        except BytesToTypeError as e:
            failures += 1
            handler.error(f"Job {index} ({job.input.name}): {e}")
            continue
        logger.debug("Job %d produced %d values", index, count)

    if failures:
        handler.error(f"{failures} of {len(jobs)} jobs failed")
        raise typer.Exit(code=1)
    handler.success(f"Completed {len(jobs)} jobs")
