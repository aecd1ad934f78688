"""Command-line interface for dumping terminal attributes."""

import logging
import sys

import click

from termflags import __version__
from termflags.attrs import TerminalError, read_attributes
from termflags.report import build_report, render_json, render_table, render_text

logger = logging.getLogger(__name__)

LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR"]


def configure_logging(level: str) -> None:
    lvl = getattr(logging, level.upper(), logging.WARNING)
    logging.basicConfig(level=lvl, format="%(asctime)s %(levelname)s %(message)s", stream=sys.stderr)


def report_error(prog: str, exc: TerminalError) -> None:
    """Print ``prog: operation: strerror`` to stderr."""
    click.echo(f"{prog}: {exc.operation}: {exc.strerror}", err=True)


@click.command(name="termflags")
@click.argument("target", required=False)
@click.option(
    "--format",
    "-f",
    "output_format",
    type=click.Choice(["text", "json", "table"]),
    default="text",
    show_default=True,
    envvar="TERMFLAGS_FORMAT",
    help="Output format",
)
@click.option(
    "--log-level",
    type=click.Choice(LOG_LEVELS, case_sensitive=False),
    default="WARNING",
    show_default=True,
    envvar="TERMFLAGS_LOG_LEVEL",
    help="Diagnostic log level (logs go to stderr)",
)
@click.version_option(__version__, prog_name="termflags")
@click.pass_context
def cli(ctx: click.Context, target: str | None, output_format: str, log_level: str) -> None:
    """Print the terminal attributes of TARGET flag by flag.

    TARGET is a file descriptor number or a device path. Defaults to stdin.
    """
    configure_logging(log_level)

    try:
        attrs = read_attributes(target)
    except TerminalError as exc:
        report_error(ctx.find_root().info_name or "termflags", exc)
        sys.exit(1)

    report = build_report(attrs)
    logger.debug("decoded %d fields", len(report.lines))

    if output_format == "json":
        click.echo(render_json(report))
    elif output_format == "table":
        render_table(report)
    else:
        click.echo(render_text(report), nl=False)


def main() -> None:
    """Main entry point."""
    cli()


if __name__ == "__main__":
    main()
