"""
Click-based CLI for ads-txt-parser.

IMPORTANT: This module only ORCHESTRATES. It never parses or validates.
- Loads settings
- Invokes fetcher and parser
- Passes flags
- Formats output
"""

import logging
import sys
from pathlib import Path

import click
from rich.console import Console
from rich.logging import RichHandler

from ads_txt_parser import __version__
from ads_txt_parser.actions.report import ReportAction
from ads_txt_parser.actions.reporters.base import RECORD_VIEWS
from ads_txt_parser.config import ConfigManager, ParserSettings
from ads_txt_parser.connector.http import AdsTxtFetcher
from ads_txt_parser.exceptions import AdsTxtError
from ads_txt_parser.model.result import ParseResult
from ads_txt_parser.parser.ads_txt import AdsTxtParser

console = Console()
err_console = Console(stderr=True)

FATAL_EXIT_CODE = 2

FORMAT_OPTION = click.option(
    "--format", "fmt", type=click.Choice(["rich", "plain", "json"]), default=None, help="Output format"
)
ONLY_OPTION = click.option(
    "--only", type=click.Choice(RECORD_VIEWS), default="all", show_default=True, help="Which records to list"
)


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(console=err_console, show_path=False)],
        force=True,
    )


@click.group()
@click.version_option(version=__version__, prog_name="ads-txt-parser")
@click.option("--config", "-c", type=click.Path(), help="Path to config directory")
@click.option("--verbose", "-v", is_flag=True, help="Enable debug logging")
@click.pass_context
def main(ctx: click.Context, config: str | None, verbose: bool) -> None:
    """ads-txt-parser: parse and validate ads.txt files.

    Reports authorized seller records, variables, and every
    line-level warning or error.
    """
    _configure_logging(verbose)
    ctx.ensure_object(dict)
    config_dir = Path(config) if config else None
    try:
        ctx.obj["settings"] = ConfigManager(config_dir).load()
    except AdsTxtError as e:
        err_console.print(f"[bold red]Error:[/] {e}")
        ctx.exit(FATAL_EXIT_CODE)


def _settings(ctx: click.Context) -> ParserSettings:
    return ctx.obj.get("settings") or ParserSettings()


def _resolve_format(fmt: str | None, settings: ParserSettings) -> str:
    """Explicit flag, then settings, then auto-detect from the terminal."""
    if fmt:
        return fmt
    if settings.default_format:
        return settings.default_format
    return "rich" if sys.stdout.isatty() else "plain"


def _report(ctx: click.Context, result: ParseResult, source: str, fmt: str, only: str) -> None:
    reporter = ReportAction(console, fmt=fmt, only=only)
    ctx.exit(reporter.report(result, source=source))


@main.command()
@click.argument("file", type=click.Path(exists=True, dir_okay=False))
@FORMAT_OPTION
@ONLY_OPTION
@click.pass_context
def parse(ctx: click.Context, file: str, fmt: str | None, only: str) -> None:
    """Parse a local ads.txt FILE.

    Exits 1 when any line was rejected, 2 when the file is empty.
    """
    settings = _settings(ctx)
    fmt = _resolve_format(fmt, settings)
    try:
        result = AdsTxtParser().parse_file(file)
    except AdsTxtError as e:
        err_console.print(f"[bold red]Error:[/] {e}")
        ctx.exit(FATAL_EXIT_CODE)
    _report(ctx, result, file, fmt, only)


@main.command()
@click.argument("domain")
@FORMAT_OPTION
@ONLY_OPTION
@click.option("--timeout", type=click.FloatRange(min=0, min_open=True), default=None, help="Request timeout in seconds")
@click.option("--no-content-type-check", is_flag=True, help="Accept responses that are not text/plain")
@click.pass_context
def fetch(
    ctx: click.Context,
    domain: str,
    fmt: str | None,
    only: str,
    timeout: float | None,
    no_content_type_check: bool,
) -> None:
    """Fetch DOMAIN/ads.txt and parse it.

    This is read-only and makes a single GET request.
    """
    settings = _settings(ctx)
    overrides = {}
    if timeout is not None:
        overrides["timeout"] = timeout
    if no_content_type_check:
        overrides["check_content_type"] = False
    if overrides:
        settings = settings.model_copy(update=overrides)

    fmt = _resolve_format(fmt, settings)
    fetcher = AdsTxtFetcher(settings)
    try:
        if fmt == "rich":
            with console.status(f"Fetching {domain}...", spinner="dots"):
                text = fetcher.fetch(domain)
        else:
            text = fetcher.fetch(domain)
        result = AdsTxtParser().parse(text)
    except AdsTxtError as e:
        err_console.print(f"[bold red]Error:[/] {e}")
        ctx.exit(FATAL_EXIT_CODE)
    _report(ctx, result, domain, fmt, only)


if __name__ == "__main__":
    main()
