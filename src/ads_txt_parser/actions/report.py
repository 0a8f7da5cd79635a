"""Report Action - Render parse results in the requested format."""

from rich.console import Console

from ads_txt_parser.actions.reporters import (
    BaseReporter,
    JsonReporter,
    PlainReporter,
    RichReporter,
)
from ads_txt_parser.model.result import ParseResult

REPORTERS: dict[str, type[BaseReporter]] = {
    "rich": RichReporter,
    "plain": PlainReporter,
    "json": JsonReporter,
}


class ReportAction:
    """Report a ParseResult to the terminal.

    This action is completely read-only; it only picks a reporter
    for the output format and delegates to it.
    """

    def __init__(self, console: Console | None = None, fmt: str = "rich", only: str = "all") -> None:
        if fmt not in REPORTERS:
            raise ValueError(f"Unknown output format: {fmt}")
        self.console = console or Console()
        self.reporter = REPORTERS[fmt](self.console, only=only)

    def report(self, result: ParseResult, source: str = "") -> int:
        """Print the result and return the exit code (1 when lines were rejected)."""
        return self.reporter.report_result(result, source=source)
