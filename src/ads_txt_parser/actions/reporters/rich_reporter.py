"""Rich Reporter Implementation."""

from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

from ads_txt_parser.actions.reporters.base import BaseReporter
from ads_txt_parser.model.record import LineIssue
from ads_txt_parser.model.result import ParseResult


class RichReporter(BaseReporter):
    """Generates high-fidelity terminal output using Rich."""

    def report_result(self, result: ParseResult, source: str = "") -> int:
        self.console.print()
        self._print_summary(result, source)

        records = self.select_records(result)
        if records:
            table = Table(title=f"Records ({self.only})", title_justify="left")
            table.add_column("Line", justify="right", style="dim")
            table.add_column("Domain")
            table.add_column("Account ID")
            table.add_column("Relationship")
            table.add_column("Cert. Authority", style="dim")
            for record in records:
                rel_color = "green" if record.is_direct else ("cyan" if record.is_reseller else "yellow")
                table.add_row(
                    str(record.line),
                    escape(record.domain),
                    escape(record.publisher_account_id or ""),
                    f"[{rel_color}]{escape(record.relationship) or '(empty)'}[/]",
                    escape(record.certification_authority_id or "-"),
                )
            self.console.print(table)

        if result.variables:
            table = Table(title="Variables", title_justify="left")
            table.add_column("Line", justify="right", style="dim")
            table.add_column("Name", style="bold")
            table.add_column("Value")
            for variable in result.variables:
                table.add_row(str(variable.line), escape(variable.name), escape(variable.value))
            self.console.print(table)

        for issue in result.errors:
            self._print_issue(issue, "red", "x")
        for issue in result.warnings:
            self._print_issue(issue, "yellow", "!")

        if result.is_valid and not result.warnings:
            self.console.print("   [green][bold]PASS:[/] No issues found.[/]")

        return self.exit_code(result)

    def _print_summary(self, result: ParseResult, source: str) -> None:
        counts = result.summary()
        color = "red" if counts["errors"] else ("yellow" if counts["warnings"] else "green")

        grid = Table.grid(expand=True)
        grid.add_column()
        grid.add_column(justify="right")
        grid.add_row("Records", str(counts["records"]))
        grid.add_row("  Direct", f"[green]{counts['directs']}[/]")
        grid.add_row("  Reseller", f"[cyan]{counts['resellers']}[/]")
        grid.add_row("Variables", str(counts["variables"]))
        grid.add_row("Comments", f"[dim]{counts['comments']}[/]")
        grid.add_row("Warnings", f"[yellow]{counts['warnings']}[/]")
        grid.add_row("Errors", f"[red]{counts['errors']}[/]")

        title = "ads.txt Results"
        if source:
            title += f": {escape(source)}"
        self.console.print(Panel(grid, title=f"[{color}]{title}[/]", border_style=color))

    def _print_issue(self, issue: LineIssue, color: str, icon: str) -> None:
        label = f"[{issue.severity.value}]"
        self.console.print(f"[{color}]{escape(label)} {icon} line {issue.line}: {escape(issue.reason)}[/]")
        if issue.raw_value:
            self.console.print(f"      [italic]{escape(issue.raw_value)}[/]")
