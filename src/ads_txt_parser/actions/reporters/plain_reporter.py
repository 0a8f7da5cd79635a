"""Plain Text Reporter Implementation."""

from ads_txt_parser.actions.reporters.base import BaseReporter
from ads_txt_parser.model.result import ParseResult


class PlainReporter(BaseReporter):
    """Generates clean, text-only output."""

    def report_result(self, result: ParseResult, source: str = "") -> int:
        counts = result.summary()

        self.console.print()
        self.console.print("ADS.TXT RESULTS", style="bold", highlight=False)
        if source:
            self.console.print(f"Source: {source}", markup=False, highlight=False)
        self.console.print(
            f"Summary: {counts['records']} records ({counts['directs']} direct, "
            f"{counts['resellers']} reseller), {counts['variables']} variables, "
            f"{counts['warnings']} warnings, {counts['errors']} errors",
            highlight=False,
        )
        self.console.print()

        for record in self.select_records(result):
            cert = record.certification_authority_id or "-"
            self.console.print(
                f"RECORD line={record.line} domain={record.domain} "
                f"account={record.publisher_account_id} relationship={record.relationship} "
                f"cert={cert}",
                markup=False,
                highlight=False,
            )

        for variable in result.variables:
            self.console.print(
                f"VARIABLE line={variable.line} {variable.name}={variable.value}",
                markup=False,
                highlight=False,
            )

        for issue in result.warnings + result.errors:
            label = f"[{issue.severity.value.upper()}]"
            self.console.print(
                f"{label} line={issue.line} reason=\"{issue.reason}\" value=\"{issue.raw_value}\"",
                markup=False,
                highlight=False,
            )

        return self.exit_code(result)
