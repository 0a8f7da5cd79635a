"""JSON Reporter Implementation."""

import json

from ads_txt_parser.actions.reporters.base import BaseReporter
from ads_txt_parser.model.result import ParseResult


class JsonReporter(BaseReporter):
    """Generates machine-readable JSON output."""

    def report_result(self, result: ParseResult, source: str = "") -> int:
        data = result.to_dict()
        data["source"] = source
        data["records"] = [r.to_dict() for r in self.select_records(result)]
        self.console.print(json.dumps(data, indent=2), markup=False, highlight=False, emoji=False, soft_wrap=True)
        return self.exit_code(result)
