"""Base Reporter Interface."""

from abc import ABC, abstractmethod

from rich.console import Console

from ads_txt_parser.model.record import Record
from ads_txt_parser.model.result import ParseResult

RECORD_VIEWS = ("all", "directs", "resellers")


class BaseReporter(ABC):
    """Abstract base class for all ads.txt reporters."""

    def __init__(self, console: Console, only: str = "all") -> None:
        if only not in RECORD_VIEWS:
            raise ValueError(f"Unknown record view: {only}")
        self.console = console
        self.only = only

    def select_records(self, result: ParseResult) -> list[Record]:
        """Pick the record view requested by the user."""
        if self.only == "directs":
            return result.directs
        if self.only == "resellers":
            return result.resellers
        return result.records

    @staticmethod
    def exit_code(result: ParseResult) -> int:
        return 0 if result.is_valid else 1

    @abstractmethod
    def report_result(self, result: ParseResult, source: str = "") -> int:
        """Report a parse result and return the process exit code."""
        pass
