"""Actions package - Read-only output actions."""

from ads_txt_parser.actions.report import ReportAction

__all__ = ["ReportAction"]
