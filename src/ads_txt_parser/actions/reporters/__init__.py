"""Reporters - Output formats for parse results."""

from ads_txt_parser.actions.reporters.base import BaseReporter
from ads_txt_parser.actions.reporters.json_reporter import JsonReporter
from ads_txt_parser.actions.reporters.plain_reporter import PlainReporter
from ads_txt_parser.actions.reporters.rich_reporter import RichReporter

__all__ = ["BaseReporter", "JsonReporter", "PlainReporter", "RichReporter"]
