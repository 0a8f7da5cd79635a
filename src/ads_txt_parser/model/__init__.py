"""Model package - Core data structures for ads-txt-parser."""

from ads_txt_parser.model.record import (
    Comment,
    IssueSeverity,
    LineIssue,
    Record,
    Relationship,
    Variable,
)
from ads_txt_parser.model.result import ParseResult

__all__ = [
    "Comment",
    "IssueSeverity",
    "LineIssue",
    "ParseResult",
    "Record",
    "Relationship",
    "Variable",
]
