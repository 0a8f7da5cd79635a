"""ads.txt Parser.

Parses the text of an ads.txt file into Comment, Record and Variable
entries, collecting per-line warnings and errors along the way.
Compatible with the IAB OpenRTB ads.txt specification 1.0.1.

IMPORTANT DESIGN NOTES:
1. Lines are indexed from 0, in split-by-newline order
2. Only an empty document is fatal; every line problem is collected
3. Each rule is a pure function so it can be tested on its own:
   strip comment -> classify -> build record / build variable
4. Every parse builds a fresh ParseResult
"""

import logging
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from urllib.parse import quote_plus

from ads_txt_parser.connector.http import AdsTxtFetcher
from ads_txt_parser.exceptions import EmptyInputError
from ads_txt_parser.model.record import Comment, LineIssue, Record, Variable
from ads_txt_parser.model.result import ParseResult

logger = logging.getLogger(__name__)

COMMENT_CHAR = "#"
FIELD_SEPARATOR = ","
VARIABLE_SEPARATOR = "="
MAX_FIELDS = 4

# ASCII whitespace and NUL only; Unicode spaces such as NBSP are data
TRIM_CHARS = " \t\n\r\0\x0b"

VALID_RELATIONSHIPS = ("direct", "reseller")
SUPPORTED_VARIABLES = ("contact", "subdomain")

TOO_MANY_FIELDS = "Fields should be 4 or less. Potential syntax error with double line"
INVALID_RELATIONSHIP = "Relationship value should be only direct or reseller"
MULTIPLE_EQUALS = "Only a symbol = should be used"
UNSUPPORTED_VARIABLE = "Valiable names supported are CONTACT or SUBDOMAIN."
INVALID_FORMAT = "Format invalid for data or variable format"


class LineKind(Enum):
    """What a comment-free, non-empty line looks like."""

    RECORD = "record"
    VARIABLE = "variable"
    INVALID = "invalid"


@dataclass
class Extraction:
    """Outcome of building one entry from a working value."""

    item: Record | Variable | None = None
    warnings: list[str] = field(default_factory=list)
    errors: list[str] = field(default_factory=list)


def percent_encode(value: str) -> str:
    """Form-encode a value the way ads.txt consumers expect.

    Spaces become '+', and everything except ASCII letters, digits,
    '-', '_' and '.' is %XX encoded from its UTF-8 bytes.
    """
    return quote_plus(value, safe="").replace("~", "%7E")


def strip_trailing_comment(value: str) -> tuple[str, str | None]:
    """Split a data line at its first '#'.

    Returns the re-trimmed data before the '#' and the text of the
    segment right after it (None when the line has no '#'). Anything
    after a second '#' is dropped.
    """
    if COMMENT_CHAR not in value:
        return value, None
    parts = value.split(COMMENT_CHAR)
    return parts[0].strip(TRIM_CHARS), parts[1]


def classify_line(value: str) -> LineKind:
    """Decide how a working value is parsed. A comma wins over '='."""
    if FIELD_SEPARATOR in value:
        return LineKind.RECORD
    if VARIABLE_SEPARATOR in value:
        return LineKind.VARIABLE
    return LineKind.INVALID


def build_record(line: int, value: str) -> Extraction:
    """Build a Record from a comma separated working value.

    The record is always produced; field count and relationship
    problems only add warnings. Extra fields beyond the fourth are
    dropped.
    """
    extraction = Extraction()
    fields: list[str | None] = list(value.split(FIELD_SEPARATOR))

    if len(fields) > MAX_FIELDS:
        extraction.warnings.append(TOO_MANY_FIELDS)
    elif len(fields) < MAX_FIELDS:
        fields.extend([None] * (MAX_FIELDS - len(fields)))

    domain, account_id, relationship, authority_id = fields[:MAX_FIELDS]

    relationship = relationship.strip(TRIM_CHARS).lower() if relationship is not None else ""
    if relationship not in VALID_RELATIONSHIPS:
        extraction.warnings.append(INVALID_RELATIONSHIP)

    extraction.item = Record(
        line=line,
        domain=percent_encode(domain.strip(TRIM_CHARS)),
        publisher_account_id=percent_encode(account_id.strip(TRIM_CHARS)) if account_id is not None else None,
        relationship=percent_encode(relationship),
        certification_authority_id=(
            percent_encode(authority_id.strip(TRIM_CHARS)) if authority_id is not None else None
        ),
    )
    return extraction


def build_variable(line: int, value: str) -> Extraction:
    """Build a Variable from a NAME=VALUE working value.

    Only CONTACT and SUBDOMAIN are accepted; any other name is an error
    and yields no Variable. Extra '=' signs are folded into the value.
    """
    extraction = Extraction()
    parts = value.split(VARIABLE_SEPARATOR)

    if len(parts) > 2:
        extraction.warnings.append(MULTIPLE_EQUALS)
    raw_name = parts[0]
    raw_value = VARIABLE_SEPARATOR.join(parts[1:])

    # <VARIABLE> is a string identifier without internal whitespace
    name = "".join(raw_name.split())

    if name.lower() not in SUPPORTED_VARIABLES:
        extraction.errors.append(UNSUPPORTED_VARIABLE)
        return extraction

    extraction.item = Variable(line=line, name=name, value=percent_encode(raw_value.strip(TRIM_CHARS)))
    return extraction


class AdsTxtParser:
    """Parser for ads.txt documents.

    Converts the raw text into a ParseResult while preserving the line
    index of every comment, record, variable, warning and error.

    Example:
        >>> parser = AdsTxtParser()
        >>> result = parser.parse("example.com, pub-1, DIRECT")
        >>> result.records[0].relationship
        'direct'
    """

    def __init__(self) -> None:
        self.result = ParseResult()

    def parse(self, text: str | None) -> ParseResult:
        """Parse ads.txt text into a fresh ParseResult.

        Args:
            text: Full document text.

        Returns:
            ParseResult with every collection in line order. The result
            is also kept on self.result for the accessor properties.

        Raises:
            EmptyInputError: If the text is empty.
        """
        if not text:
            raise EmptyInputError()

        result = ParseResult()
        for line_num, line in enumerate(text.split("\n")):
            self._parse_line(result, line_num, line)

        logger.debug(
            "Parsed ads.txt: %d records, %d variables, %d warnings, %d errors",
            len(result.records),
            len(result.variables),
            len(result.warnings),
            len(result.errors),
        )
        self.result = result
        return result

    def parse_file(self, path: str | Path) -> ParseResult:
        """Read a local ads.txt file and parse it.

        Bytes that are not valid UTF-8 are replaced, as for fetched files.
        """
        text = Path(path).read_bytes().decode("utf-8-sig", errors="replace")
        return self.parse(text)

    def read_external_file(
        self, domain: str = "http://localhost", fetcher: AdsTxtFetcher | None = None
    ) -> ParseResult:
        """Fetch <domain>/ads.txt and parse it.

        Args:
            domain: Base URL or bare domain.
            fetcher: Optional AdsTxtFetcher; a default one is built otherwise.
        """
        if fetcher is None:
            fetcher = AdsTxtFetcher()
        return self.parse(fetcher.fetch(domain))

    def _parse_line(self, result: ParseResult, line_num: int, line: str) -> None:
        value = line.strip(TRIM_CHARS)
        if not value:
            return

        # Lines starting with '#' are comments, stored whole
        if value.startswith(COMMENT_CHAR):
            result.add_comment(line_num, value)
            return

        value, trailing = strip_trailing_comment(value)
        if trailing is not None:
            result.add_comment(line_num, trailing)

        kind = classify_line(value)
        if kind is LineKind.RECORD:
            extraction = build_record(line_num, value)
        elif kind is LineKind.VARIABLE:
            extraction = build_variable(line_num, value)
        else:
            result.add_error(line_num, value, INVALID_FORMAT)
            return

        for reason in extraction.warnings:
            result.add_warning(line_num, value, reason)
        for reason in extraction.errors:
            result.add_error(line_num, value, reason)

        if isinstance(extraction.item, Record):
            result.add_record(extraction.item)
        elif isinstance(extraction.item, Variable):
            result.add_variable(extraction.item)

    # Accessors over the last parse

    @property
    def comments(self) -> list[Comment]:
        return self.result.comments

    @property
    def records(self) -> list[Record]:
        return self.result.records

    @property
    def variables(self) -> list[Variable]:
        return self.result.variables

    @property
    def warnings(self) -> list[LineIssue]:
        return self.result.warnings

    @property
    def errors(self) -> list[LineIssue]:
        return self.result.errors

    def get_resellers(self) -> list[Record]:
        return self.result.resellers

    def get_directs(self) -> list[Record]:
        return self.result.directs
