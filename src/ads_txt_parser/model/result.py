"""ParseResult - Output of a single parse pass plus derived views."""

from dataclasses import dataclass, field

from ads_txt_parser.model.record import (
    Comment,
    IssueSeverity,
    LineIssue,
    Record,
    Variable,
)


@dataclass
class ParseResult:
    """Accumulated output of one ads.txt parse.

    A new instance is built for every parse, so nothing is shared between
    documents. The reseller/direct views are computed on first access and
    cached; appending a record through add_record() drops the cache so the
    views always reflect the current record list.
    """

    comments: list[Comment] = field(default_factory=list)
    records: list[Record] = field(default_factory=list)
    variables: list[Variable] = field(default_factory=list)
    warnings: list[LineIssue] = field(default_factory=list)
    errors: list[LineIssue] = field(default_factory=list)
    _resellers: list[Record] | None = field(default=None, init=False, repr=False, compare=False)
    _directs: list[Record] | None = field(default=None, init=False, repr=False, compare=False)

    def add_comment(self, line: int, text: str) -> None:
        self.comments.append(Comment(line=line, text=text))

    def add_record(self, record: Record) -> None:
        self.records.append(record)
        self._resellers = None
        self._directs = None

    def add_variable(self, variable: Variable) -> None:
        self.variables.append(variable)

    def add_warning(self, line: int, raw_value: str, reason: str) -> None:
        self.warnings.append(LineIssue(line, raw_value, reason, IssueSeverity.WARNING))

    def add_error(self, line: int, raw_value: str, reason: str) -> None:
        self.errors.append(LineIssue(line, raw_value, reason, IssueSeverity.ERROR))

    @property
    def resellers(self) -> list[Record]:
        """Records whose relationship is RESELLER, in document order."""
        if self._resellers is None:
            self._resellers = [r for r in self.records if r.relationship.lower() == "reseller"]
        return self._resellers

    @property
    def directs(self) -> list[Record]:
        """Records whose relationship is DIRECT, in document order."""
        if self._directs is None:
            self._directs = [r for r in self.records if r.relationship.lower() == "direct"]
        return self._directs

    @property
    def is_valid(self) -> bool:
        """True when no line was rejected."""
        return not self.errors

    def summary(self) -> dict[str, int]:
        """Count entries per collection."""
        return {
            "comments": len(self.comments),
            "records": len(self.records),
            "variables": len(self.variables),
            "warnings": len(self.warnings),
            "errors": len(self.errors),
            "directs": len(self.directs),
            "resellers": len(self.resellers),
        }

    def to_dict(self) -> dict:
        """Serialize every collection for JSON export."""
        return {
            "summary": self.summary(),
            "comments": [c.to_dict() for c in self.comments],
            "records": [r.to_dict() for r in self.records],
            "variables": [v.to_dict() for v in self.variables],
            "warnings": [w.to_dict() for w in self.warnings],
            "errors": [e.to_dict() for e in self.errors],
        }
