"""Line-level dataclasses produced by the ads.txt parser.

Every entry carries the zero-based index of the physical line it came
from, so reports can point straight at the offending line.
"""

from dataclasses import asdict, dataclass
from enum import Enum


class Relationship(Enum):
    """Type of account/relationship declared in field #3 of a record."""

    DIRECT = "direct"  # Publisher directly controls the account
    RESELLER = "reseller"  # Publisher authorized another entity
    UNKNOWN = "unknown"  # Anything else, including a missing field

    @classmethod
    def from_value(cls, value: str | None) -> "Relationship":
        """Map a raw relationship value to the enum, case-insensitively."""
        if not value:
            return cls.UNKNOWN
        normalized = value.strip().lower()
        for member in (cls.DIRECT, cls.RESELLER):
            if member.value == normalized:
                return member
        return cls.UNKNOWN


class IssueSeverity(Enum):
    """Whether a line problem kept or rejected the line's data."""

    WARNING = "warning"  # Data still recorded
    ERROR = "error"  # Line rejected


@dataclass(frozen=True)
class Comment:
    """A full-line comment or the trailing text after a data line's '#'."""

    line: int
    text: str

    def to_dict(self) -> dict:
        return asdict(self)


@dataclass(frozen=True)
class Record:
    """One authorized seller declaration.

    All string fields are stored percent-encoded. The record always has
    four slots; optional trailing ones are None when the line omitted them.

    Attributes:
        line: Zero-based line index in the document.
        domain: Domain name of the advertising system.
        publisher_account_id: Seller or reseller account ID in that system.
        relationship: Lowercased relationship value (may be invalid or empty).
        certification_authority_id: Optional ID of the system within a
            certification authority such as TAG.
    """

    line: int
    domain: str
    publisher_account_id: str | None
    relationship: str
    certification_authority_id: str | None = None

    @property
    def relationship_type(self) -> Relationship:
        return Relationship.from_value(self.relationship)

    @property
    def is_direct(self) -> bool:
        return self.relationship_type is Relationship.DIRECT

    @property
    def is_reseller(self) -> bool:
        return self.relationship_type is Relationship.RESELLER

    def to_dict(self) -> dict:
        return asdict(self)


@dataclass(frozen=True)
class Variable:
    """A CONTACT or SUBDOMAIN declaration. The value is percent-encoded."""

    line: int
    name: str
    value: str

    def to_dict(self) -> dict:
        return asdict(self)


@dataclass(frozen=True)
class LineIssue:
    """A warning or error raised against a single line.

    Attributes:
        line: Zero-based line index in the document.
        raw_value: The line's working value after comment stripping.
        reason: Human readable description of the problem.
        severity: WARNING keeps the line's data, ERROR rejects it.
    """

    line: int
    raw_value: str
    reason: str
    severity: IssueSeverity = IssueSeverity.WARNING

    def to_dict(self) -> dict:
        return {
            "line": self.line,
            "raw_value": self.raw_value,
            "reason": self.reason,
            "severity": self.severity.value,
        }

    def __str__(self) -> str:
        return f"line {self.line}: {self.reason} ({self.raw_value})"
