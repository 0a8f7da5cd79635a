"""Tests for ParseResult and the record model."""

from ads_txt_parser.model.record import IssueSeverity, LineIssue, Record, Relationship
from ads_txt_parser.model.result import ParseResult


def _record(line: int, relationship: str) -> Record:
    return Record(line=line, domain=f"d{line}.com", publisher_account_id=str(line), relationship=relationship)


def test_add_record_invalidates_cached_views():
    """Views computed before an append must include the new record afterwards."""
    result = ParseResult()
    result.add_record(_record(0, "reseller"))
    assert len(result.resellers) == 1
    assert result.directs == []

    result.add_record(_record(1, "direct"))
    result.add_record(_record(2, "reseller"))

    assert [r.line for r in result.resellers] == [0, 2]
    assert [r.line for r in result.directs] == [1]


def test_views_are_cached_between_reads():
    result = ParseResult()
    result.add_record(_record(0, "direct"))

    assert result.directs is result.directs


def test_relationship_from_value():
    assert Relationship.from_value("DIRECT") is Relationship.DIRECT
    assert Relationship.from_value(" Reseller ") is Relationship.RESELLER
    assert Relationship.from_value("partner") is Relationship.UNKNOWN
    assert Relationship.from_value("") is Relationship.UNKNOWN
    assert Relationship.from_value(None) is Relationship.UNKNOWN


def test_is_valid_tracks_errors_only():
    result = ParseResult()
    result.add_warning(0, "a.com, 1", "warned")
    assert result.is_valid

    result.add_error(1, "junk", "rejected")
    assert not result.is_valid
    assert result.errors[0] == LineIssue(1, "junk", "rejected", IssueSeverity.ERROR)


def test_to_dict_exports_every_collection():
    result = ParseResult()
    result.add_comment(0, "# hi")
    result.add_record(_record(1, "direct"))
    result.add_error(2, "junk", "rejected")

    data = result.to_dict()

    assert data["summary"]["records"] == 1
    assert data["summary"]["directs"] == 1
    assert data["comments"] == [{"line": 0, "text": "# hi"}]
    assert data["records"][0]["certification_authority_id"] is None
    assert data["errors"] == [{"line": 2, "raw_value": "junk", "reason": "rejected", "severity": "error"}]


def test_line_issue_str():
    issue = LineIssue(3, "FOO=bar", "bad name")
    assert str(issue) == "line 3: bad name (FOO=bar)"
