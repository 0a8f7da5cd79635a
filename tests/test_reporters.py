"""Tests for the output reporters."""

import io

import pytest
from rich.console import Console

from ads_txt_parser.actions.report import ReportAction
from ads_txt_parser.parser.ads_txt import AdsTxtParser


@pytest.fixture
def console():
    return Console(file=io.StringIO(), record=True, width=200)


def test_rich_reporter_lists_records_and_issues(console, sample_ads_txt):
    result = AdsTxtParser().parse(sample_ads_txt)

    code = ReportAction(console, fmt="rich").report(result, source="example.com")

    text = console.export_text()
    assert code == 1
    assert "ads.txt Results: example.com" in text
    assert "google.com" in text
    assert "adops%40example.com" in text
    assert "Format invalid for data or variable format" in text
    assert "Relationship value should be only direct or reseller" in text


def test_rich_reporter_pass_message(console, valid_ads_txt):
    result = AdsTxtParser().parse(valid_ads_txt)

    code = ReportAction(console, fmt="rich", only="directs").report(result)

    text = console.export_text()
    assert code == 0
    assert "PASS: No issues found." in text
    assert "Records (directs)" in text
    assert "appnexus.com" not in text


def test_plain_reporter_only_directs(console, sample_ads_txt):
    result = AdsTxtParser().parse(sample_ads_txt)

    ReportAction(console, fmt="plain", only="directs").report(result)

    text = console.export_text()
    assert "domain=google.com" in text
    assert "domain=openx.com" in text
    assert "domain=appnexus.com" not in text
    assert "VARIABLE line=1 contact=adops%40example.com" in text
    assert "[WARNING] line=10" in text


def test_unknown_format_and_view_are_rejected(console):
    with pytest.raises(ValueError):
        ReportAction(console, fmt="html")
    with pytest.raises(ValueError):
        ReportAction(console, fmt="plain", only="others")
