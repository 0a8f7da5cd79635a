"""Pytest configuration and fixtures for ads-txt-parser tests."""

import pytest


@pytest.fixture
def sample_ads_txt():
    """Sample ads.txt covering every kind of line."""
    return "\n".join([
        "# ads.txt file for example.com",
        "contact=adops@example.com",
        "SUBDOMAIN=divisionone.example.com",
        "",
        "google.com, pub-0000000000000000, DIRECT, f08c47fec0942fa0",
        "appnexus.com, 1234, RESELLER # via partner",
        "openx.com, 5555, Direct",
        "rubicon.com, 777, partner, abc",
        "bad line here",
        "FOO=bar",
        "pubmatic.com, 99, reseller, 5d62403b186f2ace, extra",
        "",
    ])


@pytest.fixture
def valid_ads_txt():
    """ads.txt without any warnings or errors."""
    return "\n".join([
        "# clean file",
        "CONTACT=adops@example.com",
        "google.com, pub-1, DIRECT, f08c47fec0942fa0",
        "appnexus.com, 1234, RESELLER",
    ])


@pytest.fixture
def ads_txt_file(tmp_path, sample_ads_txt):
    """Write the sample document to disk."""
    path = tmp_path / "ads.txt"
    path.write_text(sample_ads_txt, encoding="utf-8")
    return path
