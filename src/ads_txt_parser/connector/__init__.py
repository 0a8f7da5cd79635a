"""Connector package - Retrieval of ads.txt text from the network."""

from ads_txt_parser.connector.http import AdsTxtFetcher, build_ads_txt_url

__all__ = ["AdsTxtFetcher", "build_ads_txt_url"]
