"""HTTP Connector - Retrieves ads.txt files from publisher domains.

This module only fetches text. It never parses; the body is handed
unchanged to AdsTxtParser.
"""

import http.client
import logging
from urllib.request import Request, urlopen

from ads_txt_parser.config import ParserSettings
from ads_txt_parser.exceptions import AdsFileNotFoundError, ContentTypeError, EmptyInputError

logger = logging.getLogger(__name__)

ADS_TXT_PATH = "/ads.txt"
PLAIN_TEXT = "text/plain"


def build_ads_txt_url(domain: str, default_scheme: str = "https") -> str:
    """Build the ads.txt URL for a base URL or bare domain."""
    base = domain.strip().rstrip("/")
    if "://" not in base:
        base = f"{default_scheme}://{base}"
    return base + ADS_TXT_PATH


class AdsTxtFetcher:
    """Blocking fetcher for <domain>/ads.txt.

    Example:
        >>> fetcher = AdsTxtFetcher(ParserSettings(timeout=5))
        >>> text = fetcher.fetch("example.com")
    """

    def __init__(self, settings: ParserSettings | None = None) -> None:
        self.settings = settings or ParserSettings()

    def fetch(self, domain: str = "http://localhost") -> str:
        """Retrieve the ads.txt text for a domain.

        Raises:
            AdsFileNotFoundError: The file is unreachable or missing.
            EmptyInputError: The response body is empty.
            ContentTypeError: Content type check is enabled and the
                response is not text/plain.
        """
        url = build_ads_txt_url(domain, self.settings.default_scheme)
        logger.info("Fetching %s", url)

        request = Request(url, headers={"User-Agent": self.settings.user_agent})
        try:
            with urlopen(request, timeout=self.settings.timeout) as response:
                media_type = response.headers.get_content_type() if response.headers.get("Content-Type") else None
                charset = response.headers.get_content_charset() or "utf-8"
                body = response.read()
        except (OSError, ValueError, http.client.HTTPException) as e:
            logger.warning("Could not fetch %s: %s", url, e)
            raise AdsFileNotFoundError() from e

        if not body:
            raise EmptyInputError()

        if self.settings.check_content_type and media_type and media_type != PLAIN_TEXT:
            logger.warning("Rejecting %s served as %s", url, media_type)
            raise ContentTypeError()

        if charset.lower().replace("-", "") == "utf8":
            charset = "utf-8-sig"
        try:
            return body.decode(charset, errors="replace")
        except LookupError:
            return body.decode("utf-8-sig", errors="replace")
