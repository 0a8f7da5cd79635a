"""Fatal conditions raised by the parser and the fetch collaborator.

Per-line anomalies are never raised. They are collected as warnings and
errors on the ParseResult so one bad line cannot stop a large file.
"""


class AdsTxtError(Exception):
    """Base class for every fatal ads.txt condition."""


class EmptyInputError(AdsTxtError, ValueError):
    """The document (or the fetched body) is empty."""

    def __init__(self, message: str = "Empty ads.txt file") -> None:
        super().__init__(message)


class AdsFileNotFoundError(AdsTxtError, FileNotFoundError):
    """The ads.txt file could not be retrieved for a domain."""

    def __init__(self, message: str = "Error getting ads.txt file for the domain") -> None:
        super().__init__(message)


class ContentTypeError(AdsTxtError):
    """The fetched ads.txt was not served as text/plain."""

    def __init__(self, message: str = "MIMETYPE should be text/plain") -> None:
        super().__init__(message)


class ConfigError(AdsTxtError):
    """The settings file contains invalid values."""
