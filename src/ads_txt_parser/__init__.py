"""ads-txt-parser - Parser and validator for the IAB ads.txt format."""

__version__ = "1.0.0"
