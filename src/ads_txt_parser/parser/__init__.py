"""Parser package - Converts raw ads.txt text into structured models.

Parsers do NOT fetch anything - they structure text handed to them.
Most importantly, they track line numbers for every entry.
"""

from ads_txt_parser.parser.ads_txt import AdsTxtParser

__all__ = ["AdsTxtParser"]
