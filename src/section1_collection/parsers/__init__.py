"""
Parsers for the supported report formats.

Each parser turns raw report text into an ordered list of Section objects.

- InxiTextParser: inxi's plain-text output (live or saved as .txt/.log)
- JsonReportParser: reports previously exported as JSON
"""

from .base_parser import BaseParser
from .inxi_parser import InxiTextParser
from .json_parser import JsonReportParser

__all__ = [
    "BaseParser",
    "InxiTextParser",
    "JsonReportParser",
]
