"""
Parser for saved JSON reports.

Accepts the same shape the dashboard API serves:
    {"timestamp": 1714557600, "mode": "basic",
     "sections": [{"title": "CPU", "entries": [{"key": "Info", "value": "..."}]}]}
"""

import json
from datetime import datetime, timezone
from typing import Optional

from pydantic import ValidationError

from ..schemas import Section
from .base_parser import BaseParser


class JsonReportParser(BaseParser):
    """Parser for reports previously exported as JSON."""

    PARSER_NAME = "json_report_parser"
    PARSER_VERSION = "1.0.0"
    SUPPORTED_EXTENSIONS = [".json"]

    def _parse_timestamp(self, value) -> Optional[datetime]:
        """Accept epoch seconds or an ISO-8601 string."""
        if value is None:
            return None

        if isinstance(value, (int, float)):
            try:
                return datetime.fromtimestamp(value, tz=timezone.utc)
            except (OverflowError, OSError, ValueError):
                self.add_warning(f"Timestamp out of range: {value!r}")
                return None

        text = str(value)
        if text.endswith("Z"):
            text = text[:-1] + "+00:00"

        try:
            return datetime.fromisoformat(text)
        except ValueError:
            self.add_warning(f"Unrecognised timestamp: {value!r}")
            return None

    def parse(self) -> list[Section]:
        """Parse the JSON document into sections."""
        sections: list[Section] = []

        try:
            data = json.loads(self.raw_text)
        except json.JSONDecodeError as e:
            self.add_error(f"Invalid JSON report: {e}")
            return sections

        if not isinstance(data, dict):
            self.add_error("JSON report must be an object with a 'sections' list")
            return sections

        self.timestamp = self._parse_timestamp(data.get("timestamp"))
        if data.get("mode"):
            self.mode = str(data["mode"])

        for idx, raw_section in enumerate(data.get("sections") or []):
            try:
                sections.append(Section.model_validate(raw_section))
            except ValidationError as e:
                self.add_error(f"Error parsing section {idx}: {e.error_count()} validation error(s)")

        return sections
