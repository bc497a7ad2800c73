"""
Parser for plain-text inxi output.

inxi prints one section per block, with the section title at the start
of a line ("System:", "CPU:", "Graphics:") followed by indented
key/value lines. Long values wrap onto deeper-indented continuation
lines which are folded back into the previous entry.
"""

import re

from ..ansi import strip_ansi
from ..schemas import RawEntry, Section
from .base_parser import BaseParser


class InxiTextParser(BaseParser):
    """
    Parser for inxi's human-readable report format.

    Recognises:
    - Section titles: short capitalised lines ending with a colon
    - Entries: "Key: value" lines, or "Key value..." lines without a colon
    - Wrapped lines: deeply indented lines starting with "(", a bare
      number, or containing "=" are appended to the previous entry
    """

    PARSER_NAME = "inxi_text_parser"
    PARSER_VERSION = "1.0.0"
    SUPPORTED_EXTENSIONS = [".txt", ".log", ".inxi"]

    MAX_TITLE_TOKENS = 3
    CONTINUATION_INDENT = 4
    TITLE_PUNCTUATION = set(" -/()+")
    LEADING_WHITESPACE = re.compile(r"^\s*")

    def _parse_section_title(self, line: str) -> str | None:
        """Return the section title if the trimmed line is a section header."""
        if not line.endswith(":"):
            return None

        if len(line.split()) > self.MAX_TITLE_TOKENS:
            return None

        title = line.rstrip(":").strip()
        if not title:
            return None

        # Section headers start with a capital: "System", "CPU", "Graphics"
        if not title[0].isupper():
            return None

        for ch in title:
            if not ((ch.isascii() and ch.isalnum()) or ch in self.TITLE_PUNCTUATION):
                return None

        return title

    def _is_continuation_line(self, raw_line: str, trimmed: str) -> bool:
        """Detect a wrapped line that belongs to the previous entry."""
        indent = len(self.LEADING_WHITESPACE.match(raw_line).group(0))
        if indent < self.CONTINUATION_INDENT:
            return False

        tokens = trimmed.split()
        if not tokens:
            return False

        first_token = tokens[0]
        return (
            first_token.startswith("(")
            or (first_token.isascii() and first_token.isdigit())
            or "=" in first_token
        )

    def _parse_entry(self, line: str) -> RawEntry | None:
        """Split a trimmed line into a key/value entry."""
        if ":" in line:
            key, value = line.split(":", 1)
            key = key.strip()
            value = value.strip()
            if key and value:
                return RawEntry(key=key, value=value)

        tokens = line.split()
        if not tokens:
            return None

        key = tokens[0]
        value_start = 1

        # "Speed (MHz) avg 3400" -> key "Speed (MHz)"
        if len(tokens) > 1 and tokens[1].startswith("(") and tokens[1].endswith(")"):
            key = f"{key} {tokens[1]}"
            value_start = 2

        if value_start >= len(tokens):
            value = line
        else:
            value = " ".join(tokens[value_start:])

        return RawEntry(key=key, value=value)

    def parse(self) -> list[Section]:
        """Parse inxi text into sections."""
        sections: list[Section] = []
        current: Section | None = None
        orphan_lines = 0

        text = strip_ansi(self.raw_text)

        for raw_line in text.splitlines():
            line = raw_line.strip()
            if not line:
                continue

            title = self._parse_section_title(line)
            if title is not None:
                current = Section(title=title)
                sections.append(current)
                continue

            if current is None:
                orphan_lines += 1
                continue

            if self._is_continuation_line(raw_line, line) and current.entries:
                last = current.entries[-1]
                last.value = f"{last.value} {line}"
                continue

            entry = self._parse_entry(line)
            if entry is not None:
                current.entries.append(entry)

        if orphan_lines:
            self.add_warning(f"Ignored {orphan_lines} line(s) before the first section header")

        if not sections and self.raw_text.strip():
            self.add_error("No section headers found in report text")

        return sections
