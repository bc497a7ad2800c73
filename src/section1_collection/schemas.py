"""
Pydantic schemas for Section 1: Report Collection

These models define the structure of system reports that are
passed to Section 2 (Curation).
"""

from datetime import datetime, timezone
from enum import Enum
from typing import Optional
from pydantic import BaseModel, Field


class InvalidModeError(ValueError):
    """Raised when a verbosity mode string is not one of the known modes."""

    def __init__(self, mode: str):
        super().__init__(f"invalid mode requested: {mode}")
        self.mode = mode


class ReportFetchError(RuntimeError):
    """Raised when the inxi data source cannot produce a report."""

    def __init__(self, mode: str, reason: str):
        super().__init__(f"inxi execution failed ({mode}): {reason}")
        self.mode = mode
        self.reason = reason


class VerbosityMode(str, Enum):
    """Detail level requested from inxi and applied during curation."""
    BASIC = "basic"
    FULL = "full"
    VERBOSE = "verbose"
    MAXIMUM = "maximum"

    @classmethod
    def parse(cls, text: str) -> "VerbosityMode":
        """Resolve a user-supplied mode string, ignoring case and padding."""
        normalized = (text or "").strip().lower()
        for mode in cls:
            if mode.value == normalized:
                return mode
        raise InvalidModeError(text)

    @property
    def inxi_args(self) -> list[str]:
        """Fixed inxi argument list for this mode."""
        return list(INXI_ARGS[self])


INXI_ARGS = {
    VerbosityMode.BASIC: ("-F",),
    VerbosityMode.FULL: ("-F", "-z"),
    VerbosityMode.VERBOSE: ("-a", "-F", "-z"),
    VerbosityMode.MAXIMUM: ("-a", "-F", "-x", "-x", "-x", "-z"),
}


class RawEntry(BaseModel):
    """A single key/value fact inside a report section."""
    key: str = Field(default="", description="Entry label as reported upstream")
    value: str = Field(default="", description="Free-form entry text")


class Section(BaseModel):
    """A named group of entries (e.g. 'CPU', 'Graphics', 'Info')."""
    title: str = Field(..., description="Section label as reported upstream")
    entries: list[RawEntry] = Field(default_factory=list, description="Entries in report order")


class CollectionMetadata(BaseModel):
    """Metadata about the parsing process."""
    parser_name: str = Field(..., description="Name of the parser used")
    parser_version: str = Field(default="1.0.0", description="Version of the parser")
    processed_at: datetime = Field(
        default_factory=lambda: datetime.now(timezone.utc),
        description="When processing occurred",
    )
    processing_time_ms: Optional[int] = Field(None, description="Time taken to process in milliseconds")
    warnings: list[str] = Field(default_factory=list, description="Any warnings during parsing")
    errors: list[str] = Field(default_factory=list, description="Any non-fatal errors during parsing")


class Report(BaseModel):
    """
    The main output of Section 1: one full system report.

    A report is produced wholesale per request and is never patched
    afterwards; a refresh replaces it.
    """
    timestamp: datetime = Field(
        default_factory=lambda: datetime.now(timezone.utc),
        description="When the report was produced",
    )
    mode: str = Field(default=VerbosityMode.BASIC.value, description="Verbosity mode the report was taken with")
    sections: list[Section] = Field(default_factory=list, description="Sections in report order")

    source: str = Field(default="inxi", description="Command or file the report came from")
    source_hash: Optional[str] = Field(None, description="SHA-256 of the raw report text")
    metadata: Optional[CollectionMetadata] = Field(None, description="Information about the parsing process")

    @property
    def entry_count(self) -> int:
        return sum(len(section.entries) for section in self.sections)

    def section_titles(self) -> list[str]:
        return [section.title for section in self.sections]

    def status_line(self) -> str:
        """Short human status, e.g. 'Mode: basic · Refreshed 2024-05-01 10:00:00'."""
        when = self.timestamp.astimezone().strftime("%Y-%m-%d %H:%M:%S")
        return f"Mode: {self.mode} · Refreshed {when}"
