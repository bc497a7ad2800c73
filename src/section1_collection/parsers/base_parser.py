"""
Base parser class that all report parsers inherit from.
"""

from abc import ABC, abstractmethod
from datetime import datetime, timezone
from pathlib import Path
from typing import Optional
import hashlib
import time

from ..schemas import CollectionMetadata, Report, Section, VerbosityMode


class BaseParser(ABC):
    """
    Abstract base class for all report parsers.

    A parser works on raw report text, which either comes straight from
    a running inxi process or from a saved file (see `from_file`).
    Each parser must implement the `parse` method.
    """

    # Override in subclasses
    PARSER_NAME: str = "base"
    PARSER_VERSION: str = "1.0.0"
    SUPPORTED_EXTENSIONS: list[str] = []

    def __init__(self, raw_text: str, source_name: str = "inxi", mode: str = VerbosityMode.BASIC.value):
        """
        Initialize parser with report text.

        Args:
            raw_text: Full report text
            source_name: Command or file name the text came from
            mode: Verbosity mode the report was taken with
        """
        self.raw_text = raw_text or ""
        self.source_name = source_name
        self.mode = getattr(mode, "value", mode)
        self.timestamp: Optional[datetime] = None
        self.warnings: list[str] = []
        self.errors: list[str] = []

    @classmethod
    def from_file(cls, file_path: str | Path, mode: str = VerbosityMode.BASIC.value) -> "BaseParser":
        """
        Build a parser over a saved report file.

        Raises:
            FileNotFoundError: If the file does not exist
            ValueError: If the extension is not supported by this parser
        """
        file_path = Path(file_path)
        if not file_path.exists():
            raise FileNotFoundError(f"File not found: {file_path}")

        if file_path.suffix.lower() not in cls.SUPPORTED_EXTENSIONS:
            raise ValueError(
                f"Unsupported file type: {file_path.suffix}. "
                f"Supported: {cls.SUPPORTED_EXTENSIONS}"
            )

        text = file_path.read_text(encoding="utf-8", errors="replace")
        return cls(text, source_name=file_path.name, mode=mode)

    def get_content_hash(self) -> str:
        """Calculate SHA-256 hash of the raw text for deduplication."""
        return hashlib.sha256(self.raw_text.encode("utf-8")).hexdigest()

    def add_warning(self, message: str) -> None:
        """Add a warning message during parsing."""
        self.warnings.append(message)

    def add_error(self, message: str) -> None:
        """Add a non-fatal error message during parsing."""
        self.errors.append(message)

    @abstractmethod
    def parse(self) -> list[Section]:
        """
        Parse the raw text into report sections.

        Returns:
            List of Section objects in report order
        """
        pass

    def run(self) -> Report:
        """
        Execute the parser and wrap the sections into a Report.

        Returns:
            Report with collection metadata attached
        """
        start_time = time.time()

        sections = self.parse()

        processing_time_ms = int((time.time() - start_time) * 1000)

        metadata = CollectionMetadata(
            parser_name=self.PARSER_NAME,
            parser_version=self.PARSER_VERSION,
            processing_time_ms=processing_time_ms,
            warnings=self.warnings,
            errors=self.errors,
        )

        return Report(
            timestamp=self.timestamp or datetime.now(timezone.utc),
            mode=self.mode,
            sections=sections,
            source=self.source_name,
            source_hash=self.get_content_hash(),
            metadata=metadata,
        )
