"""
Section 1: Report Collection

Runs inxi (or loads a saved report) and parses the output into
structured Report objects for downstream curation.

Sources:
- Live: `Collector.fetch(mode)` runs inxi with a fixed argument list
- Saved: `Collector.load(path)` reads .txt/.log/.inxi text or .json exports

Example:
    >>> from src.section1_collection import Collector
    >>>
    >>> report = Collector().fetch("full")
    >>> report = Collector().load("data/raw/laptop.txt", mode="basic")
"""

from .schemas import (
    CollectionMetadata,
    InvalidModeError,
    RawEntry,
    Report,
    ReportFetchError,
    Section,
    VerbosityMode,
)
from .ansi import strip_ansi
from .config import CollectorConfig
from .collector import Collector, fetch_report, load_report

__all__ = [
    # Schemas
    "CollectionMetadata",
    "InvalidModeError",
    "RawEntry",
    "Report",
    "ReportFetchError",
    "Section",
    "VerbosityMode",
    # Collection
    "CollectorConfig",
    "Collector",
    "fetch_report",
    "load_report",
    "strip_ansi",
]
