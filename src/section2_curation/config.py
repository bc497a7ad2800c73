"""
Configuration for Section 2: Curation

Scoring weights, value length guards, per-mode display limits,
and fixed summary text.
"""


class CurationConfig:
    """Configuration for classification and curation."""

    # Classifier scoring
    SECTION_MATCH_WEIGHT: int = 6
    KEY_MATCH_WEIGHT: int = 2
    VALUE_MATCH_WEIGHT: int = 1
    # Entries scoring below this are dropped as incidental overlaps
    MIN_CLASSIFY_SCORE: int = 2

    # Inclusion guards (normalized value length)
    MIN_VALUE_LENGTH: int = 2
    MAX_VALUE_LENGTH: int = 200

    # Maximum entries shown per category
    ENTRY_LIMITS: dict[str, int] = {
        "basic": 5,
        "full": 7,
        "verbose": 9,
    }
    DEFAULT_ENTRY_LIMIT: int = 11

    # Summaries
    EMPTY_SUMMARY: str = "No matching data in current report."
    SUMMARY_SEPARATOR: str = " | "
    FALLBACK_SUMMARY_ENTRIES: int = 2
