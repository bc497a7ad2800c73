"""
Value normalizer: whitespace cleanup and key-echo removal.
"""

import re

WHITESPACE_RUN = re.compile(r"\s+")


def normalize_value(value: str, key: str = "") -> str:
    """
    Collapse whitespace and drop a leading "key:" echo.

    Example:
        >>> normalize_value("  Kernel:   6.8.0  x86_64 ", "Kernel")
        '6.8.0 x86_64'
    """
    cleaned = WHITESPACE_RUN.sub(" ", value or "").strip()
    if key:
        prefix = key.lower() + ":"
        if cleaned.lower().startswith(prefix):
            cleaned = cleaned[len(prefix):].strip()
    return cleaned
