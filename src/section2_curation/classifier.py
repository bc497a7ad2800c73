"""
Rule-based classifier: assigns report entries to categories.

Each entry is scored against every category in the registry:

    score = 6 x [a section keyword occurs in the section title]
          + 2 x (content keywords occurring in the key)
          + 1 x (content keywords occurring in the value)

All matching is lowercase substring containment. The best score wins
(first category in registry order on ties) and must reach the minimum
score, otherwise the entry is dropped.
"""

import logging
from typing import Iterable, Optional

from src.section1_collection.schemas import RawEntry, Section

from .config import CurationConfig
from .registry import CATEGORIES
from .schemas import CategoryDefinition, ClassifiedEntry

logger = logging.getLogger(__name__)


def count_keyword_matches(text: str, keywords: Iterable[str]) -> int:
    """Count how many keywords occur in the (already lowercased) text."""
    return sum(1 for keyword in keywords if keyword in text)


def score_entry(category: CategoryDefinition, section_title: str, entry: RawEntry) -> int:
    """Score one entry against one category."""
    source = section_title.lower()
    key = entry.key.lower()
    value = entry.value.lower()

    score = 0
    if any(keyword in source for keyword in category.section_keywords):
        score += CurationConfig.SECTION_MATCH_WEIGHT

    score += count_keyword_matches(key, category.content_keywords) * CurationConfig.KEY_MATCH_WEIGHT
    score += count_keyword_matches(value, category.content_keywords) * CurationConfig.VALUE_MATCH_WEIGHT
    return score


def classify(section_title: str, entry: RawEntry) -> Optional[str]:
    """
    Return the id of the best-scoring category, or None.

    Args:
        section_title: Title of the section the entry came from
        entry: The raw entry

    Returns:
        Category id, or None if no category reaches the minimum score
    """
    best_id: Optional[str] = None
    best_score = 0

    for category in CATEGORIES:
        score = score_entry(category, section_title, entry)
        # Strictly greater: the earlier category keeps a tie
        if score > best_score:
            best_id, best_score = category.id, score

    if best_score < CurationConfig.MIN_CLASSIFY_SCORE:
        return None

    return best_id


def group_entries(sections: Iterable[Section]) -> dict[str, list[ClassifiedEntry]]:
    """
    Classify every entry of every section and group them by category.

    Every registry category is present in the result (possibly empty),
    in registry order. Exact repeats of (category, section title, key,
    value) are kept once.
    """
    groups: dict[str, list[ClassifiedEntry]] = {category.id: [] for category in CATEGORIES}
    seen: set[tuple[str, str, str, str]] = set()
    dropped = 0

    for section in sections:
        for entry in section.entries:
            category_id = classify(section.title, entry)
            if category_id is None:
                dropped += 1
                continue

            dedupe_key = (category_id, section.title, entry.key, entry.value)
            if dedupe_key in seen:
                continue
            seen.add(dedupe_key)

            groups[category_id].append(
                ClassifiedEntry(source=section.title, key=entry.key, value=entry.value)
            )

    if dropped:
        logger.debug("classifier dropped %d unmatched entries", dropped)

    return groups
