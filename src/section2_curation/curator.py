"""
Curator: normalize, filter, deduplicate and rank classified entries.
"""

import logging
from typing import Iterable, NamedTuple, Optional

from .config import CurationConfig
from .normalizer import normalize_value
from .policy import should_keep_entry
from .schemas import ClassifiedEntry, CuratedEntry

logger = logging.getLogger(__name__)


class PriorityRule(NamedTuple):
    """Key test ("eq", "prefix" or "contains") and the priority it grants."""
    match: str
    key: str
    priority: int
    value_contains: Optional[str] = None


# Rules are checked in order; the first hit decides.
PRIORITY_RULES: dict[str, tuple[PriorityRule, ...]] = {
    "cpu": (
        PriorityRule("eq", "info", 100, value_contains="model"),
        PriorityRule("eq", "topology", 90),
        PriorityRule("prefix", "speed", 80),
        PriorityRule("contains", "cache", 70),
    ),
    "memory": (
        PriorityRule("eq", "memory", 100),
        PriorityRule("prefix", "id-", 80),
    ),
    "storage": (
        PriorityRule("eq", "local", 100),
        PriorityRule("prefix", "id-", 80),
    ),
    "gpu": (
        PriorityRule("prefix", "device-", 100),
        PriorityRule("prefix", "display", 90),
        PriorityRule("prefix", "monitor-", 70),
    ),
}
RANKED_DEFAULT_PRIORITY = 20
UNRANKED_PRIORITY = 0


def key_matches(match: str, pattern: str, key: str) -> bool:
    """Apply an "eq" / "prefix" / "contains" test to a lowercased key."""
    if match == "eq":
        return key == pattern
    if match == "prefix":
        return key.startswith(pattern)
    if match == "contains":
        return pattern in key
    raise ValueError(f"Unknown key match kind: {match}")


def entry_priority(category_id: str, entry: ClassifiedEntry) -> int:
    """Priority of an entry within its category; higher sorts first."""
    rules = PRIORITY_RULES.get(category_id)
    if rules is None:
        return UNRANKED_PRIORITY

    key = entry.key.lower()
    value = entry.value.lower()

    for rule in rules:
        if not key_matches(rule.match, rule.key, key):
            continue
        if rule.value_contains is not None and rule.value_contains not in value:
            continue
        return rule.priority

    return RANKED_DEFAULT_PRIORITY


def curate(category_id: str, entries: Iterable[ClassifiedEntry], mode) -> list[CuratedEntry]:
    """
    Produce the clean, ranked entry list for one category.

    Steps: normalize each value, apply the inclusion policy, drop
    case-insensitive (source, key, value) repeats keeping the first,
    then stable-sort by descending priority.

    Args:
        category_id: Category the entries were classified into
        entries: Classified entries in report order
        mode: Verbosity mode

    Returns:
        Curated entries (not truncated; see `entry_limit_for_mode`)
    """
    seen: set[str] = set()
    curated: list[CuratedEntry] = []

    for entry in entries:
        candidate = CuratedEntry(
            source=entry.source,
            key=entry.key,
            value=normalize_value(entry.value, entry.key),
        )

        if not should_keep_entry(category_id, candidate, mode):
            logger.debug("dropped %s entry %s/%s", category_id, candidate.source, candidate.key)
            continue

        signature = f"{candidate.source.lower()}|{candidate.key.lower()}|{candidate.value.lower()}"
        if signature in seen:
            continue
        seen.add(signature)

        curated.append(candidate)

    # sorted() is stable, so equal priorities keep report order
    return sorted(curated, key=lambda item: entry_priority(category_id, item), reverse=True)


def entry_limit_for_mode(mode) -> int:
    """Maximum entries shown per category: basic 5, full 7, verbose 9, else 11."""
    mode_value = getattr(mode, "value", mode)
    return CurationConfig.ENTRY_LIMITS.get(mode_value, CurationConfig.DEFAULT_ENTRY_LIMIT)


def hidden_count(raw_count: int, curated_count: int) -> int:
    """Number of classified entries that curation removed."""
    return max(raw_count - curated_count, 0)
