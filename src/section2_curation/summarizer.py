"""
Summarizer: one short line per category, pulled out of its curated entries.
"""

import re
from typing import Callable, Optional, Sequence

from .config import CurationConfig
from .schemas import ClassifiedEntry

USED_AMOUNT = re.compile(r"used\s+([0-9.]+\s+\w+(?:\s+\([^)]+\))?)", re.IGNORECASE)
DRIVE_VENDOR = re.compile(r"\bvendor\s+(.+?)\s+\bmodel\b", re.IGNORECASE)
DRIVE_MODEL = re.compile(r"\bmodel\s+(.+?)\s+\bsize\b", re.IGNORECASE)
DRIVE_SIZE = re.compile(r"\bsize\s+([0-9.]+\s+\w+)", re.IGNORECASE)
USED_PERCENT = re.compile(r"\(([0-9.]+%)\)")
WHITESPACE_RUN = re.compile(r"\s+")


def find_entry(entries: Sequence[ClassifiedEntry], keywords: Sequence[str]) -> Optional[ClassifiedEntry]:
    """First entry whose lowercased key or value contains any keyword."""
    for entry in entries:
        key = entry.key.lower()
        value = entry.value.lower()
        if any(keyword in key or keyword in value for keyword in keywords):
            return entry
    return None


def _summarize_memory(entries: Sequence[ClassifiedEntry]) -> list[str]:
    total = find_entry(entries, ("total", "memory", "ram"))
    system = find_entry(entries, ("used", "available", "active"))
    swap = find_entry(entries, ("swap", "id-"))
    parts = []

    if total:
        parts.append(f"Total: {total.value.split(' ')[0]}")
    if system:
        match = USED_AMOUNT.search(system.value)
        if match:
            parts.append(f"Used: {match.group(1)}")
    if swap:
        match = USED_AMOUNT.search(swap.value)
        if match:
            parts.append(f"Swap: {match.group(1)}")

    return parts


def _summarize_cpu(entries: Sequence[ClassifiedEntry]) -> list[str]:
    model = find_entry(entries, ("model", "processor", "name"))
    cores = find_entry(entries, ("core", "thread"))
    speed = find_entry(entries, ("speed", "mhz", "ghz"))
    return [entry.value for entry in (model, cores, speed) if entry]


def _summarize_storage(entries: Sequence[ClassifiedEntry]) -> list[str]:
    usage = find_entry(entries, ("used", "total", "storage", "local"))
    disk = find_entry(entries, ("id-", "nvme", "ssd", "/dev/", "model"))
    health = find_entry(entries, ("smart", "temp", "health"))
    parts = []

    if disk:
        compact = WHITESPACE_RUN.sub(" ", disk.value)
        vendor_match = DRIVE_VENDOR.search(compact)
        model_match = DRIVE_MODEL.search(compact)
        size_match = DRIVE_SIZE.search(compact)

        if vendor_match and model_match:
            parts.append(f"{vendor_match.group(1)} {model_match.group(1)}")
        elif model_match:
            parts.append(model_match.group(1))

        if size_match:
            parts.append(size_match.group(1))

    if usage:
        compact = WHITESPACE_RUN.sub(" ", usage.value)
        percent_match = USED_PERCENT.search(compact)
        if percent_match:
            parts.append(f"Used: {percent_match.group(1)}")

    if health:
        parts.append(health.value)

    return parts


def _summarize_gpu(entries: Sequence[ClassifiedEntry]) -> list[str]:
    model = find_entry(entries, ("model", "graphics", "card"))
    driver = find_entry(entries, ("driver",))
    vram = find_entry(entries, ("vram", "memory"))
    parts = []
    if model:
        parts.append(model.value)
    if driver:
        parts.append(f"Driver: {driver.value}")
    if vram:
        parts.append(f"VRAM: {vram.value}")
    return parts


SUMMARIZERS: dict[str, Callable[[Sequence[ClassifiedEntry]], list[str]]] = {
    "memory": _summarize_memory,
    "cpu": _summarize_cpu,
    "storage": _summarize_storage,
    "gpu": _summarize_gpu,
}


def summarize(category_id: str, entries: Sequence[ClassifiedEntry]) -> str:
    """
    Build the summary line for a category.

    Categories without a dedicated rule, or whose rule finds nothing,
    fall back to the first two entry values.

    Args:
        category_id: Category the entries belong to
        entries: Curated entries in ranked order

    Returns:
        Summary text, or the fixed "no matching data" message
    """
    if not entries:
        return CurationConfig.EMPTY_SUMMARY

    summarizer = SUMMARIZERS.get(category_id)
    if summarizer is not None:
        parts = summarizer(entries)
        if parts:
            return CurationConfig.SUMMARY_SEPARATOR.join(parts)

    head = entries[: CurationConfig.FALLBACK_SUMMARY_ENTRIES]
    return CurationConfig.SUMMARY_SEPARATOR.join(entry.value for entry in head)
