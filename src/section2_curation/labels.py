"""
Label resolver: human-readable labels for curated entries.

Entries pulled in from a section other than the category's primary
section are prefixed with their source, e.g. "Info / RAM" on a card
that normally reads from "Drives".
"""

from typing import NamedTuple, Optional

from .curator import key_matches
from .schemas import ClassifiedEntry

PRIMARY_SECTIONS: dict[str, str] = {
    "system": "system",
    "machine": "machine",
    "cpu": "cpu",
    "memory": "info",
    "storage": "drives",
    "gpu": "graphics",
    "network": "network",
    "battery": "battery",
    "bluetooth": "bluetooth",
}


class LabelRule(NamedTuple):
    """
    Maps a lowercased key to a label.

    With `replace` set, the label is the key with its first `key`
    occurrence replaced (e.g. "id-2" -> "Disk 2"). With `source` set,
    the rule only applies when the source section contains it.
    """
    match: str
    key: str
    label: str = ""
    replace: Optional[str] = None
    source: Optional[str] = None


LABEL_RULES: dict[str, tuple[LabelRule, ...]] = {
    "system": (
        LabelRule("eq", "kernel", "Kernel"),
        LabelRule("eq", "desktop", "Desktop Environment"),
        LabelRule("eq", "distro", "Distribution"),
    ),
    "machine": (
        LabelRule("eq", "type", "Form Factor"),
        LabelRule("eq", "system", "Product Name"),
        LabelRule("eq", "mobo", "Motherboard"),
        LabelRule("eq", "chassis", "Chassis"),
        LabelRule("eq", "firmware", "BIOS / UEFI"),
    ),
    "cpu": (
        LabelRule("eq", "info", "Model"),
        LabelRule("eq", "topology", "Topology"),
        LabelRule("prefix", "speed", "Speed"),
    ),
    "memory": (
        LabelRule("eq", "memory", "RAM"),
        LabelRule("prefix", "id-", "Swap", source="swap"),
    ),
    "storage": (
        LabelRule("eq", "local", "Overall Usage"),
        LabelRule("prefix", "id-", replace="Disk "),
        LabelRule("eq", "temp", "Temperature"),
        LabelRule("eq", "speed", "Interface Speed"),
        LabelRule("contains", "smart", "Health Status"),
    ),
    "gpu": (
        LabelRule("prefix", "device-", replace="GPU "),
        LabelRule("prefix", "display", "Display"),
        LabelRule("prefix", "monitor-", "Monitor"),
        LabelRule("eq", "api", "API"),
    ),
    "network": (
        LabelRule("prefix", "device-", replace="Interface "),
        LabelRule("eq", "if", "Status"),
    ),
    "battery": (
        LabelRule("prefix", "id-", "Status"),
        LabelRule("eq", "charging", "Charging Status"),
    ),
}


def primary_section(category_id: str) -> str:
    """The section a category normally reads from; "" for unknown ids."""
    return PRIMARY_SECTIONS.get(category_id, "")


def metric_label(category_id: str, entry: ClassifiedEntry) -> str:
    """Label for an entry's key, falling back to the raw key."""
    key = entry.key.lower()
    source = entry.source.lower()

    for rule in LABEL_RULES.get(category_id, ()):
        if not key_matches(rule.match, rule.key, key):
            continue
        if rule.source is not None and rule.source not in source:
            continue
        if rule.replace is not None:
            return key.replace(rule.key, rule.replace, 1)
        return rule.label

    return entry.key


def display_label(category_id: str, entry: ClassifiedEntry) -> str:
    """Metric label, prefixed with the source when it is a secondary section."""
    primary = primary_section(category_id)
    source = entry.source.lower()
    label = metric_label(category_id, entry)

    if source == primary or primary in source:
        return label
    return f"{entry.source} / {label}"
