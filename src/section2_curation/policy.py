"""
Inclusion policy: per-category decision on which classified entries
are signal worth showing.

Every category first requires its entry to come from a matching
section. System, machine, network, battery and bluetooth keep
everything past that point; cpu, memory, storage and gpu apply
key-level rules, some of them mode dependent.
"""

from typing import Callable

from .config import CurationConfig
from .schemas import ClassifiedEntry

# Substrings the lowercased source section must contain
SECTION_AFFINITY: dict[str, tuple[str, ...]] = {
    "system": ("system",),
    "machine": ("machine", "mobo"),
    "cpu": ("cpu",),
    "memory": ("info", "memory", "swap"),
    "storage": ("drives",),
    "gpu": ("graphics",),
    "network": ("network",),
    "battery": ("battery",),
    "bluetooth": ("bluetooth",),
}

GPU_VENDOR_TERMS = ("amd", "nvidia", "intel", "radeon", "geforce", "arc", "graphics", "display")
CAMERA_TERMS = ("camera", "uvcvideo", "webcam", "usb video")
GPU_API_TERMS = ("vulkan", "opengl", "egl")
NO_VULKAN_DATA = "no vulkan data available"

STORAGE_EXACT_KEYS = ("local", "temp", "speed")


def _mode_value(mode) -> str:
    return getattr(mode, "value", mode) or ""


def is_likely_gpu_value(value: str) -> bool:
    """True for a GPU descriptor, False for cameras and unrelated devices."""
    normalized = value.lower()
    if any(term in normalized for term in CAMERA_TERMS):
        return False
    return any(term in normalized for term in GPU_VENDOR_TERMS)


def _keep_all(key: str, source: str, value: str, mode: str) -> bool:
    return True


def _keep_cpu(key: str, source: str, value: str, mode: str) -> bool:
    if key in ("info", "topology") or key.startswith("speed"):
        return True
    if "cache" in key:
        return mode != "basic"
    return False


def _keep_memory(key: str, source: str, value: str, mode: str) -> bool:
    # GPU memory sometimes lands in the Info section
    if "vram" in value:
        return False
    if "info" in source:
        return key == "memory"
    if "swap" in source:
        return key.startswith("id-")
    return True


def _keep_storage(key: str, source: str, value: str, mode: str) -> bool:
    return key in STORAGE_EXACT_KEYS or key.startswith("id-") or "smart" in key


def _keep_gpu(key: str, source: str, value: str, mode: str) -> bool:
    if key in ("info", "x"):
        return False

    if key.startswith("device-"):
        return is_likely_gpu_value(value)

    if key.startswith("display") or key.startswith("monitor-"):
        return True

    if key == "api":
        if mode != "maximum":
            return False
        if NO_VULKAN_DATA in value:
            return False
        return any(term in value for term in GPU_API_TERMS)

    return False


KEEP_RULES: dict[str, Callable[[str, str, str, str], bool]] = {
    "system": _keep_all,
    "machine": _keep_all,
    "cpu": _keep_cpu,
    "memory": _keep_memory,
    "storage": _keep_storage,
    "gpu": _keep_gpu,
    "network": _keep_all,
    "battery": _keep_all,
    "bluetooth": _keep_all,
}


def should_keep_entry(category_id: str, entry: ClassifiedEntry, mode) -> bool:
    """
    Decide whether a classified (and normalized) entry is kept.

    Args:
        category_id: Category the entry was classified into
        entry: Entry with its normalized value
        mode: Verbosity mode ("basic", "full", "verbose", "maximum", ...)

    Returns:
        True if the entry should be displayed
    """
    source = entry.source.lower()
    key = entry.key.lower()
    value = entry.value.lower()

    if not entry.value or len(value) < CurationConfig.MIN_VALUE_LENGTH:
        return False
    if len(value) > CurationConfig.MAX_VALUE_LENGTH:
        return False

    rule = KEEP_RULES.get(category_id)
    if rule is None:
        return True

    affinity = SECTION_AFFINITY[category_id]
    if not any(term in source for term in affinity):
        return False

    return rule(key, source, value, _mode_value(mode))
