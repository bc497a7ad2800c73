"""
Category registry: the nine fixed output categories.

Registry order is significant: the classifier breaks score ties in
favour of the category listed first.
"""

from typing import Optional

from .schemas import CategoryDefinition


CATEGORIES: tuple[CategoryDefinition, ...] = (
    CategoryDefinition(
        id="system",
        label="OS & Kernel",
        icon="/static/icons/chip.png",
        section_keywords=("system",),
        content_keywords=("kernel", "desktop", "distro", "base", "arch"),
    ),
    CategoryDefinition(
        id="machine",
        label="Machine",
        icon="/static/icons/mainboard.png",
        section_keywords=("machine", "mobo"),
        content_keywords=("product", "vendor", "chassis", "serial", "uuid", "firmware", "bios"),
    ),
    CategoryDefinition(
        id="cpu",
        label="CPU",
        icon="/static/icons/chip.png",
        section_keywords=("cpu",),
        content_keywords=("cpu", "processor", "core", "thread", "cache", "clock", "ghz", "mhz"),
    ),
    CategoryDefinition(
        id="memory",
        label="Memory",
        icon="/static/icons/ssd.png",
        section_keywords=("memory", "swap"),
        content_keywords=("memory", "ram", "swap", "slot", "dimm", "channel", "ddr"),
    ),
    CategoryDefinition(
        id="storage",
        label="SSD",
        icon="/static/icons/ssd-drive.png",
        section_keywords=("drives", "storage"),
        content_keywords=("ssd", "nvme", "drive", "drives", "storage", "disk", "/dev/"),
    ),
    CategoryDefinition(
        id="gpu",
        label="GPU",
        icon="/static/icons/graphics-card.png",
        section_keywords=("graphics", "display", "gpu", "video"),
        content_keywords=("gpu", "graphics", "video", "vram", "nvidia", "radeon", "display", "vulkan"),
    ),
    CategoryDefinition(
        id="network",
        label="Network",
        icon="/static/icons/keyboard-and-mouse.png",
        section_keywords=("network",),
        content_keywords=("wlan", "ethernet", "wifi", "adapter", "driver", "if"),
    ),
    CategoryDefinition(
        id="battery",
        label="Battery",
        icon="/static/icons/mainboard.png",
        section_keywords=("battery",),
        content_keywords=("charge", "condition", "volts", "model", "li-poly", "charging"),
    ),
    CategoryDefinition(
        id="bluetooth",
        label="Bluetooth",
        icon="/static/icons/keyboard-and-mouse.png",
        section_keywords=("bluetooth",),
        content_keywords=("rfkill", "hci0", "driver", "btusb"),
    ),
)

_BY_ID = {category.id: category for category in CATEGORIES}


def get_category(category_id: str) -> Optional[CategoryDefinition]:
    """Look up a category by id; None for unknown ids."""
    return _BY_ID.get(category_id)


def category_ids() -> list[str]:
    """Category ids in registry order."""
    return [category.id for category in CATEGORIES]
