"""
Tests for value normalization, the inclusion policy and the curator.
"""

import pytest

from src.section1_collection.schemas import VerbosityMode
from src.section2_curation.curator import curate, entry_limit_for_mode, entry_priority, hidden_count
from src.section2_curation.normalizer import normalize_value
from src.section2_curation.policy import is_likely_gpu_value, should_keep_entry
from src.section2_curation.schemas import ClassifiedEntry, CuratedEntry


def _entry(source: str, key: str, value: str) -> ClassifiedEntry:
    return ClassifiedEntry(source=source, key=key, value=value)


class TestNormalizeValue:
    """Test whitespace cleanup and key-echo removal."""

    def test_collapses_whitespace(self):
        assert normalize_value("  8-core\n\tmodel   AMD  ", "Info") == "8-core model AMD"

    def test_strips_key_echo(self):
        assert normalize_value("  Kernel:   6.8.0  x86_64 ", "Kernel") == "6.8.0 x86_64"

    def test_key_echo_is_case_insensitive(self):
        assert normalize_value("MEMORY: 16 GiB", "memory") == "16 GiB"

    def test_key_must_be_followed_by_colon(self):
        assert normalize_value("Kernel 6.8", "Kernel") == "Kernel 6.8"

    def test_empty_key(self):
        assert normalize_value("a:  b", "") == "a: b"


class TestInclusionPolicy:
    """Test per-category keep rules."""

    def test_rejects_too_short_and_too_long(self):
        assert not should_keep_entry("system", _entry("System", "Kernel", ""), "basic")
        assert not should_keep_entry("system", _entry("System", "Kernel", "x"), "basic")
        assert not should_keep_entry("system", _entry("System", "Kernel", "x" * 201), "basic")
        assert should_keep_entry("system", _entry("System", "Kernel", "x" * 200), "basic")

    def test_keep_all_categories_only_check_section(self):
        assert should_keep_entry("network", _entry("Network", "anything", "at all"), "basic")
        assert should_keep_entry("machine", _entry("Mobo", "anything", "at all"), "basic")
        assert should_keep_entry("bluetooth", _entry("Bluetooth", "Report", "rfkill ID 0"), "basic")
        assert not should_keep_entry("network", _entry("System", "Device-1", "Intel Wi-Fi"), "basic")
        assert not should_keep_entry("battery", _entry("Info", "charging", "true"), "basic")

    def test_cpu_keys(self):
        assert should_keep_entry("cpu", _entry("CPU", "Info", "8-core model AMD"), "basic")
        assert should_keep_entry("cpu", _entry("CPU", "Topology", "1 socket 8 cores"), "basic")
        assert should_keep_entry("cpu", _entry("CPU", "Speed (MHz)", "avg 3800"), "basic")
        assert not should_keep_entry("cpu", _entry("CPU", "Flags", "avx avx2"), "maximum")

    @pytest.mark.parametrize("mode,expected", [
        ("basic", False),
        ("full", True),
        ("verbose", True),
        ("maximum", True),
    ])
    def test_cpu_cache_depends_on_mode(self, mode, expected):
        entry = _entry("CPU", "cache-l2", "L2 4 MiB")

        assert should_keep_entry("cpu", entry, mode) is expected

    def test_accepts_mode_enum(self):
        entry = _entry("CPU", "cache-l2", "L2 4 MiB")

        assert not should_keep_entry("cpu", entry, VerbosityMode.BASIC)
        assert should_keep_entry("cpu", entry, VerbosityMode.FULL)

    def test_memory_rules(self):
        assert should_keep_entry("memory", _entry("Info", "Memory", "total 16 GiB used 4 GiB"), "basic")
        assert not should_keep_entry("memory", _entry("Info", "Processes", "412"), "basic")
        assert should_keep_entry("memory", _entry("Swap", "ID-1", "swap-1 type partition"), "basic")
        assert not should_keep_entry("memory", _entry("Swap", "Kernel", "swappiness 60"), "basic")
        assert should_keep_entry("memory", _entry("Memory", "Array-1", "capacity 64 GiB"), "basic")
        assert not should_keep_entry("memory", _entry("Info", "Memory", "VRAM 8 GiB"), "basic")
        assert not should_keep_entry("memory", _entry("Machine", "Memory", "16 GiB"), "basic")

    def test_storage_rules(self):
        assert should_keep_entry("storage", _entry("Drives", "Local", "total 1 TiB"), "basic")
        assert should_keep_entry("storage", _entry("Drives", "ID-1", "/dev/nvme0n1"), "basic")
        assert should_keep_entry("storage", _entry("Drives", "Temp", "41 C"), "basic")
        assert should_keep_entry("storage", _entry("Drives", "Speed", "63.2 Gb/s"), "basic")
        assert should_keep_entry("storage", _entry("Drives", "SMART", "yes health PASSED"), "basic")
        assert not should_keep_entry("storage", _entry("Drives", "Optical", "No optical"), "basic")
        assert not should_keep_entry("storage", _entry("Partition", "Local", "total 1 TiB"), "basic")

    def test_gpu_rules(self):
        assert should_keep_entry("gpu", _entry("Graphics", "Device-1", "NVIDIA GeForce RTX 3060"), "basic")
        assert not should_keep_entry("gpu", _entry("Graphics", "Device-2", "Logitech Webcam C920"), "basic")
        assert not should_keep_entry("gpu", _entry("Graphics", "Device-3", "Realtek thing"), "basic")
        assert should_keep_entry("gpu", _entry("Graphics", "Display", "wayland server X.org"), "basic")
        assert should_keep_entry("gpu", _entry("Graphics", "Monitor-1", "eDP-1 1920x1080"), "basic")
        assert not should_keep_entry("gpu", _entry("Graphics", "Info", "Tools: glxinfo"), "maximum")
        assert not should_keep_entry("gpu", _entry("Graphics", "X", "loaded: modesetting"), "maximum")
        assert not should_keep_entry("gpu", _entry("Graphics", "Renderer", "Mesa"), "maximum")
        assert not should_keep_entry("gpu", _entry("Video", "Device-1", "NVIDIA"), "basic")

    def test_gpu_api_only_in_maximum(self):
        opengl = _entry("Graphics", "API", "OpenGL v 4.6 renderer NVIDIA")

        assert should_keep_entry("gpu", opengl, "maximum")
        assert not should_keep_entry("gpu", opengl, "verbose")
        assert should_keep_entry("gpu", _entry("Graphics", "API", "Vulkan v 1.3"), "maximum")
        assert should_keep_entry("gpu", _entry("Graphics", "API", "EGL v 1.5"), "maximum")
        assert not should_keep_entry("gpu", _entry("Graphics", "API", "No Vulkan data available."), "maximum")
        assert not should_keep_entry("gpu", _entry("Graphics", "API", "Direct3D"), "maximum")

    def test_unknown_category_keeps(self):
        assert should_keep_entry("printer", _entry("Printers", "Device-1", "HP LaserJet"), "basic")

    def test_is_likely_gpu_value(self):
        assert is_likely_gpu_value("Intel Arc A770")
        assert is_likely_gpu_value("AMD Radeon RX 7800")
        assert not is_likely_gpu_value("Intel USB Video camera")
        assert not is_likely_gpu_value("Realtek RTL8111")


class TestPriority:
    """Test ranking scores."""

    def test_cpu_priorities(self):
        assert entry_priority("cpu", _entry("CPU", "Info", "8-core model AMD")) == 100
        assert entry_priority("cpu", _entry("CPU", "Info", "8-core AMD")) == 20
        assert entry_priority("cpu", _entry("CPU", "Topology", "1 socket")) == 90
        assert entry_priority("cpu", _entry("CPU", "Speed (MHz)", "avg 3800")) == 80
        assert entry_priority("cpu", _entry("CPU", "cache-l2", "4 MiB")) == 70
        assert entry_priority("cpu", _entry("CPU", "Flags", "avx")) == 20

    def test_memory_storage_gpu_priorities(self):
        assert entry_priority("memory", _entry("Info", "Memory", "16 GiB")) == 100
        assert entry_priority("memory", _entry("Swap", "ID-1", "zram")) == 80
        assert entry_priority("storage", _entry("Drives", "Local", "1 TiB")) == 100
        assert entry_priority("storage", _entry("Drives", "ID-2", "sda")) == 80
        assert entry_priority("storage", _entry("Drives", "Temp", "41 C")) == 20
        assert entry_priority("gpu", _entry("Graphics", "Device-1", "AMD")) == 100
        assert entry_priority("gpu", _entry("Graphics", "Display", "x11")) == 90
        assert entry_priority("gpu", _entry("Graphics", "Monitor-1", "eDP")) == 70
        assert entry_priority("gpu", _entry("Graphics", "API", "OpenGL")) == 20

    def test_unranked_categories(self):
        assert entry_priority("system", _entry("System", "Kernel", "6.8")) == 0
        assert entry_priority("printer", _entry("Printers", "Device-1", "HP")) == 0


class TestCurate:
    """Test the full curation of one category."""

    CPU_ENTRIES = [
        _entry("CPU", "Speed (MHz)", "avg 3800 min/max 2200/4850"),
        _entry("CPU", "cache-l2", "L2 4 MiB"),
        _entry("CPU", "Info", "Info:  8-core   model AMD Ryzen 7"),
        _entry("CPU", "Topology", "1 socket 8 cores"),
        _entry("CPU", "Flags", "avx avx2 sse4"),
    ]

    def test_ranks_and_filters_basic(self):
        curated = curate("cpu", self.CPU_ENTRIES, "basic")

        assert [e.key for e in curated] == ["Info", "Topology", "Speed (MHz)"]

    def test_ranks_and_filters_full(self):
        curated = curate("cpu", self.CPU_ENTRIES, "full")

        assert [e.key for e in curated] == ["Info", "Topology", "Speed (MHz)", "cache-l2"]

    def test_values_are_normalized(self):
        curated = curate("cpu", self.CPU_ENTRIES, "basic")

        assert curated[0].value == "8-core model AMD Ryzen 7"
        assert isinstance(curated[0], CuratedEntry)

    def test_case_insensitive_dedup_keeps_first(self):
        entries = [
            _entry("CPU", "Info", "8-core model X"),
            _entry("cpu", "INFO", "8-CORE MODEL X"),
            _entry("Cpu", "info", "8-core  model x"),
        ]

        curated = curate("cpu", entries, "basic")

        assert len(curated) == 1
        assert curated[0].source == "CPU"
        assert curated[0].value == "8-core model X"

    def test_equal_priorities_keep_input_order(self):
        entries = [
            _entry("Drives", "Temp", "41 C"),
            _entry("Drives", "Speed", "63.2 Gb/s"),
            _entry("Drives", "Local", "total 1 TiB"),
            _entry("Drives", "SMART", "yes"),
        ]

        curated = curate("storage", entries, "basic")

        assert [e.key for e in curated] == ["Local", "Temp", "Speed", "SMART"]

    def test_curation_is_idempotent(self):
        for mode in ("basic", "full", "verbose", "maximum"):
            once = curate("cpu", self.CPU_ENTRIES, mode)

            assert curate("cpu", once, mode) == once

    def test_empty_input(self):
        assert curate("gpu", [], "basic") == []


class TestLimits:
    """Test mode-dependent display caps."""

    @pytest.mark.parametrize("mode,limit", [
        ("basic", 5),
        ("full", 7),
        ("verbose", 9),
        ("maximum", 11),
        ("something-else", 11),
        (VerbosityMode.FULL, 7),
    ])
    def test_entry_limit_for_mode(self, mode, limit):
        assert entry_limit_for_mode(mode) == limit

    def test_hidden_count_never_negative(self):
        assert hidden_count(5, 3) == 2
        assert hidden_count(2, 3) == 0


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
