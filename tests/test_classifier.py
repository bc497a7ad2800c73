"""
Tests for the category registry and the rule-based classifier.
"""

import pytest

from src.section1_collection.schemas import RawEntry, Section
from src.section2_curation.classifier import classify, group_entries, score_entry
from src.section2_curation.registry import CATEGORIES, category_ids, get_category


class TestRegistry:
    """Test the static category definitions."""

    def test_nine_categories_in_order(self):
        assert category_ids() == [
            "system", "machine", "cpu", "memory", "storage",
            "gpu", "network", "battery", "bluetooth",
        ]

    def test_get_category(self):
        storage = get_category("storage")

        assert storage.label == "SSD"
        assert "drives" in storage.section_keywords
        assert "/dev/" in storage.content_keywords

    def test_unknown_category(self):
        assert get_category("printer") is None

    def test_ids_are_unique(self):
        assert len({c.id for c in CATEGORIES}) == len(CATEGORIES)


class TestScoring:
    """Test the per-category score."""

    def test_section_key_and_value_weights(self):
        """Section match is worth 6, key keywords 2 each, value keywords 1 each."""
        entry = RawEntry(key="Kernel", value="6.8.0 arch x86_64")

        assert score_entry(get_category("system"), "System", entry) == 6 + 2 + 1

    def test_section_match_counts_once(self):
        """Several matching section keywords still add 6 only once."""
        entry = RawEntry(key="x", value="y")

        assert score_entry(get_category("gpu"), "Graphics display video", entry) == 6

    def test_every_matching_keyword_counts(self):
        entry = RawEntry(key="", value="nvme ssd /dev/nvme0n1")

        # nvme, ssd, /dev/
        assert score_entry(get_category("storage"), "Misc", entry) == 3


class TestClassify:
    """Test category assignment."""

    def test_score_of_one_is_dropped(self):
        assert classify("Misc", RawEntry(key="x", value="kernel")) is None

    def test_score_of_two_is_kept(self):
        assert classify("Misc", RawEntry(key="kernel", value="6.8")) == "system"

    def test_no_match_is_dropped(self):
        # only "cpu" in the value matches: score 1
        assert classify("Sensors", RawEntry(key="System Temperatures", value="cpu 45.0 C")) is None
        assert classify("Sensors", RawEntry(key="Fan Speeds", value="N/A")) is None

    def test_tie_goes_to_first_registered_category(self):
        """'driver' contains storage's 'drive' as well as network's and bluetooth's 'driver'."""
        assert classify("Misc", RawEntry(key="driver", value="ok")) == "storage"

    def test_section_match_is_case_insensitive_substring(self):
        assert classify("Graphics:", RawEntry(key="Display", value="x11")) == "gpu"
        assert classify("GRAPHICS", RawEntry(key="Display", value="x11")) == "gpu"

    def test_gpu_device_scenario(self):
        entry = RawEntry(key="device-1", value="NVIDIA GeForce RTX driver: nvidia")

        assert classify("Graphics:", entry) == "gpu"

    def test_battery_scenario(self):
        assert classify("Battery:", RawEntry(key="charging", value="true")) == "battery"

    def test_memory_line_from_info_section(self):
        """Info is not a memory section keyword; the key alone scores 2."""
        entry = RawEntry(key="Memory", value="total 32 GiB used 9.1 GiB (28.6%)")

        assert classify("Info", entry) == "memory"

    def test_deterministic(self):
        entry = RawEntry(key="Speed (MHz)", value="avg 3800 min/max 2200/4850")

        results = {classify("CPU", entry) for _ in range(5)}

        assert results == {"cpu"}


class TestGroupEntries:
    """Test grouping of classified entries."""

    def test_all_categories_present_for_empty_input(self):
        groups = group_entries([])

        assert list(groups.keys()) == category_ids()
        assert all(entries == [] for entries in groups.values())

    def test_entries_tagged_with_source(self):
        sections = [Section(title="CPU", entries=[RawEntry(key="Info", value="8-core model AMD")])]

        cpu = group_entries(sections)["cpu"]

        assert len(cpu) == 1
        assert cpu[0].source == "CPU"
        assert cpu[0].key == "Info"
        assert cpu[0].value == "8-core model AMD"

    def test_exact_repeats_are_dropped(self):
        entry = RawEntry(key="Info", value="8-core")
        sections = [
            Section(title="CPU", entries=[entry, entry]),
            Section(title="CPU", entries=[entry]),
        ]

        assert len(group_entries(sections)["cpu"]) == 1

    def test_case_variants_survive_classification(self):
        """Case-insensitive dedup belongs to curation, not classification."""
        sections = [
            Section(title="CPU", entries=[
                RawEntry(key="Info", value="8-core"),
                RawEntry(key="INFO", value="8-CORE"),
            ]),
        ]

        assert len(group_entries(sections)["cpu"]) == 2

    def test_each_entry_lands_in_one_category(self):
        sections = [
            Section(title="Graphics", entries=[
                RawEntry(key="Device-1", value="AMD Radeon driver amdgpu"),
                RawEntry(key="Display", value="wayland"),
            ]),
            Section(title="Network", entries=[RawEntry(key="Device-1", value="Intel Wi-Fi 6 driver iwlwifi")]),
        ]

        groups = group_entries(sections)

        assert sum(len(v) for v in groups.values()) == 3
        assert [e.source for e in groups["gpu"]] == ["Graphics", "Graphics"]
        assert [e.source for e in groups["network"]] == ["Network"]

    def test_preserves_report_order(self):
        sections = [Section(title="System", entries=[
            RawEntry(key="Host", value="laptop"),
            RawEntry(key="Kernel", value="6.8"),
            RawEntry(key="Desktop", value="KDE"),
        ])]

        assert [e.key for e in group_entries(sections)["system"]] == ["Host", "Kernel", "Desktop"]


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
