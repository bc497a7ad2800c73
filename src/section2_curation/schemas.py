"""
Pydantic schemas for Section 2: Curation

Classified and curated entries, decomposed sub-values, and the
per-category cards assembled for display.
"""

from datetime import datetime, timezone
from typing import Optional
from pydantic import BaseModel, Field


class CategoryDefinition(BaseModel):
    """Static definition of one output category."""
    id: str = Field(..., description="Stable category identifier (e.g. 'cpu')")
    label: str = Field(..., description="Human label shown on the card")
    icon: str = Field(..., description="Icon reference for the presentation layer")
    section_keywords: tuple[str, ...] = Field(..., description="Substrings matched against section titles")
    content_keywords: tuple[str, ...] = Field(..., description="Substrings matched against keys and values")


class ClassifiedEntry(BaseModel):
    """A raw entry tagged with the section it came from."""
    source: str = Field(..., description="Original section title")
    key: str = Field(default="", description="Entry key")
    value: str = Field(default="", description="Entry value")


class CuratedEntry(ClassifiedEntry):
    """A classified entry that survived normalization, filtering, and dedup."""


class SubValue(BaseModel):
    """One fragment of a decomposed compound value."""
    key: str = Field(default="", description="Embedded label, empty for unlabeled text")
    value: str = Field(..., description="Trimmed fragment text")


class DisplayRow(BaseModel):
    """A labeled entry ready for a table; compound values carry sub-values."""
    label: str
    value: str
    sub_values: list[SubValue] = Field(default_factory=list)

    @property
    def is_compound(self) -> bool:
        return len(self.sub_values) > 1


class CategoryCard(BaseModel):
    """
    Curated output for one category.

    `entries` holds every curated entry; the presentation layer shows
    at most `entry_limit` of them (see `visible_entries`).
    """
    id: str
    label: str
    icon: str
    entries: list[CuratedEntry] = Field(default_factory=list)
    hidden_count: int = Field(default=0, ge=0, description="Classified entries dropped by curation")
    entry_limit: int = Field(..., ge=0)
    summary: str

    def visible_entries(self) -> list[CuratedEntry]:
        return self.entries[: self.entry_limit]

    @property
    def truncated_count(self) -> int:
        return max(len(self.entries) - self.entry_limit, 0)

    def meta_line(self) -> str:
        """Item count line, e.g. '4 items (2 hidden)'."""
        if self.hidden_count > 0:
            return f"{len(self.entries)} items ({self.hidden_count} hidden)"
        return f"{len(self.entries)} items detected"


class Dashboard(BaseModel):
    """All category cards for one report and mode."""
    mode: str
    generated_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
    report_timestamp: Optional[datetime] = None
    status: str = ""
    cards: list[CategoryCard] = Field(default_factory=list)

    def card(self, category_id: str) -> Optional[CategoryCard]:
        for card in self.cards:
            if card.id == category_id:
                return card
        return None

    @property
    def total_entries(self) -> int:
        return sum(len(card.entries) for card in self.cards)
