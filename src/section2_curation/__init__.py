"""
Section 2: Curation

Takes Report objects from Section 1 (Collection) and turns them into
compact per-category cards:
1. Classification of entries into nine fixed categories
2. Inclusion policy, deduplication and ranking per category
3. Display labels, compound-value decomposition and summaries
"""

__version__ = "1.0.0"

from .classifier import classify, group_entries
from .curator import curate, entry_limit_for_mode, entry_priority
from .dashboard import build_dashboard, build_rows, save_dashboard
from .decomposer import explode_value
from .labels import display_label, metric_label, primary_section
from .normalizer import normalize_value
from .policy import is_likely_gpu_value, should_keep_entry
from .registry import CATEGORIES, category_ids, get_category
from .schemas import (
    CategoryCard,
    CategoryDefinition,
    ClassifiedEntry,
    CuratedEntry,
    Dashboard,
    DisplayRow,
    SubValue,
)
from .session import DashboardSession
from .summarizer import summarize

__all__ = [
    "CATEGORIES",
    "CategoryCard",
    "CategoryDefinition",
    "ClassifiedEntry",
    "CuratedEntry",
    "Dashboard",
    "DashboardSession",
    "DisplayRow",
    "SubValue",
    "build_dashboard",
    "build_rows",
    "category_ids",
    "classify",
    "curate",
    "display_label",
    "entry_limit_for_mode",
    "entry_priority",
    "explode_value",
    "get_category",
    "group_entries",
    "is_likely_gpu_value",
    "metric_label",
    "normalize_value",
    "primary_section",
    "save_dashboard",
    "should_keep_entry",
    "summarize",
]
