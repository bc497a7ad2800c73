"""
Dashboard assembly: Report in, one curated card per category out.

`build_dashboard` is a pure function of (report, mode): the report is
never modified and no state is kept between calls.
"""

import logging
from datetime import datetime, timezone
from pathlib import Path
from typing import Optional

from src.section1_collection.schemas import Report

from .classifier import group_entries
from .curator import curate, entry_limit_for_mode, hidden_count
from .decomposer import explode_value
from .labels import display_label
from .registry import CATEGORIES
from .schemas import CategoryCard, Dashboard, DisplayRow
from .summarizer import summarize

logger = logging.getLogger(__name__)


def build_dashboard(report: Report, mode: Optional[str] = None) -> Dashboard:
    """
    Classify, curate and summarize a report.

    Args:
        report: Report produced by Section 1
        mode: Verbosity mode to curate with (defaults to the report's mode)

    Returns:
        Dashboard with one card per registry category, in registry order
    """
    mode_value = getattr(mode, "value", mode) or report.mode
    groups = group_entries(report.sections)
    limit = entry_limit_for_mode(mode_value)

    cards = []
    for category in CATEGORIES:
        raw_entries = groups.get(category.id, [])
        entries = curate(category.id, raw_entries, mode_value)
        cards.append(
            CategoryCard(
                id=category.id,
                label=category.label,
                icon=category.icon,
                entries=entries,
                hidden_count=hidden_count(len(raw_entries), len(entries)),
                entry_limit=limit,
                summary=summarize(category.id, entries),
            )
        )

    dashboard = Dashboard(
        mode=mode_value,
        report_timestamp=report.timestamp,
        status=report.status_line(),
        cards=cards,
    )
    logger.debug("built dashboard mode=%s entries=%d", mode_value, dashboard.total_entries)
    return dashboard


def build_rows(card: CategoryCard) -> list[DisplayRow]:
    """
    Labeled rows for a card's visible entries.

    Values with more than one embedded fragment carry them as
    sub-values; otherwise the row holds the single fragment's text.
    """
    rows = []
    for entry in card.visible_entries():
        fragments = explode_value(entry.value)
        label = display_label(card.id, entry)
        if len(fragments) <= 1:
            value = fragments[0].value if fragments else entry.value
            rows.append(DisplayRow(label=label, value=value))
        else:
            rows.append(DisplayRow(label=label, value=entry.value, sub_values=fragments))
    return rows


def save_dashboard(dashboard: Dashboard, output_dir: str | Path) -> Path:
    """
    Save a dashboard as JSON.

    Returns:
        Path to the saved file
    """
    output_dir = Path(output_dir)
    output_dir.mkdir(parents=True, exist_ok=True)

    stamp = (dashboard.report_timestamp or datetime.now(timezone.utc)).strftime("%Y%m%d_%H%M%S")
    output_file = output_dir / f"dashboard-{dashboard.mode}-{stamp}.json"

    with open(output_file, 'w', encoding='utf-8') as f:
        f.write(dashboard.model_dump_json(indent=2))

    return output_file
