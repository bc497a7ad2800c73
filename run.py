#!/usr/bin/env python3
"""
inxi dashboard - Simple CLI Runner

Usage:
    python run.py [--mode <basic|full|verbose|maximum>] [--output-dir <path>]
    python run.py <report_file> [--mode <mode>] [--output-dir <path>]

Examples:
    python run.py --mode full
    python run.py data/raw/laptop.txt --mode verbose
    python run.py data/processed/inxi-dashboard-basic.json --output-dir data/processed
"""

import sys
from pathlib import Path

from src.section1_collection import Collector, CollectorConfig, InvalidModeError, ReportFetchError, VerbosityMode
from src.section2_curation import build_dashboard, build_rows, save_dashboard


def _option(name: str) -> str | None:
    if name in sys.argv:
        idx = sys.argv.index(name)
        if idx + 1 < len(sys.argv):
            return sys.argv[idx + 1]
    return None


def print_dashboard(dashboard) -> None:
    """Print every card with its summary and visible rows."""
    print(dashboard.status)
    for card in dashboard.cards:
        print("-" * 50)
        print(f"{card.label} - {card.meta_line()}")
        print(f"  {card.summary}")
        for row in build_rows(card):
            if row.is_compound:
                print(f"  {row.label}")
                for part in row.sub_values:
                    print(f"      {part.key or '-'}: {part.value}")
            else:
                print(f"  {row.label}: {row.value}")
        if card.truncated_count:
            print(f"  Showing {card.entry_limit} of {len(card.entries)} entries. Increase mode for more detail.")


def main():
    try:
        mode = VerbosityMode.parse(_option("--mode") or CollectorConfig.DEFAULT_MODE)
    except InvalidModeError as e:
        print(f"Error: {e}")
        sys.exit(1)

    output_dir = _option("--output-dir")
    option_values = {_option("--mode"), output_dir}
    positional = [arg for arg in sys.argv[1:] if not arg.startswith("--") and arg not in option_values]

    collector = Collector()

    if positional:
        file_path = positional[0]
        if not Path(file_path).exists():
            print(f"Error: File not found: {file_path}")
            sys.exit(1)
        print(f"Loading: {file_path}")
        report = collector.load(file_path, mode=mode.value)
    else:
        if not CollectorConfig.validate():
            sys.exit(1)
        print(f"Running inxi ({mode.value})")
        try:
            report = collector.fetch(mode)
        except ReportFetchError as e:
            print(f"Error: {e}")
            sys.exit(1)

    dashboard = build_dashboard(report, mode.value)
    print_dashboard(dashboard)

    if output_dir:
        print("-" * 50)
        print(f"Saved to: {save_dashboard(dashboard, output_dir)}")


if __name__ == "__main__":
    main()
