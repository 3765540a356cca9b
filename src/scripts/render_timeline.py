#!/usr/bin/env python3
"""
Render a Gantt-style timeline image from an Excel workbook.

Each sheet is a track; each row after the header is an event with the
columns start, end, name, color (timestamps as YYYY-MM-DD HH:MM:SS).

Usage:
    uv run python src/scripts/render_timeline.py --path <workbook.xlsx> [--width 4000]

Example:
    uv run python src/scripts/render_timeline.py --path data/schedule.xlsx --width 2000
"""

import argparse
import sys
from pathlib import Path

# Add src to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from core.config import DEFAULT_WIDTH, OUTPUT_PATH
from core.errors import MissingPathArgument, TimelineError
from core.timeline import build_timeline
from services.importer import import_from_xlsx
from services.renderer import render


def run(path: str | None, width: float, output_path: Path) -> Path | None:
    """Import, aggregate, render, then list every track."""
    if not path:
        raise MissingPathArgument()

    tracks = import_from_xlsx(Path(path))
    timeline = build_timeline(tracks)
    print(f"Total events: {timeline.event_count}")

    written = render(timeline, width, output_path)

    for events in tracks:
        print(events, end="")

    return written


def main(argv: list[str] | None = None):
    parser = argparse.ArgumentParser(
        description="Render a timeline image from an Excel workbook"
    )
    parser.add_argument("--path", help="XLSX path")
    parser.add_argument(
        "--width",
        type=float,
        default=DEFAULT_WIDTH,
        help=f"Image width in pixels (default: {DEFAULT_WIDTH:g})",
    )
    parser.add_argument(
        "--output",
        type=Path,
        default=OUTPUT_PATH,
        help=f"Output PNG path (default: {OUTPUT_PATH})",
    )

    args = parser.parse_args(argv)

    try:
        run(args.path, args.width, args.output)
    except TimelineError as e:
        print(f"\nError: {e}")
        sys.exit(1)


if __name__ == "__main__":
    main()
