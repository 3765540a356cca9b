"""
Pytest configuration and shared fixtures.
"""

import sys
from datetime import datetime
from pathlib import Path

import pytest
from openpyxl import Workbook

# Add src to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from models.events import Event, EventsList

HEADER = ["Start", "End", "Name", "Color"]
RED = (255, 0, 0, 255)


@pytest.fixture
def make_event():
    """Factory for events from 'YYYY-MM-DD HH:MM:SS' strings."""
    def _make(start: str, end: str, name: str = "Task", color=RED) -> Event:
        return Event(
            start=datetime.fromisoformat(start),
            end=datetime.fromisoformat(end),
            name=name,
            color=color,
        )
    return _make


@pytest.fixture
def sample_tracks(make_event):
    """Two tracks with disjoint hours, plus an empty track."""
    return [
        EventsList("Design", [
            make_event("2024-01-01 09:00:00", "2024-01-01 10:00:00", "Sketch"),
            make_event("2024-01-01 10:30:00", "2024-01-01 12:00:00", "Review"),
        ]),
        EventsList("Build", [
            make_event("2024-01-01 08:00:00", "2024-01-01 09:00:00", "Setup"),
        ]),
        EventsList("Empty"),
    ]


@pytest.fixture
def write_workbook(tmp_path):
    """
    Factory writing an .xlsx with one sheet per entry of `sheets`.

    Each value is the list of data rows; the header row is added.
    """
    def _write(sheets: dict[str, list[list]], name: str = "timeline.xlsx") -> Path:
        wb = Workbook()
        wb.remove(wb.active)
        for title, rows in sheets.items():
            ws = wb.create_sheet(title)
            ws.append(HEADER)
            for row in rows:
                ws.append(row)
        path = tmp_path / name
        wb.save(path)
        return path
    return _write
