"""
Spreadsheet import.

Reads an .xlsx workbook where every sheet is one track. Row 0 of each sheet
is a header; each following row is one event with the positional columns
start, end, name, color.
"""

from collections.abc import Mapping
from datetime import datetime
from pathlib import Path
from zipfile import BadZipFile

from openpyxl import load_workbook
from openpyxl.utils.exceptions import InvalidFileException

from core.colors import RGBA, resolve_color
from core.config import (
    COLOR_COL,
    COLORS,
    END_COL,
    HEADER_ROWS,
    NAME_COL,
    START_COL,
    TIME_FORMAT,
)
from core.errors import CellValueError, SourceOpenFailure, TimestampParseFailure
from models.events import Event, EventsList


# =============================================================================
# CELL PARSING
# =============================================================================


def parse_timestamp(value) -> datetime:
    """
    Parse a start/end cell.

    Cells typed as dates by the spreadsheet arrive as datetime and are kept;
    text cells must match TIME_FORMAT.
    """
    if isinstance(value, datetime):
        return value
    if not isinstance(value, str):
        raise TimestampParseFailure(value, f"expected '{TIME_FORMAT}'")
    try:
        return datetime.strptime(value, TIME_FORMAT)
    except ValueError:
        raise TimestampParseFailure(value, f"expected '{TIME_FORMAT}'") from None


def cell_at(row: tuple, index: int):
    """Value at a column index, None when the row is shorter."""
    return row[index] if index < len(row) else None


def parse_row(row: tuple, colors: Mapping[str, RGBA]) -> Event:
    """Build an Event from one data row. Errors carry the column index."""
    start = _parse_cell(row, START_COL, parse_timestamp)
    end = _parse_cell(row, END_COL, parse_timestamp)

    color = _parse_cell(row, COLOR_COL, lambda value: resolve_color(_as_text(value), colors))

    return Event(
        start=start,
        end=end,
        name=_as_text(cell_at(row, NAME_COL)),
        color=color,
    )


def _as_text(value) -> str:
    return "" if value is None else str(value)


def _parse_cell(row: tuple, index: int, parse):
    try:
        return parse(cell_at(row, index))
    except CellValueError as e:
        e.cell = index
        raise


def _is_blank(row: tuple) -> bool:
    return all(value is None or value == "" for value in row)


# =============================================================================
# WORKBOOK IMPORT
# =============================================================================


def import_from_xlsx(path: Path, colors: Mapping[str, RGBA] = COLORS) -> list[EventsList]:
    """
    Read every sheet of the workbook into an EventsList.

    Any invalid cell aborts the whole import; nothing partial is returned.

    Raises:
        SourceOpenFailure: the file or one of its sheets cannot be parsed.
        TimestampParseFailure: a start/end cell is not a valid timestamp.
        UnrecognizedColor: a color token is not in `colors`.
    """
    path = Path(path)
    print(f"Reading input file: {path}")

    try:
        wb = load_workbook(path, read_only=True, data_only=True)
    except (SyntaxError, OSError, BadZipFile, InvalidFileException, KeyError, ValueError) as e:
        raise SourceOpenFailure(path, str(e) or type(e).__name__) from e

    try:
        return [import_sheet(ws, colors) for ws in wb.worksheets]
    except CellValueError:
        raise
    # Read-only sheets are only parsed while iterating their rows
    except (SyntaxError, OSError, BadZipFile, KeyError, ValueError) as e:
        raise SourceOpenFailure(path, str(e) or type(e).__name__) from e
    finally:
        wb.close()


def import_sheet(ws, colors: Mapping[str, RGBA] = COLORS) -> EventsList:
    """Read one worksheet into an EventsList, skipping the header."""
    events = EventsList(name=ws.title)

    for idx_row, row in enumerate(ws.iter_rows(values_only=True)):
        # Ignore header
        if idx_row < HEADER_ROWS or _is_blank(row):
            continue

        try:
            event = parse_row(row, colors)
        except CellValueError as e:
            raise e.at(ws.title, idx_row, e.cell) from None

        events.add_event(event)

    print(f"  Sheet '{ws.title}': {len(events)} events")
    return events
