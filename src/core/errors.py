"""
Error types raised while importing and rendering a timeline.
"""

from pathlib import Path


class TimelineError(Exception):
    """Base class for every fatal condition of a run."""


class MissingPathArgument(TimelineError):
    """The required input path was not given."""

    def __init__(self):
        super().__init__("path file expected")


class SourceOpenFailure(TimelineError):
    """The spreadsheet could not be opened or parsed at all."""

    def __init__(self, path: Path, reason: str):
        self.path = path
        super().__init__(f"Cannot open '{path}': {reason}")


class CellValueError(TimelineError, ValueError):
    """
    A cell holds a value that cannot be imported.

    Location fields are None until the importer attaches them with
    `at()`; the message always names the offending value.
    """

    reason = "invalid value"

    def __init__(
        self,
        value,
        reason: str | None = None,
        sheet: str | None = None,
        row: int | None = None,
        cell: int | None = None,
    ):
        self.value = value
        self.reason = reason or self.reason
        self.sheet = sheet
        self.row = row
        self.cell = cell
        super().__init__(self._message())

    def _message(self) -> str:
        if self.sheet is None:
            return f"{self.reason}, get '{self.value}'"
        return (
            f"Invalid value at sheet '{self.sheet}', row '{self.row}' and cell "
            f"'{self.cell}', get '{self.value}': {self.reason}"
        )

    def at(self, sheet: str, row: int, cell: int) -> "CellValueError":
        """Return a copy of this error located at sheet/row/cell."""
        return type(self)(self.value, self.reason, sheet, row, cell)


class TimestampParseFailure(CellValueError):
    """A start or end cell does not match the fixed timestamp format."""

    reason = "timestamp does not match format"


class UnrecognizedColor(CellValueError):
    """A non-empty color token is not in the color table."""

    reason = "color not handled"
