"""
Timeline aggregation over event tracks.
"""

from dataclasses import dataclass
from datetime import datetime, timedelta
from functools import reduce

from models.events import Event, EventsList


@dataclass(frozen=True)
class Bounds:
    """Inclusive time range covered by a set of events."""
    start: datetime
    end: datetime


def widen(bounds: Bounds | None, event: Event) -> Bounds:
    """Fold step: the first event sets both bounds, later events widen them."""
    if bounds is None:
        return Bounds(event.start, event.end)
    return Bounds(min(bounds.start, event.start), max(bounds.end, event.end))


@dataclass(frozen=True)
class TimeLine:
    """
    Aggregate view over all tracks.

    Holds the tracks it was built from by reference. `start` and `end` are
    None when the tracks hold no events.
    """
    tracks: list[EventsList]
    start: datetime | None
    end: datetime | None
    event_count: int

    @property
    def total_duration(self) -> timedelta:
        if self.start is None or self.end is None:
            return timedelta(0)
        return self.end - self.start

    def events(self):
        """Yield every event, track order then event order."""
        for track in self.tracks:
            yield from track.events


def build_timeline(tracks: list[EventsList]) -> TimeLine:
    """Compute global bounds and event count from fully imported tracks."""
    bounds = reduce(widen, (e for track in tracks for e in track.events), None)
    event_count = sum(len(track) for track in tracks)

    return TimeLine(
        tracks=tracks,
        start=bounds.start if bounds else None,
        end=bounds.end if bounds else None,
        event_count=event_count,
    )
