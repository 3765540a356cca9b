"""
Data models for events and event tracks.
"""

from dataclasses import dataclass, field
from datetime import datetime, timedelta


@dataclass(frozen=True)
class Event:
    """One imported row: a colored span of time."""
    start: datetime
    end: datetime
    name: str
    color: tuple[int, int, int, int]

    @property
    def duration(self) -> timedelta:
        return self.end - self.start

    def __str__(self) -> str:
        return f"'{self.name}' {self.start} {self.end}"


@dataclass
class EventsList:
    """Events of one track (one sheet), in input row order."""
    name: str
    events: list[Event] = field(default_factory=list)

    def add_event(self, event: Event):
        self.events.append(event)

    def __len__(self) -> int:
        return len(self.events)

    def __iter__(self):
        return iter(self.events)

    def __str__(self) -> str:
        lines = "".join(f" - {event}\n" for event in self.events)
        return f"[{self.name}]\n{lines}\n"
