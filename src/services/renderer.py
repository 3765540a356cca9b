"""
Timeline layout and rendering.

All events share one horizontal coordinate system anchored at the timeline
start: x = seconds since timeline start * scale factor. Each event gets its
own row slot, top to bottom in traversal order, regardless of track.
"""

from collections.abc import Callable
from dataclasses import dataclass, field
from pathlib import Path

from core.config import (
    BACKGROUND_COLOR,
    FALLBACK_CANVAS_HEIGHT_PX,
    MIN_CANVAS_HEIGHT_PX,
    OUTPUT_PATH,
    ROW_HEIGHT_PX,
)
from core.timeline import TimeLine
from models.events import Event
from services.canvas import Canvas, MatplotlibCanvas


@dataclass(frozen=True)
class Placement:
    """Pixel geometry of one event."""
    event: Event
    x: float
    y: float
    width: float
    height: float


@dataclass
class Layout:
    width: float
    height: float
    scale_factor: float  # pixels per second
    row_height: float
    placements: list[Placement] = field(default_factory=list)


def canvas_height(event_count: int, row_height: float = ROW_HEIGHT_PX) -> float:
    """Row height times event count, or the fallback when that is too small."""
    height = row_height * event_count
    if height < MIN_CANVAS_HEIGHT_PX:
        return FALLBACK_CANVAS_HEIGHT_PX
    return height


def compute_layout(
    timeline: TimeLine, width: float, row_height: float = ROW_HEIGHT_PX
) -> Layout | None:
    """
    Map every event of the timeline to pixel geometry.

    Returns None when the timeline spans no time at all (no events, or all
    events at one instant); there is nothing to scale against.
    """
    total_seconds = timeline.total_duration.total_seconds()
    if total_seconds == 0:
        return None

    scale_factor = width / total_seconds
    layout = Layout(
        width=width,
        height=canvas_height(timeline.event_count, row_height),
        scale_factor=scale_factor,
        row_height=row_height,
    )

    y = 0.0
    for event in timeline.events():
        x = (event.start - timeline.start).total_seconds() * scale_factor
        # Inverted events (end before start) draw as zero width
        event_width = max(0.0, event.duration.total_seconds() * scale_factor)
        layout.placements.append(Placement(event, x, y, event_width, row_height))
        y += row_height

    return layout


def draw(layout: Layout, canvas: Canvas):
    """Paint the background then every placement, in order."""
    canvas.fill(BACKGROUND_COLOR)

    for p in layout.placements:
        event = p.event
        print(
            f"'{event.name}' ({event.start}-{event.end}) "
            f"x:{p.x:0.3f} y:{p.y:0.3f} z:{p.width:0.3f}({event.duration})"
        )
        canvas.draw_rectangle(p.x, p.y, p.width, p.height, event.color)


def render(
    timeline: TimeLine,
    width: float,
    output_path: Path = OUTPUT_PATH,
    canvas_factory: Callable[[float, float], Canvas] = MatplotlibCanvas,
) -> Path | None:
    """
    Render the timeline to a PNG file.

    Returns the written path, or None when the timeline has zero duration,
    in which case no canvas is created and no file is touched.
    """
    layout = compute_layout(timeline, width)
    if layout is None:
        print("Timeline has zero duration, nothing to render")
        return None

    canvas = canvas_factory(layout.width, layout.height)
    draw(layout, canvas)

    output_path = Path(output_path)
    canvas.save(output_path)
    print(f"Saved timeline image to: {output_path}")
    return output_path
