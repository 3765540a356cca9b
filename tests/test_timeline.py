"""
Tests for timeline aggregation.
"""

import itertools
from datetime import timedelta

from core.timeline import Bounds, build_timeline, widen
from models.events import EventsList


def test_bounds_are_min_start_and_max_end(sample_tracks):
    timeline = build_timeline(sample_tracks)

    all_events = [e for track in sample_tracks for e in track.events]
    assert timeline.start == min(e.start for e in all_events)
    assert timeline.end == max(e.end for e in all_events)
    assert timeline.total_duration == timedelta(hours=4)


def test_bounds_do_not_depend_on_traversal_order(sample_tracks):
    expected = build_timeline(sample_tracks)

    for tracks in itertools.permutations(sample_tracks):
        shuffled = [EventsList(t.name, list(reversed(t.events))) for t in tracks]
        timeline = build_timeline(shuffled)
        assert (timeline.start, timeline.end) == (expected.start, expected.end)


def test_event_count_includes_every_track(sample_tracks, make_event):
    sample_tracks.append(EventsList("Instant", [
        make_event("2024-01-01 09:00:00", "2024-01-01 09:00:00"),
        # End before start still counts
        make_event("2024-01-01 11:00:00", "2024-01-01 10:00:00"),
    ]))

    timeline = build_timeline(sample_tracks)

    assert timeline.event_count == 5


def test_tracks_are_held_by_reference(sample_tracks):
    timeline = build_timeline(sample_tracks)

    assert timeline.tracks is sample_tracks
    assert [e.name for e in timeline.events()] == ["Sketch", "Review", "Setup"]


def test_no_tracks_gives_unset_range():
    timeline = build_timeline([])

    assert timeline.start is None
    assert timeline.end is None
    assert timeline.event_count == 0
    assert timeline.total_duration == timedelta(0)


def test_empty_tracks_give_unset_range():
    timeline = build_timeline([EventsList("A"), EventsList("B")])

    assert timeline.start is None
    assert timeline.event_count == 0


def test_widen_initializes_then_extends(make_event):
    first = make_event("2024-01-01 10:00:00", "2024-01-01 11:00:00")
    earlier = make_event("2024-01-01 08:00:00", "2024-01-01 09:00:00")

    bounds = widen(None, first)
    assert bounds == Bounds(first.start, first.end)

    bounds = widen(bounds, earlier)
    assert bounds == Bounds(earlier.start, first.end)
