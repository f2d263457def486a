"""Replay of recorded runs through the reporter."""

from powerbi_reporter.replay.loader import (
    RecordingError,
    event_args,
    load_recording,
    recording_window,
    replay,
)
from powerbi_reporter.replay.models import RecordedEvent

__all__ = [
    "RecordedEvent",
    "RecordingError",
    "event_args",
    "load_recording",
    "recording_window",
    "replay",
]
