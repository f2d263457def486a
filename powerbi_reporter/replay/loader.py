"""Loading and replaying of recorded event streams."""

import logging
from collections.abc import Sequence
from datetime import datetime
from pathlib import Path
from typing import Any

from pydantic import ValidationError

from powerbi_reporter.events import AsyncEventEmitter, EventKind
from powerbi_reporter.models.events import AssertionArgs, ItemArgs, RequestArgs
from powerbi_reporter.replay.models import RecordedEvent

log = logging.getLogger(__name__)


class RecordingError(Exception):
    """Raised when a recording cannot be parsed."""


def load_recording(path: Path) -> Sequence[RecordedEvent]:
    """Parse a JSON-lines recording.

    Args:
        path: Recording file, one event object per line; blank lines are skipped

    Returns:
        The recorded events in emission order

    Raises:
        FileNotFoundError: If the recording does not exist
        RecordingError: If a line is not a valid event

    """
    events: list[RecordedEvent] = []
    for number, line in enumerate(path.read_text().splitlines(), start=1):
        if not line.strip():
            continue
        try:
            events.append(RecordedEvent.model_validate_json(line))
        except ValidationError as error:
            raise RecordingError(f"Invalid event on line {number}: {error}") from error
    return events


def event_args(event: RecordedEvent) -> Any:
    """Convert recorded arguments into the payload type of the event."""
    args = event.args
    if event.event in {EventKind.BEFORE_ITEM, EventKind.ITEM}:
        if args.item is None:
            raise RecordingError(f"{event.event.value} event without an item")
        return ItemArgs(item=args.item, cursor=args.cursor)
    if event.event is EventKind.REQUEST:
        return RequestArgs(item=args.item, cursor=args.cursor, response=args.response)
    if event.event is EventKind.ASSERTION:
        return AssertionArgs(
            assertion=args.assertion, item=args.item, cursor=args.cursor
        )
    return args


def recording_window(
    events: Sequence[RecordedEvent],
) -> tuple[datetime | None, datetime | None]:
    """Return the recorded timestamps of the ``start`` and ``done`` events."""
    started = next((e.timestamp for e in events if e.event is EventKind.START), None)
    finished = next((e.timestamp for e in events if e.event is EventKind.DONE), None)
    return started, finished


async def replay(events: Sequence[RecordedEvent], emitter: AsyncEventEmitter) -> None:
    """Emit recorded events in order, waiting for each to be handled."""
    log.info("Replaying %d event(s)", len(events))
    for event in events:
        await emitter.emit(event.event.value, event.error, event_args(event))
