"""Per-run accumulation of pass/fail status and response samples."""

import statistics
from collections.abc import Sequence
from dataclasses import dataclass, field
from enum import StrEnum
from typing import Any

from powerbi_reporter.models.events import Response


class RunState(StrEnum):
    """Lifecycle of a reported run; transitions only move forward."""

    IDLE = "idle"
    RUNNING = "running"
    COMPLETED = "completed"


@dataclass(frozen=True, kw_only=True)
class FailedAssertion:
    """A failed assertion of the current item."""

    assertion: str
    message: str


@dataclass(kw_only=True)
class CurrentItem:
    """The item presently executing."""

    name: str
    passed: bool = True
    failed_assertions: list[FailedAssertion] = field(default_factory=list)


def describe_error(error: Any) -> str:
    """Return a readable message for an event error object."""
    message = getattr(error, "message", None)
    return str(message) if message else str(error)


def mean_or_zero(samples: Sequence[float]) -> float:
    """Return the arithmetic mean of the samples, or 0 when there are none."""
    return statistics.fmean(samples) if samples else 0.0


@dataclass(kw_only=True)
class RunAccumulator:
    """Mutable statistics of a single run.

    Response time and size samples are kept in lockstep: both lists always
    have the same length. ``overall_passed`` only ever goes from True to
    False.
    """

    state: RunState = RunState.IDLE
    overall_passed: bool = True
    response_time_samples: list[float] = field(default_factory=list)
    response_size_samples: list[float] = field(default_factory=list)
    current_item: CurrentItem | None = None

    def start(self) -> None:
        """Enter the running state."""
        self.state = RunState.RUNNING

    def begin_item(self, name: str) -> CurrentItem:
        """Replace the current item with a fresh one."""
        self.current_item = CurrentItem(name=name)
        return self.current_item

    def record_response(self, response: Response | None) -> bool:
        """Record a response's samples.

        A missing response discards every sample collected so far; later
        responses are appended to the emptied lists as usual.

        Returns:
            False if the samples were reset, True otherwise

        """
        if response is None:
            self.response_time_samples.clear()
            self.response_size_samples.clear()
            return False

        self.response_time_samples.append(response.response_time)
        self.response_size_samples.append(response.response_size)
        return True

    def record_assertion(self, assertion: str, error: Any) -> FailedAssertion | None:
        """Record an assertion outcome; a non-null error fails the run."""
        if error is None:
            return None

        self.overall_passed = False
        failure = FailedAssertion(assertion=assertion, message=describe_error(error))
        if self.current_item is not None:
            self.current_item.passed = False
            self.current_item.failed_assertions.append(failure)
        return failure

    def complete(self) -> None:
        """Enter the terminal state."""
        self.state = RunState.COMPLETED

    @property
    def average_response_time(self) -> float:
        """Mean response time in milliseconds, 0 without samples."""
        return mean_or_zero(self.response_time_samples)

    @property
    def average_response_size(self) -> float:
        """Mean response size in bytes, 0 without samples."""
        return mean_or_zero(self.response_size_samples)
