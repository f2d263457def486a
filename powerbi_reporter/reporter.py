"""Power BI reporter attached to a running collection executor."""

import logging
from collections.abc import Awaitable, Callable, Mapping
from dataclasses import dataclass, field
from datetime import datetime
from functools import cached_property, partial
from typing import Any

from powerbi_reporter.accumulator import RunAccumulator, RunState
from powerbi_reporter.events import EventEmitter, EventHandler, EventKind
from powerbi_reporter.models.context import RunContext, utc_now
from powerbi_reporter.models.outcome import DeliveryOutcome
from powerbi_reporter.models.report import Report
from powerbi_reporter.naming import resolve_item_name
from powerbi_reporter.report_builder import build_report
from powerbi_reporter.senders.base import ReportSender

log = logging.getLogger(__name__)


@dataclass(kw_only=True)
class Reporter:
    """Aggregates one run's events and reports the run once it is done.

    Events arriving before ``start`` or after ``done`` are ignored.
    """

    context: RunContext
    sender: ReportSender
    accumulator: RunAccumulator = field(default_factory=RunAccumulator)
    clock: Callable[[], datetime] = utc_now
    report: Report | None = field(default=None, init=False)
    outcome: DeliveryOutcome | None = field(default=None, init=False)

    @cached_property
    def handlers(self) -> Mapping[EventKind, EventHandler]:
        """Event handlers of the reporter, keyed by the event they handle."""
        return {
            EventKind.START: self.start,
            EventKind.BEFORE_ITEM: self.before_item,
            EventKind.REQUEST: self.request,
            EventKind.ASSERTION: self.assertion,
            EventKind.DONE: self.done,
        }

    def subscribe(self, emitter: EventEmitter) -> None:
        """Register for every event the reporter handles."""
        for kind in self.handlers:
            emitter.on(kind.value, partial(self.handle, kind))

    def handle(
        self, kind: EventKind, error: Any, args: Any
    ) -> Awaitable[None] | None:
        """Route an event to its handler if the run is in the right state.

        Every event except ``done`` is handled synchronously. For ``done`` the
        returned awaitable completes once the report has been sent. Handler
        failures are logged and never raised to the emitter.
        """
        expected = RunState.IDLE if kind is EventKind.START else RunState.RUNNING
        if self.accumulator.state is not expected:
            log.warning(
                "Ignoring %s event in state %s", kind.value, self.accumulator.state
            )
            return None

        try:
            return self.handlers[kind](error, args)
        except Exception:
            log.exception("Failed to handle %s event", kind.value)
            return None

    def start(self, error: Any, args: Any) -> None:
        self.accumulator.start()
        log.info("Currently running %s", self.context.collection_name)

    def before_item(self, error: Any, args: Any) -> None:
        item = getattr(args, "item", None)
        if item is None:
            log.warning("beforeItem event without an item, keeping current item")
            return

        name = resolve_item_name(
            item, getattr(args, "cursor", None), self.context.collection_name
        )
        self.accumulator.begin_item(name)
        log.info("[testStarted name='%s' captureStandardOutput='true']", name)

    def request(self, error: Any, args: Any) -> None:
        response = getattr(args, "response", None)
        if not self.accumulator.record_response(response):
            log.warning("Missing response, discarding collected response samples")
            return

        log.info(
            "Response time: %sms, response size: %sB",
            response.response_time,
            response.response_size,
        )

    def assertion(self, error: Any, args: Any) -> None:
        failure = self.accumulator.record_assertion(
            getattr(args, "assertion", None) or "", error
        )
        if failure is None:
            return

        item = self.accumulator.current_item
        log.info(
            "Assertion failed: item=%s assertion=%s message=%s",
            item.name if item is not None else "<none>",
            failure.assertion,
            failure.message,
        )

    async def done(self, error: Any, args: Any) -> None:
        """Complete the run, then build and send its report."""
        if error is not None:
            log.warning("Run finished with error: %s", error)

        self.accumulator.complete()
        log.info("Tests finished, preparing report for Power BI")

        try:
            self.report = build_report(self.context, self.accumulator, self.clock())
            self.outcome = await self.sender.send(
                self.report, self.context.report_url
            )
        except Exception:
            log.exception("Failed to report run")
