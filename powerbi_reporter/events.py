"""Lifecycle event vocabulary and the emitter contract of the host executor."""

import inspect
from collections import defaultdict
from collections.abc import Awaitable, Callable
from dataclasses import dataclass, field
from enum import StrEnum
from typing import Any, Protocol, TypeAlias

EventHandler: TypeAlias = Callable[[Any, Any], Awaitable[None] | None]


class EventKind(StrEnum):
    """Events emitted by the executor, in the order they occur within a run."""

    START = "start"
    BEFORE_ITERATION = "beforeIteration"
    ITERATION = "iteration"
    BEFORE_ITEM = "beforeItem"
    ITEM = "item"
    BEFORE_PREREQUEST = "beforePrerequest"
    PREREQUEST = "prerequest"
    BEFORE_SCRIPT = "beforeScript"
    SCRIPT = "script"
    BEFORE_REQUEST = "beforeRequest"
    REQUEST = "request"
    BEFORE_TEST = "beforeTest"
    TEST = "test"
    BEFORE_ASSERTION = "beforeAssertion"
    ASSERTION = "assertion"
    CONSOLE = "console"
    EXCEPTION = "exception"
    BEFORE_DONE = "beforeDone"
    DONE = "done"


class EventEmitter(Protocol):
    """Subscription surface of the host executor.

    Handlers are called with ``(error, args)``. A handler may return an
    awaitable, which the emitter awaits before delivering the next event.
    """

    def on(self, name: str, handler: EventHandler) -> None:
        """Register a handler for the named event."""
        ...


@dataclass
class AsyncEventEmitter:
    """In-process emitter delivering events one at a time in arrival order."""

    _handlers: defaultdict[str, list[EventHandler]] = field(
        default_factory=lambda: defaultdict(list), repr=False
    )

    def on(self, name: str, handler: EventHandler) -> None:
        """Register a handler for the named event."""
        self._handlers[name].append(handler)

    def listeners(self, name: str) -> int:
        """Return the number of handlers registered for the named event."""
        return len(self._handlers.get(name, ()))

    async def emit(self, name: str, error: Any = None, args: Any = None) -> None:
        """Deliver an event to its handlers, awaiting asynchronous ones."""
        for handler in list(self._handlers.get(name, ())):
            result = handler(error, args)
            if inspect.isawaitable(result):
                await result
