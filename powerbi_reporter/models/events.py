"""Payload shapes delivered by the host executor with each lifecycle event."""

from dataclasses import dataclass
from typing import Protocol


class ItemDescriptor(Protocol):
    """A test item positioned within the collection's folder hierarchy."""

    name: str

    def parent(self) -> "ItemDescriptor | None":
        """Return the enclosing folder, or None for top-level items."""
        ...


class Cursor(Protocol):
    """Iteration cursor of the run."""

    cycles: int
    iteration: int


class Response(Protocol):
    """Timing and size of a received response."""

    response_time: float
    response_size: int


@dataclass(frozen=True, kw_only=True)
class ItemArgs:
    """Arguments of item-scoped events such as ``beforeItem``."""

    item: ItemDescriptor
    cursor: Cursor | None = None


@dataclass(frozen=True, kw_only=True)
class RequestArgs:
    """Arguments of the ``request`` event; ``response`` is None when missing."""

    item: ItemDescriptor | None = None
    cursor: Cursor | None = None
    response: Response | None = None


@dataclass(frozen=True, kw_only=True)
class AssertionArgs:
    """Arguments of the ``assertion`` event."""

    assertion: str = ""
    item: ItemDescriptor | None = None
    cursor: Cursor | None = None
