"""Resolution of fully qualified item names."""

import logging

from powerbi_reporter.models.events import Cursor, ItemDescriptor
from powerbi_reporter.sanitizer import sanitize

log = logging.getLogger(__name__)


def parent_name(item: ItemDescriptor) -> str:
    """Return the name of the item's parent folder, or an empty string."""
    try:
        parent = item.parent()
    except Exception:
        log.debug("Parent lookup failed for item %r", item.name, exc_info=True)
        return ""
    if parent is None:
        return ""
    return getattr(parent, "name", None) or ""


def resolve_item_name(
    item: ItemDescriptor, cursor: Cursor | None, collection_name: str
) -> str:
    """Build the sanitized name of an item within its collection.

    Args:
        item: The executing item
        cursor: Iteration cursor of the run, if the executor provides one
        collection_name: Name of the collection; its root folder is not shown

    Returns:
        ``<folder>/<item>/<iteration>`` with the folder and iteration parts
        omitted where they do not apply, escaped with :func:`sanitize`.

    """
    folder = parent_name(item)
    prefix = "" if not folder or folder == collection_name else f"{folder}/"
    suffix = f"/{cursor.iteration}" if cursor is not None and cursor.cycles > 1 else ""
    return sanitize(f"{prefix}{item.name}{suffix}")
