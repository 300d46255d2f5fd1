"""
Pagination over Bitbucket Server's paged change listings.

Pages are fetched strictly in sequence because each request needs the
previous page's ``nextPageStart``.
"""

from collections.abc import Awaitable, Callable, Iterable

from bbserver.logging import get_logger
from bbserver.types.changes import PagedChangeSet

logger = get_logger("pagination")

# Guard against a server that never reports its last page
MAX_PAGES = 1000


def unique_in_order(paths: Iterable[str]) -> list[str]:
    """Drop repeated paths, keeping the first occurrence of each."""
    seen: set[str] = set()
    unique: list[str] = []
    for path in paths:
        if path not in seen:
            seen.add(path)
            unique.append(path)
    return unique


def collect_changed_paths(
    fetch_page: Callable[[int], PagedChangeSet],
    max_pages: int = MAX_PAGES,
) -> list[str]:
    """
    Fetch every page of a change listing and return the distinct paths.

    Renames contribute both their new and old path. Hitting ``max_pages``
    ends the loop without an error and returns what was gathered.

    Args:
        fetch_page: Fetches the page starting at the given offset
        max_pages: Upper bound on fetch calls

    Returns:
        Distinct paths in first-seen order

    Raises:
        Whatever ``fetch_page`` raises; nothing is returned in that case.
    """
    paths: list[str] = []
    start = 0
    for _ in range(max_pages):
        page = fetch_page(start)
        for change in page.values:
            paths.extend(change.touched_paths())
        if page.is_last_page:
            break
        start = page.next_page_start  # type: ignore[assignment]
    else:
        logger.warning("stopped paging after %d pages without reaching the last page", max_pages)

    return unique_in_order(paths)


async def acollect_changed_paths(
    fetch_page: Callable[[int], Awaitable[PagedChangeSet]],
    max_pages: int = MAX_PAGES,
) -> list[str]:
    """Async twin of :func:`collect_changed_paths`."""
    paths: list[str] = []
    start = 0
    for _ in range(max_pages):
        page = await fetch_page(start)
        for change in page.values:
            paths.extend(change.touched_paths())
        if page.is_last_page:
            break
        start = page.next_page_start  # type: ignore[assignment]
    else:
        logger.warning("stopped paging after %d pages without reaching the last page", max_pages)

    return unique_in_order(paths)
