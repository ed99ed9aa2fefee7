"""Pagination arithmetic for the quotes listing."""

import re

from . import config

_PAGE_RE = re.compile(r"[+-]?[0-9]+")


class PageNotFound(Exception):
    """Raised when the requested page is past the last page."""

    def __init__(self, page: int, total_pages: int):
        super().__init__(f"Page {page} not found (total pages: {total_pages})")
        self.page = page
        self.total_pages = total_pages


def parse_page_number(raw) -> int:
    """Return the page number from a query value; anything unusable means 1."""
    # ASCII digits only: int() would also take "1_0", " 2 " and non-ASCII digits
    if not isinstance(raw, str) or not _PAGE_RE.fullmatch(raw):
        return 1
    page = int(raw)
    return page if page >= 1 else 1


def count_pages(count: int, per_page: int = config.FRIENDS_PER_PAGE) -> int:
    return (count + per_page - 1) // per_page


def page_ranges(current: int, total: int, window: int = config.PAGE_WINDOW) -> list[str]:
    """Page numbers for the nav bar: the run of ``window`` pages holding ``current``.

    With a window of 3, pages 1-3 show "1 2 3", pages 4-6 show "4 5 6" and so on,
    clipped at the last page.
    """
    start = (current - 1) // window * window + 1
    end = min(start + window - 1, total)
    return [str(i) for i in range(start, end + 1)]


def paginate(count: int, page: int, per_page: int = config.FRIENDS_PER_PAGE) -> dict:
    total_pages = count_pages(count, per_page)
    if page > total_pages:
        raise PageNotFound(page, total_pages)

    start = (page - 1) * per_page
    end = min(start + per_page, count)

    return {
        "start": start,
        "end": end,
        "prev_page": page - 1 if page > 1 else 0,
        "next_page": page + 1 if page < total_pages else 0,
        "current_page": page,
        "total_pages": total_pages,
        "page_ranges": page_ranges(page, total_pages),
    }
