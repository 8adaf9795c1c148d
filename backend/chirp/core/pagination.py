"""Pagination Rules — page size, page validation, offset and page-count math.

Invariants:
    - Page numbers are 1-based; anything below 1 is a ValidationError
    - PAGE_SIZE is fixed; it is not configurable per request
    - page_count(0) == 0 (an empty timeline has no pages, not one)
"""

from chirp.core.errors import ValidationError

PAGE_SIZE = 32


def check_page_number(page: int) -> None:
    """Raise ValidationError if page is not a valid 1-based page number."""
    if page is None or page < 1:
        raise ValidationError("Page number cannot be under 1", "page")


def skip_count(page: int, page_size: int = PAGE_SIZE) -> int:
    """Rows to skip before the first row of the given page."""
    return (page - 1) * page_size


def page_count(count: int, page_size: int = PAGE_SIZE) -> int:
    """Number of pages needed to show count rows."""
    total_pages = count // page_size
    # remainder rows still need a page of their own
    if count % page_size != 0:
        total_pages += 1
    return total_pages
