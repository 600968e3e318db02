from __future__ import annotations
from dataclasses import dataclass, field
from typing import Callable, Generic, List, Optional, TypeVar

T = TypeVar('T')


@dataclass(frozen=True)
class Page(Generic[T]):
    items: List[T] = field(default_factory=list)
    total: int = 0
    limit: int = 0
    cursor: Optional[str] = None

    @property
    def has_more(self) -> bool:
        return bool(self.cursor)


def collect_all(fetch_page: Callable[[Optional[str]], Page[T]], max_pages: Optional[int] = None) -> List[T]:
    """Follow server cursors until exhausted and return every item in order.

    A page with no items ends the walk even if it carries a cursor. Any error
    from ``fetch_page`` propagates and the items gathered so far are dropped.
    The number of round-trips is unbounded unless ``max_pages`` is given;
    callers that need bounded memory should page manually.
    """
    items: List[T] = []
    cursor: Optional[str] = None
    pages_fetched = 0
    while max_pages is None or pages_fetched < max_pages:
        page = fetch_page(cursor)
        pages_fetched += 1
        items.extend(page.items)
        if not page.cursor or not page.items:
            break
        cursor = page.cursor
    return items
