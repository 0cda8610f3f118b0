"""Split table rows into pages."""

import math
from dataclasses import dataclass
from typing import List, Sequence, TypeVar

from .errors import PageTooSmallError

T = TypeVar("T")


@dataclass(frozen=True)
class PagePlan:
    """Row range drawn on one page: start inclusive, end exclusive."""
    index: int
    start: int
    end: int

    @property
    def row_count(self) -> int:
        return self.end - self.start

    def slice(self, rows: Sequence[T]) -> Sequence[T]:
        return rows[self.start:self.end]


def rows_per_page(usable_height: float, row_height: float) -> int:
    """
    Number of content rows that fit on a page.

    One row's height is reserved for the column header row. Raises
    PageTooSmallError when not even one content row fits.
    """
    rows = math.floor(usable_height / row_height) - 1
    if rows < 1:
        raise PageTooSmallError(rows, usable_height, row_height)
    return rows


def plan_pages(total_rows: int, per_page: int) -> List[PagePlan]:
    """
    Compute the row range of every page.

    The last page may hold fewer than per_page rows. Zero rows yield
    an empty plan.
    """
    if per_page < 1:
        raise PageTooSmallError(per_page)
    if total_rows < 0:
        raise ValueError(f"Row count must not be negative, got {total_rows}")

    page_count = math.ceil(float(total_rows) / per_page)
    plans = []
    for page_index in range(page_count):
        start = page_index * per_page
        end = min(start + per_page, total_rows)
        plans.append(PagePlan(index=page_index, start=start, end=end))
    return plans
