"""Page and selection bookkeeping for the wallet list."""

from __future__ import annotations

import math

from edgebeat.config import WALLETS_PER_PAGE


class Pager:
    """Track the current page and the highlighted row.

    ``selected`` is an absolute index into the wallet list and always stays
    inside the current page.
    """

    def __init__(self, total: int, page_size: int = WALLETS_PER_PAGE) -> None:
        if page_size <= 0:
            raise ValueError("page_size must be positive")
        self.total = total
        self.page_size = page_size
        self.page = 0
        self.selected = 0

    @property
    def page_count(self) -> int:
        return math.ceil(self.total / self.page_size)

    def page_bounds(self) -> tuple[int, int]:
        """Return [start, end) of the current page."""
        start = self.page * self.page_size
        return start, min(start + self.page_size, self.total)

    def move_up(self) -> bool:
        start, _end = self.page_bounds()
        if self.selected > start:
            self.selected -= 1
            return True
        return False

    def move_down(self) -> bool:
        _start, end = self.page_bounds()
        if self.selected < end - 1:
            self.selected += 1
            return True
        return False

    def prev_page(self) -> bool:
        if self.page > 0:
            self._go_to(self.page - 1)
            return True
        return False

    def next_page(self) -> bool:
        if self.page < self.page_count - 1:
            self._go_to(self.page + 1)
            return True
        return False

    def _go_to(self, page: int) -> None:
        self.page = page
        self.selected = page * self.page_size
