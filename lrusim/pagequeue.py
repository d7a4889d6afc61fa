"""Bounded LRU queue of page numbers that reports reuse depth."""

from __future__ import annotations

from collections import OrderedDict
from typing import Iterator


class PageQueue:
    """LRU-ordered pages: iteration runs from least to most recently used."""

    def __init__(self, max_size: int) -> None:
        if max_size < 0:
            raise ValueError("max_size must not be negative")
        self.max_size = max_size
        self._pages: OrderedDict[int, None] = OrderedDict()

    def access(self, page_num: int) -> int:
        """Reference a page.

        Returns the page's depth from the most recently used end (0 for the
        most recent) if it was present, or -1 on a fault. The page becomes
        the most recently used; a fault past capacity evicts the oldest page.
        """
        if page_num in self._pages:
            depth = next(
                d for d, page in enumerate(reversed(self._pages)) if page == page_num
            )
            self._pages.move_to_end(page_num)
            return depth
        self._pages[page_num] = None
        if len(self._pages) > self.max_size:
            self._pages.popitem(last=False)
        return -1

    def __len__(self) -> int:
        return len(self._pages)

    def __iter__(self) -> Iterator[int]:
        return iter(self._pages)

    def format(self) -> str:
        """Page numbers from LRU to MRU, separated by spaces."""
        return " ".join(str(page) for page in self._pages)