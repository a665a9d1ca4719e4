# viva_core/common/pagination.py
from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Any, Generic, TypeVar

T = TypeVar("T")

DEFAULT_PAGE = 1
DEFAULT_PAGE_SIZE = 10
MAX_PAGE_SIZE = 100


def _as_int(value: Any, default: int) -> int:
    if value is None or value == "":
        return default
    return int(value)


@dataclass(frozen=True)
class PageRequest:
    """
    Normalized paging parameters.

    Out-of-range values are clamped, never rejected:
      page < 1          -> 1
      page_size < 1     -> 1
      page_size > 100   -> 100
    """
    page: int = DEFAULT_PAGE
    page_size: int = DEFAULT_PAGE_SIZE

    @classmethod
    def clamp(cls, page: Any = None, page_size: Any = None) -> "PageRequest":
        p = max(_as_int(page, DEFAULT_PAGE), 1)
        size = min(max(_as_int(page_size, DEFAULT_PAGE_SIZE), 1), MAX_PAGE_SIZE)
        return cls(page=p, page_size=size)

    @property
    def offset(self) -> int:
        return (self.page - 1) * self.page_size


@dataclass(frozen=True)
class PageResult(Generic[T]):
    items: list[T] = field(default_factory=list)
    total_records: int = 0
    page: int = DEFAULT_PAGE
    page_size: int = DEFAULT_PAGE_SIZE

    @property
    def total_pages(self) -> int:
        return math.ceil(self.total_records / self.page_size)
